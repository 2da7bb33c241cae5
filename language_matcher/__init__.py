"""
language_matcher chooses between languages the way the Unicode CLDR says
to. Given two language identifiers, such as 'zh-CN' and 'zh-Hans', it finds
the "distance" between them using CLDR's enhanced language matching rules.
Given a language that a user wants and a list of languages that you have,
it finds the one that the user is most likely to be happy with.

See the docstrings of `LanguageMatcher` for the details.
"""
from .language_id import LanguageId
from .matcher import DISTANCE_THRESHOLD, LanguageMatcher
from .rules import RuleTableError
from .tag_parser import LanguageTagError

# The default matcher is made the first time it's needed, because reading
# the rules and maximizing the paradigm locales takes a moment. Two threads
# can race to make it; that only wastes time, because matchers are immutable
# and equivalent.
_DEFAULT_MATCHER = None


def get_matcher() -> LanguageMatcher:
    """
    Get a LanguageMatcher that uses the CLDR data that comes with this package.
    The same instance is returned every time.
    """
    global _DEFAULT_MATCHER
    if _DEFAULT_MATCHER is None:
        _DEFAULT_MATCHER = LanguageMatcher.from_cldr()
    return _DEFAULT_MATCHER


def distance(desired, supported) -> int:
    """
    Return the distance from the `desired` language to the `supported`
    language. 0 means they're the same language, possibly after filling in
    likely values. Lower is better, and 1000 or more means that they don't
    match at all.

    >>> distance('zh-TW', 'zh-Hant')
    0
    >>> distance('zh-HK', 'zh-Hant')    # Hong Kong Chinese is a bit different from Taiwanese
    50
    >>> distance('sr-Latn', 'sr-Cyrl')  # Serbian is written in two scripts
    50
    >>> distance('nb', 'da')            # Norwegian Bokmål to Danish
    120
    >>> distance('ta', 'en')            # Tamil to English, which many Tamil speakers know
    439
    >>> distance('en', 'ta')            # but English speakers don't generally know Tamil
    1339
    """
    return get_matcher().distance(desired, supported)


def best_match(desired, supported, max_distance: int=DISTANCE_THRESHOLD):
    """
    Choose the item of `supported` that best matches the `desired` language,
    and return it along with its distance. Return None if there's no
    acceptable match.

    >>> best_match('fr', ['de', 'en', 'fr'])
    ('fr', 0)
    >>> best_match('pt', ['pt-PT', 'pt-BR'])
    ('pt-BR', 0)
    >>> best_match('en-AU', ['en-US', 'en-GB'])
    ('en-GB', 29)
    >>> best_match('eu', ['el', 'es'])
    ('es', 200)
    >>> best_match('eu', ['el', 'es'], max_distance=100) is None
    True
    """
    return get_matcher().best_match(desired, supported, max_distance)
