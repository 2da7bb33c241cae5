import logging
from types import MappingProxyType

from .cldr import read_language_info_xml, read_language_matching
from .engine import raw_distance
from .language_id import LanguageId
from .likely import check_maximized, maximize as maximize_likely
from .rules import check_rule_table

logger = logging.getLogger(__name__)

# Distances of 1000 or more mean that there's no reasonable way to use the
# supported language in place of the desired one.
DISTANCE_THRESHOLD = 1000


class LanguageMatcher:
    """
    A LanguageMatcher measures the distance between languages using the
    algorithm of CLDR's enhanced language matching, and uses it to choose the
    best supported language for what a user wants.

    Distances are the CLDR distances multiplied by 10, minus 1 when only one
    of the languages being compared is a paradigm locale. Identical languages
    have a distance of 0.

    >>> matcher = LanguageMatcher.from_cldr()
    >>> matcher.distance('zh-CN', 'zh-Hans')
    0
    >>> matcher.distance('zh-HK', 'zh-MO')
    40
    >>> matcher.distance('en-US', 'en-GB')
    50
    >>> matcher.distance('en-US', 'en-CA')
    39

    Some rules only go one way, so the order of the arguments matters.
    Swiss German speakers understand Standard German much better than the
    other way around:

    >>> matcher.distance('gsw', 'de')
    80
    >>> matcher.distance('de', 'gsw')
    840

    A matcher doesn't change after it's made, so one instance can be shared
    by any number of threads.
    """

    def __init__(self, rules, variables, paradigm_locales=(), maximize=None):
        """
        Make a LanguageMatcher from rules that are already parsed. `maximize`
        is the function that fills in the likely script and region of a
        LanguageId; by default, it uses the likely subtags data in `langcodes`.

        Raises a RuleTableError if the rules can't be used for matching.
        """
        self._maximize = maximize or maximize_likely
        self.rules = tuple(rules)
        self.variables = MappingProxyType({
            name: frozenset(values) for (name, values) in variables.items()
        })
        check_rule_table(self.rules, self.variables)
        self.paradigm = frozenset(
            self.maximize(locale) for locale in paradigm_locales
        )
        logger.debug(
            "Made a LanguageMatcher with %d rules, %d variables and %d paradigm locales",
            len(self.rules), len(self.variables), len(self.paradigm)
        )

    @classmethod
    def from_data(cls, data, maximize=None) -> 'LanguageMatcher':
        return cls(data.rules, data.variables, data.paradigm_locales, maximize=maximize)

    @classmethod
    def from_cldr(cls, filename=None, maximize=None) -> 'LanguageMatcher':
        """
        Make a LanguageMatcher from the cldr-json language matching data. If no
        filename is given, use the copy that comes with this package.
        """
        return cls.from_data(read_language_matching(filename), maximize=maximize)

    @classmethod
    def from_xml(cls, filename, maximize=None) -> 'LanguageMatcher':
        """
        Make a LanguageMatcher from CLDR's `languageInfo.xml`.
        """
        return cls.from_data(read_language_info_xml(filename), maximize=maximize)

    def maximize(self, language) -> LanguageId:
        """
        Fill in the likely script and region of a language, which can be given
        as a LanguageId or as a string.
        """
        if isinstance(language, str):
            language = LanguageId.get(language)
        maximized = self._maximize(language)
        check_maximized(maximized)
        return maximized

    def is_paradigm(self, language_id: LanguageId) -> bool:
        return language_id in self.paradigm

    def distance(self, desired, supported) -> int:
        """
        Calculate the distance from the `desired` language to the `supported`
        language. Each can be a LanguageId or a string.
        """
        return self._distance(self.maximize(desired), self.maximize(supported))

    def _distance(self, desired: LanguageId, supported: LanguageId) -> int:
        return raw_distance(
            desired, supported, self.rules, self.variables, self.paradigm
        )

    def best_match(self, desired, supported, max_distance: int=DISTANCE_THRESHOLD):
        """
        You have software that supports any of the `supported` languages. You
        want to use the `desired` language. This method lets you choose the
        right language, even if there isn't an exact match.

        Returns the item of `supported` that is the closest match, and its
        distance, or None if nothing is closer than `max_distance`. When there
        is a tie, the first one in `supported` wins. Languages can be given as
        LanguageIds or strings, and you get back the same object you gave.

        >>> matcher = LanguageMatcher.from_cldr()
        >>> matcher.best_match('zh-CN', ['en', 'ja', 'zh-Hans', 'zh-Hant'])
        ('zh-Hans', 0)
        >>> matcher.best_match('zh-TW', ['en', 'ja', 'zh-Hans', 'zh-Hant'])
        ('zh-Hant', 0)
        >>> matcher.best_match('ja', ['de', 'fr']) is None
        True
        """
        desired_max = self.maximize(desired)
        best = None
        for candidate in supported:
            distance = self._distance(desired_max, self.maximize(candidate))
            if best is None or distance < best[1]:
                best = (candidate, distance)

        if best is None or best[1] >= max_distance:
            logger.debug("No match for %s closer than %d", desired_max, max_distance)
            return None
        logger.debug("Best match for %s is %s, at distance %d", desired_max, best[0], best[1])
        return best

    def __repr__(self):
        return "<LanguageMatcher: %d rules>" % len(self.rules)
