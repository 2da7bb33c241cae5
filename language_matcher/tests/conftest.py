import pytest

from language_matcher import LanguageId, LanguageMatcher
from language_matcher.rules import make_rule

# A cut-down version of the CLDR rules, with the same structure: language
# rules, then script rules, then region rules, each ending with a catch-all.
SMALL_RULES = [
    ('nb', 'no', 1),
    ('gsw', 'de', 4, True),
    ('*', '*', 80),
    ('sr_Latn', 'sr_Cyrl', 5),
    ('zh_Hans', 'zh_Hant', 15, True),
    ('zh_Hant', 'zh_Hans', 19, True),
    ('*_*', '*_*', 50),
    ('en_*_$enUS', 'en_*_$enUS', 4),
    ('en_*_GB', 'en_*_$!enUS', 3),
    ('en_*_$!enUS', 'en_*_$!enUS', 4),
    ('en_*_*', 'en_*_*', 5),
    ('zh_Hant_$cnsar', 'zh_Hant_$cnsar', 4),
    ('zh_Hant_*', 'zh_Hant_*', 5),
    ('*_*_*', '*_*_*', 4),
]

SMALL_VARIABLES = {
    'enUS': frozenset(['US', 'CA', 'PR']),
    'cnsar': frozenset(['HK', 'MO']),
}

SMALL_PARADIGM = ['en', 'en-GB']

# Stands in for CLDR's likely subtags. Tags that aren't listed here are left
# as they are, which lets us test what happens when maximizing fails.
LIKELY = {
    'en': 'en-Latn-US',
    'en-US': 'en-Latn-US',
    'en-GB': 'en-Latn-GB',
    'en-CA': 'en-Latn-CA',
    'en-AU': 'en-Latn-AU',
    'en-PR': 'en-Latn-PR',
    'zh-CN': 'zh-Hans-CN',
    'zh-Hans': 'zh-Hans-CN',
    'zh-TW': 'zh-Hant-TW',
    'zh-Hant': 'zh-Hant-TW',
    'zh-HK': 'zh-Hant-HK',
    'zh-MO': 'zh-Hant-MO',
    'sr-Latn': 'sr-Latn-RS',
    'sr-Cyrl': 'sr-Cyrl-RS',
    'nb': 'nb-Latn-NO',
    'no': 'no-Latn-NO',
    'gsw': 'gsw-Latn-CH',
    'de': 'de-Latn-DE',
    'de-AT': 'de-Latn-AT',
    'ja': 'ja-Jpan-JP',
}


def fake_maximize(language_id):
    if language_id.is_maximized():
        return language_id
    tag = language_id.to_tag()
    if tag in LIKELY:
        return LanguageId.get(LIKELY[tag])
    return language_id


@pytest.fixture
def small_rules():
    return [make_rule(*rule) for rule in SMALL_RULES]


@pytest.fixture
def small_variables():
    return dict(SMALL_VARIABLES)


@pytest.fixture
def maximize():
    return fake_maximize


@pytest.fixture
def matcher(small_rules, small_variables):
    return LanguageMatcher(small_rules, small_variables, SMALL_PARADIGM, maximize=fake_maximize)
