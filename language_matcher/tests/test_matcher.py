import pytest

from language_matcher import LanguageId, LanguageMatcher, RuleTableError
from language_matcher.cldr import LanguageMatchingData
from language_matcher.rules import make_rule


def test_paradigm_locales_are_maximized(matcher):
    assert matcher.paradigm == frozenset([
        LanguageId('en', 'Latn', 'US'), LanguageId('en', 'Latn', 'GB')
    ])
    assert matcher.is_paradigm(LanguageId.get('en-Latn-GB'))
    assert not matcher.is_paradigm(LanguageId.get('en-GB'))
    assert not matcher.is_paradigm(LanguageId.get('en-Latn-CA'))


def test_bad_rules_are_rejected(small_rules, small_variables, maximize):
    del small_variables['cnsar']
    with pytest.raises(RuleTableError):
        LanguageMatcher(small_rules, small_variables, maximize=maximize)

    without_fallback = [rule for rule in small_rules if str(rule.desired) != '*_*_*']
    with pytest.raises(RuleTableError):
        LanguageMatcher(without_fallback, {'enUS': frozenset(), 'cnsar': frozenset()},
                        maximize=maximize)


def test_rules_keep_their_order(small_rules, small_variables, maximize):
    matcher = LanguageMatcher(iter(small_rules), small_variables, maximize=maximize)
    assert matcher.rules == tuple(small_rules)


def test_distance(matcher):
    assert matcher.distance('zh-CN', 'zh-Hans') == 0
    assert matcher.distance('zh-TW', 'zh-Hant') == 0
    assert matcher.distance('zh-HK', 'zh-MO') == 40
    assert matcher.distance('zh-HK', 'zh-Hant') == 50
    assert matcher.distance('en-US', 'en-GB') == 50
    assert matcher.distance('en-US', 'en-CA') == 39
    assert matcher.distance('en', 'en-US') == 0


def test_distance_accepts_language_ids(matcher):
    assert matcher.distance(LanguageId.get('zh-HK'), 'zh-MO') == 40
    assert matcher.distance(LanguageId.get('zh-HK'), LanguageId.get('zh-Hant-MO')) == 40


def test_distance_needs_maximized_languages(matcher):
    # The fake likely-subtags data doesn't know about 'xx'
    with pytest.raises(AssertionError):
        matcher.distance('xx', 'en')


def test_distance_doesnt_change_arguments(matcher):
    desired = LanguageId.get('zh-HK')
    matcher.distance(desired, 'zh-MO')
    assert desired == LanguageId('zh', region='HK')


def test_best_match(matcher):
    supported = ['en', 'ja', 'zh-Hans', 'zh-Hant']
    assert matcher.best_match('zh-CN', supported) == ('zh-Hans', 0)
    assert matcher.best_match('zh-TW', supported) == ('zh-Hant', 0)
    assert matcher.best_match('zh-HK', supported) == ('zh-Hant', 50)


def test_best_match_returns_original(matcher):
    candidates = [LanguageId.get('ja'), LanguageId.get('en-GB')]
    language, distance = matcher.best_match('en-AU', candidates)
    assert language is candidates[1]
    assert language == LanguageId('en', region='GB')
    assert distance == 29


def test_best_match_empty(matcher):
    assert matcher.best_match('en', []) is None


def test_best_match_ties(matcher):
    assert matcher.best_match('zh-CN', ['zh-Hans', 'zh-CN']) == ('zh-Hans', 0)
    assert matcher.best_match('zh-CN', ['zh-CN', 'zh-Hans']) == ('zh-CN', 0)
    assert matcher.best_match('zh-HK', ['zh-TW', 'zh-Hant']) == ('zh-TW', 50)


def test_best_match_threshold(matcher):
    # ja-Jpan-JP to de-Latn-DE has a distance of 1340
    assert matcher.best_match('ja', ['de']) is None
    assert matcher.best_match('ja', ['de', 'de-AT']) is None
    assert matcher.best_match('ja', ['de'], max_distance=2000) == ('de', 1340)

    # the threshold itself is not acceptable
    assert matcher.best_match('en-US', ['en-CA'], max_distance=39) is None
    assert matcher.best_match('en-US', ['en-CA'], max_distance=40) == ('en-CA', 39)


def test_from_data(small_rules, small_variables, maximize):
    data = LanguageMatchingData(['en', 'en-GB'], small_variables, small_rules)
    matcher = LanguageMatcher.from_data(data, maximize=maximize)
    assert matcher.distance('en-US', 'en-CA') == 39


def test_custom_maximize(maximize):
    calls = []

    def counting_maximize(language_id):
        calls.append(language_id)
        return maximize(language_id)

    rules = [make_rule('*_*_*', '*_*_*', 4)]
    matcher = LanguageMatcher(rules, {}, ['en'], maximize=counting_maximize)
    assert calls == [LanguageId('en')]

    # Everything that isn't identical falls through to the one rule
    assert matcher.distance('de', 'de-AT') == 40
    # both are written in Latin script, so only region and language count
    assert matcher.distance('en', 'de') == 39 + 40
    assert repr(matcher) == '<LanguageMatcher: 1 rules>'


def test_variables_cant_be_changed(matcher):
    with pytest.raises(TypeError):
        matcher.variables['enUS'] = frozenset(['GB'])
    with pytest.raises(AttributeError):
        matcher.variables['cnsar'].add('TW')
