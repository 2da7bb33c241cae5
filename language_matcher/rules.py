"""
The rules of CLDR's enhanced language matching, described in
https://www.unicode.org/reports/tr35/tr35.html#EnhancedLanguageMatching

A rule pairs a pattern for the desired language with a pattern for the
supported language, and gives a distance between things that match them.
Patterns are written with one slot per subtag, separated by underscores:

- `en` matches the language 'en', with no script or region.
- `en_*_GB` matches 'en' with any script, in the region 'GB'.
- `en_*_$enUS` matches 'en' in any region listed in the variable `$enUS`.
- `en_*_$!enUS` matches 'en' in any region *not* listed in `$enUS`.

>>> parse_tag_pattern('en_*_$!enUS')
TagPattern(language=SubtagPattern(kind=0, value='en'), script=SubtagPattern(kind=3, value=None), region=SubtagPattern(kind=2, value='enUS'))
"""
from typing import Dict, FrozenSet, NamedTuple, Optional

# The four kinds of subtag pattern. A SubtagPattern is a (kind, value) pair,
# and every function that looks at one handles each of these kinds.
LITERAL, VARIABLE, EXCLUDED_VARIABLE, ANY = range(4)

# The fields of a LanguageId that a TagPattern can constrain, in order.
SUBTAG_FIELDS = ('language', 'script', 'region')


class RuleTableError(ValueError):
    """
    Raised when language matching data is malformed or incomplete, such as
    when a rule refers to a variable that isn't defined.
    """
    pass


class SubtagPattern(NamedTuple):
    kind: int
    value: Optional[str] = None

    def __str__(self):
        if self.kind == LITERAL:
            return self.value
        elif self.kind == VARIABLE:
            return '$' + self.value
        elif self.kind == EXCLUDED_VARIABLE:
            return '$!' + self.value
        else:
            return '*'


ANY_SUBTAG = SubtagPattern(ANY)


class TagPattern(NamedTuple):
    language: SubtagPattern
    script: Optional[SubtagPattern] = None
    region: Optional[SubtagPattern] = None

    def __str__(self):
        return '_'.join(
            str(pattern) for pattern in self if pattern is not None
        )


class MatchRule(NamedTuple):
    desired: TagPattern
    supported: TagPattern
    distance: int
    oneway: bool = False

    def __str__(self):
        arrow = '->' if self.oneway else '<->'
        return '%s %s %s: %d' % (self.desired, arrow, self.supported, self.distance)


Variables = Dict[str, FrozenSet[str]]


def parse_subtag_pattern(text: str) -> SubtagPattern:
    """
    Parse one slot of a pattern.

    >>> parse_subtag_pattern('*')
    SubtagPattern(kind=3, value=None)
    >>> parse_subtag_pattern('$!maghreb')
    SubtagPattern(kind=2, value='maghreb')
    >>> parse_subtag_pattern('$maghreb')
    SubtagPattern(kind=1, value='maghreb')
    >>> parse_subtag_pattern('Hant')
    SubtagPattern(kind=0, value='Hant')
    """
    if not text:
        raise RuleTableError("Empty subtag in a language matching pattern")
    if text == '*':
        return ANY_SUBTAG
    elif text.startswith('$!'):
        kind, name = EXCLUDED_VARIABLE, text[2:]
    elif text.startswith('$'):
        kind, name = VARIABLE, text[1:]
    else:
        return SubtagPattern(LITERAL, text)
    if not name:
        raise RuleTableError("Missing variable name in pattern %r" % text)
    return SubtagPattern(kind, name)


def parse_tag_pattern(text: str) -> TagPattern:
    """
    Parse a pattern such as 'zh_Hant_$cnsar' into a TagPattern, with one
    SubtagPattern per slot. Slots that aren't written are None.
    """
    slots = text.split('_')
    if len(slots) > len(SUBTAG_FIELDS):
        raise RuleTableError(
            "A language matching pattern has at most %d subtags, got %r"
            % (len(SUBTAG_FIELDS), text)
        )
    return TagPattern(*[parse_subtag_pattern(slot) for slot in slots])


def parse_variable(var_id: str, value: str):
    """
    Parse a match variable definition, such as `$cnsar` = 'HK+MO'. Returns
    the name without its sigil, and the set of subtags it stands for.

    >>> name, values = parse_variable('$cnsar', 'HK+MO')
    >>> name, sorted(values)
    ('cnsar', ['HK', 'MO'])
    """
    if not var_id.startswith('$') or len(var_id) < 2:
        raise RuleTableError("Match variable IDs start with '$', got %r" % var_id)
    # TODO: CLDR also allows '-' to subtract subtags from a set; no data uses it yet
    return var_id[1:], frozenset(value.split('+'))


def make_rule(desired: str, supported: str, distance, oneway=False) -> MatchRule:
    """
    Make a MatchRule out of the attributes of a `languageMatch` entry, which
    may still be strings.

    >>> print(make_rule('gsw', 'de', '4', 'true'))
    gsw -> de: 4
    """
    try:
        distance = int(distance)
    except (TypeError, ValueError):
        raise RuleTableError("Distance must be an integer, got %r" % (distance,))
    if not 0 <= distance <= 100:
        raise RuleTableError("Distance must be between 0 and 100, got %d" % distance)
    if isinstance(oneway, str):
        if oneway not in ('true', 'false'):
            raise RuleTableError("Expected 'true' or 'false' for oneway, got %r" % oneway)
        oneway = (oneway == 'true')
    return MatchRule(
        parse_tag_pattern(desired), parse_tag_pattern(supported),
        distance, bool(oneway)
    )


def subtag_matches(pattern: Optional[SubtagPattern], subtag: Optional[str],
                   variables: Variables) -> bool:
    """
    Check one slot of a pattern against one subtag of a language identifier.
    Either may be missing: a missing slot only matches a missing subtag, and
    a wildcard matches anything, even a missing subtag.
    """
    if pattern is None:
        return subtag is None
    kind = pattern.kind
    if kind == ANY:
        return True
    elif subtag is None:
        return False
    elif kind == LITERAL:
        return subtag == pattern.value
    elif kind == VARIABLE:
        return subtag in variables[pattern.value]
    elif kind == EXCLUDED_VARIABLE:
        return subtag not in variables[pattern.value]
    raise ValueError("Unknown subtag pattern kind: %r" % (kind,))


def tag_matches(pattern: TagPattern, language_id, variables: Variables) -> bool:
    return (
        subtag_matches(pattern.language, language_id.language, variables)
        and subtag_matches(pattern.script, language_id.script, variables)
        and subtag_matches(pattern.region, language_id.region, variables)
    )


def rule_matches(rule: MatchRule, desired, supported, variables: Variables) -> bool:
    """
    Check whether a rule applies to a pair of language identifiers. Rules
    that aren't one-way are also tried with their sides swapped.
    """
    if (tag_matches(rule.desired, desired, variables)
            and tag_matches(rule.supported, supported, variables)):
        return True
    if rule.oneway:
        return False
    return (tag_matches(rule.supported, desired, variables)
            and tag_matches(rule.desired, supported, variables))


# Language identifiers are compared three times, with the region and then the
# script stripped off. These are the shapes they have at each step, as
# (has_script, has_region).
QUERY_SHAPES = [(True, True), (True, False), (False, False)]


def _is_fallback_pattern(pattern: TagPattern, has_script: bool, has_region: bool) -> bool:
    """
    Whether a pattern matches every language identifier of a given shape.
    """
    def covers(subpattern, present):
        if subpattern is None:
            return not present
        return subpattern.kind == ANY

    return (
        pattern.language.kind == ANY
        and covers(pattern.script, has_script)
        and covers(pattern.region, has_region)
    )


def check_rule_table(rules, variables: Variables):
    """
    Make sure that a list of rules can be used for matching: every variable
    they mention must be defined, and every comparison the distance
    calculation makes must reach a catch-all rule if nothing more specific
    matches. Raises a RuleTableError if not.
    """
    for rule in rules:
        for pattern in (rule.desired, rule.supported):
            for subpattern in pattern:
                if subpattern is None or subpattern.kind not in (VARIABLE, EXCLUDED_VARIABLE):
                    continue
                if subpattern.value not in variables:
                    raise RuleTableError(
                        "The rule %s refers to the undefined variable $%s"
                        % (rule, subpattern.value)
                    )

    for has_script, has_region in QUERY_SHAPES:
        if not any(
            _is_fallback_pattern(rule.desired, has_script, has_region)
            and _is_fallback_pattern(rule.supported, has_script, has_region)
            for rule in rules
        ):
            fields = [field for field, present in
                      zip(SUBTAG_FIELDS, (True, has_script, has_region)) if present]
            raise RuleTableError(
                "There is no catch-all rule for comparing %s, such as %s"
                % ('+'.join(fields), '_'.join(['*'] * len(fields)))
            )
