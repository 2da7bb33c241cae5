"""
Find the 'distance' between two maximized language identifiers, using the
ordered rules of CLDR's enhanced language matching.

Distances here are the CLDR distances multiplied by 10, which leaves room to
subtract 1 when exactly one of the two languages is a "paradigm locale", such
as 'en-GB' or 'es-419'. This breaks ties in favor of the more standard form
of a language.

This module works on values that are already in memory; the LanguageMatcher
class in `language_matcher.matcher` is what most code should use.
"""
from .likely import check_maximized
from .rules import rule_matches


def rule_distance(desired, supported, rules, variables, paradigm) -> int:
    """
    Find the first rule that applies to this pair of language identifiers,
    and return its distance, times 10.

    The order of the rules is what makes more specific rules win, so the
    first match is the one we use, even if later rules would also match.
    """
    for rule in rules:
        if rule_matches(rule, desired, supported, variables):
            distance = rule.distance * 10
            if distance and ((desired in paradigm) != (supported in paradigm)):
                distance -= 1
            return distance

    # check_rule_table() makes sure there's a catch-all rule, so this can
    # only happen if someone skipped it.
    raise RuntimeError(
        "No language matching rule applies to %s and %s. This represents a "
        "problem with the rule table." % (desired, supported)
    )


def raw_distance(desired, supported, rules, variables, paradigm) -> int:
    """
    Add up the distances between two maximized language identifiers, in three
    steps: first the region, then the script, then the language.

    Each step only counts if that subtag differs, and after each step, that
    subtag is removed from both identifiers. This changes which rules can
    match later on: a rule such as 'sr_Latn' <-> 'sr_Cyrl' only applies once
    the regions are gone.
    """
    check_maximized(desired)
    check_maximized(supported)

    distance = 0
    if desired.region != supported.region:
        distance += rule_distance(desired, supported, rules, variables, paradigm)
    desired = desired._replace(region=None)
    supported = supported._replace(region=None)

    if desired.script != supported.script:
        distance += rule_distance(desired, supported, rules, variables, paradigm)
    desired = desired._replace(script=None)
    supported = supported._replace(script=None)

    if desired.language != supported.language:
        distance += rule_distance(desired, supported, rules, variables, paradigm)

    return distance
