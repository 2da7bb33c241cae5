"""
Read CLDR's language matching data, which is published both as part of
`languageInfo.xml` and as `supplemental/languageMatching.json` in the
cldr-json distribution. A copy of the JSON version comes with this package.

Either way, the data has three parts, which must stay in order:

- `paradigmLocales`: a space-separated list of locales that are the
  standard forms of their languages
- `matchVariable`: named sets of region codes, such as `$cnsar` = 'HK+MO'
- `languageMatch`: the rules, from most specific to least specific
"""
import json
import logging
from typing import Dict, FrozenSet, List, NamedTuple
from xml.etree import ElementTree

from .rules import MatchRule, RuleTableError, make_rule, parse_variable
from .util import data_filename

logger = logging.getLogger(__name__)

# CLDR has had other types of matching data, such as 'written' and
# 'spoken'. This is the one that current CLDR data contains.
DEFAULT_MATCHING_TYPE = 'written_new'
DEFAULT_FILENAME = 'cldr/supplemental/languageMatching.json'


class LanguageMatchingData(NamedTuple):
    paradigm_locales: List[str]
    variables: Dict[str, FrozenSet[str]]
    rules: List[MatchRule]


class _DataBuilder:
    """
    Collects the entries of a languageMatches section as they're read.
    """
    def __init__(self):
        self.paradigm_locales = []
        self.variables = {}
        self.rules = []

    def add_paradigm_locales(self, locales):
        self.paradigm_locales.extend(locales.split())

    def add_variable(self, var_id, value):
        name, values = parse_variable(var_id, value)
        if name in self.variables:
            raise RuleTableError("The match variable $%s is defined twice" % name)
        self.variables[name] = values

    def add_rule(self, desired, supported, distance, oneway='false'):
        self.rules.append(make_rule(desired, supported, distance, oneway))

    def build(self, source):
        logger.debug(
            "Read %d language matching rules and %d variables from %s",
            len(self.rules), len(self.variables), source
        )
        return LanguageMatchingData(self.paradigm_locales, self.variables, self.rules)


def read_language_matching(filename=None, matching_type=DEFAULT_MATCHING_TYPE):
    """
    Read the cldr-json form of the language matching data. If no filename is
    given, read the copy that comes with this package.
    """
    if filename is None:
        filename = data_filename(DEFAULT_FILENAME)
    with open(filename, encoding='utf-8') as infile:
        fulldata = json.load(infile)

    try:
        entries = fulldata['supplemental']['languageMatching'][matching_type]
    except KeyError:
        raise RuleTableError(
            "%s has no %r language matching data" % (filename, matching_type)
        )

    builder = _DataBuilder()
    for entry in entries:
        for key, value in entry.items():
            if key == 'paradigmLocales':
                builder.add_paradigm_locales(value['_locales'])
            elif key == 'matchVariable':
                builder.add_variable(value['_id'], value['_value'])
            elif key == 'languageMatch':
                builder.add_rule(
                    value['_desired'], value['_supported'], value['_distance'],
                    value.get('_oneway', 'false')
                )
            else:
                logger.debug("Ignoring language matching entry %r", key)
    return builder.build(filename)


def read_language_info_xml(filename, matching_type=DEFAULT_MATCHING_TYPE):
    """
    Read the language matching data from CLDR's `languageInfo.xml`, or any
    other supplemental data file that contains a `languageMatching` element.
    """
    root = ElementTree.parse(filename).getroot()
    section = None
    for matches in root.iter('languageMatches'):
        if matches.get('type') == matching_type:
            section = matches
            break
    if section is None:
        raise RuleTableError(
            "%s has no %r language matching data" % (filename, matching_type)
        )

    builder = _DataBuilder()
    for element in section:
        if element.tag == 'paradigmLocales':
            builder.add_paradigm_locales(element.get('locales', ''))
        elif element.tag == 'matchVariable':
            builder.add_variable(element.get('id', ''), element.get('value', ''))
        elif element.tag == 'languageMatch':
            builder.add_rule(
                element.get('desired', ''), element.get('supported', ''),
                element.get('distance'), element.get('oneway', 'false')
            )
    return builder.build(filename)
