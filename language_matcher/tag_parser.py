"""
This module implements a parser for language identifiers, as defined by
the Unicode `unicode_language_id` production (UTS #35), which is the
"language, script, region, variants" core of a BCP 47 tag.

Here, we're only concerned with the syntax of the identifier. Filling in
missing subtags is a separate step.

>>> parse('en')
[('language', 'en')]

>>> parse('en_US')
[('language', 'en'), ('region', 'US')]

>>> parse('zh-hant-tw')
[('language', 'zh'), ('script', 'Hant'), ('region', 'TW')]

>>> parse('es-419')
[('language', 'es'), ('region', '419')]

>>> parse('de-DE-1901')
[('language', 'de'), ('region', 'DE'), ('variant', '1901')]

>>> parse('zh-tw-hant')
Traceback (most recent call last):
    ...
language_matcher.tag_parser.LanguageTagError: This script subtag, 'hant', is out of place. Expected variant or end of string.

Extensions and private-use subtags belong to full locale tags, not to
language identifiers:

>>> parse('en-u-co-backwards')
Traceback (most recent call last):
    ...
language_matcher.tag_parser.LanguageTagError: The singleton 'u' starts an extension, which a language identifier can't contain

>>> parse('zh-yue')
Traceback (most recent call last):
    ...
language_matcher.tag_parser.LanguageTagError: Expected a script, region, or variant, got 'yue'
"""

# Define the order of subtags as integer constants, but also give them names
# so we can describe them in error messages
SCRIPT, REGION, VARIANT = range(3)
SUBTAG_TYPES = ['script', 'region', 'variant', 'end of string']


class LanguageTagError(ValueError):
    pass


def normalize_characters(tag):
    """
    Language identifiers are case-insensitive, and underscores are equivalent
    to hyphens. So here we smash tags into lowercase with hyphens, so we can
    make exact comparisons.

    >>> normalize_characters('en_US')
    'en-us'
    >>> normalize_characters('zh-Hant_TW')
    'zh-hant-tw'
    """
    return tag.lower().replace('_', '-')


def parse(tag):
    """
    Parse the syntax of a language identifier. Returns a list of
    (type, value) tuples, with each value in its conventional case.
    """
    if not tag.isascii():
        subtag_error(tag, 'only ASCII letters, digits, hyphens, and underscores')
    tag = normalize_characters(tag)
    subtags = tag.split('-')
    language = subtags[0]
    if not (2 <= len(language) <= 8 and len(language) != 4 and language.isalpha()):
        subtag_error(language, 'a language code')
    return [('language', language)] + parse_subtags(subtags[1:])


def parse_subtags(subtags, expect=SCRIPT):
    """
    Parse everything that comes after the language subtag: an optional
    script, an optional region, and any number of variants.
    """
    parsed = []
    for subtag in subtags:
        tagtype = subtag_type(subtag)
        if tagtype < expect:
            # We got a tag type that was supposed to appear earlier in the order.
            order_error(subtag, tagtype, expect)

        # Scripts and regions can only appear once; variants can repeat.
        if tagtype in (SCRIPT, REGION):
            expect = tagtype + 1
        else:
            expect = VARIANT

        # Now restore case conventions.
        if tagtype == SCRIPT:
            subtag = subtag.title()
        elif tagtype == REGION:
            subtag = subtag.upper()
        parsed.append((SUBTAG_TYPES[tagtype], subtag))
    return parsed


def subtag_type(subtag):
    """
    Work out which kind of subtag this is from its shape alone.
    """
    tag_length = len(subtag)
    if tag_length == 0 or tag_length > 8:
        subtag_error(subtag, '1-8 characters')
    elif tag_length == 1:
        raise LanguageTagError(
            "The singleton %r starts an extension, which a language "
            "identifier can't contain" % subtag
        )
    elif tag_length == 2 and subtag.isalpha():
        return REGION
    elif tag_length == 3 and subtag.isdigit():
        return REGION
    elif tag_length == 4 and subtag.isalpha():
        return SCRIPT
    elif tag_length == 4 and subtag[0].isdigit() and subtag.isalnum():
        return VARIANT
    elif tag_length >= 5 and subtag.isalnum():
        return VARIANT
    subtag_error(subtag, 'a script, region, or variant')


def order_error(subtag, got, expected):
    """
    Output an error indicating that tags were out of order.
    """
    options = SUBTAG_TYPES[expected:]
    if len(options) == 1:
        expect_str = options[0]
    elif len(options) == 2:
        expect_str = '%s or %s' % (options[0], options[1])
    else:
        expect_str = '%s, or %s' % (', '.join(options[:-1]), options[-1])
    got_str = SUBTAG_TYPES[got]
    raise LanguageTagError("This %s subtag, %r, is out of place. "
                           "Expected %s." % (got_str, subtag, expect_str))


def subtag_error(subtag, expected='a valid subtag'):
    raise LanguageTagError("Expected %s, got %r" % (expected, subtag))
