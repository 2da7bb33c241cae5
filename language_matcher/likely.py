"""
Fill in the likely script and region of a language identifier.

The Unicode CLDR contains a "likelySubtags" data file, which can guess
reasonable values for subtags that are missing. For example, 'zh-TW' is
most likely written in Traditional Han characters, so it becomes
'zh-Hant-TW'. We use the copy of this data that comes with `langcodes`.
"""
import langcodes

from .language_id import LanguageId


def maximize(language_id: LanguageId) -> LanguageId:
    """
    Return a copy of `language_id` with its language, script and region
    filled in. Subtags that are already present are kept.

    >>> maximize(LanguageId.get('zh-TW'))
    LanguageId(language='zh', script='Hant', region='TW')
    >>> maximize(LanguageId.get('und-CH'))
    LanguageId(language='de', script='Latn', region='CH')
    """
    # Read the result back through its tag. Newer versions of langcodes call
    # the region a "territory", and warn when it is accessed as `region`.
    filled = langcodes.Language.get(language_id.to_tag(), normalize=False).maximize()
    return LanguageId.get(filled.to_tag())._replace(variants=language_id.variants)


def check_maximized(language_id: LanguageId):
    assert language_id.is_maximized(), (
        "%s needs a script and region to be compared; maximize it first"
        % (language_id,)
    )
