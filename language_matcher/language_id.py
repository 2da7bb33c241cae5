from typing import NamedTuple, Optional, Tuple

from .tag_parser import parse


class LanguageId(NamedTuple):
    """
    A LanguageId is the parsed form of a language identifier such as
    'zh-Hant-TW'. It has these attributes:

    - *language*: the code for the language itself, or 'und' if it's
      unspecified.
    - *script*: the 4-letter code for the writing system, or None.
    - *region*: the 2-letter or 3-digit code for the region, or None.
    - *variants*: a tuple of codes for more specific variations of the
      language, usually empty.

    LanguageIds are immutable and hashable, so they can be shared freely and
    stored in sets. Methods that "change" one return a new value.

    >>> LanguageId.get('zh-TW')
    LanguageId(language='zh', region='TW')
    >>> str(LanguageId.get('EN_latn_us'))
    'en-Latn-US'
    """
    language: str = 'und'
    script: Optional[str] = None
    region: Optional[str] = None
    variants: Tuple[str, ...] = ()

    @staticmethod
    def get(tag: str) -> 'LanguageId':
        """
        Create a LanguageId from a language identifier string. Raises a
        LanguageTagError (a subclass of ValueError) if it can't be parsed.

        >>> LanguageId.get('sr-Latn')
        LanguageId(language='sr', script='Latn')
        >>> LanguageId.get('de-CH-1996')
        LanguageId(language='de', region='CH', variants=('1996',))
        """
        data = {}
        variants = []
        for typ, value in parse(tag):
            if typ == 'variant':
                variants.append(value)
            else:
                data[typ] = value
        return LanguageId(variants=tuple(variants), **data)

    def to_tag(self) -> str:
        """
        Convert a LanguageId back to a standard language tag, as a string.
        This is also the str() representation of a LanguageId.

        >>> LanguageId('yue', 'Hant', 'HK').to_tag()
        'yue-Hant-HK'
        >>> LanguageId(region='IN').to_tag()
        'und-IN'
        """
        subtags = [self.language]
        if self.script:
            subtags.append(self.script)
        if self.region:
            subtags.append(self.region)
        subtags.extend(self.variants)
        return '-'.join(subtags)

    def is_maximized(self) -> bool:
        """
        Whether both the script and region are filled in, which is what the
        distance calculation requires.
        """
        return bool(self.script and self.region)

    def update(self, other: 'LanguageId') -> 'LanguageId':
        """
        Fill in the fields that are missing from this LanguageId using the
        fields of `other`. Fields that are already set are kept.

        >>> LanguageId('und', region='CH').update(LanguageId('de', 'Latn', 'DE'))
        LanguageId(language='de', script='Latn', region='CH')
        """
        language = self.language
        if language == 'und':
            language = other.language
        return LanguageId(
            language=language,
            script=self.script or other.script,
            region=self.region or other.region,
            variants=self.variants or other.variants
        )

    def __str__(self):
        return self.to_tag()

    def __repr__(self):
        items = ['language={!r}'.format(self.language)]
        for attr in ('script', 'region', 'variants'):
            if getattr(self, attr):
                items.append('{0}={1!r}'.format(attr, getattr(self, attr)))
        return 'LanguageId({})'.format(', '.join(items))
