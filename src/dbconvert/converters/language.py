"""
Locales stored as BCP-47 language tags.

Reading a tag never fails. A malformed tag keeps its longest well-formed
leading run of subtags; a tag with no usable subtag at all reads back as the
undetermined locale ``und``.
"""
import logging
import re

from dbconvert.converters.base import AttributeConverter, register_converter
from dbconvert.utils import is_absent
from langcodes import Language

logger = logging.getLogger(__name__)

UNDETERMINED = Language.get('und')

_SUBTAG_SEPARATOR = re.compile(r'[-_]')
_WELL_FORMED_SUBTAG = re.compile(r'[A-Za-z0-9]{1,8}')


def parse_tag(tag: str, normalize: bool = True) -> Language:
    """Parse a language tag, dropping whatever does not parse.

    >>> parse_tag('en-US').to_tag()
    'en-US'
    >>> parse_tag('en-US-!!').to_tag()
    'en-US'
    >>> parse_tag('%%%').to_tag()
    'und'
    """
    subtags = []
    for subtag in _SUBTAG_SEPARATOR.split(tag):
        if not _WELL_FORMED_SUBTAG.fullmatch(subtag):
            break
        subtags.append(subtag)

    for end in range(len(subtags), 0, -1):
        candidate = '-'.join(subtags[:end])
        try:
            return Language.get(candidate, normalize=normalize)
        except ValueError:
            continue
    logger.debug(f'No well-formed subtags in {tag!r}, using {UNDETERMINED.to_tag()!r}')
    return UNDETERMINED


@register_converter
class LocaleTagConverter(AttributeConverter[Language, str]):
    """Store `langcodes.Language` values as their canonical tag.

    >>> converter = LocaleTagConverter()
    >>> converter.to_storage(Language.get('zh-hans-cn'))
    'zh-Hans-CN'
    >>> converter.to_domain('fr-CA') == Language.get('fr-CA')
    True
    >>> converter.to_domain('iw').to_tag()
    'he'
    """

    domain_type = Language
    storage_type = str

    def __init__(self, normalize: bool = True) -> None:
        self.normalize = normalize

    def to_storage(self, value: Language | None) -> str | None:
        if is_absent(value):
            return None
        return value.to_tag()

    def to_domain(self, value: str | None) -> Language | None:
        if is_absent(value):
            return None
        return parse_tag(value, normalize=self.normalize)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
