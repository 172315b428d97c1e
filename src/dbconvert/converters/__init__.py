"""
Converter implementations.

- base: AttributeConverter interface and the domain type registry
- boolean: booleans <-> SMALLINT codes
- typename: classes <-> fully-qualified names, with pluggable resolvers
- language: langcodes locales <-> BCP-47 tags
"""
from dbconvert.converters.base import _CONVERTER_REGISTRY
from dbconvert.converters.base import AttributeConverter as AttributeConverter
from dbconvert.converters.base import register_converter as register_converter
from dbconvert.converters.boolean import BooleanCodeConverter as BooleanCodeConverter
from dbconvert.converters.language import LocaleTagConverter as LocaleTagConverter
from dbconvert.converters.language import UNDETERMINED as UNDETERMINED
from dbconvert.converters.language import parse_tag as parse_tag
from dbconvert.converters.typename import ImportResolver as ImportResolver
from dbconvert.converters.typename import RegistryResolver as RegistryResolver
from dbconvert.converters.typename import TypeNameConverter as TypeNameConverter
from dbconvert.converters.typename import TypeResolver as TypeResolver
from dbconvert.converters.typename import qualified_name as qualified_name


def get_available_domain_types() -> list[type]:
    """Return the domain types that have a registered converter."""
    return list(_CONVERTER_REGISTRY.keys())


def get_converter_class(domain_type: type) -> type[AttributeConverter]:
    """Get the converter class registered for a domain type."""
    if domain_type not in _CONVERTER_REGISTRY:
        available = [t.__name__ for t in _CONVERTER_REGISTRY]
        raise ValueError(f'No converter for {domain_type!r}. Available: {available}')
    return _CONVERTER_REGISTRY[domain_type]
