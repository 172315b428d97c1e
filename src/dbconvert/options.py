import logging
from dataclasses import dataclass, fields
from typing import Any

from dbconvert.converters import BooleanCodeConverter, ImportResolver
from dbconvert.converters import LocaleTagConverter, RegistryResolver
from dbconvert.converters import TypeNameConverter, TypeResolver

from libb import ConfigOptions, attrdict, load_options

__all__ = [
    'ConverterOptions',
    'build_converters',
    'build_resolver',
]

logger = logging.getLogger(__name__)

TYPE_RESOLVERS = ('import', 'registry')


@dataclass
class ConverterOptions(ConfigOptions):
    """Options

    supported type resolvers: `import`, `registry`

    - type_resolver: How stored class names are looked up (default: import)
    - type_registry: Name -> class seed for the `registry` resolver
    - locale_normalize: Replace deprecated language codes when reading tags (default: True)
    - type_name_length: Column length for class names (default: 255)
    - locale_tag_length: Column length for language tags (default: 35)
    """
    type_resolver: str = 'import'
    type_registry: dict[str, type] | None = None
    locale_normalize: bool = True
    type_name_length: int = 255
    locale_tag_length: int = 35

    def __post_init__(self):
        if self.type_resolver not in TYPE_RESOLVERS:
            raise ValueError(f'type_resolver must be one of: {list(TYPE_RESOLVERS)}')
        if self.type_registry is not None and self.type_resolver != 'registry':
            raise ValueError('type_registry requires type_resolver="registry"')
        for name in ('type_name_length', 'locale_tag_length'):
            if getattr(self, name) <= 0:
                raise ValueError(f'{name} must be positive')


def build_resolver(options: ConverterOptions) -> TypeResolver:
    """Create the type resolver selected by the options."""
    if options.type_resolver == 'registry':
        logger.debug(f'Using registry resolver with {len(options.type_registry or {})} types')
        return RegistryResolver(options.type_registry)
    logger.debug('Using import resolver')
    return ImportResolver()


def build_converters(options: ConverterOptions | dict[str, Any] | str | None = None,
                     config: Any | None = None, **kw: Any) -> attrdict:
    """Create one instance of each converter configured by the options

    Args:
        options: Can be:
                - ConverterOptions object
                - String path to configuration
                - Dictionary of options
                - None, with options specified as keyword arguments
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        attrdict with `boolean`, `type_name` and `locale` converters
    """
    if isinstance(options, ConverterOptions):
        for field in fields(options):
            kw.pop(field.name, None)
    elif options is None:
        options = ConverterOptions(**kw)
    else:
        options_func = load_options(cls=ConverterOptions)(lambda o, c: o)
        options = options_func(options, config, **kw)

    return attrdict(
        boolean=BooleanCodeConverter(),
        type_name=TypeNameConverter(resolver=build_resolver(options)),
        locale=LocaleTagConverter(normalize=options.locale_normalize),
        )
