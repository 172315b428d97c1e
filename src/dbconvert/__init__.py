"""
Bidirectional converters between domain values and column values.

Each converter is a stateless pair of functions:
- to_storage(value): domain value -> column value
- to_domain(value): column value -> domain value

Absent values (None, pandas/NumPy missing markers) always map to None.

Converters:
- BooleanCodeConverter: bool <-> SMALLINT 1/0 (any positive code reads as True)
- TypeNameConverter: class <-> fully-qualified name, resolved through a TypeResolver
- LocaleTagConverter: langcodes.Language <-> BCP-47 tag

The SQLAlchemy column types in `dbconvert.types` wrap the same converters.
"""
__version__ = '0.1.0'

from dbconvert.converters import AttributeConverter, BooleanCodeConverter
from dbconvert.converters import ImportResolver, LocaleTagConverter
from dbconvert.converters import RegistryResolver, TypeNameConverter
from dbconvert.converters import TypeResolver, get_available_domain_types
from dbconvert.converters import get_converter_class, qualified_name
from dbconvert.exceptions import ConversionError, InvalidArgument
from dbconvert.exceptions import ResolutionError, TypeNotFoundError
from dbconvert.options import ConverterOptions, build_converters
from dbconvert.types import BooleanCode, LocaleTag, TypeName

__all__ = [
    'AttributeConverter',
    'BooleanCodeConverter',
    'TypeNameConverter',
    'LocaleTagConverter',
    'TypeResolver',
    'ImportResolver',
    'RegistryResolver',
    'get_converter_class',
    'get_available_domain_types',
    'qualified_name',
    'ConverterOptions',
    'build_converters',
    'BooleanCode',
    'TypeName',
    'LocaleTag',
    'ConversionError',
    'InvalidArgument',
    'TypeNotFoundError',
    'ResolutionError',
]
