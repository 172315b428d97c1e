"""
SQLAlchemy column types backed by the converters.

Each type forwards bound parameters to the converter's `to_storage` and result
rows to its `to_domain`, so the converter semantics apply unchanged to every
column that declares the type:

    table = sa.Table(
        'job', metadata,
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('enabled', BooleanCode),
        sa.Column('handler', TypeName(length=200)),
        sa.Column('locale', LocaleTag),
    )

Reading a `TypeName` column whose stored name cannot be resolved raises
`InvalidArgument` from the result row.
"""
from typing import Any

import sqlalchemy as sa
from dbconvert.converters import AttributeConverter, BooleanCodeConverter
from dbconvert.converters import LocaleTagConverter, TypeNameConverter
from dbconvert.converters import TypeResolver
from dbconvert.options import ConverterOptions, build_resolver
from sqlalchemy.types import TypeDecorator

__all__ = [
    'BooleanCode',
    'TypeName',
    'LocaleTag',
    'column_types_from_options',
]


class ConverterType(TypeDecorator):
    """TypeDecorator delegating both directions to an AttributeConverter."""

    cache_ok = True

    converter: AttributeConverter

    def process_bind_param(self, value: Any, dialect: sa.Dialect) -> Any:
        return self.converter.to_storage(value)

    def process_result_value(self, value: Any, dialect: sa.Dialect) -> Any:
        return self.converter.to_domain(value)

    @property
    def python_type(self) -> type:
        return self.converter.domain_type


class BooleanCode(ConverterType):
    """Boolean stored as a SMALLINT 1/0 code."""

    impl = sa.SmallInteger

    def __init__(self) -> None:
        super().__init__()
        self.converter = BooleanCodeConverter()


class TypeName(ConverterType):
    """Class stored as its fully-qualified name."""

    impl = sa.String

    def __init__(self, length: int = 255, resolver: TypeResolver | None = None) -> None:
        super().__init__(length)
        self.length = length
        self.resolver = resolver
        self.converter = TypeNameConverter(resolver=resolver)


class LocaleTag(ConverterType):
    """langcodes Language stored as a BCP-47 tag."""

    impl = sa.String

    def __init__(self, length: int = 35, normalize: bool = True) -> None:
        super().__init__(length)
        self.length = length
        self.normalize = normalize
        self.converter = LocaleTagConverter(normalize=normalize)


def column_types_from_options(options: ConverterOptions) -> dict[str, ConverterType]:
    """Create column types sized and configured by ConverterOptions."""
    return {
        'boolean': BooleanCode(),
        'type_name': TypeName(length=options.type_name_length,
                              resolver=build_resolver(options)),
        'locale': LocaleTag(length=options.locale_tag_length,
                            normalize=options.locale_normalize),
        }
