"""
Classes stored by their fully-qualified name.

A class is written as ``module.QualifiedName`` and read back by resolving
that name against a resolution scope. The scope is a `TypeResolver` object
handed to the converter (or to a single `TypeNameConverter.load_type` call),
never ambient global state:

- `ImportResolver` imports the owning module, so reading a name may run that
  module's top-level code the first time it is seen
- `RegistryResolver` only knows the classes registered with it and never
  imports anything

Usage:
    converter = TypeNameConverter()
    converter.to_storage(decimal.Decimal)       # 'decimal.Decimal'
    converter.to_domain('decimal.Decimal')      # <class 'decimal.Decimal'>

    registry = RegistryResolver()
    registry.register(Invoice)
    TypeNameConverter(resolver=registry).to_domain('billing.models.Invoice')
"""
import importlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any

from dbconvert.converters.base import AttributeConverter, register_converter
from dbconvert.exceptions import InvalidArgument, TypeNotFoundError
from dbconvert.utils import is_absent

logger = logging.getLogger(__name__)


def qualified_name(cls: type) -> str:
    """Return the canonical name a class is stored under.

    >>> qualified_name(int)
    'builtins.int'
    >>> import collections
    >>> qualified_name(collections.OrderedDict)
    'collections.OrderedDict'
    """
    return f'{cls.__module__}.{cls.__qualname__}'


class TypeResolver(ABC):
    """Resolution scope mapping a fully-qualified name to a class.
    """

    @abstractmethod
    def resolve(self, name: str) -> type:
        """Return the class named ``name``.

        Raises TypeNotFoundError if the scope has no such class.
        """


class ImportResolver(TypeResolver):
    """Resolve names through the import system.

    The longest importable dotted prefix of the name is taken as the module,
    the rest is walked as attributes so nested classes resolve too.
    """

    def __init__(self, importer: Callable[[str], ModuleType] | None = None) -> None:
        self.importer = importer or importlib.import_module

    def _import_longest_prefix(self, name: str) -> tuple[ModuleType, list[str]]:
        parts = name.split('.')
        for i in range(len(parts) - 1, 0, -1):
            module_name = '.'.join(parts[:i])
            try:
                return self.importer(module_name), parts[i:]
            except ModuleNotFoundError as e:
                # a missing submodule is expected, anything else means the
                # module exists but failed to import
                if e.name is None or not (module_name == e.name
                                          or module_name.startswith(f'{e.name}.')):
                    raise TypeNotFoundError(name, str(e)) from e
                logger.debug(f'No module {module_name!r} while resolving {name!r}')
        raise TypeNotFoundError(name, 'no importable module')

    def resolve(self, name: str) -> type:
        if not name or name.startswith('.') or name.endswith('.') or '..' in name:
            raise TypeNotFoundError(name, 'not a fully-qualified name')

        module, attrs = self._import_longest_prefix(name)
        obj: Any = module
        for attr in attrs:
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                raise TypeNotFoundError(name, f'{module.__name__} has no {".".join(attrs)}') from e

        if not isinstance(obj, type):
            raise TypeNotFoundError(name, f'resolved to {type(obj).__name__}, not a class')

        logger.debug(f'Resolved {name!r} from module {module.__name__!r}')
        return obj


class RegistryResolver(TypeResolver):
    """Resolve names from an explicit name -> class mapping.

    >>> resolver = RegistryResolver()
    >>> @resolver.register
    ... class Invoice:
    ...     pass
    >>> resolver.resolve(qualified_name(Invoice)) is Invoice
    True
    >>> _ = resolver.register(dict, name='mapping')
    >>> resolver.resolve('mapping')
    <class 'dict'>
    """

    def __init__(self, types: dict[str, type] | Iterable[type] | None = None) -> None:
        self._types: dict[str, type] = {}
        if isinstance(types, dict):
            for name, cls in types.items():
                self.register(cls, name=name)
        elif types is not None:
            for cls in types:
                self.register(cls)

    def register(self, cls: type | None = None, *,
                 name: str | None = None) -> type | Callable[[type], type]:
        """Register a class under its qualified name or an explicit alias.

        Returns the class, so it doubles as a class decorator, with or
        without the ``name`` keyword.
        """
        if cls is None:
            return lambda inner: self.register(inner, name=name)

        key = name or qualified_name(cls)
        self._types[key] = cls
        logger.debug(f'Registered {key!r} -> {cls!r}')
        return cls

    def resolve(self, name: str) -> type:
        try:
            return self._types[name]
        except KeyError:
            logger.debug(f'No registered type for {name!r}')
            raise TypeNotFoundError(name, 'not registered') from None

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


@register_converter
class TypeNameConverter(AttributeConverter[type, str]):
    """Store classes as their fully-qualified name.

    >>> converter = TypeNameConverter()
    >>> converter.to_storage(OSError)
    'builtins.OSError'
    >>> converter.to_domain('builtins.OSError') is OSError
    True
    >>> converter.to_domain('no.such.Type12345')
    Traceback (most recent call last):
    ...
    dbconvert.exceptions.InvalidArgument: no.such.Type12345
    """

    domain_type = type
    storage_type = str

    def __init__(self, resolver: TypeResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else ImportResolver()

    def to_storage(self, value: type | None) -> str | None:
        if is_absent(value):
            return None
        return qualified_name(value)

    def to_domain(self, value: str | None) -> type | None:
        try:
            return self.load_type(value)
        except TypeNotFoundError as e:
            raise InvalidArgument(value) from e

    def load_type(self, name: str | None, resolver: TypeResolver | None = None) -> type | None:
        """Look up the class called ``name``.

        Override to resolve against a different scope. ``resolver`` takes
        precedence over the converter's own resolver for this call.
        """
        if is_absent(name):
            return None
        if resolver is None:
            resolver = self.resolver
        return resolver.resolve(name)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
