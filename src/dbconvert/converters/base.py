"""
Base converter interface.

Every converter maps a domain value to the value stored in a column and back.
Concrete converters declare the ``(domain_type, storage_type)`` pair they
handle and implement the two directions:

    @register_converter
    class BooleanCodeConverter(AttributeConverter[bool, int]):
        domain_type = bool
        storage_type = int

        def to_storage(self, value): ...
        def to_domain(self, value): ...

Both directions propagate absent values: ``None`` in, ``None`` out.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

D = TypeVar('D')
S = TypeVar('S')

# Registry of domain type -> converter class
_CONVERTER_REGISTRY: dict[type, type['AttributeConverter']] = {}


def register_converter(cls: type['AttributeConverter']) -> type['AttributeConverter']:
    """Class decorator registering a converter under its domain type.
    """
    _CONVERTER_REGISTRY[cls.domain_type] = cls
    return cls


class AttributeConverter(ABC, Generic[D, S]):
    """Stateless two-way mapping between a domain value and its stored form.
    """

    domain_type: type
    storage_type: type

    @abstractmethod
    def to_storage(self, value: D | None) -> S | None:
        """Convert a domain value to its column representation.
        """

    @abstractmethod
    def to_domain(self, value: S | None) -> D | None:
        """Convert a column value back to its domain representation.
        """

    def __repr__(self) -> str:
        return (f'{type(self).__name__}(domain_type={self.domain_type.__name__}, '
                f'storage_type={self.storage_type.__name__})')
