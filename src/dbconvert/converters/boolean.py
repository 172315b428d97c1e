"""
Boolean flags stored as small integer codes.
"""
from typing import Any

from dbconvert.converters.base import AttributeConverter, register_converter
from dbconvert.utils import is_absent, unwrap_scalar


@register_converter
class BooleanCodeConverter(AttributeConverter[bool, int]):
    """Store booleans as ``1``/``0`` in a SMALLINT column.

    Reading is more lenient than writing: every positive code is true, zero
    and every negative code are false.

    >>> converter = BooleanCodeConverter()
    >>> converter.to_storage(True), converter.to_storage(False)
    (1, 0)
    >>> converter.to_domain(42), converter.to_domain(0), converter.to_domain(-5)
    (True, False, False)
    >>> converter.to_domain(None) is None
    True
    """

    domain_type = bool
    storage_type = int

    def to_storage(self, value: Any) -> int | None:
        if is_absent(value):
            return None
        if unwrap_scalar(value) is True:
            return 1
        return 0

    def to_domain(self, value: Any) -> bool | None:
        if is_absent(value):
            return None
        return unwrap_scalar(value) > 0


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
