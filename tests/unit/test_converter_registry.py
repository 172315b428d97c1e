"""
Tests for the domain type -> converter registry.
"""
import pytest
from dbconvert import AttributeConverter, BooleanCodeConverter
from dbconvert import LocaleTagConverter, TypeNameConverter
from dbconvert import get_available_domain_types, get_converter_class
from dbconvert.converters import register_converter
from dbconvert.converters.base import _CONVERTER_REGISTRY
from langcodes import Language


def test_builtin_converters_registered():
    """Test every converter is registered under its domain type"""
    assert get_converter_class(bool) is BooleanCodeConverter
    assert get_converter_class(type) is TypeNameConverter
    assert get_converter_class(Language) is LocaleTagConverter
    assert {bool, type, Language} <= set(get_available_domain_types())


def test_unknown_domain_type():
    """Test lookups for unregistered types list what is available"""
    with pytest.raises(ValueError, match='Available'):
        get_converter_class(complex)


def test_register_converter():
    """Test third-party converters register through the decorator"""

    @register_converter
    class ComplexConverter(AttributeConverter[complex, str]):
        domain_type = complex
        storage_type = str

        def to_storage(self, value):
            return None if value is None else str(value)

        def to_domain(self, value):
            return None if value is None else complex(value)

    try:
        assert get_converter_class(complex) is ComplexConverter
        converter = ComplexConverter()
        assert converter.to_domain(converter.to_storage(1 + 2j)) == 1 + 2j
    finally:
        _CONVERTER_REGISTRY.pop(complex, None)


def test_base_is_abstract():
    """Test the base class cannot be used without both directions"""
    with pytest.raises(TypeError):
        AttributeConverter()


if __name__ == '__main__':
    pytest.main([__file__])
