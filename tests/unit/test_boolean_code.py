"""
Tests for the boolean <-> SMALLINT code converter.
"""
import numpy as np
import pytest
from dbconvert import BooleanCodeConverter


@pytest.fixture
def converter():
    return BooleanCodeConverter()


def test_to_storage(converter):
    """Test booleans are written as 1/0 codes"""
    assert converter.to_storage(True) == 1
    assert converter.to_storage(False) == 0
    assert converter.to_storage(None) is None


def test_to_storage_only_emits_canonical_codes(converter):
    """Test anything that is not True is written as 0"""
    assert converter.to_storage(np.bool_(True)) == 1
    assert converter.to_storage(np.bool_(False)) == 0
    assert converter.to_storage(1) == 0
    assert converter.to_storage('true') == 0


def test_to_domain(converter, code_values):
    """Test positive codes read as True, zero and negative codes as False"""
    for code, expected in code_values.items():
        assert converter.to_domain(code) is expected, code


def test_to_domain_numpy_codes(converter):
    """Test NumPy integers from DataFrame columns read back as Python bools"""
    assert converter.to_domain(np.int16(3)) is True
    assert converter.to_domain(np.int16(0)) is False
    assert converter.to_domain(np.int64(-7)) is False


def test_absent_values(converter, absent_values):
    """Test missing values propagate as None in both directions"""
    for value in absent_values:
        assert converter.to_storage(value) is None
        assert converter.to_domain(value) is None


def test_round_trip(converter):
    """Test canonical values survive a write and read"""
    for value in (True, False, None):
        assert converter.to_domain(converter.to_storage(value)) is value


def test_declared_types(converter):
    """Test the declared domain/storage pair"""
    assert converter.domain_type is bool
    assert converter.storage_type is int
    assert repr(converter) == 'BooleanCodeConverter(domain_type=bool, storage_type=int)'


if __name__ == '__main__':
    pytest.main([__file__])
