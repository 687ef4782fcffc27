# bloch_inspector/tests/test_complex_math.py
import dataclasses
import math
import pytest
from bloch_inspector.complex_math import (
    ComplexNumber, add, sub, mul, conj, abs2, from_polar, approx_equal, complex_from,
)

def test_arithmetic_matches_builtin_complex():
    a = ComplexNumber(1.5, -2.0)
    b = ComplexNumber(-0.25, 3.0)
    za, zb = a.to_complex(), b.to_complex()
    assert approx_equal(add(a, b), complex_from(za + zb))
    assert approx_equal(sub(a, b), complex_from(za - zb))
    assert approx_equal(mul(a, b), complex_from(za * zb))
    assert conj(a) == ComplexNumber(1.5, 2.0)
    assert abs2(a) == pytest.approx(abs(za) ** 2)

def test_from_polar():
    z = from_polar(2.0, math.pi / 2)
    assert approx_equal(z, ComplexNumber(0.0, 2.0))
    assert approx_equal(from_polar(1.0, math.pi), ComplexNumber(-1.0, 0.0))

def test_approx_equal_eps():
    a = ComplexNumber(1.0, 1.0)
    assert approx_equal(a, ComplexNumber(1.0 + 5e-7, 1.0))
    assert not approx_equal(a, ComplexNumber(1.0 + 5e-6, 1.0))
    assert approx_equal(a, ComplexNumber(1.05, 0.95), eps=0.1)

def test_values_are_immutable():
    a = ComplexNumber(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.real = 3.0
    b = add(a, a)
    assert a == ComplexNumber(1.0, 2.0) and b == ComplexNumber(2.0, 4.0)
