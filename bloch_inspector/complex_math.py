# bloch_inspector/complex_math.py
import math
from dataclasses import dataclass

@dataclass(frozen=True)
class ComplexNumber:
    real: float = 0.0
    imag: float = 0.0

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

ZERO = ComplexNumber(0.0, 0.0)

def complex_from(value) -> ComplexNumber:
    """Build a ComplexNumber from a Python/numpy scalar."""
    z = complex(value)
    return ComplexNumber(z.real, z.imag)

def add(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(a.real + b.real, a.imag + b.imag)

def sub(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(a.real - b.real, a.imag - b.imag)

def mul(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(a.real*b.real - a.imag*b.imag,
                         a.real*b.imag + a.imag*b.real)

def conj(a: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(a.real, -a.imag)

def abs2(a: ComplexNumber) -> float:
    # squared magnitude; no sqrt needed for sums/comparisons
    return a.real*a.real + a.imag*a.imag

def from_polar(magnitude: float, phase: float) -> ComplexNumber:
    """magnitude * e^{i phase}, phase in radians."""
    return ComplexNumber(magnitude*math.cos(phase), magnitude*math.sin(phase))

def approx_equal(a: ComplexNumber, b: ComplexNumber, eps=1e-6) -> bool:
    return abs(a.real - b.real) < eps and abs(a.imag - b.imag) < eps
