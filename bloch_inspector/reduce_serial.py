# bloch_inspector/reduce_serial.py
from dataclasses import dataclass
from typing import Sequence

from .complex_math import ComplexNumber, ZERO, abs2, conj, mul

@dataclass(frozen=True)
class ReducedDensityMatrix:
    """[[rho00, rho01], [conj(rho01), rho11]] for one qubit."""
    rho00: float
    rho11: float
    rho01: ComplexNumber

def insert_bit(rest: int, position: int, bit: int) -> int:
    """Shift bits of `rest` at/above `position` up by one and put `bit` at `position`."""
    if position < 0:
        raise ValueError(f"bit position must be >= 0, got {position}")
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, got {bit}")
    low_mask = (1 << position) - 1
    return ((rest & ~low_mask) << 1) | (bit << position) | (rest & low_mask)

def reduced_density(psi: Sequence[ComplexNumber], qubit: int, total_qubits: int) -> ReducedDensityMatrix:
    """Trace out every qubit except `qubit` (little-endian: bit `qubit`)."""
    if not 0 <= qubit < total_qubits:
        raise ValueError(f"qubit {qubit} out of range for {total_qubits} qubits")
    N = len(psi)
    rest_size = 1 << (total_qubits - 1)
    rho00 = 0.0
    rho11 = 0.0
    re01 = 0.0
    im01 = 0.0
    # walk every assignment of the other qubits, pairing i0 (bit=0) with i1 (bit=1)
    for rest in range(rest_size):
        i0 = insert_bit(rest, qubit, 0)
        i1 = insert_bit(rest, qubit, 1)
        a0 = psi[i0] if i0 < N else ZERO
        a1 = psi[i1] if i1 < N else ZERO
        rho00 += abs2(a0)
        rho11 += abs2(a1)
        p = mul(a0, conj(a1))
        re01 += p.real
        im01 += p.imag
    return ReducedDensityMatrix(rho00, rho11, ComplexNumber(re01, im01))
