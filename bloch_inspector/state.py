# bloch_inspector/state.py
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .complex_math import ComplexNumber, ZERO, abs2, complex_from

def qubit_count_for(length: int) -> int:
    """max(1, round(log2(length))); rounds, so non power-of-two lengths are tolerated."""
    if length <= 1:
        return 1
    return max(1, int(round(math.log2(length))))

def next_power_of_two(length: int) -> int:
    if length <= 1:
        return 1
    return 1 << (length - 1).bit_length()

def normalize_state_vector(state: Sequence[ComplexNumber]) -> List[ComplexNumber]:
    """Scale to unit norm. Zero or non-finite norm -> all-zero vector of the same length."""
    total = math.sqrt(sum(abs2(a) for a in state))
    if total == 0 or not math.isfinite(total):
        return [ZERO for _ in state]
    return [ComplexNumber(a.real / total, a.imag / total) for a in state]

def pad_state_vector(state: Sequence[ComplexNumber]) -> List[ComplexNumber]:
    """New list zero-filled up to the next power of two; input untouched."""
    N = next_power_of_two(len(state))
    return list(state) + [ZERO] * (N - len(state))

@dataclass(frozen=True)
class StateVector:
    amplitudes: Tuple[ComplexNumber, ...]  # index = basis state, little-endian (qubit k is bit k)

    @staticmethod
    def of(amplitudes: Sequence[ComplexNumber]) -> "StateVector":
        return StateVector(tuple(amplitudes))

    @staticmethod
    def from_numpy(psi: np.ndarray) -> "StateVector":
        return StateVector(tuple(complex_from(a) for a in np.asarray(psi).ravel()))

    def __len__(self):
        return len(self.amplitudes)

    @property
    def qubit_count(self) -> int:
        return qubit_count_for(len(self.amplitudes))

    def norm2(self) -> float:
        return float(sum(abs2(a) for a in self.amplitudes))

    def check_normalized(self, tol=1e-6):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def normalized(self) -> "StateVector":
        return StateVector(tuple(normalize_state_vector(self.amplitudes)))

    def padded(self) -> "StateVector":
        return StateVector(tuple(pad_state_vector(self.amplitudes)))

    def as_numpy(self, dtype=np.complex128) -> np.ndarray:
        return np.array([a.to_complex() for a in self.amplitudes], dtype=dtype)

# ---------- numpy forms, for the JIT backend ----------

def normalize_array(psi: np.ndarray) -> np.ndarray:
    """Same policy as normalize_state_vector, on a complex128 copy."""
    psi = np.asarray(psi, dtype=np.complex128).ravel()
    total = np.sqrt(np.sum(np.abs(psi)**2))
    if total == 0 or not np.isfinite(total):
        return np.zeros(psi.shape[0], dtype=np.complex128)
    return psi / total

def pad_array(psi: np.ndarray) -> np.ndarray:
    out = np.zeros(next_power_of_two(psi.shape[0]), dtype=np.complex128)
    out[:psi.shape[0]] = psi
    return out
