# bloch_inspector/bloch.py
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from .reduce_serial import ReducedDensityMatrix
from .state import (
    StateVector, normalize_array, normalize_state_vector, pad_array, pad_state_vector, qubit_count_for,
)

@dataclass(frozen=True)
class BlochVector:
    qubit_index: int
    x: float
    y: float
    z: float
    radius: float  # [0, 1]
    theta: float   # [0, pi]
    phi: float     # (-pi, pi]

    def readout(self) -> Dict[str, str]:
        """Display strings: cartesian to 2 decimals, angles in degrees to 1 decimal."""
        return {
            "x": f"{self.x:.2f}",
            "y": f"{self.y:.2f}",
            "z": f"{self.z:.2f}",
            "theta": f"{math.degrees(self.theta):.1f}°",
            "phi": f"{math.degrees(self.phi):.1f}°",
        }

@dataclass(frozen=True)
class BlochResult:
    qubit_count: int
    vectors: List[BlochVector]

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

def bloch_from_density(qubit: int, rho: ReducedDensityMatrix) -> BlochVector:
    x = 2.0 * rho.rho01.real
    y = -2.0 * rho.rho01.imag
    z = rho.rho00 - rho.rho11
    # round-off may push these past the unit sphere / acos domain
    radius = min(1.0, math.sqrt(x*x + y*y + z*z))
    theta = 0.0 if radius == 0 else math.acos(_clamp(z / radius, -1.0, 1.0))
    phi = math.atan2(y, x)
    if phi == -math.pi:
        phi = math.pi
    return BlochVector(qubit, x, y, z, radius, theta, phi)

def compute_bloch_vectors(state, backend: str = "serial",
                          num_threads: Optional[int] = None) -> BlochResult:
    """
    Normalize, zero-pad to a power of two and reduce every qubit to its Bloch vector.
    `state` may be a sequence of ComplexNumber, a StateVector or a 1-D numpy array.
    Cost is O(n * 2^n) for n qubits; fine for the small registers an inspector shows.
    """
    if isinstance(state, StateVector):
        state = state.amplitudes
    n = qubit_count_for(len(state))

    if backend == "serial":
        from .reduce_serial import reduced_density
        if isinstance(state, np.ndarray):
            state = StateVector.from_numpy(state).amplitudes
        psi = pad_state_vector(normalize_state_vector(state))
        vectors = [bloch_from_density(k, reduced_density(psi, k, n)) for k in range(n)]

    elif backend == "numba":
        try:
            from .reduce_numba import reduced_density, set_threads, get_threads
        except Exception as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        arr = state if isinstance(state, np.ndarray) else StateVector.of(state).as_numpy()
        psi = pad_array(normalize_array(arr))
        prev = get_threads()
        if num_threads is not None:
            set_threads(int(num_threads))
        try:
            vectors = [bloch_from_density(k, reduced_density(psi, k, n)) for k in range(n)]
        finally:
            # thread count is process-wide
            set_threads(prev)

    else:
        raise NotImplementedError(f"Unknown backend: {backend}")

    return BlochResult(n, vectors)
