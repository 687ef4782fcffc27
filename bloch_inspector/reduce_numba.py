# bloch_inspector/reduce_numba.py
import numpy as np
from numba import njit, prange, set_num_threads, get_num_threads
from .complex_math import ComplexNumber
from .reduce_serial import ReducedDensityMatrix

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _reduce_kernel(psi, qubit, total_qubits):
    N = psi.shape[0]
    rest_size = 1 << (total_qubits - 1)
    low_mask = (1 << qubit) - 1
    mq = 1 << qubit
    rho00 = 0.0
    rho11 = 0.0
    re01 = 0.0
    im01 = 0.0
    # each rest-combination is independent → scalar reductions across threads
    for rest in prange(rest_size):
        r = np.int64(rest)  # keep index arithmetic signed
        i0 = ((r & ~low_mask) << 1) | (r & low_mask)
        i1 = i0 | mq
        a0 = 0j
        a1 = 0j
        if i0 < N:
            a0 = psi[i0]
        if i1 < N:
            a1 = psi[i1]
        rho00 += a0.real*a0.real + a0.imag*a0.imag
        rho11 += a1.real*a1.real + a1.imag*a1.imag
        # a0 * conj(a1)
        re01 += a0.real*a1.real + a0.imag*a1.imag
        im01 += a0.imag*a1.real - a0.real*a1.imag
    return rho00, rho11, re01, im01

# ---------- user-facing helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def reduced_density(psi: np.ndarray, qubit: int, total_qubits: int) -> ReducedDensityMatrix:
    if not 0 <= qubit < total_qubits:
        raise ValueError(f"qubit {qubit} out of range for {total_qubits} qubits")
    psi = np.ascontiguousarray(psi, dtype=np.complex128)
    rho00, rho11, re01, im01 = _reduce_kernel(psi, qubit, total_qubits)
    return ReducedDensityMatrix(float(rho00), float(rho11), ComplexNumber(float(re01), float(im01)))
