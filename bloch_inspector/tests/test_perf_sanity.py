# bloch_inspector/tests/test_perf_sanity.py
import time
import numpy as np
from bloch_inspector.bench import random_state
from bloch_inspector.bloch import compute_bloch_vectors

FIELDS = ("x", "y", "z")

def test_bench_runs_and_times():
    n = 12     # ~moderate but quick in CI/local
    state = random_state(n, seed=5)
    compute_bloch_vectors(random_state(2), backend="numba")  # JIT warmup

    t0 = time.perf_counter()
    s1 = compute_bloch_vectors(state, backend="serial")
    t1 = time.perf_counter() - t0

    t0 = time.perf_counter()
    s2 = compute_bloch_vectors(state, backend="numba")
    t2 = time.perf_counter() - t0

    # correctness
    a = np.array([[getattr(v, f) for f in FIELDS] for v in s1.vectors])
    b = np.array([[getattr(v, f) for f in FIELDS] for v in s2.vectors])
    assert np.allclose(a, b, atol=1e-9, rtol=0)
    # sanity: both timings are positive
    assert t1 > 0 and t2 > 0
    # don't hard-assert speedup (machines vary); just ensure it isn't catastrophically slower
    assert t2 < 5.0 * t1
