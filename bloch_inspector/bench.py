# bloch_inspector/bench.py
import argparse, csv, os, socket, subprocess, time, platform
from datetime import datetime
import numpy as np
from .bloch import compute_bloch_vectors
from .state import StateVector

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

def backend_dir(backend):
    path = os.path.join(DATA_DIR, backend)
    os.makedirs(path, exist_ok=True)
    return path

def warmup(backend, threads=None):
    # one tiny run to JIT-compile the numba kernel
    _ = compute_bloch_vectors(input_for(2, backend), backend=backend, num_threads=threads)

# ---------------------------------------------------------------------

def meta_row():
    commit = ""
    try:
        commit = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                         stderr=subprocess.DEVNULL).decode().strip()
    except Exception:
        pass
    return {
        "hostname": socket.gethostname(),
        "commit": commit,
        "dtype": "complex128",
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "python": platform.python_version(),
        "machine": platform.machine(),
        "cpu": platform.processor(),
    }

HEADER = ["qubits","backend","threads","wall_ms","hostname","commit","dtype","timestamp","python","machine","cpu"]

def new_csv(path):
    """Create/overwrite CSV with header."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writerow(row)

# ---------------------------------------------------------------------


def random_psi(n, seed=0) -> np.ndarray:
    """Unnormalized Gaussian amplitudes on n qubits."""
    if n < 1:
        raise ValueError(f"need at least one qubit, got n={n}")
    rng = np.random.default_rng(seed)
    N = 1 << n
    return rng.normal(size=N) + 1j * rng.normal(size=N)

def random_state(n, seed=0) -> StateVector:
    return StateVector.from_numpy(random_psi(n, seed))

def input_for(n, backend, seed=0):
    # numba times the array path; serial times the ComplexNumber path
    return random_psi(n, seed) if backend == "numba" else random_state(n, seed)

def time_run(state, backend, threads=None):
    t0 = time.perf_counter()
    _ = compute_bloch_vectors(state, backend=backend, num_threads=threads)
    return (time.perf_counter() - t0) * 1e3  # ms

def numba_max_threads():
    try:
        from numba import config
        return int(config.NUMBA_NUM_THREADS)
    except Exception:
        return os.cpu_count() or 1

# ---------------------------------------------------------------------
# individual experiments

def bench_qubits(ns, backend, out_path):
    print(f"[run] Qubits scaling → {out_path}")
    new_csv(out_path)
    warmup(backend)
    for n in ns:
        state = input_for(n, backend, seed=42)
        wall = time_run(state, backend)
        m = meta_row()
        write_row(out_path, {
            "qubits": n, "backend": backend, "threads": 0 if backend=="serial" else numba_max_threads(),
            "wall_ms": f"{wall:.3f}",
            **m,
        })
        print(f"  n={n}  wall={wall:.2f} ms")
    print("✓ done.\n")

def bench_threads(n, threads_list, out_path):
    print(f"[run] Thread scaling → {out_path}")
    new_csv(out_path)
    state = random_psi(n, seed=123)
    warmup("numba", threads=1)
    t1 = time_run(state, "numba", threads=1)
    pool = numba_max_threads()
    print(f"  pool={pool}  T1={t1:.1f} ms")

    for t in threads_list:
        tt = min(int(t), pool)
        if tt != t:
            print(f"  requested t={t} > pool={pool}; using t={tt}")
        wall = time_run(state, "numba", threads=tt)
        speedup = t1 / wall if wall > 0 else float("nan")
        m = meta_row()
        write_row(out_path, {
            "qubits": n, "backend": "numba", "threads": tt,
            "wall_ms": f"{wall:.3f}",
            **m,
        })
        print(f"  t={tt}  wall={wall:.2f} ms  speedup={speedup:.2f}×")
    print("✓ done.\n")

def main():
    p = argparse.ArgumentParser(description="bloch_inspector reduction benchmarks → data/<backend>/*.csv")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_qubits = sub.add_parser("qubits")
    p_qubits.add_argument("--ns", type=str, default="2,4,6,8,10,12")
    p_qubits.add_argument("--backend", type=str, default="numba", choices=["serial","numba"])

    p_threads = sub.add_parser("threads")
    p_threads.add_argument("--n", type=int, default=16)
    p_threads.add_argument("--threads", type=str, default="1,2,4,8")
    p_threads.add_argument("--backend", type=str, default="numba", choices=["numba"])

    args = p.parse_args()

    base = backend_dir(args.backend)

    if args.cmd == "qubits":
        ns = [int(x) for x in args.ns.split(",")]
        out_path = os.path.join(base, "qubits.csv")
        bench_qubits(ns, args.backend, out_path)

    elif args.cmd == "threads":
        ts = [int(x) for x in args.threads.split(",")]
        out_path = os.path.join(base, "threads.csv")
        bench_threads(args.n, ts, out_path)

if __name__ == "__main__":
    main()
