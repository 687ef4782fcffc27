# bloch_inspector/plot_results.py
import csv, os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from collections import defaultdict
from statistics import median

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")
BACKENDS = ("serial", "numba")

def load_rows(path):
    rows = []
    with open(path, "r") as f:
        r = csv.DictReader(f)
        for row in r:
            row["qubits"]  = int(row["qubits"])
            row["threads"] = int(row["threads"])
            row["wall_ms"] = float(row["wall_ms"])
            rows.append(row)
    return rows

def median_by(rows, field):
    """[(value, median wall_ms)] sorted by value."""
    buckets = defaultdict(list)
    for r in rows:
        buckets[r[field]].append(r["wall_ms"])
    return sorted((k, float(median(v))) for k, v in buckets.items())

def cost_model(ns, anchor_n, anchor_ms):
    """n * 2^n reduction cost, scaled to pass through one measured point."""
    scale = anchor_ms / (anchor_n * 2 ** anchor_n)
    return [scale * n * 2 ** n for n in ns]

def plot_runtime_vs_qubits(rows, tag, out_dir):
    pts = median_by(rows, "qubits")
    if not pts:
        return None
    xs, ys = zip(*pts)
    plt.figure()
    plt.plot(xs, ys, marker="o", label=tag)
    plt.plot(xs, cost_model(xs, xs[-1], ys[-1]), ls="--", label="n·2ⁿ")
    plt.xlabel("Qubits (n)")
    plt.ylabel("Runtime (ms, log scale)")
    plt.yscale("log")
    plt.title(f"Bloch reduction runtime vs qubits [{tag}]")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    out = os.path.join(out_dir, f"runtime_vs_qubits_{tag}.png")
    plt.savefig(out, dpi=200)
    plt.close()
    return out

def plot_speedup_vs_threads(rows, tag, out_dir):
    pts = median_by(rows, "threads")
    t1 = next((ms for t, ms in pts if t == 1), None)
    if not t1:
        return None
    xs = [t for t, _ in pts]
    ys = [t1 / ms for _, ms in pts]
    plt.figure()
    plt.plot(xs, ys, marker="o")
    plt.xlabel("Threads")
    plt.ylabel("Speedup (T1/Tt)")
    plt.title(f"Speedup vs Threads [{tag}]")
    plt.grid(True)
    out = os.path.join(out_dir, f"speedup_vs_threads_{tag}.png")
    plt.savefig(out, dpi=200)
    plt.close()
    return out

def plot_qubits_compare(data_dir=DATA_DIR):
    series = {}
    for be in BACKENDS:
        path = os.path.join(data_dir, be, "qubits.csv")
        if os.path.exists(path):
            series[be] = median_by(load_rows(path), "qubits")
    if not series:
        return None

    plt.figure()
    for be, pts in series.items():
        xs, ys = zip(*pts)
        plt.plot(xs, ys, marker="o", label=be)
    plt.xlabel("Qubits (n)")
    plt.ylabel("Runtime (ms, log scale)")
    plt.title("Bloch reduction runtime (serial vs numba)")
    plt.yscale("log")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.tight_layout()
    out = os.path.join(data_dir, "runtime_vs_qubits_compare.png")
    plt.savefig(out, dpi=200)
    plt.close()
    return out

def main(data_dir=DATA_DIR):
    csvs = []
    for root, _, files in os.walk(data_dir):
        for f in files:
            if f.endswith(".csv"):
                csvs.append(os.path.join(root, f))

    if not csvs:
        print("No CSV files found under data/")
        return

    for path in sorted(csvs):
        tag = os.path.splitext(os.path.basename(path))[0]
        backend = os.path.basename(os.path.dirname(path))
        rows = load_rows(path)
        print(f"Plotting from {backend}/{tag}.csv ({len(rows)} rows)...")

        # plots go next to their CSV
        out_dir = os.path.dirname(path)
        if tag.startswith("threads"):
            plot_speedup_vs_threads(rows, backend, out_dir)
        else:
            plot_runtime_vs_qubits(rows, backend, out_dir)

    plot_qubits_compare(data_dir)
    print("\nSaved all plots under data/<backend>/*.png")


if __name__ == "__main__":
    main()
