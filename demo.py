"""
Hash Table Demo -- Basic operations, resize timeline, chain length analysis,
load factor sweep, and key pattern comparison.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import math
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from hash_table import HashTable

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

ALPHABET = np.array(list("abcdefghijklmnopqrstuvwxyz"))


def random_keys(n, length=8):
    """Distinct random lowercase keys."""
    keys = []
    seen = set()
    while len(keys) < n:
        key = "".join(ALPHABET[np.random.randint(0, len(ALPHABET), size=length)])
        if key not in seen:
            seen.add(key)
            keys.append(key)
    return keys


def poisson_pmf(k, lam):
    return np.exp(-lam) * lam ** k / np.array([math.factorial(int(i)) for i in k])


def example_1_basic_operations():
    """set/get/has/remove on a small table, printed step by step."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    table = HashTable(capacity=4, load_factor=0.75)
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        table.set(key, value)
        print(f"  set({key!r}, {value}) -> length={table.length()}, capacity={table.capacity}")

    table.set("a", 100)
    print(f"  set('a', 100) -> length={table.length()} (update, no growth)")
    print(f"  get('a') = {table.get('a')}")
    print(f"  has('z') = {table.has('z')}")
    print(f"  get('z') = {table.get('z')!r}")
    print(f"  remove('b') = {table.remove('b')}")
    print(f"  remove('b') = {table.remove('b')}")
    print(f"  entries() = {table.entries()}")

    fig, ax = plt.subplots(figsize=(8, 4))
    sizes = table.bucket_sizes()
    ax.bar(range(len(sizes)), sizes, color=COLORS["blue"], edgecolor="white")
    ax.set_xlabel("Bucket index")
    ax.set_ylabel("Chain length")
    ax.set_title(f"Bucket layout after operations (capacity={table.capacity})")
    ax.set_xticks(range(len(sizes)))
    ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_basic_operations.png", dpi=150)
    plt.close(fig)

    return fig, table


def example_2_resize_timeline():
    """Track capacity and load after every insertion."""
    print("\n" + "=" * 60)
    print("Example 2: Resize Timeline")
    print("=" * 60)

    table = HashTable(capacity=4, load_factor=0.75)
    keys = random_keys(600)
    capacities = []
    loads = []
    for i, key in enumerate(keys):
        before = table.capacity
        table.set(key, i)
        if table.capacity != before:
            print(f"  insert #{i + 1}: capacity {before} -> {table.capacity}")
        capacities.append(table.capacity)
        loads.append(table.load())

    lost = [k for i, k in enumerate(keys) if table.get(k) != i]
    print(f"  keys lost across resizes: {len(lost)}")

    steps = np.arange(1, len(keys) + 1)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].step(steps, capacities, where="post", color=COLORS["purple"], linewidth=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Insertions")
    axes[0].set_ylabel("Capacity")
    axes[0].set_title("Capacity doubles at the load factor threshold")
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(steps, loads, color=COLORS["blue"], linewidth=1.5)
    axes[1].axhline(table.load_factor, color=COLORS["red"], linestyle="--",
                    label=f"load factor = {table.load_factor}")
    axes[1].set_xlabel("Insertions")
    axes[1].set_ylabel("size / capacity")
    axes[1].set_title("Load after each insertion (sawtooth)")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_resize_timeline.png", dpi=150)
    plt.close(fig)

    return fig, table


def example_3_chain_lengths():
    """Compare observed chain lengths with a Poisson model."""
    print("\n" + "=" * 60)
    print("Example 3: Chain Length Distribution")
    print("=" * 60)

    table = HashTable(capacity=1024, load_factor=1.0)
    for i, key in enumerate(random_keys(1000)):
        table.set(key, i)

    sizes = np.array(table.bucket_sizes())
    lam = table.length() / table.capacity
    k = np.arange(0, sizes.max() + 1)
    observed = np.bincount(sizes, minlength=len(k)) / len(sizes)
    expected = poisson_pmf(k, lam)

    print(f"  load = {lam:.3f}, used buckets = {table.used_buckets()}/{table.capacity}")
    print(f"  longest chain = {sizes.max()}, mean non-empty chain = {sizes[sizes > 0].mean():.3f}")
    for length, obs, exp in zip(k, observed, expected):
        print(f"    chain length {length}: observed {obs:.3f}, poisson {exp:.3f}")

    fig, ax = plt.subplots(figsize=(8, 5))
    width = 0.4
    ax.bar(k - width / 2, observed, width=width, color=COLORS["blue"], label="Observed")
    ax.bar(k + width / 2, expected, width=width, color=COLORS["orange"], label=f"Poisson(λ={lam:.2f})")
    ax.set_xlabel("Chain length")
    ax.set_ylabel("Fraction of buckets")
    ax.set_title("Chain lengths for 1000 random keys")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_chain_lengths.png", dpi=150)
    plt.close(fig)

    return fig, table


def example_4_load_factor_sweep():
    """Final capacity and chain lengths for different load factors."""
    print("\n" + "=" * 60)
    print("Example 4: Load Factor Sweep")
    print("=" * 60)

    keys = random_keys(2000)
    load_factors = [0.25, 0.5, 0.75, 1.0]
    capacities = []
    mean_chains = []
    max_chains = []
    for lf in load_factors:
        table = HashTable(capacity=16, load_factor=lf)
        for i, key in enumerate(keys):
            table.set(key, i)
        sizes = np.array(table.bucket_sizes())
        capacities.append(table.capacity)
        mean_chains.append(sizes[sizes > 0].mean())
        max_chains.append(sizes.max())
        print(f"  load_factor={lf:.2f}: capacity={table.capacity}, "
              f"mean chain={mean_chains[-1]:.3f}, max chain={max_chains[-1]}")

    x = np.arange(len(load_factors))
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].bar(x, capacities, color=COLORS["green"])
    axes[0].set_xticks(x)
    axes[0].set_xticklabels([str(lf) for lf in load_factors])
    axes[0].set_xlabel("Load factor")
    axes[0].set_ylabel("Final capacity")
    axes[0].set_title("Memory: buckets allocated for 2000 keys")
    axes[0].grid(True, alpha=0.3, axis="y")

    axes[1].plot(x, mean_chains, "o-", color=COLORS["blue"], label="Mean non-empty chain")
    axes[1].plot(x, max_chains, "s--", color=COLORS["red"], label="Longest chain")
    axes[1].set_xticks(x)
    axes[1].set_xticklabels([str(lf) for lf in load_factors])
    axes[1].set_xlabel("Load factor")
    axes[1].set_ylabel("Nodes scanned")
    axes[1].set_title("Lookup cost vs. load factor")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_load_factor_sweep.png", dpi=150)
    plt.close(fig)

    return fig, (load_factors, capacities)


def example_5_key_patterns():
    """Bucket usage for sequential, random, and short keys."""
    print("\n" + "=" * 60)
    print("Example 5: Key Patterns")
    print("=" * 60)

    n = 500
    patterns = {
        "sequential (key0..)": [f"key{i}" for i in range(n)],
        "random (8 chars)": random_keys(n),
        "two letters": [a + b for a in ALPHABET for b in ALPHABET][:n],
    }

    fig, axes = plt.subplots(1, len(patterns), figsize=(18, 5))
    for ax, (name, keys) in zip(axes, patterns.items()):
        table = HashTable(capacity=1024, load_factor=1.0)
        for key in keys:
            table.set(key, None)
        sizes = np.array(table.bucket_sizes())
        used = table.used_buckets()
        print(f"  {name}: used buckets {used}/{table.capacity}, longest chain {sizes.max()}")
        ax.bar(np.arange(len(sizes)), sizes, width=1.0, color=COLORS["dark"])
        ax.set_title(f"{name}\nused={used}, max chain={sizes.max()}")
        ax.set_xlabel("Bucket index")
        ax.set_ylabel("Chain length")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "05_key_patterns.png", dpi=150)
    plt.close(fig)

    return fig, patterns


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Chained Hash Table", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Separate Chaining with a Linked List", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")
        summary_text = """
Polynomial rolling hash (h = h * 31 + code unit, mod capacity
after every character) routes string keys to buckets. Each
bucket is a singly linked chain of key/value nodes.

• Capacity doubles whenever size / capacity reaches the
  load factor after an insertion; every key is rehashed.
• A side list of keys keeps insertion order for keys(),
  values(), entries() and drives the rehash.

Key Findings:
  1. No key is lost or changed across resizes
  2. Chain lengths for random keys track a Poisson model
  3. Lower load factors trade memory for shorter chains
  4. Short, structured keys cluster in low bucket indices
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / filename)
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    VIZ_DIR.mkdir(exist_ok=True)

    print("\n" + "#" * 60)
    print("#" + " " * 22 + "HASH TABLE DEMO" + " " * 21 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_basic_operations()
    example_2_resize_timeline()
    example_3_chain_lengths()
    example_4_load_factor_sweep()
    example_5_key_patterns()

    figures = [
        ("Example 1: Basic Operations", "01_basic_operations.png"),
        ("Example 2: Resize Timeline", "02_resize_timeline.png"),
        ("Example 3: Chain Lengths", "03_chain_lengths.png"),
        ("Example 4: Load Factor Sweep", "04_load_factor_sweep.png"),
        ("Example 5: Key Patterns", "05_key_patterns.png"),
    ]
    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
