"""
AVL Tree Demo -- Rotation cases, intermediate trees, height growth against the
AVL bound, and balance factor distribution.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- One page per intermediate tree of the sample sequence
"""

import sys
import math
import random
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from avltree import AVLTree
from avltree.plotting import plot_tree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SAMPLE_SEQUENCE = [50, 20, 80, 10, 30, 25, 27, 90, 95, 99, 5, 1]


def _describe(tree: AVLTree) -> str:
    snap = tree.snapshot()
    parts = []
    for node in snap:
        parts.append(f"{node.value}(h={node.height}, bf={node.balance:+d})")
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Example 1: The Four Rotation Cases
# ---------------------------------------------------------------------------
def example_1_rotation_cases():
    """Insert three values in each of the four unbalancing orders."""
    print("=" * 60)
    print("Example 1: The Four Rotation Cases")
    print("=" * 60)

    cases = [
        ("Left-Left (single right rotation)", [3, 2, 1]),
        ("Right-Right (single left rotation)", [1, 2, 3]),
        ("Left-Right (double rotation)", [3, 1, 2]),
        ("Right-Left (double rotation)", [1, 3, 2]),
    ]

    fig, axes = plt.subplots(1, 4, figsize=(16, 3.5))
    for ax, (name, order) in zip(axes, cases):
        tree = AVLTree.from_iterable(order)
        print(f"\n  {name}")
        print(f"    Insert order: {order}")
        print(f"    Pre-order:    {tree.pre_order()}")
        print(f"    Nodes:        {_describe(tree)}")
        plot_tree(tree.snapshot(), ax=ax, title=f"{name}\ninsert {order}")

    fig.suptitle("Every case settles on the middle value as root", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_rotation_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_rotation_cases.png")


# ---------------------------------------------------------------------------
# Example 2: Intermediate Trees
# ---------------------------------------------------------------------------
def example_2_intermediate_trees():
    """Snapshot the tree after every single insertion."""
    print("\n" + "=" * 60)
    print("Example 2: Intermediate Trees")
    print("=" * 60)

    tree = AVLTree()
    snapshots = []
    print(f"\n  {'Step':>6} {'Value':>7} {'Root':>6} {'Height':>8} {'Size':>6}")
    print(f"  {'-'*37}")
    for step, value in enumerate(SAMPLE_SEQUENCE, start=1):
        tree.insert(value)
        snap = tree.snapshot()
        snapshots.append((value, snap))
        print(f"  {step:>6} {value:>7} {snap.root:>6} {snap.height:>8} {len(snap):>6}")

    cols = 4
    rows = math.ceil(len(snapshots) / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(4.5 * cols, 3.5 * rows))
    for ax in axes.flat:
        ax.set_axis_off()
    for i, (value, snap) in enumerate(snapshots):
        plot_tree(snap, ax=axes.flat[i], title=f"after insert {value}")

    fig.suptitle("AVL tree after each insertion", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_intermediate_trees.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_intermediate_trees.png")
    return snapshots


# ---------------------------------------------------------------------------
# Example 3: Height Growth
# ---------------------------------------------------------------------------
def example_3_height_growth():
    """Compare tree height against log2(n) and the AVL worst-case bound."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    rng = random.Random(SEED)
    n_max = 4096
    random_values = rng.sample(range(2 ** 32), n_max)
    orders = {
        "ascending": list(range(n_max)),
        "descending": list(range(n_max, 0, -1)),
        "random": random_values,
    }

    checkpoints = np.unique(np.round(np.geomspace(1, n_max, 40)).astype(int))
    heights = {}
    for name, values in orders.items():
        tree = AVLTree()
        curve = []
        next_checkpoint = 0
        for i, value in enumerate(values, start=1):
            tree.insert(value)
            if next_checkpoint < len(checkpoints) and i == checkpoints[next_checkpoint]:
                curve.append(tree.height())
                next_checkpoint += 1
        heights[name] = np.array(curve)
        assert tree.is_balanced()

    ns = checkpoints.astype(float)
    lower = np.ceil(np.log2(ns + 1))
    bound = 1.44 * np.log2(ns + 2)

    print(f"\n  {'n':>6} {'ascending':>10} {'descending':>11} {'random':>8} {'log2':>6} {'bound':>7}")
    print(f"  {'-'*53}")
    for i in range(0, len(checkpoints), 6):
        print(f"  {checkpoints[i]:>6} {heights['ascending'][i]:>10} {heights['descending'][i]:>11} "
              f"{heights['random'][i]:>8} {lower[i]:>6.0f} {bound[i]:>7.2f}")

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.plot(ns, heights["ascending"], "o-", color=COLORS["blue"], ms=4, label="ascending insert")
    ax.plot(ns, heights["descending"], "s--", color=COLORS["orange"], ms=4, label="descending insert")
    ax.plot(ns, heights["random"], "^-", color=COLORS["green"], ms=4, label="random 32-bit insert")
    ax.plot(ns, lower, color=COLORS["dark"], lw=1, label="perfect tree ceil(log2(n+1))")
    ax.plot(ns, bound, color=COLORS["red"], lw=1.5, label="AVL bound 1.44 log2(n+2)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("number of values")
    ax.set_ylabel("tree height")
    ax.set_title("Height stays logarithmic regardless of insertion order", fontsize=11, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_height_growth.png")


# ---------------------------------------------------------------------------
# Example 4: Balance Factor Distribution
# ---------------------------------------------------------------------------
def example_4_balance_distribution():
    """How often nodes lean left, right, or not at all."""
    print("\n" + "=" * 60)
    print("Example 4: Balance Factor Distribution")
    print("=" * 60)

    n = 2000
    inputs = {
        "ascending": list(range(n)),
        "random": list(np.random.permutation(n)),
    }

    fig, axes = plt.subplots(1, len(inputs), figsize=(10, 4), sharey=True)
    for ax, (name, values) in zip(axes, inputs.items()):
        snap = AVLTree.from_iterable(int(v) for v in values).snapshot()
        balances = np.array([node.balance for node in snap])
        counts = np.array([(balances == b).sum() for b in (-1, 0, 1)])
        share = counts / counts.sum() * 100
        print(f"\n  {name} insert of {n} values (height {snap.height}):")
        for b, c, s in zip((-1, 0, 1), counts, share):
            print(f"    bf={b:+d}: {c:>5} nodes ({s:5.1f}%)")

        ax.bar(["-1", "0", "+1"], share,
               color=[COLORS["red"], COLORS["blue"], COLORS["orange"]], edgecolor="white")
        ax.set_title(f"{name} insert (n={n})", fontsize=10, fontweight="bold")
        ax.set_xlabel("balance factor")
        ax.grid(True, axis="y", alpha=0.3)
    axes[0].set_ylabel("share of nodes (%)")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_balance_distribution.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_balance_distribution.png")


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------
def write_report(snapshots):
    """One PDF page per intermediate tree."""
    print("\n" + "=" * 60)
    print("Writing report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        for step, (value, snap) in enumerate(snapshots, start=1):
            fig, ax = plt.subplots(figsize=(8.5, 5))
            plot_tree(snap, ax=ax, title=f"Step {step}: insert {value} "
                                         f"(size={len(snap)}, height={snap.height})")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"\n  Saved: {REPORT_PATH.name} ({len(snapshots)} pages)")


if __name__ == "__main__":
    example_1_rotation_cases()
    snapshots = example_2_intermediate_trees()
    example_3_height_growth()
    example_4_balance_distribution()
    write_report(snapshots)
