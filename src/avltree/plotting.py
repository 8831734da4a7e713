"""
Matplotlib drawing of tree snapshots.

Nodes are placed on a grid: x is the in-order rank of the value, y is minus
the depth, so the drawing reads top-down and left-to-right in sorted order.
"""

from typing import Any, List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from .snapshot import TreeSnapshot

BALANCE_COLORS = {
    -1: "#e74c3c",
    0: "#3498db",
    1: "#f39c12",
}
UNBALANCED_COLOR = "#2c3e50"
EDGE_COLOR = "#7f8c8d"
NODE_SIZE = 500


def layout(snapshot: TreeSnapshot) -> Tuple[List[Any], np.ndarray]:
    """
    Grid coordinates for every node.

    Returns:
        (values, positions) where values follows the snapshot's pre-order and
        positions[i] is the (x, y) of values[i], shape (n, 2).
    """
    values = [node.value for node in snapshot]
    positions = np.zeros((len(values), 2), dtype=float)
    if not values:
        return values, positions

    positions[:, 0] = snapshot.ranks()
    positions[:, 1] = [-d for d in snapshot.depths()]
    return values, positions


def plot_tree(
    snapshot: TreeSnapshot,
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
) -> Axes:
    """Draw a snapshot onto ax (a new figure if None). Nodes are coloured by balance factor."""
    if ax is None:
        width = max(4.0, 0.6 * len(snapshot))
        height = max(3.0, 0.9 * snapshot.height)
        _, ax = plt.subplots(figsize=(width, height))

    values, positions = layout(snapshot)
    if not values:
        ax.text(0.5, 0.5, "empty tree", ha="center", va="center",
                fontsize=11, color=UNBALANCED_COLOR, transform=ax.transAxes)
    else:
        for parent, child in snapshot.edge_positions():
            p = positions[parent]
            c = positions[child]
            ax.plot([p[0], c[0]], [p[1], c[1]], color=EDGE_COLOR, lw=1.5, zorder=1)

        colors = [BALANCE_COLORS.get(node.balance, UNBALANCED_COLOR) for node in snapshot]
        ax.scatter(positions[:, 0], positions[:, 1], s=NODE_SIZE, c=colors,
                   edgecolors="white", linewidths=1.5, zorder=2)
        for value, (x, y) in zip(values, positions):
            ax.text(x, y, str(value), ha="center", va="center",
                    fontsize=9, fontweight="bold", color="white", zorder=3)

        ax.set_xlim(positions[:, 0].min() - 0.8, positions[:, 0].max() + 0.8)
        ax.set_ylim(positions[:, 1].min() - 0.6, 0.6)

    ax.set_axis_off()
    if title is not None:
        ax.set_title(title, fontsize=11, fontweight="bold")
    return ax
