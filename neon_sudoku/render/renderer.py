"""Draw a game session's grid with matplotlib."""

from __future__ import annotations
import logging
import os
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import seaborn as sns

from ..core.board import GRID_SIZE, BOX_SIZE
from ..game.session import GameSession, GameState

log = logging.getLogger(__name__)

CYAN = "#00ffff"
MAGENTA = "#ff00ff"
BACKGROUND = "#0a0a1a"


def render_session(session: GameSession, path: Optional[str] = None) -> Optional[plt.Figure]:
    """
    Render the board of ``session``.

    Correct digits are cyan and wrong ones magenta. Box borders are thick
    magenta lines, other cell borders thin cyan ones. The selected cell and
    the cells sharing its digit are shaded, and a completed game gets a
    victory banner with the elapsed time.

    Args:
        session: The game to draw.
        path: If given, the PNG is written there and the figure is closed.

    Returns:
        The figure, or None when it was saved to ``path``.
    """
    with sns.axes_style("dark", {"axes.facecolor": BACKGROUND}):
        fig, ax = plt.subplots(figsize=(5, 6))

    fig.patch.set_facecolor(BACKGROUND)
    ax.set_xlim(0, GRID_SIZE)
    ax.set_ylim(GRID_SIZE + 1.5, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    # Highlights go under the lines and digits
    if session.selected is not None:
        row, col = session.selected
        ax.add_patch(mpatches.Rectangle((col, row), 1, 1, color=CYAN, alpha=0.2, linewidth=0))
        for h_row, h_col in session.highlighted_cells():
            ax.add_patch(mpatches.Rectangle((h_col, h_row), 1, 1, color=MAGENTA, alpha=0.1, linewidth=0))

    for i in range(GRID_SIZE + 1):
        thick = i % BOX_SIZE == 0
        color = MAGENTA if thick else CYAN
        width = 3 if thick else 1
        ax.plot([i, i], [0, GRID_SIZE], color=color, linewidth=width)
        ax.plot([0, GRID_SIZE], [i, i], color=color, linewidth=width)

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = session.board.get(row, col)
            if value:
                color = CYAN if session.is_correct(row, col, value) else MAGENTA
                ax.text(col + 0.5, row + 0.5, str(value), color=color,
                        fontsize=18, family="monospace", ha="center", va="center")

    status = f"{session.difficulty.value.upper()}  {session.time_display}  hints: {session.hints_left}"
    if session.state is GameState.ERROR:
        status += "  Error detected!"
    ax.text(GRID_SIZE / 2, GRID_SIZE + 0.75, status, color=CYAN,
            fontsize=11, family="monospace", ha="center", va="center")

    if session.state is GameState.COMPLETED:
        ax.text(GRID_SIZE / 2, GRID_SIZE / 2 - 0.4, "VICTORY!", color=CYAN, fontsize=32,
                family="monospace", ha="center", va="center", fontweight="bold",
                bbox={"facecolor": BACKGROUND, "alpha": 0.8, "edgecolor": MAGENTA})
        ax.text(GRID_SIZE / 2, GRID_SIZE / 2 + 0.6, f"Time: {session.time_display}", color=CYAN,
                fontsize=16, family="monospace", ha="center", va="center")

    plt.tight_layout()

    if path is None:
        return fig

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    log.debug("Rendered board to %s", path)
    return None
