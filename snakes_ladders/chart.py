"""Series leaderboard: one bar per player, length = games won."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

WIN_COLOR = "#4A90D9"
NO_WIN_COLOR = "#C8D3E0"
NO_WIN_STUB = 0.05  # visible sliver for players who never won


def make_wins_chart(
    tallies: dict[str, int],
    output_path: str = "wins_leaderboard.png",
    title: str = "Snakes & Ladders Wins",
) -> str:
    """Save a horizontal bar chart of *tallies*, most wins on top.

    Players without a win still get a (grey) bar so the whole table shows.
    """
    ranked = sorted(tallies.items(), key=lambda kv: (-kv[1], kv[0]))
    names = [name for name, _ in ranked]
    wins = [count for _, count in ranked]
    total = sum(wins)

    fig, ax = plt.subplots(figsize=(8, max(2.5, len(names) * 0.6)))
    ax.barh(
        names,
        [count or NO_WIN_STUB for count in wins],
        color=[WIN_COLOR if count else NO_WIN_COLOR for count in wins],
    )
    for y, count in enumerate(wins):
        share = f" ({count / total:.0%})" if total else ""
        ax.annotate(
            f"{count}{share}", (max(count, NO_WIN_STUB), y),
            xytext=(4, 0), textcoords="offset points", va="center",
        )

    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_xlim(0, max(wins, default=0) * 1.25 + 1)
    ax.set_xlabel(f"Games won (of {total})")
    ax.set_title(title, fontweight="bold")
    ax.invert_yaxis()

    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
