"""
Sub-line plotting.

Unbounded segment ends are clipped to a viewing box before drawing.
"""

from typing import Optional, Sequence, Tuple
import matplotlib.pyplot as plt

from ..geometry import SubLine, Vector2D


def _box_abscissa_range(sub: SubLine, bounds: Tuple[float, float, float, float]) -> Tuple[float, float]:
    """Abscissa range along the sub-line's line spanned by the box corners."""
    xmin, xmax, ymin, ymax = bounds
    corners = [Vector2D(xmin, ymin), Vector2D(xmin, ymax),
               Vector2D(xmax, ymin), Vector2D(xmax, ymax)]
    abscissas = [sub.line.to_sub_space(c) for c in corners]
    return min(abscissas), max(abscissas)


def plot_segments(sublines: Sequence[SubLine],
                  ax: Optional[plt.Axes] = None,
                  bounds: Tuple[float, float, float, float] = (-10.0, 10.0, -10.0, 10.0),
                  colors: Optional[Sequence[str]] = None,
                  linewidth: float = 2.0,
                  show_endpoints: bool = True,
                  title: Optional[str] = None) -> plt.Axes:
    """Draw the segments of each sub-line.

    Args:
        sublines: Sub-lines to draw
        ax: Matplotlib axes (created if None)
        bounds: Viewing box ``(xmin, xmax, ymin, ymax)``; infinite ends are
            cut where the line leaves it
        colors: One color per sub-line
        linewidth: Line width
        show_endpoints: Mark finite segment ends
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))

    if colors is None:
        cmap = plt.get_cmap('tab10')
        colors = [cmap(i % 10) for i in range(len(sublines))]

    for i, sub in enumerate(sublines):
        low, high = _box_abscissa_range(sub, bounds)
        color = colors[i % len(colors)]

        for interval in sub.remaining_region:
            start = interval.lower if interval.bounded_below else min(low, interval.upper)
            end = interval.upper if interval.bounded_above else max(high, interval.lower)
            p, q = sub.line.to_space(start), sub.line.to_space(end)
            ax.plot([p.x, q.x], [p.y, q.y], color=color, linewidth=linewidth)

            if show_endpoints:
                ends = [v for v, bounded in ((p, interval.bounded_below), (q, interval.bounded_above))
                        if bounded]
                if ends:
                    ax.scatter([v.x for v in ends], [v.y for v in ends],
                               color=color, s=30, zorder=5)

    xmin, xmax, ymin, ymax = bounds
    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.set_aspect('equal')

    if title:
        ax.set_title(title)

    return ax
