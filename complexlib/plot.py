"""
Draw Complex values on the Argand plane.
----------------------------------
Dependencies:  pip install matplotlib numpy
Input items    :  Complex, builtin complex, (re, im[, suffix]) tuples or text
                  such as "3-4i"; every item goes through Complex.validate()
"""
from typing import Iterable, List, Tuple

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from .complex import Complex
from .errors import InvalidArgumentError

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DEFAULT_INTERVAL_MS = 200             # delay between animation frames
DEFAULT_MARGIN      = 0.1             # fraction of the span added on each side
MIN_SPAN            = 1.0             # never zoom closer than the unit circle
POINT_STYLE         = "ro"
TRAIL_STYLE         = "b-"

ComplexLike = Complex | complex | tuple | str


def _as_complex_list(values: Iterable[ComplexLike]) -> List[Complex]:
    return [Complex.validate(z) for z in values]


def _components(seq: List[Complex]) -> Tuple[np.ndarray, np.ndarray]:
    xs = np.array([z.real for z in seq], dtype=float)
    ys = np.array([z.imaginary for z in seq], dtype=float)
    return xs, ys


def argand_limits(values: Iterable[ComplexLike], margin: float = DEFAULT_MARGIN) -> Tuple[float, float]:
    """Symmetric (lo, hi) axis limits for a square box that fits every value."""
    xs, ys = _components(_as_complex_list(values))
    span = max(np.abs(xs).max(initial=0.0), np.abs(ys).max(initial=0.0), MIN_SPAN)
    pad = margin * span
    return float(-span - pad), float(span + pad)


def _style_axes(ax, lo: float, hi: float, title: str) -> None:
    ax.set_aspect("equal")
    ax.set_xlim(lo, hi)
    ax.set_ylim(lo, hi)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)
    ax.axhline(0.0, color="0.6", linewidth=0.8)
    ax.axvline(0.0, color="0.6", linewidth=0.8)


def plot_argand(values: Iterable[ComplexLike], *, ax=None, annotate: bool = False):
    """
    Scatter the values on labelled Re/Im axes.

    Parameters
    ----------
    values   : iterable of complex-like items
    ax       : existing matplotlib Axes to draw on (a new figure otherwise)
    annotate : label each point with its canonical string form

    Returns
    -------
    matplotlib.axes.Axes
    """
    seq = _as_complex_list(values)
    xs, ys = _components(seq)

    if ax is None:
        _, ax = plt.subplots()
    lo, hi = argand_limits(seq)
    _style_axes(ax, lo, hi, "Argand diagram")
    ax.plot(xs, ys, POINT_STYLE, markersize=6)

    if annotate:
        for z, x, y in zip(seq, xs, ys):
            ax.annotate(z.format(), (x, y), textcoords="offset points", xytext=(4, 4))
    return ax


def animate_complex(
    sequence: Iterable[ComplexLike],
    *,
    interval: int = DEFAULT_INTERVAL_MS,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of complex-like items
    interval : delay between frames in **ms**
    show     : call plt.show() before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """
    # Convert the iterable to a concrete list (needed to pre‑fit axes)
    seq = _as_complex_list(sequence)
    if not seq:
        raise InvalidArgumentError("Nothing to animate: the sequence is empty")

    fig, ax = plt.subplots()
    lo, hi = argand_limits(seq)
    _style_axes(ax, lo, hi, "Complex number animation")

    # Artists
    point, = ax.plot([], [], POINT_STYLE, markersize=6)
    trail, = ax.plot([], [], TRAIL_STYLE, alpha=0.5, linewidth=1)

    # History containers for the trail
    history_x: List[float] = []
    history_y: List[float] = []

    def init():
        history_x.clear()
        history_y.clear()
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        z = seq[frame]
        history_x.append(z.real)
        history_y.append(z.imaginary)

        point.set_data([z.real], [z.imaginary])
        trail.set_data(history_x, history_y)
        ax.set_title(f"t = {frame}  |  z = {z.format()}")
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(seq),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    step = Complex.from_polar(1.0, np.pi / 180)
    o = [Complex(1.0)]
    for _ in range(1, 360):
        o.append(o[-1] * step)
    animate_complex(o, interval=1)
