import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np
import pytest

from complexlib import Complex, InvalidArgumentError
from complexlib.plot import animate_complex, argand_limits, plot_argand


def test_limits_fit_largest_component():
    assert argand_limits(["3+4i", -1]) == pytest.approx((-4.4, 4.4))


def test_limits_never_smaller_than_unit_box():
    assert argand_limits([]) == pytest.approx((-1.1, 1.1))
    assert argand_limits([(0.2, 0.1)]) == pytest.approx((-1.1, 1.1))


def test_limits_custom_margin():
    assert argand_limits(["-2j"], margin=0.5) == pytest.approx((-3.0, 3.0))


def test_plot_argand_points():
    ax = plot_argand(["1+i", 2, 3j])
    points = ax.lines[-1]
    np.testing.assert_allclose(points.get_xdata(), [1.0, 2.0, 0.0])
    np.testing.assert_allclose(points.get_ydata(), [1.0, 0.0, 3.0])
    assert ax.get_xlim() == pytest.approx((-3.3, 3.3))
    assert ax.get_xlabel() == "Re"
    assert ax.get_ylabel() == "Im"


def test_plot_argand_annotations_use_canonical_form():
    ax = plot_argand([Complex(1, -1, "j"), 2.5], annotate=True)
    assert [text.get_text() for text in ax.texts] == ["1-j", "2.5"]


def test_plot_argand_on_existing_axes():
    _, ax = plt.subplots()
    assert plot_argand(["1+i"], ax=ax) is ax


def test_plot_argand_rejects_bad_items():
    with pytest.raises(InvalidArgumentError):
        plot_argand([object()])


def test_animate_complex():
    step = Complex.from_polar(1.0, np.pi / 4)
    frames = [Complex(1.0)]
    for _ in range(3):
        frames.append(frames[-1] * step)

    anim = animate_complex(frames, interval=50, show=False)
    assert isinstance(anim, animation.FuncAnimation)

    html = anim.to_jshtml()
    assert isinstance(html, str)
    ax = plt.gcf().axes[0]
    assert ax.get_title().startswith("t = 3")


def test_animate_empty_sequence():
    with pytest.raises(InvalidArgumentError):
        animate_complex([], show=False)
