import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def assert_close():
    """Compare a Complex against a builtin complex reference value."""

    def check(result, expected, rel=1e-9, abs=1e-12):
        expected = complex(expected)
        assert result.real == pytest.approx(expected.real, rel=rel, abs=abs)
        assert result.imaginary == pytest.approx(expected.imag, rel=rel, abs=abs)

    return check
