"""
Seeding drivers and the end-to-end x^2 + y sin(y) scenario.
"""
import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from dualad import MismatchedFamilyError, define_family, derivative, gradient, value

# d/dy [y sin y] at y = 7
DZ_DY_AT_7 = 5.934302379121921


def test_end_to_end(XY):
    x = XY.variable_at("x", 5.0)
    y = XY.variable_at("y", 7.0)
    z = x.powf(2) + y * y.sin()
    assert z.extract_derivative("x") == 10.0
    assert z.extract_derivative("y") == pytest.approx(DZ_DY_AT_7)
    assert z.d_d_y() == pytest.approx(7.0 * math.cos(7.0) + math.sin(7.0))
    assert z.real == pytest.approx(25.0 + 7.0 * math.sin(7.0))


def test_gradient(XY):
    val, partials = gradient(lambda x, y: x.powf(2) + y * y.sin(), XY, {"x": 5.0, "y": 7.0})
    assert val == pytest.approx(25.0 + 7.0 * math.sin(7.0))
    assert list(partials) == ["x", "y"]
    assert partials["x"] == 10.0
    assert partials["y"] == pytest.approx(DZ_DY_AT_7)


def test_gradient_constant_result(XY):
    val, partials = gradient(lambda x, y: 3.0, XY, {"x": 1.0, "y": 2.0})
    assert val == 3.0
    assert partials == {"x": 0.0, "y": 0.0}


def test_gradient_requires_exact_axes(XY):
    with pytest.raises(ValueError, match="missing"):
        gradient(lambda x, y: x, XY, {"x": 1.0})
    with pytest.raises(ValueError, match="unknown"):
        gradient(lambda x, y: x, XY, {"x": 1.0, "y": 2.0, "w": 0.0})


def test_gradient_rejects_foreign_result(XY):
    Other = define_family("Other", ["x", "y"])
    with pytest.raises(MismatchedFamilyError):
        gradient(lambda x, y: Other.x(1.0), XY, {"x": 1.0, "y": 2.0})


def test_derivative():
    val, d = derivative(lambda x: x * x * x - 2.0 * x, 3.0)
    assert val == pytest.approx(21.0)
    assert d == pytest.approx(25.0)


def test_derivative_of_tan():
    val, d = derivative(lambda x: x.tan(), 0.4)
    assert val == pytest.approx(math.tan(0.4))
    assert d == pytest.approx(1.0 / math.cos(0.4) ** 2)


def test_derivative_dtype():
    val, d = derivative(lambda x: x.sin(), 1.0, dtype=np.float32)
    assert val.dtype == np.float32
    assert d.dtype == np.float32
    assert d == pytest.approx(math.cos(1.0), rel=1e-6)


def test_value(XY):
    assert value(XY.x(2.5)) == 2.5
    assert value(4) == 4


def test_shared_family_across_threads(XY):
    def work(v):
        x, y = XY.x(v), XY.y(v + 1.0)
        return (x * y + x.sin()).partials()

    inputs = [0.1 * i for i in range(64)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(work, inputs))
    for v, p in zip(inputs, results):
        assert p["x"] == pytest.approx(v + 1.0 + math.cos(v))
        assert p["y"] == pytest.approx(v)
