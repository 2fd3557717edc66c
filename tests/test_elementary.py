"""
Elementary function kernel: power, reciprocal and trigonometric chain rules,
plus NaN/Inf propagation at domain edges.
"""
import math

import numpy as np
import pytest

from dualad import ops


def test_trig_at_zero(XYZ):
    x = XYZ.x(0.0)
    assert x.sin() == XYZ.eps_x(0.0, 1.0)
    assert x.cos() == XYZ.eps_x(1.0, 0.0)
    assert x.tan() == XYZ.eps_x(0.0, 1.0)


@pytest.mark.parametrize("v", [-2.0, 0.3, 1.0, 7.0])
def test_sin_cos_chain_rule(XY, v):
    x = XY.eps_x(v, 3.0)
    s, c = x.sin(), x.cos()
    assert s.real == pytest.approx(math.sin(v))
    assert s.d_d_x() == pytest.approx(3.0 * math.cos(v))
    assert c.real == pytest.approx(math.cos(v))
    assert c.d_d_x() == pytest.approx(-3.0 * math.sin(v))
    assert s.d_d_y() == 0 and c.d_d_y() == 0


@pytest.mark.parametrize("v", [-1.0, 0.3, 1.2])
def test_tan_is_recomposed_from_sin_and_cos(XY, v):
    x = XY.x(v)
    t = x.tan()
    assert t == x.sin() / x.cos()
    assert t.real == pytest.approx(math.tan(v))
    assert t.d_d_x() == pytest.approx(1.0 / math.cos(v) ** 2)


@pytest.mark.parametrize("v", [-3.0, 0.5, 2.0, 10.0])
def test_power_rule_square(XYZ, v):
    x = XYZ.x(v)
    assert x.powf(2).d_d_x() == 2 * v
    assert (x ** 2) == x.powf(2)


def test_power_general(XY):
    x = XY.eps_x(4.0, 2.0)
    r = x.powf(0.5)
    assert r.real == pytest.approx(2.0)
    assert r.d_d_x() == pytest.approx(2.0 * 0.5 * 4.0 ** -0.5)


def test_power_one_is_identity(XYZ):
    for v in (XYZ(2.5, [0.5, -1.25, 3.0]), XYZ(-4.0, [1.0, 0.0, -2.0])):
        assert v.powf(1) == v


def test_invert(XYZ):
    r = XYZ.y(10.0).invert()
    assert r.real == pytest.approx(0.1)
    assert r.eps_x == 0.0
    assert r.eps_y == pytest.approx(-0.01)
    assert r.eps_z == 0.0
    assert r == XYZ.y(10.0).powf(-1)


def test_invert_zero_propagates_infinity(XY):
    r = XY.x(0.0).invert()
    assert math.isinf(r.real)
    assert r.d_d_x() == -math.inf
    assert r.d_d_y() == 0.0 or math.isnan(r.d_d_y())


def test_fractional_power_of_negative_base_is_nan(XY):
    r = XY.x(-1.0).powf(0.5)
    assert math.isnan(r.real)
    assert math.isnan(r.d_d_x())


def test_division_by_zero_is_not_an_error(XY):
    q = XY.x(1.0) / 0.0
    assert math.isinf(q.real)
    assert not math.isfinite(q.d_d_x())


def test_nan_flows_through_trig(XY):
    n = XY.x(math.nan)
    assert math.isnan(n.sin().real)
    assert math.isnan(n.cos().d_d_x())
    assert math.isnan(n.tan().d_d_x())


def test_named_kernels(XY):
    x = XY.x(0.7)
    assert ops.power(x, 3) == x.powf(3)
    assert ops.invert(x) == x.invert()
    assert ops.sin(x) == x.sin()
    assert ops.cos(x) == x.cos()
    assert ops.tan(x) == x.tan()


def test_kernels_reject_bare_scalars_and_dual_exponents(XY):
    with pytest.raises(TypeError):
        ops.sin(1.0)
    with pytest.raises(TypeError):
        ops.power(2.0, 3.0)
    with pytest.raises(TypeError):
        XY.x(2.0).powf(XY.y(1.0))
    with pytest.raises(TypeError):
        2.0 ** XY.x(1.0)


def test_float32_trig_keeps_dtype():
    from dualad import define_family
    F = define_family("F32Trig", ["x"], dtype=np.float32)
    s = F.x(0.5).sin()
    assert s.real.dtype == np.float32
    assert s.derivatives.dtype == np.float32
    assert s.d_d_x() == pytest.approx(math.cos(0.5), rel=1e-6)
