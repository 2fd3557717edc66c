# dualad/core/seeds.py

#-----------------------------------------------------------------------------
# Seed every input (dx/dx = 1) and let the partials flow forward through f.
# One evaluation yields the value and all partials of a scalar function.
#-----------------------------------------------------------------------------
from __future__ import annotations
from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Tuple
import numpy as np

from .config import get_config
from .dual import DualNumber
from .errors import MismatchedFamilyError
from .schema import define_family


def value(x: Any) -> Any:
    """Return the real part of a dual number; pass through plain numbers unchanged."""
    return x.real if isinstance(x, DualNumber) else x


def _ensure_dual(y: Any, family) -> DualNumber:
    """Wrap a plain result as a constant of `family`; reject foreign families."""
    if not isinstance(y, DualNumber):
        return family.constant(y)
    if y.schema is not family.schema:
        raise MismatchedFamilyError(family, type(y))
    return y


# ----------------------------- multi-input gradient ----------------------------- #
def gradient(f: Callable[..., Any], family,
             point: Mapping[str, float]) -> Tuple[Any, Dict[str, Any]]:
    """
    Value and all partials of a scalar function at `point`, in one forward pass.

    Parameters
    ----------
    f      : function taking one keyword argument per axis of `family`
    family : a family returned by define_family
    point  : {axis: real}; must name exactly the axes of `family`

    Returns
    -------
    (value, {axis: partial})  # partials in axis order

    Example
    -------
    XY = define_family("XY", ["x", "y"])
    gradient(lambda x, y: x.powf(2) + y * y.sin(), XY, {"x": 5.0, "y": 7.0})
    -> (25 + 7 sin 7, {"x": 10.0, "y": 5.9343...})
    """
    axes = family.schema.axis_names
    missing = [a for a in axes if a not in point]
    extra = [a for a in point if a not in axes]
    if missing or extra:
        raise ValueError(
            f"point must give exactly the axes {axes}; missing={missing}, unknown={extra}"
        )
    variables = {axis: family.variable_at(axis, point[axis]) for axis in axes}
    y = _ensure_dual(f(**variables), family)
    return y.real, y.partials()


# ----------------------------- single-input derivative ----------------------------- #
@lru_cache(maxsize=None)
def _single_axis_family(dtype: np.dtype):
    return define_family("Scalar", ["x"], dtype=dtype)


def derivative(f: Callable[[DualNumber], Any], x0: float, dtype=None) -> Tuple[Any, Any]:
    """
    Value and derivative of a single-input function y = f(x) at x0.
    `dtype` defaults to the configured inner type.
    """
    if dtype is None:
        dtype = get_config().default_dtype
    family = _single_axis_family(np.dtype(dtype))
    y = _ensure_dual(f(family.x(x0)), family)
    return y.real, y.d_d_x()
