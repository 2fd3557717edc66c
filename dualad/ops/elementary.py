# dualad/ops/elementary.py
import numbers
import numpy as np
from ..core.dual import DualNumber
from ..core.config import errstate
from .arithmetic import divide


def _require_dual(u, fn):
    if not isinstance(u, DualNumber):
        raise TypeError(f"{fn}() expects a dual number, got {type(u).__name__}")
    return u


def power(u, p):
    """
    u ** p for a bare real exponent p (power rule):
      real' = real^p
      d_i'  = d_i * p * real^(p-1)
    Domain problems (0 to a negative power, negative base with a fractional
    exponent) come out as inf/nan in the slots; nothing is guarded.
    """
    _require_dual(u, "power")
    if not isinstance(p, numbers.Real):
        raise TypeError(f"exponent must be a real number, got {type(p).__name__}")
    p = u.schema.scalar(p)
    r = u.real
    with errstate():
        return type(u)._from_parts(np.power(r, p), u.derivatives * p * np.power(r, p - 1))


def invert(u):
    """1/u, i.e. power(u, -1)."""
    return power(u, -1)


def sin(u):
    _require_dual(u, "sin")
    r = u.real
    with errstate():
        dr = np.cos(r)
        return type(u)._from_parts(np.sin(r), u.derivatives * dr)


def cos(u):
    _require_dual(u, "cos")
    r = u.real
    with errstate():
        dr = -np.sin(r)
        return type(u)._from_parts(np.cos(r), u.derivatives * dr)


def tan(u):
    """sin(u) / cos(u) through the division kernel (not the sec^2 closed form)."""
    _require_dual(u, "tan")
    return divide(sin(u), cos(u))
