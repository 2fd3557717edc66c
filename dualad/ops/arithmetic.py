# dualad/ops/arithmetic.py
import numbers
from ..core.dual import DualNumber
from ..core.config import errstate
from ..core.errors import MismatchedFamilyError


def as_dual(x, family):
    """Ensure x is a dual number of `family`; bare reals are lifted to constants."""
    if isinstance(x, DualNumber):
        if x.schema is not family.schema:
            raise MismatchedFamilyError(family, type(x))
        return x
    if isinstance(x, numbers.Real):
        return family.constant(x)
    raise TypeError(f"expected a dual number or a real number, got {type(x).__name__}")


def _pair(u, v):
    """Lift both operands into the family of whichever one is a dual number."""
    if isinstance(u, DualNumber):
        return u, as_dual(v, type(u))
    if isinstance(v, DualNumber):
        return as_dual(u, type(v)), v
    raise TypeError(
        f"at least one operand must be a dual number, got "
        f"{type(u).__name__} and {type(v).__name__}"
    )


def _split_scalar(u, v):
    """
    (dual, k) when exactly one operand is a bare real k, converted to the
    dual's dtype; (None, None) otherwise.
    """
    if isinstance(u, DualNumber) and isinstance(v, numbers.Real):
        return u, u.schema.scalar(v)
    if isinstance(v, DualNumber) and isinstance(u, numbers.Real):
        return v, v.schema.scalar(u)
    return None, None


def add(u, v):
    """d(u+v) = du + dv, slot by slot."""
    w, k = _split_scalar(u, v)
    if w is not None:
        # a lifted constant has zero slots: only the real part moves
        with errstate():
            return type(w)._from_parts(w.real + k, w.derivatives)
    u, v = _pair(u, v)
    with errstate():
        return type(u)._from_parts(u.real + v.real, u.derivatives + v.derivatives)


def negate(u):
    """-u, computed as u * (-1)."""
    return multiply(u, -1)


def subtract(u, v):
    """u + (-v)."""
    if isinstance(v, DualNumber):
        return add(u, negate(v))
    u, _ = _pair(u, v)
    return add(u, -u.schema.scalar(v))


def multiply(u, v):
    """
    Product rule per slot, from the original real parts:
      d(u*v)_i = du_i * v + dv_i * u
    With a bare scalar k the dv_i * u term vanishes, so each slot is
    scaled by k (no 0 * u term, which would be NaN for an infinite u).
    """
    w, k = _split_scalar(u, v)
    if w is not None:
        with errstate():
            return type(w)._from_parts(w.real * k, w.derivatives * k)
    u, v = _pair(u, v)
    ur, vr = u.real, v.real
    with errstate():
        return type(u)._from_parts(ur * vr, u.derivatives * vr + v.derivatives * ur)


def divide(u, v):
    """
    u * invert(v). No separate quotient rule, so u / v and u * v.invert()
    are bit-identical. A bare scalar divisor k scales by 1/k instead.
    """
    from .elementary import invert
    if isinstance(v, DualNumber):
        return multiply(u, invert(v))
    u, _ = _pair(u, v)
    schema = u.schema
    with errstate():
        r = schema.scalar(1) / schema.scalar(v)
    return multiply(u, r)
