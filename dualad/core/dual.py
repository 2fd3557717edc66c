# dualad/core/dual.py
from __future__ import annotations
import numbers
from typing import Any, Dict, Optional
import numpy as np


class DualNumber:
    """
    Dual number for forward-mode Automatic Differentiation (AD).

    A value carries its real part plus one derivative slot per axis of its
    family. Families are created with `define_family`, which returns a
    subclass of DualNumber bound to an AxisSchema; DualNumber itself cannot be
    instantiated.

    Attributes
    ----------
    real : numpy floating scalar
        Primal value, in the family's inner dtype.
    derivatives : np.ndarray
        Read-only vector of partials; slot i holds d(value)/d(axis_i).
    schema : AxisSchema
        Class attribute shared by every value of the family.

    Values are immutable: every operation returns a new instance, and the
    compound operators (+=, -=, *=, /=) rebind the name to the out-of-place
    result.

    Values of different families never mix: arithmetic, ordering and even
    `==` against a value of another family raise MismatchedFamilyError, so
    membership tests or dict lookups across families raise instead of
    returning False.
    """

    __slots__ = ("_real", "_derivatives")

    schema = None

    # numpy scalars on the left return NotImplemented, so the reflected
    # operators below take over.
    __array_ufunc__ = None

    def __init__(self, real: Any, derivatives: Optional[Any] = None):
        schema = self._require_schema()
        self._real = schema.scalar(real)
        if derivatives is None:
            d = schema.zeros()
        else:
            d = np.array(derivatives, dtype=schema.dtype)
            if d.shape != (schema.axis_count,):
                raise ValueError(
                    f"{type(self).__name__} expects {schema.axis_count} derivative slots "
                    f"{schema.axis_names}, got shape {d.shape}"
                )
        d.flags.writeable = False
        self._derivatives = d

    @classmethod
    def _require_schema(cls):
        if cls.schema is None:
            raise TypeError(
                "DualNumber has no axes; create a family with define_family() first"
            )
        return cls.schema

    @classmethod
    def _from_parts(cls, real, derivatives) -> "DualNumber":
        """Build a value from kernel output without re-validating it."""
        dtype = cls.schema.dtype
        obj = object.__new__(cls)
        obj._real = dtype.type(real)
        d = np.asarray(derivatives, dtype=dtype)
        d.flags.writeable = False
        obj._derivatives = d
        return obj

    # ------------------------------------------------------------------ #
    # Constructors
    # ------------------------------------------------------------------ #
    @classmethod
    def constant(cls, real) -> "DualNumber":
        """A value independent of every axis: all derivative slots are 0."""
        return cls(real)

    from_real = constant

    @classmethod
    def variable_at(cls, axis: str, real) -> "DualNumber":
        """Seed an independent variable: derivative 1 at `axis`, 0 elsewhere."""
        return cls.with_derivative(axis, real, 1)

    @classmethod
    def with_derivative(cls, axis: str, real, derivative) -> "DualNumber":
        """
        Value with `derivative` stored at `axis` and every other slot 0.
        Always starts from the zero vector.
        """
        schema = cls._require_schema()
        d = schema.zeros()
        d[schema.index(axis)] = schema.scalar(derivative)
        return cls._from_parts(schema.scalar(real), d)

    # ------------------------------------------------------------------ #
    # Extractors
    # ------------------------------------------------------------------ #
    @property
    def real(self):
        return self._real

    @property
    def derivatives(self) -> np.ndarray:
        return self._derivatives

    @property
    def axis_names(self):
        return self.schema.axis_names

    def extract_derivative(self, axis: str):
        """Partial derivative with respect to `axis`."""
        return self._derivatives[self.schema.index(axis)]

    def partials(self) -> Dict[str, Any]:
        """{axis: partial} in axis order."""
        return {axis: self._derivatives[i].item() for i, axis in enumerate(self.schema.axis_names)}

    def __repr__(self):
        slots = ", ".join(
            f"eps_{axis}={self._derivatives[i].item()!r}"
            for i, axis in enumerate(self.schema.axis_names)
        )
        return f"{type(self).__name__}(real={self._real.item()!r}, {slots})"

    # ------------------------------------------------------------------ #
    # Equality and ordering
    # ------------------------------------------------------------------ #
    def _coerce(self, other):
        """Lift `other` into this family, or NotImplemented for foreign types."""
        from ..ops.arithmetic import as_dual
        if not isinstance(other, (DualNumber, numbers.Real)):
            return NotImplemented
        return as_dual(other, type(self))

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._real == other._real
                    and np.array_equal(self._derivatives, other._derivatives))

    __hash__ = None

    # Ordering only looks at the real part.
    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._real < other._real)

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._real <= other._real)

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._real > other._real)

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return bool(self._real >= other._real)

    def compare(self, other) -> Optional[int]:
        """
        Three-way comparison of the real parts: -1, 0 or 1, and None when the
        real parts are incomparable (NaN).
        """
        lifted = self._coerce(other)
        if lifted is NotImplemented:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        a, b = self._real, lifted._real
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        return None

    # ------------------------------------------------------------------ #
    # Operator overloading
    # ------------------------------------------------------------------ #
    def __add__(self, other):
        if not isinstance(other, (DualNumber, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not isinstance(other, (DualNumber, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other):
        if not isinstance(other, (DualNumber, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def __truediv__(self, other):
        if not isinstance(other, (DualNumber, numbers.Real)):
            return NotImplemented
        from ..ops.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        from ..ops.arithmetic import divide
        return divide(other, self)

    def __neg__(self):
        from ..ops.arithmetic import negate
        return negate(self)

    def __pos__(self):
        return self

    def __pow__(self, p):
        if not isinstance(p, numbers.Real):
            return NotImplemented
        from ..ops.elementary import power
        return power(self, p)

    # ------------------------------------------------------------------ #
    # Elementary functions
    # ------------------------------------------------------------------ #
    def powf(self, p) -> "DualNumber":
        from ..ops.elementary import power
        return power(self, p)

    def invert(self) -> "DualNumber":
        from ..ops.elementary import invert
        return invert(self)

    def sin(self) -> "DualNumber":
        from ..ops.elementary import sin
        return sin(self)

    def cos(self) -> "DualNumber":
        from ..ops.elementary import cos
        return cos(self)

    def tan(self) -> "DualNumber":
        from ..ops.elementary import tan
        return tan(self)


# ---------------------------------------------------------------------- #
# Per-axis members installed by define_family
# ---------------------------------------------------------------------- #
class AxisSlot:
    """
    `eps_<axis>` member of a family.

    On the family class it is the constructor `Family.eps_x(real, value)`;
    on a value it reads the derivative stored at that axis (`v.eps_x`).
    """

    def __init__(self, axis: str, index: int):
        self.axis = axis
        self.index = index

    def __get__(self, obj, owner=None):
        if obj is None:
            axis = self.axis

            def eps(real, value):
                return owner.with_derivative(axis, real, value)
            eps.__name__ = eps.__qualname__ = f"eps_{axis}"
            eps.__doc__ = f"Value with derivative `value` at {axis!r} and 0 elsewhere."
            return eps
        return obj._derivatives[self.index]

    def __set__(self, obj, value):
        raise AttributeError("dual numbers are immutable")


def seed_constructor(axis: str):
    """`Family.<axis>(real)`: independent variable seeded at `axis`."""
    def seed(cls, real):
        return cls.variable_at(axis, real)
    seed.__name__ = seed.__qualname__ = axis
    seed.__doc__ = f"Independent variable {axis!r}: unit derivative at {axis!r}."
    return classmethod(seed)


def extractor(axis: str, index: int):
    """`value.d_d_<axis>()`: derivative with respect to `axis`."""
    def d_d(self):
        return self._derivatives[index]
    d_d.__name__ = d_d.__qualname__ = f"d_d_{axis}"
    d_d.__doc__ = f"Partial derivative with respect to {axis!r}."
    return d_d
