# dualad/core/schema.py
"""
Axis schemas and family definition.

A family is the fixed, ordered set of named axes (plus the inner scalar type)
shared by all dual numbers that are combined in one computation:

    XY = define_family("XY", ["x", "y"])
    x, y = XY.x(5.0), XY.y(7.0)
    z = x.powf(2) + y * y.sin()
    z.d_d_x(), z.d_d_y()        # 10.0, 5.9343...

Every check happens here, once, before any value of the family exists.
"""
from __future__ import annotations
import keyword
import logging
import numbers
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple
import numpy as np

from .config import get_config
from .dual import DualNumber, AxisSlot, seed_constructor, extractor
from .errors import SchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisSchema:
    """
    Immutable descriptor of a family.

    Attributes
    ----------
    axis_names : tuple of str
        Ordered, unique, non-empty axis names.
    dtype : np.dtype
        Inner scalar type of the real part and of every derivative slot.
    """
    axis_names: Tuple[str, ...]
    dtype: np.dtype
    _index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        names = tuple(self.axis_names)
        if not names:
            raise SchemaError("a family needs at least one axis")
        seen = set()
        for name in names:
            if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
                raise SchemaError(f"axis name {name!r} is not a valid identifier")
            if name in seen:
                raise SchemaError(f"duplicate axis name {name!r}")
            seen.add(name)

        try:
            dtype = np.dtype(self.dtype)
        except TypeError as exc:
            raise SchemaError(f"invalid inner type {self.dtype!r}") from exc
        if not np.issubdtype(dtype, np.floating):
            raise SchemaError(f"inner type must be a numpy floating type, got {dtype}")

        object.__setattr__(self, "axis_names", names)
        object.__setattr__(self, "dtype", dtype)
        object.__setattr__(self, "_index", {name: i for i, name in enumerate(names)})

    @property
    def axis_count(self) -> int:
        return len(self.axis_names)

    def index(self, axis: str) -> int:
        """Slot index of `axis`."""
        try:
            return self._index[axis]
        except KeyError:
            raise KeyError(
                f"unknown axis {axis!r}; expected one of {self.axis_names}"
            ) from None

    def scalar(self, x):
        """Convert a bare real number to the inner type."""
        if not isinstance(x, numbers.Real):
            raise TypeError(
                f"expected a real number, got {type(x).__name__}"
            )
        return self.dtype.type(x)

    def zeros(self) -> np.ndarray:
        """Fresh zero derivative vector."""
        return np.zeros(self.axis_count, dtype=self.dtype)


def define_family(name: str, axis_names: Iterable[str], dtype: Optional[type] = None):
    """
    Create a new family of dual numbers.

    Args:
        name: Class name of the family (a valid identifier).
        axis_names: Ordered, unique axis names.
        dtype: numpy floating type for the real part and derivative slots.
            Defaults to `get_config().default_dtype`.

    Returns:
        A DualNumber subclass with, for every axis `a`:
            Family.a(real)            seeded variable
            Family.eps_a(real, d)     explicit derivative at `a`
            value.eps_a               derivative at `a`
            value.d_d_a()             derivative at `a`

    Raises:
        SchemaError: empty or duplicate axes, invalid names, names that
            would shadow a member of the value type, or a non-float dtype.
    """
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise SchemaError(f"family name {name!r} is not a valid identifier")

    if dtype is None:
        dtype = get_config().default_dtype
    schema = AxisSchema(tuple(axis_names), dtype)

    namespace = {
        "__slots__": (),
        "__doc__": f"Dual number over axes {', '.join(schema.axis_names)} ({schema.dtype}).",
        "schema": schema,
    }
    reserved = set(dir(DualNumber))
    for i, axis in enumerate(schema.axis_names):
        members = (
            (axis, seed_constructor(axis)),
            (f"eps_{axis}", AxisSlot(axis, i)),
            (f"d_d_{axis}", extractor(axis, i)),
        )
        for attr, member in members:
            if attr in reserved or attr in namespace:
                raise SchemaError(f"axis {axis!r} would shadow the member {attr!r}")
            namespace[attr] = member

    family = type(name, (DualNumber,), namespace)
    logger.debug("Defined dual family %s: axes=%s dtype=%s",
                 name, schema.axis_names, schema.dtype)
    return family
