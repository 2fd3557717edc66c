# dualad/core/__init__.py

"""
Core public API for the dual-number package.

Exports:
    DualNumber            : Base class of every family's value type.
    AxisSchema            : Immutable axis/dtype descriptor of a family.
    define_family         : Validate an axis list and build its value type.
    EngineConfig          : Engine-wide settings (default dtype, float error policy).
    get_config/use_config : Read / temporarily override the active settings.
    value                 : Real part of a dual number; numbers pass through.
    gradient              : Value and partials of f over every axis of a family.
    derivative            : Value and derivative of a single-input function.
    DualError, SchemaError, MismatchedFamilyError : Error types.
"""

from .errors import DualError, SchemaError, MismatchedFamilyError
from .config import EngineConfig, get_config, use_config
from .dual import DualNumber
from .schema import AxisSchema, define_family
from .seeds import value, gradient, derivative

__all__ = [
    "DualNumber",
    "AxisSchema", "define_family",
    "EngineConfig", "get_config", "use_config",
    "value", "gradient", "derivative",
    "DualError", "SchemaError", "MismatchedFamilyError",
]
