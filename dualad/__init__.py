# dualad/__init__.py
# Forward-mode automatic differentiation with named-axis dual numbers

import logging

from .core import (
    DualNumber,
    AxisSchema,
    define_family,
    EngineConfig,
    get_config,
    use_config,
    value,
    gradient,
    derivative,
    DualError,
    SchemaError,
    MismatchedFamilyError,
)

# Kernels
from . import ops
from .ops import add, subtract, multiply, divide, negate, power, invert, sin, cos, tan

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    'DualNumber',
    'AxisSchema',
    'define_family',
    'EngineConfig',
    'get_config',
    'use_config',
    'value',
    'gradient',
    'derivative',
    # Errors
    'DualError',
    'SchemaError',
    'MismatchedFamilyError',
    # Kernels
    'ops',
    'add',
    'subtract',
    'multiply',
    'divide',
    'negate',
    'power',
    'invert',
    'sin',
    'cos',
    'tan',
]
