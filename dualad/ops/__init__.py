# dualad/ops/__init__.py

# Convenience re-exports so users can do: from dualad.ops import multiply, sin, ...
from .arithmetic import add, subtract, multiply, divide, negate, as_dual
from .elementary import power, invert, sin, cos, tan

__all__ = [
    "add", "subtract", "multiply", "divide", "negate", "as_dual",
    "power", "invert", "sin", "cos", "tan",
]
