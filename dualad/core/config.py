# dualad/core/config.py
"""
Engine-wide settings.

The active configuration lives in a context variable, so `use_config` only
affects the current thread / task:

    with use_config(float_errors="raise"):
        x.invert()      # FloatingPointError when x.real == 0
"""
from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
import numpy as np

# Policies accepted by numpy.errstate
FLOAT_ERROR_POLICIES = ("ignore", "warn", "raise", "call", "print", "log")


@dataclass(frozen=True)
class EngineConfig:
    """
    Attributes
    ----------
    default_dtype : numpy floating type
        Inner scalar type used by `define_family` when none is given.
    float_errors : str
        numpy errstate policy applied inside every kernel. The default
        "ignore" lets NaN/Inf propagate silently through the derivative slots.
    """
    default_dtype: type = np.float64
    float_errors: str = "ignore"

    def __post_init__(self):
        if self.float_errors not in FLOAT_ERROR_POLICIES:
            raise ValueError(
                f"float_errors must be one of {FLOAT_ERROR_POLICIES}, "
                f"got {self.float_errors!r}"
            )
        if not np.issubdtype(np.dtype(self.default_dtype), np.floating):
            raise ValueError(
                f"default_dtype must be a numpy floating type, got {self.default_dtype!r}"
            )


_active: ContextVar[EngineConfig] = ContextVar("dualad_config", default=EngineConfig())


def get_config() -> EngineConfig:
    """Return the configuration active in the current context."""
    return _active.get()


@contextmanager
def use_config(**overrides):
    """
    Temporarily activate a copy of the current config with `overrides` applied.
    Yields the new config and restores the previous one on exit.
    """
    cfg = replace(_active.get(), **overrides)
    token = _active.set(cfg)
    try:
        yield cfg
    finally:
        _active.reset(token)


def errstate():
    """numpy errstate context for the active float-error policy."""
    return np.errstate(all=_active.get().float_errors)
