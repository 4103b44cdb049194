"""
Runtime configuration read from the environment.

Settings are resolved on every call to :func:`load_settings`, so tests and
long-running processes see changes to the environment immediately.

Environment variables:
    AFFINEKIT_CHECK_TRANSPOSE  - verify transposes in from_linear (default off)
    AFFINEKIT_TRANSPOSE_ATOL   - absolute tolerance for that check (1e-6)
    AFFINEKIT_DET_WARN_DIM     - dimension above which cofactor expansion
                                 logs a warning (6)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """
    Resolved affinekit settings.

    Attributes:
        check_transpose: Run check_transpose on every from_linear call
        transpose_atol: Absolute tolerance used by check_transpose
        det_warn_dim: Warn when the cofactor expansion exceeds this dimension
    """
    check_transpose: bool = False
    transpose_atol: float = 1e-6
    det_warn_dim: int = 6

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            check_transpose=_parse_bool(
                env, "AFFINEKIT_CHECK_TRANSPOSE", defaults.check_transpose),
            transpose_atol=_parse_number(
                env, "AFFINEKIT_TRANSPOSE_ATOL", float, defaults.transpose_atol),
            det_warn_dim=_parse_number(
                env, "AFFINEKIT_DET_WARN_DIM", int, defaults.det_warn_dim),
        )


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_number(env: Mapping[str, str], name: str, kind, default):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(
            f"{name} must be a {kind.__name__}, got {raw!r}"
        ) from None


def load_settings() -> Settings:
    """Resolve settings from the current process environment."""
    return Settings.from_env()


__all__ = [
    'Settings',
    'load_settings',
]
