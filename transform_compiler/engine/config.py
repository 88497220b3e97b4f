"""Compiler configuration: tolerances used when reporting on results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CompilerConfig:
    """Numeric tolerances. Compilation itself has no tunables."""

    # Max absolute deviation for a result to count as identity
    identity_atol: float = 1e-9
