"""API request models.

Transform payloads are typed ``Any`` on purpose: shape validation belongs to
the compiler, which reports it with its own error kinds.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CompileRequest(BaseModel):
    transform: Any = Field(..., description="Operation list or 16-number matrix literal")
    fallback_to_identity: bool | None = Field(
        default=None,
        description="Return identity instead of an error (defaults to server setting)",
    )


class LegacyCompileRequest(BaseModel):
    props: Any = Field(..., description="Per-axis props (translateX, rotation, ...) or transformMatrix")
    fallback_to_identity: bool | None = Field(default=None)


class AngleRequest(BaseModel):
    value: Any = Field(..., description="Number (radians) or string with deg/rad suffix")
