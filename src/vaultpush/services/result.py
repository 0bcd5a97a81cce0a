"""Outcome records returned by every service method.

The CLI renders these; nothing below the service layer raises past them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed. ``detail`` never holds OS error text."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    ``message`` is the line shown to the user; ``data`` carries values
    worth echoing on success (paths, stored settings).
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    message: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Build a failed result whose message is also the error message."""
        return cls(
            ok=False,
            op=op,
            message=message,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
