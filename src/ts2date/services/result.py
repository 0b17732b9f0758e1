"""ServiceResult: what every service operation hands back to its caller.

A result is either ``ok`` with an operation-specific ``data`` payload, or
failed with a :class:`ServiceError`. Non-fatal problems ride along in
``warnings`` either way.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable ``code`` plus a message for humans."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation, named by ``op``.

    ``meta`` carries timing and other data that is not part of the
    operation's answer.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Failed result for *op* with a :class:`ServiceError` built from the arguments."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
