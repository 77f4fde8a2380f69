"""ServiceResult and ServiceError — the non-interactive service contract.

INVARIANT: Every CompanyService operation returns ServiceResult.
The CLI subcommands and the MCP adapter consume this type; neither
sees a raw exception from the service layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_staff"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any] | None = None) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {})

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        /,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result; keyword arguments become ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
