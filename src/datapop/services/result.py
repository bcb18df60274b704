"""The value every service method returns.

A result is either a success carrying ``data`` (and maybe ``warnings``) or
a failure carrying exactly one :class:`ServiceError`. A lookup that finds
nothing is a success with an empty payload; failures are reserved for
input the operation cannot act on. ``mutated`` tells the CLI to write the
document snapshot back.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    mutated: bool = False

    @model_validator(mode="after")
    def _error_matches_outcome(self) -> ServiceResult:
        if self.ok and self.error is not None:
            msg = f"{self.op}: a successful result cannot carry an error"
            raise ValueError(msg)
        if not self.ok and self.error is None:
            msg = f"{self.op}: a failed result needs an error"
            raise ValueError(msg)
        if not self.ok and self.mutated:
            msg = f"{self.op}: a failed result cannot mutate the document"
            raise ValueError(msg)
        return self

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any] | None = None,
        *,
        warnings: list[str] | None = None,
        mutated: bool = False,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, warnings=warnings or [], mutated=mutated)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
