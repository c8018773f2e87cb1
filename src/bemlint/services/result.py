"""The result envelope every LintService operation returns.

A result answers two separate questions. ``ok`` says whether the
operation could run at all; ``healthy`` says whether what it checked
passed. Commands turn the pair into an exit status.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation could not run.

    ``code`` is one of ``CONFIG_ERROR``, ``NO_INPUT`` or ``PATH_NOT_FOUND``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one ``validate``, ``lint`` or ``variants`` call.

    Attributes:
        ok: The operation ran. Violations found do not clear it.
        op: Operation name.
        data: Payload; checking ops include a ``healthy`` flag.
        warnings: Problems that did not stop the run (unreadable files).
        error: Set exactly when ``ok`` is False.
        meta: Extras such as ``duration_ms`` in verbose mode.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, *, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    @property
    def healthy(self) -> bool:
        """True when the op ran and reported nothing at error severity."""
        return self.ok and self.data.get("healthy", True) is not False
