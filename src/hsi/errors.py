from __future__ import annotations

"""Error types raised by the HSI attribute model and codecs."""

from typing import Iterable, Optional

from pydantic import ValidationError


class HsiError(RuntimeError):
    """Base class for all HSI attribute errors."""


class PreconditionViolation(HsiError, TypeError):
    """A caller passed something the operation cannot accept.

    Covers wrong handle types, ``None`` where an id is required and values
    outside the field ranges. When the failure came from model validation the
    first few pydantic errors are folded into the message.
    """

    def __init__(self, message: str, *, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if isinstance(self.cause, ValidationError):
            detail = self._format_validation_errors(self.cause.errors())
            return f"{self.message}: {detail}"
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets = []
        for err in error_list:
            loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
            msg = err.get("msg") or err.get("type") or "validation error"
            snippets.append(f"{loc}: {msg}")
            if len(snippets) >= 3:
                break
        remaining = len(error_list) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()


class UnrecognizedWireShape(HsiError):
    """The outer wire value is neither ``(a{sv})`` nor ``a{sv}``."""

    def __init__(self, type_string: str):
        self.type_string = type_string
        super().__init__(f"type {type_string} not known")


class SkippedBatchElement(HsiError):
    """One child of a batch payload could not be decoded."""

    def __init__(self, index: int, type_string: str, cause: Optional[Exception] = None):
        self.index = index
        self.type_string = type_string
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"skipping element {index} of type {type_string}{detail}")


__all__ = ["HsiError", "PreconditionViolation", "SkippedBatchElement", "UnrecognizedWireShape"]
