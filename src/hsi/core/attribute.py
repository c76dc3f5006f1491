from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hsi.core.flags import UINT64_MAX
from hsi.errors import PreconditionViolation

UINT32_MAX = (1 << 32) - 1

# the maximum value defined, although this might be increased in the future
HSI_NUMBER_MAX = 5


class HsiAttr(BaseModel):
    """One Host Security ID attribute.

    Fields are read directly. Writes through the ``set_*`` helpers raise
    :class:`PreconditionViolation` on bad input; plain attribute assignment is
    validated too but surfaces pydantic's ``ValidationError``.

    Validation is strict: bytes are not strings and numeric strings or floats
    are not integers.

    Unset strings are ``None``, an unset number or flag mask is ``0`` and an
    empty ``obsoletes`` tuple means nothing is superseded. None of these appear
    in any encoding. ``obsoletes`` is immutable; extend it with
    :meth:`add_obsolete` so ids stay unique.
    """

    model_config = ConfigDict(validate_assignment=True, strict=True)

    appstream_id: Optional[str] = None  # e.g. com.intel.BiosGuard
    obsoletes: Tuple[str, ...] = ()
    name: Optional[str] = None
    summary: Optional[str] = None
    uri: Optional[str] = None
    number: int = Field(default=0, ge=0, le=UINT32_MAX)
    flags: int = Field(default=0, ge=0, le=UINT64_MAX)

    def __init__(self, appstream_id: Optional[str] = None, /, **data: Any) -> None:
        if appstream_id is not None:
            data["appstream_id"] = appstream_id
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise PreconditionViolation("Invalid HSI attribute", cause=exc) from exc

    @field_validator("number", "flags", mode="before")
    @classmethod
    def _plain_int(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("must be an integer, not a boolean")
        if isinstance(v, int):
            return int(v)
        return v

    @field_validator("obsoletes", mode="before")
    @classmethod
    def _obsoletes_tuple(cls, v: Any) -> Any:
        if isinstance(v, list):
            return tuple(v)
        return v

    @field_validator("obsoletes")
    @classmethod
    def _unique_obsoletes(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(v))

    def _assign(self, field: str, value: Any) -> None:
        try:
            setattr(self, field, value)
        except ValidationError as exc:
            raise PreconditionViolation(f"Invalid value for {field}", cause=exc) from exc

    def set_appstream_id(self, appstream_id: Optional[str]) -> None:
        self._assign("appstream_id", appstream_id)

    def set_name(self, name: Optional[str]) -> None:
        self._assign("name", name)

    def set_summary(self, summary: Optional[str]) -> None:
        self._assign("summary", summary)

    def set_uri(self, uri: Optional[str]) -> None:
        """Set where the user can find out more about fixing the attribute."""
        self._assign("uri", uri)

    def set_number(self, number: int) -> None:
        self._assign("number", number)

    def set_flags(self, flags: int) -> None:
        """Replace the whole flag mask."""
        self._assign("flags", flags)

    def add_flag(self, flag: int) -> None:
        self._assign("flags", self.flags | _require_int(flag))

    def has_flag(self, flag: int) -> bool:
        return (self.flags & _require_int(flag)) > 0

    def add_obsolete(self, appstream_id: str) -> None:
        """Record that this attribute supersedes ``appstream_id``.

        Adding an id that is already present leaves the tuple unchanged.
        """
        _require_str(appstream_id)
        if appstream_id in self.obsoletes:
            return
        self._assign("obsoletes", (*self.obsoletes, appstream_id))

    def has_obsolete(self, appstream_id: str) -> bool:
        _require_str(appstream_id)
        return appstream_id in self.obsoletes


def _require_str(value: Any) -> None:
    if not isinstance(value, str):
        raise PreconditionViolation(f"Expected an AppStream ID string, got {type(value).__name__}")


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionViolation(f"Expected an integer flag, got {type(value).__name__}")
    return int(value)


def ensure_attr(obj: Any) -> HsiAttr:
    """Return ``obj`` if it is an :class:`HsiAttr`, else raise."""
    if not isinstance(obj, HsiAttr):
        raise PreconditionViolation(f"Expected HsiAttr, got {type(obj).__name__}")
    return obj


__all__ = ["HSI_NUMBER_MAX", "HsiAttr", "UINT32_MAX", "ensure_attr"]
