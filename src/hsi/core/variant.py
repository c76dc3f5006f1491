"""
Typed values for the inter-process wire encoding.

A Variant pairs a value with a GVariant-style type signature so that the
receiving side can tell a ``uint32`` from a ``uint64`` and a vardict from a
tuple wrapping one. Only the subset the HSI attribute encoding needs is
supported:

- ``s``: string
- ``as``: array of strings
- ``t``: unsigned 64-bit integer
- ``u``: unsigned 32-bit integer
- ``a{sv}``: vardict, string keys mapped to Variants
- ``a<T>``: array of Variants of signature T (``av`` allows any signature)
- ``(<T1><T2>...)``: tuple of Variants

Signatures are checked on construction; a value that does not fit its
signature raises pydantic's ``ValidationError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from hsi.errors import PreconditionViolation

_UINT_LIMITS = {"t": (1 << 64) - 1, "u": (1 << 32) - 1}
_UINT_NAMES = {"t": "uint64", "u": "uint32"}

VARDICT = "a{sv}"


class Variant(BaseModel):
    """A value tagged with its wire type signature."""

    model_config = ConfigDict(frozen=True)

    signature: str
    value: Any

    @model_validator(mode="after")
    def _check_value(self) -> "Variant":
        _check_signature(self.signature, self.value)
        return self

    # Constructors -----------------------------------------------------------

    @classmethod
    def string(cls, value: str) -> "Variant":
        return cls(signature="s", value=value)

    @classmethod
    def strv(cls, values: Sequence[str]) -> "Variant":
        return cls(signature="as", value=list(values))

    @classmethod
    def uint64(cls, value: int) -> "Variant":
        return cls(signature="t", value=int(value))

    @classmethod
    def uint32(cls, value: int) -> "Variant":
        return cls(signature="u", value=int(value))

    @classmethod
    def vardict(cls, entries: Mapping[str, "Variant"]) -> "Variant":
        return cls(signature=VARDICT, value=dict(entries))

    @classmethod
    def array(cls, children: Sequence["Variant"], element_signature: str = "v") -> "Variant":
        return cls(signature=f"a{element_signature}", value=list(children))

    @classmethod
    def tuple_of(cls, *children: "Variant") -> "Variant":
        signature = "(" + "".join(child.signature for child in children) + ")"
        return cls(signature=signature, value=tuple(children))

    # Accessors --------------------------------------------------------------

    @property
    def type_string(self) -> str:
        return self.signature

    def is_container(self) -> bool:
        return _is_tuple(self.signature) or _is_variant_array(self.signature)

    def n_children(self) -> int:
        return len(self._children())

    def child_value(self, index: int) -> "Variant":
        children = self._children()
        if not 0 <= index < len(children):
            raise PreconditionViolation(f"Child {index} out of range for {self.signature} with {len(children)} children")
        return children[index]

    def children(self) -> List["Variant"]:
        return list(self._children())

    def _children(self) -> Sequence["Variant"]:
        if not self.is_container():
            raise PreconditionViolation(f"Type {self.signature} is not a container")
        return self.value

    def unpack(self) -> Any:
        """Return the value as plain Python objects, dropping the signatures."""
        if self.signature == VARDICT:
            return {key: child.unpack() for key, child in self.value.items()}
        if _is_tuple(self.signature):
            return tuple(child.unpack() for child in self.value)
        if _is_variant_array(self.signature):
            return [child.unpack() for child in self.value]
        if self.signature == "as":
            return list(self.value)
        return self.value

    def print_text(self, type_annotate: bool = True) -> str:
        """Render in GLib's text format, e.g. ``{'Name': <'x'>, 'HsiNumber': <uint32 1>}``."""
        sig = self.signature
        if sig == "s":
            return _quote(self.value)
        if sig in _UINT_NAMES:
            return f"{_UINT_NAMES[sig]} {self.value}" if type_annotate else str(self.value)
        if sig == "as":
            if not self.value:
                return "@as []"
            return "[" + ", ".join(_quote(item) for item in self.value) + "]"
        if sig == VARDICT:
            if not self.value:
                return "@a{sv} {}"
            items = ", ".join(f"{_quote(key)}: <{child.print_text()}>" for key, child in self.value.items())
            return "{" + items + "}"
        if _is_tuple(sig):
            inner = ", ".join(child.print_text(type_annotate) for child in self.value)
            if len(self.value) == 1:
                inner += ","
            return f"({inner})"
        if not self.value:
            return f"@{sig} []"
        return "[" + ", ".join(child.print_text(type_annotate) for child in self.value) + "]"

    def __str__(self) -> str:
        return self.print_text()


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _is_tuple(signature: str) -> bool:
    return signature.startswith("(") and signature.endswith(")")


def _is_variant_array(signature: str) -> bool:
    return signature.startswith("a") and signature not in ("as", VARDICT)


def _check_signature(signature: str, value: Any) -> None:
    if signature == "s":
        if not isinstance(value, str):
            raise ValueError(f"signature 's' expects str, got {type(value).__name__}")
        return
    if signature in _UINT_LIMITS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"signature '{signature}' expects int, got {type(value).__name__}")
        if not 0 <= value <= _UINT_LIMITS[signature]:
            raise ValueError(f"{value} out of range for {_UINT_NAMES[signature]}")
        return
    if signature == "as":
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValueError("signature 'as' expects a list of str")
        return
    if signature == VARDICT:
        if not isinstance(value, dict):
            raise ValueError(f"signature 'a{{sv}}' expects dict, got {type(value).__name__}")
        for key, child in value.items():
            if not isinstance(key, str) or not isinstance(child, Variant):
                raise ValueError("signature 'a{sv}' expects str keys and Variant values")
        return
    if _is_tuple(signature):
        if not isinstance(value, tuple) or not all(isinstance(child, Variant) for child in value):
            raise ValueError(f"signature '{signature}' expects a tuple of Variants")
        inner = "".join(child.signature for child in value)
        if f"({inner})" != signature:
            raise ValueError(f"tuple children have signature ({inner}), expected {signature}")
        return
    if _is_variant_array(signature) and len(signature) > 1:
        if not isinstance(value, list) or not all(isinstance(child, Variant) for child in value):
            raise ValueError(f"signature '{signature}' expects a list of Variants")
        element = signature[1:]
        if element != "v":
            for child in value:
                if child.signature != element:
                    raise ValueError(f"array element has signature {child.signature}, expected {element}")
        return
    raise ValueError(f"unsupported signature '{signature}'")


def vardict_items(value: Variant) -> Tuple[Tuple[str, Variant], ...]:
    """Return the entries of an ``a{sv}`` Variant in insertion order."""
    if value.signature != VARDICT:
        raise PreconditionViolation(f"Expected a{{sv}}, got {value.signature}")
    entries: Dict[str, Variant] = value.value
    return tuple(entries.items())


__all__ = ["VARDICT", "Variant", "vardict_items"]
