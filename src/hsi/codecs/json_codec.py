from __future__ import annotations

"""JSON report output for HSI attributes."""

import json
from typing import Any, Dict, List, Optional, Protocol, Union

from hsi.core.attribute import HsiAttr, ensure_attr
from hsi.core.flags import flag_to_string, iter_set_bits
from hsi.core.keys import (
    KEY_APPSTREAM_ID,
    KEY_CHECKSUM,
    KEY_FLAGS,
    KEY_HSI_NUMBER,
    KEY_NAME,
    KEY_SUMMARY,
    KEY_URI,
)
from hsi.errors import PreconditionViolation

JsonContainer = Union[Dict[str, Any], List[Any]]


class JsonBuilder(Protocol):
    """Streaming JSON writer the attribute serializes itself into."""

    def begin_object(self) -> None: ...

    def end_object(self) -> None: ...

    def begin_array(self) -> None: ...

    def end_array(self) -> None: ...

    def set_member_name(self, name: str) -> None: ...

    def add_string_value(self, value: str) -> None: ...

    def add_int_value(self, value: int) -> None: ...


class DictJsonBuilder:
    """Build plain dicts and lists that ``json.dumps`` can write out."""

    def __init__(self) -> None:
        self._stack: List[JsonContainer] = []
        self._member: Optional[str] = None
        self._root: Any = None
        self._has_root = False

    def begin_object(self) -> None:
        self._open({})

    def end_object(self) -> None:
        self._close(dict)

    def begin_array(self) -> None:
        self._open([])

    def end_array(self) -> None:
        self._close(list)

    def set_member_name(self, name: str) -> None:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise PreconditionViolation("Member names can only be set inside an object")
        self._member = name

    def add_string_value(self, value: str) -> None:
        self._add(value)

    def add_int_value(self, value: int) -> None:
        self._add(int(value))

    def get_root(self) -> Any:
        if self._stack:
            raise PreconditionViolation("JSON document is not finished")
        return self._root

    def _open(self, container: JsonContainer) -> None:
        self._add(container)
        self._stack.append(container)

    def _close(self, kind: type) -> None:
        if not self._stack or not isinstance(self._stack[-1], kind):
            raise PreconditionViolation(f"No open {kind.__name__} to end")
        self._stack.pop()

    def _add(self, value: Any) -> None:
        if not self._stack:
            if self._has_root:
                raise PreconditionViolation("JSON document already has a root value")
            self._root = value
            self._has_root = True
            return
        top = self._stack[-1]
        if isinstance(top, dict):
            if self._member is None:
                raise PreconditionViolation("No member name set for object value")
            top[self._member] = value
            self._member = None
        else:
            top.append(value)


def _add_string(builder: JsonBuilder, key: str, value: Optional[str]) -> None:
    if value is None:
        return
    builder.set_member_name(key)
    builder.add_string_value(value)


def _add_int(builder: JsonBuilder, key: str, num: int) -> None:
    if num == 0:
        return
    builder.set_member_name(key)
    builder.add_int_value(num)


def to_json(attr: HsiAttr, builder: JsonBuilder) -> None:
    """Write the populated fields of ``attr`` as members of the builder's open object.

    Flag bits without a token are left out of the ``Flags`` array.
    """
    ensure_attr(attr)
    if builder is None:
        raise PreconditionViolation("A JSON builder is required")

    _add_string(builder, KEY_APPSTREAM_ID, attr.appstream_id)
    _add_int(builder, KEY_HSI_NUMBER, attr.number)
    _add_string(builder, KEY_NAME, attr.name)
    _add_string(builder, KEY_SUMMARY, attr.summary)
    if attr.obsoletes:
        builder.set_member_name(KEY_CHECKSUM)
        builder.begin_array()
        for appstream_id in attr.obsoletes:
            builder.add_string_value(appstream_id)
        builder.end_array()
    _add_string(builder, KEY_URI, attr.uri)
    if attr.flags != 0:
        builder.set_member_name(KEY_FLAGS)
        builder.begin_array()
        for bit in iter_set_bits(attr.flags):
            token = flag_to_string(bit)
            if token is None:
                continue
            builder.add_string_value(token)
        builder.end_array()


def to_json_dict(attr: HsiAttr) -> Dict[str, Any]:
    builder = DictJsonBuilder()
    builder.begin_object()
    to_json(attr, builder)
    builder.end_object()
    return builder.get_root()


def to_json_string(attr: HsiAttr, indent: Optional[int] = 2) -> str:
    return json.dumps(to_json_dict(attr), indent=indent)


__all__ = ["DictJsonBuilder", "JsonBuilder", "to_json", "to_json_dict", "to_json_string"]
