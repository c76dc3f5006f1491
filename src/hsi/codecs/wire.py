from __future__ import annotations

"""Convert HSI attributes to and from the typed wire encoding."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from hsi.core.attribute import HsiAttr, ensure_attr
from hsi.core.keys import (
    KEY_APPSTREAM_ID,
    KEY_CHECKSUM,
    KEY_HSI_NUMBER,
    KEY_NAME,
    KEY_SUMMARY,
    KEY_TRUST_FLAGS,
    KEY_URI,
)
from hsi.core.variant import VARDICT, Variant, vardict_items
from hsi.errors import PreconditionViolation, SkippedBatchElement, UnrecognizedWireShape
from hsi.utils.logging import log_calls

logger = logging.getLogger(__name__)

TUPLED_VARDICT = f"({VARDICT})"


def to_variant(attr: HsiAttr) -> Variant:
    """Build an ``a{sv}`` Variant holding only the populated fields."""
    ensure_attr(attr)
    entries: Dict[str, Variant] = {}
    if attr.appstream_id is not None:
        entries[KEY_APPSTREAM_ID] = Variant.string(attr.appstream_id)
    if attr.name is not None:
        entries[KEY_NAME] = Variant.string(attr.name)
    if attr.summary is not None:
        entries[KEY_SUMMARY] = Variant.string(attr.summary)
    if attr.uri is not None:
        entries[KEY_URI] = Variant.string(attr.uri)
    if attr.obsoletes:
        entries[KEY_CHECKSUM] = Variant.strv(attr.obsoletes)
    if attr.flags != 0:
        entries[KEY_TRUST_FLAGS] = Variant.uint64(attr.flags)
    if attr.number > 0:
        entries[KEY_HSI_NUMBER] = Variant.uint32(attr.number)
    return Variant.vardict(entries)


def array_to_variant(attrs: Iterable[HsiAttr]) -> Variant:
    """Build the ``(aa{sv})`` Variant the daemon returns for a list of attributes."""
    children = [to_variant(attr) for attr in attrs]
    return Variant.tuple_of(Variant.array(children, VARDICT))


def _add_obsoletes(attr: HsiAttr, appstream_ids: List[str]) -> None:
    for appstream_id in appstream_ids:
        attr.add_obsolete(appstream_id)


_KEY_SETTERS: Dict[str, Tuple[str, Callable[[HsiAttr, Any], None]]] = {
    KEY_APPSTREAM_ID: ("s", HsiAttr.set_appstream_id),
    KEY_NAME: ("s", HsiAttr.set_name),
    KEY_SUMMARY: ("s", HsiAttr.set_summary),
    KEY_CHECKSUM: ("as", _add_obsoletes),
    KEY_URI: ("s", HsiAttr.set_uri),
    KEY_TRUST_FLAGS: ("t", HsiAttr.set_flags),
    KEY_HSI_NUMBER: ("u", HsiAttr.set_number),
}


def _set_from_key_value(attr: HsiAttr, key: str, value: Variant) -> None:
    handler = _KEY_SETTERS.get(key)
    if handler is None:
        logger.debug("Ignoring unknown key %s", key)
        return
    signature, setter = handler
    if value.signature != signature:
        logger.warning("Ignoring %s: expected type %s, got %s", key, signature, value.signature)
        return
    setter(attr, value.value)


def _require_variant(value: Any) -> Variant:
    if not isinstance(value, Variant):
        raise PreconditionViolation(f"Expected Variant, got {type(value).__name__}")
    return value


def from_variant_strict(value: Variant) -> HsiAttr:
    """Create an attribute from ``(a{sv})`` or ``a{sv}`` packed data.

    Raises:
        UnrecognizedWireShape: if the value has any other type.
    """
    _require_variant(value)
    type_string = value.type_string
    if type_string == TUPLED_VARDICT:
        inner = value.child_value(0)
    elif type_string == VARDICT:
        inner = value
    else:
        raise UnrecognizedWireShape(type_string)
    attr = HsiAttr()
    for key, child in vardict_items(inner):
        _set_from_key_value(attr, key, child)
    return attr


def from_variant(value: Variant) -> Optional[HsiAttr]:
    """Create an attribute from packed data, or ``None`` if the shape is unknown."""
    try:
        return from_variant_strict(value)
    except UnrecognizedWireShape as exc:
        logger.warning("type %s not known", exc.type_string)
        return None


def _entry_types(value: Variant) -> List[str]:
    if value.signature == VARDICT:
        return ["{sv}"] * len(value.value)
    if value.signature == "as":
        return ["s"] * len(value.value)
    return []


@log_calls()
def array_from_variant(value: Variant) -> List[HsiAttr]:
    """Create attributes from a container of packed attributes.

    The outer container (normally the ``(aa{sv})`` tuple) is unwrapped once
    and each child decoded on its own. Children that do not decode are left
    out; the rest keep their order.

    When the unwrapped value is not itself a container, as for a bare
    ``aa{sv}`` whose first child is one vardict, its entries are what gets
    iterated. None of them is an attribute, so all are skipped.
    """
    _require_variant(value)
    untuple = value.child_value(0)
    if not untuple.is_container():
        for index, entry_type in enumerate(_entry_types(untuple)):
            logger.warning("type %s not known", entry_type)
            logger.debug("%s", SkippedBatchElement(index, entry_type))
        return []
    attrs: List[HsiAttr] = []
    for index, data in enumerate(untuple.children()):
        attr = from_variant(data)
        if attr is None:
            logger.debug("%s", SkippedBatchElement(index, data.type_string))
            continue
        attrs.append(attr)
    return attrs


__all__ = [
    "TUPLED_VARDICT",
    "array_from_variant",
    "array_to_variant",
    "from_variant",
    "from_variant_strict",
    "to_variant",
]
