from __future__ import annotations

"""Plain-text rendering of HSI attributes for terminal output."""

from typing import List, Optional

from hsi.core.attribute import HsiAttr, ensure_attr
from hsi.core.flags import flag_to_string, iter_set_bits
from hsi.core.keys import KEY_APPSTREAM_ID, KEY_CHECKSUM, KEY_FLAGS, KEY_HSI_NUMBER, KEY_NAME, KEY_SUMMARY

TEXT_INDENT = "  "
TEXT_KEY_WIDTH = 20


def _pad_kv_str(lines: List[str], key: str, value: Optional[str]) -> None:
    if value is None:
        return
    padding = " " * max(0, TEXT_KEY_WIDTH - len(key))
    lines.append(f"{TEXT_INDENT}{key}: {padding}{value}\n")


def _pad_kv_int(lines: List[str], key: str, value: int) -> None:
    if value == 0:
        return
    _pad_kv_str(lines, key, str(value))


def _pad_kv_flags(lines: List[str], key: str, flags: int) -> None:
    # unknown bits keep their slot as an empty token, so a mask of only
    # unknown bits renders as bare separators; only called for a nonzero mask
    tokens = [flag_to_string(bit) or "" for bit in iter_set_bits(flags)]
    value = "|".join(tokens)
    _pad_kv_str(lines, key, value)


def to_string(attr: HsiAttr) -> str:
    """Return one padded ``key: value`` line per populated field."""
    ensure_attr(attr)
    lines: List[str] = []
    _pad_kv_str(lines, KEY_APPSTREAM_ID, attr.appstream_id)
    _pad_kv_int(lines, KEY_HSI_NUMBER, attr.number)
    if attr.flags != 0:
        _pad_kv_flags(lines, KEY_FLAGS, attr.flags)
    _pad_kv_str(lines, KEY_NAME, attr.name)
    _pad_kv_str(lines, KEY_SUMMARY, attr.summary)
    for appstream_id in attr.obsoletes:
        _pad_kv_str(lines, KEY_CHECKSUM, appstream_id)
    return "".join(lines)


__all__ = ["TEXT_INDENT", "TEXT_KEY_WIDTH", "to_string"]
