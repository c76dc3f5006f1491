from __future__ import annotations

"""Trust flag vocabulary for HSI attributes."""

from enum import IntFlag
from typing import Dict, Iterator, Optional

UINT64_MAX = (1 << 64) - 1

FLAG_NONE_TOKEN = "none"


class HsiAttrFlag(IntFlag):
    """Flags that can be set on an HSI attribute."""

    NONE = 0
    SUCCESS = 1 << 0
    RUNTIME_UPDATES = 1 << 8  # suffix U
    RUNTIME_ATTESTATION = 1 << 9  # suffix A
    RUNTIME_ISSUE = 1 << 10  # suffix !
    RUNTIME_UNTRUSTED = 1 << 11  # suffix ?


_FLAG_TOKENS: Dict[int, str] = {
    int(HsiAttrFlag.SUCCESS): "success",
    int(HsiAttrFlag.RUNTIME_UPDATES): "runtime-updates",
    int(HsiAttrFlag.RUNTIME_ATTESTATION): "runtime-attestation",
    int(HsiAttrFlag.RUNTIME_ISSUE): "runtime-issue",
    int(HsiAttrFlag.RUNTIME_UNTRUSTED): "runtime-untrusted",
}

_TOKEN_FLAGS: Dict[str, int] = {token: bit for bit, token in _FLAG_TOKENS.items()}

_FLAG_SUFFIXES: Dict[int, str] = {
    int(HsiAttrFlag.RUNTIME_UPDATES): "U",
    int(HsiAttrFlag.RUNTIME_ATTESTATION): "A",
    int(HsiAttrFlag.RUNTIME_ISSUE): "!",
    int(HsiAttrFlag.RUNTIME_UNTRUSTED): "?",
}


def flag_to_string(flag: int) -> Optional[str]:
    """Return the token for a single flag bit.

    ``0`` maps to ``"none"``. A bit outside the vocabulary returns ``None`` so
    callers can tell it apart from a real token.
    """
    flag = int(flag)
    if flag == HsiAttrFlag.NONE:
        return FLAG_NONE_TOKEN
    return _FLAG_TOKENS.get(flag)


def flag_from_string(token: str) -> int:
    """Return the flag bit for a token, raising ``ValueError`` if unknown."""
    if token == FLAG_NONE_TOKEN:
        return int(HsiAttrFlag.NONE)
    try:
        return _TOKEN_FLAGS[token]
    except KeyError:
        known = ", ".join([FLAG_NONE_TOKEN, *_TOKEN_FLAGS])
        raise ValueError(f"Unknown flag '{token}'. Known: {known}") from None


def iter_set_bits(mask: int) -> Iterator[int]:
    """Yield each set bit of a 64-bit mask as a single-bit value, lowest first."""
    mask = int(mask)
    for i in range(64):
        bit = 1 << i
        if mask & bit:
            yield bit


def flags_to_suffix(mask: int) -> str:
    """Return the HSI suffix characters for the runtime flags in ``mask``."""
    return "".join(_FLAG_SUFFIXES[bit] for bit in iter_set_bits(mask) if bit in _FLAG_SUFFIXES)


def flag_vocabulary() -> Dict[int, str]:
    """Return a copy of the bit to token table."""
    return dict(_FLAG_TOKENS)


def flag_suffix(flag: int) -> Optional[str]:
    return _FLAG_SUFFIXES.get(int(flag))


__all__ = [
    "FLAG_NONE_TOKEN",
    "HsiAttrFlag",
    "UINT64_MAX",
    "flag_from_string",
    "flag_suffix",
    "flag_to_string",
    "flag_vocabulary",
    "flags_to_suffix",
    "iter_set_bits",
]
