"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from rich.table import Table

from hsi.core.attribute import HsiAttr
from hsi.core.flags import FLAG_NONE_TOKEN, flag_suffix, flag_vocabulary, flags_to_suffix


def build_flag_table() -> Table:
    table = Table(title="HSI attribute flags", show_header=True, header_style="bold blue")
    table.add_column("Bit", style="dim", justify="right")
    table.add_column("Value", style="dim", justify="right")
    table.add_column("Token", style="cyan")
    table.add_column("Suffix", style="green")

    table.add_row("-", "0x0", FLAG_NONE_TOKEN, "")
    for bit, token in flag_vocabulary().items():
        table.add_row(str(bit.bit_length() - 1), hex(bit), token, flag_suffix(bit) or "")
    return table


def format_summary_line(attr: HsiAttr) -> str:
    """One-line description such as ``com.intel.BiosGuard HSI:1 (UA)``."""
    parts = [attr.appstream_id or "<unnamed>"]
    if attr.number > 0:
        parts.append(f"HSI:{attr.number}")
    suffix = flags_to_suffix(attr.flags)
    if suffix:
        parts.append(f"({suffix})")
    return " ".join(parts)


__all__ = ["build_flag_table", "format_summary_line"]
