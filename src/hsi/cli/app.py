"""
HSI CLI: build a Host Security ID attribute and print its encodings.

- render: assemble an attribute from options and print it as text, JSON or wire data
- flags: list the known trust flags
"""

from __future__ import annotations

from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape

from hsi.cli.formatters import build_flag_table, format_summary_line
from hsi.codecs.json_codec import to_json_dict
from hsi.codecs.text import to_string
from hsi.codecs.wire import to_variant
from hsi.core.attribute import UINT32_MAX, HsiAttr
from hsi.core.flags import flag_from_string
from hsi.errors import PreconditionViolation
from hsi.utils.logging import configure_logging

app = typer.Typer(help="HSI CLI: build Host Security ID attributes and print their encodings.")
console = Console()


class OutputFormat(str, Enum):
    """Encodings the render command can print."""

    TEXT = "text"
    JSON = "json"
    WIRE = "wire"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    configure_logging(verbose)


def _build_attr(
    appstream_id: str | None,
    name: str | None,
    summary: str | None,
    uri: str | None,
    number: int,
    flags: list[str],
    obsoletes: list[str],
) -> HsiAttr:
    attr = HsiAttr(appstream_id)
    attr.set_name(name)
    attr.set_summary(summary)
    attr.set_uri(uri)
    attr.set_number(number)
    for token in flags:
        try:
            attr.add_flag(flag_from_string(token))
        except ValueError as exc:
            console.print(f"[red]Bad --flag[/red]: {exc}")
            raise typer.Exit(code=2)
    for obsolete in obsoletes:
        attr.add_obsolete(obsolete)
    return attr


@app.command()
def render(
    appstream_id: str | None = typer.Option(None, "--id", help="AppStream ID, e.g. com.intel.BiosGuard"),
    name: str | None = typer.Option(None, "--name", help="Short attribute name"),
    summary: str | None = typer.Option(None, "--summary", help="One line summary"),
    uri: str | None = typer.Option(None, "--uri", help="Link with more information"),
    number: int = typer.Option(0, "--number", "-n", min=0, max=UINT32_MAX, help="HSI level, 0 for unset"),
    flags: list[str] = typer.Option([], "--flag", "-f", help="Flag token, may be repeated"),
    obsoletes: list[str] = typer.Option([], "--obsolete", help="AppStream ID this attribute replaces"),
    fmt: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", help="Output encoding"),
) -> None:
    """Build an attribute from options and print it."""
    try:
        attr = _build_attr(appstream_id, name, summary, uri, number, flags, obsoletes)
    except PreconditionViolation as exc:
        console.print(f"[red]Invalid attribute[/red]: {exc}")
        raise typer.Exit(code=1)

    if fmt == OutputFormat.JSON:
        console.print_json(data=to_json_dict(attr))
        return
    if fmt == OutputFormat.WIRE:
        console.print(str(to_variant(attr)), markup=False, highlight=False, soft_wrap=True)
        return

    text = to_string(attr)
    if not text:
        console.print("[dim]No fields set[/dim]")
        return
    console.print(f"[bold]{escape(format_summary_line(attr))}[/bold]", highlight=False)
    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


@app.command()
def flags() -> None:
    """List the known attribute flags."""
    console.print(build_flag_table())


if __name__ == "__main__":  # pragma: no cover
    app()
