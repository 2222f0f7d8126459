"""
SafePass Console Interface
===========================

Rich console shared by every SafePass command: banner, section rules,
status lines, and the findings table.

Everything is written to stdout. Machine-readable output (``--output
json``) bypasses this class and goes through ``click.echo`` so that
banners and status lines never corrupt it.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from shared.models import Finding

_SAFEPASS_THEME = Theme(
    {
        "safepass.banner": "bold bright_cyan",
        "safepass.section": "bold bright_magenta",
        "safepass.success": "bold green",
        "safepass.error": "bold red",
        "safepass.info": "bold bright_blue",
        "safepass.dim": "dim white",
        "safepass.critical": "bold white on red",
        "safepass.high": "bold red",
        "safepass.medium": "bold yellow",
        "safepass.low": "bold bright_cyan",
        "safepass.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___        __     ___
 / __| __ _ / _|___| _ \__ _ ______
 \__ \/ _` |  _/ -_)  _/ _` (_-<_-<
 |___/\__,_|_| \___|_| \__,_/__/__/
[/bright_cyan]"""

_TAGLINE = "Password Quality Assessment Toolkit"


class SafePassConsole:
    """Presentation helpers over a themed Rich console.

    Usage::

        con = SafePassConsole()
        con.banner("1.0.0")
        con.section("Strength")
        con.success("Password not found in the top-300 list.")

    Args:
        quiet: Swallow all output (``--quiet`` and library use).
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self._console = Console(theme=_SAFEPASS_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        """The wrapped Rich console, for formatters that build renderables."""
        return self._console

    def banner(self, version: str) -> None:
        stamp = _dt.datetime.now().strftime("%Y-%m-%d %H:%M")
        body = Text.from_markup(
            f"{_BANNER_ART}\n[safepass.banner]{_TAGLINE}[/safepass.banner]\n"
            f"[safepass.dim]v{version}  |  {stamp}[/safepass.dim]"
        )
        self._console.print(Panel(Align.center(body), border_style="bright_cyan", padding=(0, 2)))

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="safepass.section", characters="─")
        self._console.print()

    def success(self, message: str) -> None:
        self._status("safepass.success", "✔", message)

    def error(self, message: str) -> None:
        self._status("safepass.error", "✘", message)

    def info(self, message: str) -> None:
        self._status("safepass.info", "ℹ", message)

    def _status(self, style: str, glyph: str, message: str) -> None:
        line = Text.assemble((f"[{glyph}] ", style), message)
        self._console.print(line)

    def blank(self) -> None:
        self._console.print()

    def findings_table(self, findings: Sequence[Finding]) -> None:
        """Numbered findings, coloured by severity, with recommendations."""
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Severity")
        tbl.add_column("Finding", ratio=1)
        tbl.add_column("Detail", ratio=2)

        for number, finding in enumerate(findings, start=1):
            severity = finding.severity.value
            style = "safepass.informational" if severity == "INFO" else f"safepass.{severity.lower()}"
            detail = Text(finding.description)
            if finding.recommendation:
                detail.append(f"\n→ {finding.recommendation}", style="safepass.dim")
            tbl.add_row(str(number), Text(severity, style=style), Text(finding.title), detail)

        self._console.print(tbl)
