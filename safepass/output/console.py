"""
SafePass Console Output
========================

Rich-based formatters for SafePass results: a tier meter for strength,
property tables for entropy, a crack-time table per attacker model, and
pattern/suggestion lists.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import SafePassConsole

from safepass.core.models import (
    DEFAULT_TIERS,
    CrackTimeResult,
    EntropyResult,
    PasswordReport,
    PatternResult,
    StrengthResult,
    StrengthTier,
)

# Meter colours from lowest to highest tier
_TIER_COLOURS: tuple[str, ...] = (
    "bold white on red",
    "bold red",
    "bold yellow",
    "bold green",
    "bold bright_green",
)

_ATTACK_LABELS: tuple[tuple[str, str, str], ...] = (
    ("online_throttled", "Online attack (throttled)", "100 / hour"),
    ("online_unthrottled", "Online attack (unthrottled)", "10 / second"),
    ("offline_slow_hash", "Offline attack (slow hash)", "1e4 / second"),
    ("offline_fast_hash", "Offline attack (fast hash)", "1e10 / second"),
)


def _yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[dim]no[/dim]"


class SafePassConsoleOutput:
    """Console formatters for SafePass results.

    Usage::

        output = SafePassConsoleOutput(SafePassConsole())
        output.display_report(report)
    """

    def __init__(
        self,
        console: Optional[SafePassConsole] = None,
        tiers: Sequence[StrengthTier] = DEFAULT_TIERS,
    ) -> None:
        self.console = console or SafePassConsole()
        self._rich = self.console.rich
        self._tiers = tuple(tiers)

    # ------------------------------------------------------------------ #
    #  Strength
    # ------------------------------------------------------------------ #

    def _tier_colour(self, tier_id: int) -> str:
        ids = [tier.id for tier in self._tiers]
        position = ids.index(tier_id) if tier_id in ids else 0
        if len(ids) > 1:
            position = round(position * (len(_TIER_COLOURS) - 1) / (len(ids) - 1))
        return _TIER_COLOURS[min(position, len(_TIER_COLOURS) - 1)]

    def display_strength(self, result: StrengthResult) -> None:
        """Tier meter plus character-class breakdown."""
        self.console.section("Strength")

        colour = self._tier_colour(result.id)
        meter = Text()
        for tier in self._tiers:
            reached = tier.id <= result.id
            meter.append(
                f" {tier.value} ",
                style=self._tier_colour(tier.id) if reached else "dim",
            )
            meter.append(" ")
        meter.append("  ")
        meter.append(result.value.upper(), style=colour)
        self._rich.print(Panel(meter, title="Strength Tier", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Class", style="bold")
        tbl.add_column("Present", justify="center")
        tbl.add_column("Count", justify="right")

        counts = result.counts
        rows = (
            ("Lowercase", result.contains.lowercase, counts.lowercase if counts else None),
            ("Uppercase", result.contains.uppercase, counts.uppercase if counts else None),
            ("Digits", result.contains.number, counts.numbers if counts else None),
            ("Symbols", result.contains.symbol, counts.special if counts else None),
        )
        for label, present, count in rows:
            tbl.add_row(label, _yes_no(present), "-" if count is None else str(count))

        self._rich.print(tbl)
        self._rich.print(
            f"Length: [bold]{result.length}[/bold]   "
            f"Diversity: [bold]{result.contains.diversity}/4[/bold]"
        )

    # ------------------------------------------------------------------ #
    #  Entropy and crack time
    # ------------------------------------------------------------------ #

    def display_entropy(self, result: EntropyResult) -> None:
        self.console.section("Entropy")
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value", justify="right")
        tbl.add_row("Entropy", f"{result.entropy:.2f} bits")
        tbl.add_row("Character Pool", str(result.pool_size))
        tbl.add_row("Length", str(result.length))
        self._rich.print(tbl)

    def display_crack_time(self, result: CrackTimeResult) -> None:
        self.console.section("Crack Time Estimates")
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Attack Scenario", style="bold")
        tbl.add_column("Speed", justify="right")
        tbl.add_column("Seconds", justify="right")
        tbl.add_column("Estimated Time", justify="right")

        for field, label, speed in _ATTACK_LABELS:
            seconds = getattr(result.seconds, field)
            display = getattr(result.display, field)
            style = "red" if display == "instantly" else (
                "bright_green" if display == "centuries" else ""
            )
            tbl.add_row(
                label,
                speed,
                f"{seconds:.3g}",
                f"[{style}]{display}[/{style}]" if style else display,
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Patterns
    # ------------------------------------------------------------------ #

    def display_patterns(self, result: PatternResult) -> None:
        """Risk meter, detected patterns, and suggestions."""
        self.console.section("Patterns")

        meter_width = 40
        filled = max(0, min(meter_width, int(result.risk_score / 100 * meter_width)))
        meter = Text()
        meter.append("Risk: ", style="bold")
        meter.append(f"{result.risk_score}/100  ")
        meter.append("[", style="dim")
        for i in range(meter_width):
            if i < filled:
                if i < meter_width * 0.25:
                    meter.append("█", style="green")
                elif i < meter_width * 0.50:
                    meter.append("█", style="yellow")
                elif i < meter_width * 0.75:
                    meter.append("█", style="dark_orange")
                else:
                    meter.append("█", style="red")
            else:
                meter.append("░", style="dim")
        meter.append("]", style="dim")
        self._rich.print(Panel(meter, title="Pattern Risk", border_style="cyan"))

        if result.detected_patterns:
            self._rich.print("[bold]Patterns Detected:[/bold]")
            for description in result.detected_patterns:
                self._rich.print(Text.assemble(("  ⚠ ", "yellow"), description))
        else:
            self._rich.print("[green]No common patterns detected.[/green]")

        if result.suggestions:
            self._rich.print()
            self._rich.print("[bold]Suggestions:[/bold]")
            for suggestion in result.suggestions:
                self._rich.print(f"  [bright_cyan]•[/bright_cyan] {suggestion}")

    # ------------------------------------------------------------------ #
    #  Full report
    # ------------------------------------------------------------------ #

    def display_report(
        self,
        report: PasswordReport,
        common_password: Optional[bool] = None,
    ) -> None:
        self.display_strength(report.strength)
        self.display_entropy(report.entropy)
        self.display_crack_time(report.crack_time)
        self.display_patterns(report.patterns)

        if common_password is not None:
            self._rich.print()
            if common_password:
                self.console.error("Password appears in a list of known-compromised passwords.")
            else:
                self.console.success("Password not found in the common-password list.")
