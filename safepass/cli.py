"""
SafePass CLI
=============

Click-based command-line interface for the SafePass password toolkit.

Usage::

    python -m safepass strength "Pass1!word" --require-symbol
    python -m safepass entropy "correct horse battery staple"
    python -m safepass crack-time
    python -m safepass patterns "qwerty123"
    python -m safepass analyze --list-size 100k
    python -m safepass common "password123"
    python -m safepass generate --length 24 --no-symbols --count 5

When the password argument is omitted it is read from a hidden prompt,
which keeps it out of shell history.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, NoReturn, Optional

import click
from pydantic import BaseModel

from shared.config import SafePassConfig
from shared.console import SafePassConsole
from shared.models import ScanResult

from safepass.analyzers import (
    analyze_password_patterns,
    calculate_password_entropy,
    check_password_strength,
    estimate_crack_time,
)
from safepass.core.engine import SafePassEngine
from safepass.core.errors import SafePassError
from safepass.core.models import HardRequirements, ListSize, PasswordReport
from safepass.output.console import SafePassConsoleOutput
from safepass.output.report import SafePassReportGenerator

_EXIT_SAFEPASS_ERROR = 2
_LIST_SIZES = [size.value for size in ListSize]


# ===================================================================== #
#  Helpers
# ===================================================================== #


def _fail(ctx: click.Context, exc: SafePassError) -> NoReturn:
    """Report a SafePass error and exit with the dedicated status code."""
    console: SafePassConsole = ctx.obj["console"]
    console.error(str(exc))
    ctx.exit(_EXIT_SAFEPASS_ERROR)


def _read_password(password: Optional[str]) -> str:
    if password is not None:
        return password
    return click.prompt("Password", hide_input=True, default="", show_default=False)


def _emit_model(ctx: click.Context, model: BaseModel) -> bool:
    """Write *model* as JSON when JSON output is selected.

    Returns ``True`` if the model was emitted and console rendering
    should be skipped.
    """
    output_format = ctx.obj["output_format"]
    if output_format == "console":
        return False
    if output_format == "html":
        raise click.UsageError("HTML output is only available for the 'analyze' command.")

    payload = model.model_dump_json(indent=2)
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")
        ctx.obj["console"].success(f"JSON saved to: {path}")
    else:
        click.echo(payload)
    return True


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write a ScanResult in the selected JSON or HTML format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: SafePassReportGenerator = ctx.obj["reporter"]
    console: SafePassConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.to_json(result))
    elif output_format == "html":
        config: SafePassConfig = ctx.obj["config"]
        path = Path(output_file) if output_file else (
            Path(config.global_settings.output_dir) / "safepass_report.html"
        )
        reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  CLI Group
# ===================================================================== #


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a SafePass configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """SafePass -- Password Quality Assessment Toolkit.

    Rate password strength, estimate entropy and crack time, detect weak
    patterns, check breach lists, and generate secure passwords.
    """
    ctx.ensure_object(dict)

    try:
        safepass_config = SafePassConfig.load(config)
    except (OSError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    console = SafePassConsole(quiet=quiet)
    ctx.obj["config"] = safepass_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["reporter"] = SafePassReportGenerator(safepass_config.global_settings.version)

    try:
        engine = SafePassEngine(safepass_config)
    except SafePassError as exc:
        _fail(ctx, exc)
    ctx.obj["engine"] = engine
    ctx.obj["display"] = SafePassConsoleOutput(console, engine.tiers)

    if not quiet and output == "console":
        console.banner(version=safepass_config.global_settings.version)


# ===================================================================== #
#  Analysis Subcommands
# ===================================================================== #


@cli.command()
@click.argument("password", required=False)
@click.option("--require-uppercase", is_flag=True, default=False, help="Require an uppercase letter.")
@click.option("--require-number", is_flag=True, default=False, help="Require a digit.")
@click.option("--require-symbol", is_flag=True, default=False, help="Require a symbol.")
@click.option("--min-uppercase", type=click.IntRange(min=0), default=0, help="Minimum uppercase letters.")
@click.option("--min-number", type=click.IntRange(min=0), default=0, help="Minimum digits.")
@click.option("--min-symbol", type=click.IntRange(min=0), default=0, help="Minimum symbols.")
@click.pass_context
def strength(
    ctx: click.Context,
    password: Optional[str],
    require_uppercase: bool,
    require_number: bool,
    require_symbol: bool,
    min_uppercase: int,
    min_number: int,
    min_symbol: int,
) -> None:
    """Resolve the strength tier of a password.

    Requirement flags replace any requirements set in the configuration
    file. A failed requirement forces the lowest tier.
    """
    engine: SafePassEngine = ctx.obj["engine"]
    password = _read_password(password)

    flags = (require_uppercase, require_number, require_symbol, min_uppercase, min_number, min_symbol)
    requirements = engine.requirements
    if any(flags):
        requirements = HardRequirements(
            require_uppercase=require_uppercase,
            require_number=require_number,
            require_symbol=require_symbol,
            min_uppercase_count=min_uppercase,
            min_number_count=min_number,
            min_symbol_count=min_symbol,
        )

    try:
        result = check_password_strength(password, requirements, engine.tiers)
    except SafePassError as exc:
        _fail(ctx, exc)

    if not _emit_model(ctx, result):
        ctx.obj["display"].display_strength(result)


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def entropy(ctx: click.Context, password: Optional[str]) -> None:
    """Estimate password entropy in bits."""
    result = calculate_password_entropy(_read_password(password))
    if not _emit_model(ctx, result):
        ctx.obj["display"].display_entropy(result)


@cli.command("crack-time")
@click.argument("password", required=False)
@click.pass_context
def crack_time(ctx: click.Context, password: Optional[str]) -> None:
    """Estimate time to guess a password under four attacker models."""
    result = estimate_crack_time(_read_password(password))
    if not _emit_model(ctx, result):
        ctx.obj["display"].display_crack_time(result)


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def patterns(ctx: click.Context, password: Optional[str]) -> None:
    """Detect keyboard runs, sequences, repeats, and years."""
    result = analyze_password_patterns(_read_password(password))
    if not _emit_model(ctx, result):
        ctx.obj["display"].display_patterns(result)


@cli.command()
@click.argument("password", required=False)
@click.option(
    "--list-size", "-s",
    type=click.Choice(_LIST_SIZES),
    default=None,
    help="Common-password list to check against (default from config).",
)
@click.option(
    "--no-common-check",
    is_flag=True,
    default=False,
    help="Skip the common-password lookup.",
)
@click.pass_context
def analyze(
    ctx: click.Context,
    password: Optional[str],
    list_size: Optional[str],
    no_common_check: bool,
) -> None:
    """Run every analysis and report the findings.

    Combines strength, entropy, crack-time and pattern analysis with an
    optional lookup in a list of known-compromised passwords.
    """
    engine: SafePassEngine = ctx.obj["engine"]
    password = _read_password(password)

    result = asyncio.run(engine.analyze(
        password,
        check_common=False if no_common_check else None,
        list_size=list_size,
    ))

    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, result)
        return

    display: SafePassConsoleOutput = ctx.obj["display"]
    console: SafePassConsole = ctx.obj["console"]
    raw_report = result.metadata.get("report")
    if raw_report is not None:
        report = PasswordReport.model_validate(raw_report)
        display.display_report(report, result.metadata.get("common_password"))
        console.blank()
    console.findings_table(result.findings)
    console.info(result.summary)


@cli.command()
@click.argument("password", required=False)
@click.option(
    "--list-size", "-s",
    type=click.Choice(_LIST_SIZES),
    default=None,
    help="Common-password list to check against (default from config).",
)
@click.pass_context
def common(ctx: click.Context, password: Optional[str], list_size: Optional[str]) -> None:
    """Check a password against a list of known-compromised passwords."""
    engine: SafePassEngine = ctx.obj["engine"]
    config: SafePassConfig = ctx.obj["config"]
    console: SafePassConsole = ctx.obj["console"]

    size = list_size or config.wordlist.default_size
    found = asyncio.run(engine.check_common(_read_password(password), size))

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"common_password": found, "list_size": size}))
    elif ctx.obj["output_format"] == "html":
        raise click.UsageError("HTML output is only available for the 'analyze' command.")
    elif found:
        console.error(f"Password found in the {size} common-password list.")
    else:
        console.success(f"Password not found in the {size} common-password list.")


# ===================================================================== #
#  Generation
# ===================================================================== #


@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length (default from config).")
@click.option("--uppercase/--no-uppercase", default=None, help="Include A-Z.")
@click.option("--lowercase/--no-lowercase", default=None, help="Include a-z.")
@click.option("--numbers/--no-numbers", default=None, help="Include 0-9.")
@click.option("--symbols/--no-symbols", default=None, help="Include symbols.")
@click.option("--exclude-similar/--allow-similar", default=None, help="Drop look-alike characters.")
@click.option("--exclude-ambiguous/--allow-ambiguous", default=None, help="Drop brackets, quotes, and similar.")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of passwords.")
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    uppercase: Optional[bool],
    lowercase: Optional[bool],
    numbers: Optional[bool],
    symbols: Optional[bool],
    exclude_similar: Optional[bool],
    exclude_ambiguous: Optional[bool],
    count: int,
) -> None:
    """Generate secure random passwords.

    Options not given on the command line fall back to the
    ``[generator]`` section of the configuration.
    """
    engine: SafePassEngine = ctx.obj["engine"]

    candidates: dict[str, Any] = {
        "length": length,
        "include_uppercase": uppercase,
        "include_lowercase": lowercase,
        "include_numbers": numbers,
        "include_symbols": symbols,
        "exclude_similar_characters": exclude_similar,
        "exclude_ambiguous_characters": exclude_ambiguous,
    }
    overrides = {key: value for key, value in candidates.items() if value is not None}

    try:
        passwords = engine.generate(count=count, **overrides)
    except SafePassError as exc:
        _fail(ctx, exc)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"passwords": passwords}, indent=2))
    elif ctx.obj["output_format"] == "html":
        raise click.UsageError("HTML output is only available for the 'analyze' command.")
    else:
        for value in passwords:
            click.echo(value)


# ===================================================================== #
#  Entry Point
# ===================================================================== #


def main() -> None:
    """Main entry point for the SafePass CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
