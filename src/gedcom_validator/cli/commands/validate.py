from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from gedcom_validator.cli.utils import build_context, findings_table, run_validation
from gedcom_validator.core.exceptions import ValidatorError
from gedcom_validator.rules import RULES, get_rule

console = Console()


def validate_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Report file (defaults to the configured report file)",
    ),
    rule: Optional[List[str]] = typer.Option(
        None,
        "--rule",
        "-r",
        help="Rule code to run (repeatable); defaults to every rule",
    ),
    append: bool = typer.Option(
        False,
        "--append",
        help="Append to the report file instead of starting it fresh",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Validate a GEDCOM file and write the error report.
    """
    try:
        codes = [get_rule(c).code for c in rule] if rule else None
        ctx = build_context(gedcom, out=out, rules=codes, append=append, debug=debug)
        run_validation(ctx, verbose=verbose)
    except ValidatorError as exc:
        console.print(f"[red]ERROR[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(findings_table(ctx.stats.get("findings", {}), ctx.rules or list(RULES)))
    console.print(
        f"{ctx.stats.get('total_findings', 0)} finding(s) written to {ctx.output_path}"
    )
