from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from rich.console import Console
from rich.table import Table

from gedcom_validator.config import get_config
from gedcom_validator.core.context import ValidationContext
from gedcom_validator.core.pipeline import Pipeline
from gedcom_validator.logging import get_logger, set_debug
from gedcom_validator.reporting import get_template

console = Console()


def build_context(
    gedcom: Path,
    *,
    out: Optional[Path],
    rules: Optional[List[str]],
    append: bool,
    debug: bool = False,
) -> ValidationContext:
    cfg = get_config()
    debug = debug or bool(cfg.debug)
    set_debug(debug)

    return ValidationContext(
        config=cfg,
        logger=get_logger("cli"),
        input_path=str(gedcom),
        output_path=str(out) if out else cfg.report_file,
        rules=rules or cfg.enabled_rules,
        append=append,
        debug=debug,
    )


def run_validation(ctx: ValidationContext, *, verbose: bool = False):
    if verbose:
        console.log(f"Validating {ctx.input_path}")
    findings = Pipeline(ctx).run()
    if verbose:
        console.log(f"Report written to {ctx.output_path}")
    return findings


def findings_table(counts: Dict[str, int], codes: Iterable[str]) -> Table:
    table = Table(title="Validation Findings")
    table.add_column("Rule", style="bold")
    table.add_column("Label")
    table.add_column("Findings", justify="right")

    for code in codes:
        table.add_row(code, get_template(code).label, str(counts.get(code, 0)))

    return table
