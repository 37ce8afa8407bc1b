from __future__ import annotations

from rich.console import Console
from rich.table import Table

from gedcom_validator.reporting import get_template
from gedcom_validator.rules import RULES

console = Console()


def rules_command():
    """
    List the rule catalog.
    """
    table = Table(title="Rule Catalog")
    table.add_column("Code", style="bold")
    table.add_column("Label")
    table.add_column("Scope")
    table.add_column("Function")

    for code, rule in RULES.items():
        template = get_template(code)
        table.add_row(code, template.label, template.scope or "-", rule.name)

    console.print(table)
