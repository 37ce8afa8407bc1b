from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_validator.config import get_config
from gedcom_validator.core.exceptions import ValidatorError
from gedcom_validator.loader import load_record_store

console = Console()


def tables_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
):
    """
    Show individuals and families of a GEDCOM file.
    """
    try:
        store = load_record_store(gedcom)
    except (ValidatorError, ValueError, OSError) as exc:
        console.print(f"[red]ERROR[/red] {exc}")
        raise typer.Exit(code=1)

    missing = get_config().missing_name

    people = Table(title="Individuals")
    for col in ("ID", "Name", "Sex", "Birthday", "Death"):
        people.add_column(col)
    for ind in store.individuals.values():
        people.add_row(ind.id, ind.name or missing, ind.sex or "-", ind.birth or "-", ind.death or "-")

    families = Table(title="Families")
    for col in ("ID", "Married", "Divorced", "Husband", "Wife", "Children"):
        families.add_column(col)
    for fam in store.families.values():
        families.add_row(
            fam.id,
            fam.marriage_date or "-",
            fam.divorce_date or "-",
            f"{fam.husband_id or '-'} {store.display_name(fam.husband_id, missing)}",
            f"{fam.wife_id or '-'} {store.display_name(fam.wife_id, missing)}",
            ", ".join(fam.children) or "-",
        )

    console.print(people)
    console.print(families)
