
from __future__ import annotations

import typer

from gedcom_validator.cli.commands.rules import rules_command
from gedcom_validator.cli.commands.tables import tables_command
from gedcom_validator.cli.commands.validate import validate_command

app = typer.Typer(
    name="gedcom-validate",
    help="GEDCOM consistency checks (user stories) and error reports",
    add_completion=False,
)

app.command("validate")(validate_command)
app.command("rules")(rules_command)
app.command("tables")(tables_command)


def main():
    app()


if __name__ == "__main__":
    main()
