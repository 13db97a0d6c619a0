from __future__ import annotations

import typer

from gedcomx7.cli.commands.convert import convert_command
from gedcomx7.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcomx7",
    help="GEDCOM X to GEDCOM 7 converter",
    add_completion=False,
)

app.command("convert")(convert_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
