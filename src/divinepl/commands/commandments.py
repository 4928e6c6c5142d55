# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Commandments command for DivinePL.

Validates and shows the project's commandments.config.
"""

import typer

from divinepl.config import ConfigError, load_config

app = typer.Typer(help="Manage and validate commandments.config")


@app.command()
def validate(
    config_path: str = typer.Option(None, "--config", "-c", help="Path to commandments.config"),
):
    """
    Validate the commandments file.

    Checks that the file exists (when given) and holds valid settings.
    """
    typer.echo("Validating commandments...")
    typer.echo()

    try:
        commandments = load_config(config_path)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ConfigError as e:
        typer.echo(f"Validation failed: {e}", err=True)
        raise typer.Exit(1)

    if commandments.source is None:
        typer.echo("No commandments.config found; defaults apply")
    else:
        typer.echo(f"Commandments structure is valid: {commandments.source}")
    typer.echo()
    if commandments.trinity:
        for role, module in commandments.trinity.items():
            typer.echo(f"  {role}: {module}")
    typer.echo(f"Sabbath mode: {'on' if commandments.sabbath_mode else 'off'}")
    typer.echo(f"Confession allowed: {'yes' if commandments.allow_confession else 'no'}")
    if commandments.revelation_level:
        typer.echo(f"Revelation level: {commandments.revelation_level}")
    typer.echo()
    typer.echo("Commandments validation complete!")
