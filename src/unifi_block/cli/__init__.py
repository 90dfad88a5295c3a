"""
unifi-block - CLI Interface

This module provides the command-line entry point.
"""

import sys

import typer

from .station import station_command

# Create main CLI app
app = typer.Typer(
    name="unifi-block",
    help="unifi-block -- Block or unblock UniFi wireless stations",
    add_completion=False
)

# A single registered command runs without a subcommand name
app.command(name="station")(station_command)


def main():
    """CLI entry point."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\n\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
