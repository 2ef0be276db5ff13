#!/usr/bin/env python3
"""
Build Server CLI - clone a repository, build it and deploy the output to S3
"""

import sys

import typer
from rich.console import Console

from . import __version__
from .commands.describe import describe_command
from .commands.run import run_command
from .helpers.logger import setup_logger

console = Console()


def configure_logging(output_format: str = "TEXT", log_level: str = None):
    """Configure logging based on output format and log level."""
    # For JSON output, send logs to stderr to keep stdout clean
    json_output = output_format.upper() == "JSON"

    # Level: CLI option > BUILD_SERVER_LOG_LEVEL > INFO
    setup_logger(log_level, json_output)


def show_help_suggestion():
    """Show helpful suggestions for common mistakes."""
    console.print("\n[yellow]💡 Common usage patterns:[/yellow]")
    console.print(
        "   [cyan]PROJECT_ID=site GIT_REPOSITORY_URL=https://github.com/acme/site.git build-server run[/cyan]"
    )
    console.print("   [cyan]build-server run --config deploy.yaml[/cyan]")
    console.print("   [cyan]build-server describe --config deploy.yaml --output JSON[/cyan]")

    console.print("\n[yellow]📖 For detailed help:[/yellow]")
    console.print("   [cyan]build-server --help[/cyan]")
    console.print("   [cyan]build-server <command> --help[/cyan]")


app = typer.Typer(
    help="Build Server - clone, build and deploy static sites to S3",
    no_args_is_help=True,
    add_completion=False,
    epilog="💡 Use 'build-server <command> --help' for command-specific help",
)


# Global log level option
LOG_LEVEL = None


def _version_callback(value: bool):
    if value:
        typer.echo(f"build-server {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Build Server - clone, build and deploy static sites to S3."""
    global LOG_LEVEL
    LOG_LEVEL = log_level


@app.command(
    "run",
    help="Clone, build and upload one project. Example: build-server run --config deploy.yaml",
    rich_help_panel="Pipeline Commands",
)
def run(
    config_file: str = typer.Option(
        None, "--config", "-c", help="Path to YAML configuration file"
    ),
    repo_url: str = typer.Option(
        None, "--repo-url", "-r", help="Git repository URL (overrides GIT_REPOSITORY_URL)"
    ),
    project_id: str = typer.Option(
        None, "--project-id", "-p", help="Project identifier (overrides PROJECT_ID)"
    ),
    workspace: str = typer.Option(
        None, "--workspace", "-w", help="Clone directory (overrides WORKSPACE_DIR)"
    ),
    strict_exit_code: bool = typer.Option(
        False,
        "--strict-exit-code",
        help="Exit with status 1 when the pipeline fails (default: always 0)",
    ),
):
    """Clone, build and upload one project."""
    configure_logging("TEXT", LOG_LEVEL)
    run_command(config_file, repo_url, project_id, workspace, strict_exit_code)


@app.command(
    "describe",
    help="Show the resolved configuration. Example: build-server describe --output JSON",
    rich_help_panel="Pipeline Commands",
)
def describe(
    config_file: str = typer.Option(
        None, "--config", "-c", help="Path to YAML configuration file"
    ),
    output: str = typer.Option(
        "TEXT", "--output", "-o", help="Output format: TEXT (default) or JSON"
    ),
):
    """Show the resolved configuration with secrets masked."""
    configure_logging(output, LOG_LEVEL)
    describe_command(config_file, output)


def cli_error_handler():
    """Handle CLI errors and provide helpful suggestions."""
    try:
        app()
    except typer.Exit as e:
        if e.exit_code != 0:
            is_json_output = "--output" in sys.argv and "JSON" in sys.argv
            if not is_json_output:
                console.print(f"[dim]Build Server CLI v{__version__}[/dim]")
                show_help_suggestion()
        raise
    except Exception as e:
        is_json_output = "--output" in sys.argv and "JSON" in sys.argv
        if not is_json_output:
            console.print(f"[dim]Build Server CLI v{__version__}[/dim]")
            console.print(f"\n[red]❌ Error: {e}[/red]")
            show_help_suggestion()
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_error_handler()
