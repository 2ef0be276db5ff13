"""Error handling utilities for the build server CLI."""

import typer


def handle_error(message: str, exit_code: int = 1) -> None:
    """Handle errors consistently across the CLI."""
    typer.echo(f"❌ Error: {message}", err=True)
    raise typer.Exit(exit_code)


def handle_warning(message: str) -> None:
    """Handle warnings consistently across the CLI."""
    typer.echo(f"⚠️ Warning: {message}")


def handle_success(message: str) -> None:
    """Handle success messages consistently across the CLI."""
    typer.echo(f"✅ {message}")


def validate_required_settings(config, context: str = "a pipeline run") -> None:
    """Exit with an error listing the required settings the config lacks."""
    missing = config.missing_env_vars()
    if missing:
        handle_error(f"Missing required settings for {context}: {', '.join(missing)}")
