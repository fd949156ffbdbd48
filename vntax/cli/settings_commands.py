"""Settings CLI commands for vntax.

Manages settings.json - rules directory and default tax year.
"""

import click
from pathlib import Path

from vntax.sdk import (
    clear_setting,
    get_rules_dir,
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - rules_dir: directory with custom tax/<year>.yaml and carriers.yaml
    - default_year: tax year used when --year is not given
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    click.echo(f"  rules_dir: {get_rules_dir()}")


@settings.command("rules-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom rules_dir, revert to bundled rules")
def settings_rules_dir(path, clear):
    """Set or clear the custom rules directory.

    PATH must contain a tax/ subdirectory with <year>.yaml files and a
    carriers.yaml file.

    Examples:
        vntax settings rules-dir ~/vntax-rules
        vntax settings rules-dir --clear
    """
    if clear:
        if clear_setting("rules_dir"):
            click.echo("Cleared rules_dir setting.")
            click.echo(f"Rules directory is now: {get_rules_dir()}")
        else:
            click.echo("rules_dir was not set.")
        return

    if not path:
        current = get_setting("rules_dir")
        if current:
            click.echo(f"Current rules_dir: {current}")
        else:
            click.echo(f"No custom rules_dir set. Using: {get_rules_dir()}")
        return

    rules_path = Path(path).expanduser().resolve()
    if not rules_path.is_dir():
        raise click.ClickException(f"Not a directory: {rules_path}")
    if not (rules_path / "tax").is_dir():
        raise click.ClickException(f"Missing tax/ subdirectory in {rules_path}")

    saved = set_setting("rules_dir", str(rules_path))
    click.echo(f"Set rules_dir to {rules_path}")
    click.echo(f"Saved to {saved}")


@settings.command("default-year")
@click.argument("year", required=False, type=int)
@click.option("--clear", is_flag=True, help="Clear default_year, revert to latest available")
def settings_default_year(year, clear):
    """Set or clear the default tax year."""
    if clear:
        if clear_setting("default_year"):
            click.echo("Cleared default_year setting.")
        else:
            click.echo("default_year was not set.")
        return

    if year is None:
        current = get_setting("default_year")
        click.echo(f"Current default_year: {current}" if current else "No default_year set (using latest).")
        return

    set_setting("default_year", year)
    click.echo(f"Set default_year to {year}")
