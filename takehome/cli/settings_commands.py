"""Settings CLI commands for takehome.

Manages settings.json - default tax year.
"""

import click

from takehome.sdk import (
    InvalidTaxYearError,
    get_available_years,
    get_default_tax_year,
    get_settings_path,
    load_settings,
    save_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: default tax year for all commands
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

    if current:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")
    else:
        click.echo("No settings configured (using defaults).")

    click.echo()
    available = get_available_years()
    try:
        effective = get_default_tax_year()
    except InvalidTaxYearError as e:
        raise click.ClickException(str(e))
    if effective is None:
        click.echo(f"Effective tax year: {available[0]} (latest)")
    else:
        click.echo(f"Effective tax year: {effective}")
    click.echo(f"Available tax years: {', '.join(str(y) for y in available)}")


@settings.command("tax-year")
@click.argument("year", required=False, type=int)
@click.option("--clear", is_flag=True, help="Clear tax_year, revert to latest available")
def settings_tax_year(year, clear):
    """Set or clear the default tax year.

    Examples:
        takehome settings tax-year 2025
        takehome settings tax-year --clear
    """
    if clear:
        current = load_settings()
        if "tax_year" in current:
            del current["tax_year"]
            save_settings(current)
            click.echo("Cleared tax_year setting.")
        else:
            click.echo("tax_year was not set.")
        return

    if year is None:
        current_year = load_settings().get("tax_year")
        if current_year:
            click.echo(f"Current tax_year: {current_year}")
        else:
            click.echo(f"No tax_year set. Using latest: {get_available_years()[0]}")
        return

    available = get_available_years()
    if year not in available:
        raise click.BadParameter(
            f"No tax rules for {year}. Available: {', '.join(str(y) for y in available)}",
            param_hint="YEAR",
        )

    path = set_setting("tax_year", year)
    click.echo(f"Set tax_year: {year}")
    click.echo(f"Saved to: {path}")
