"""takehome CLI - Command-line interface for take-home pay estimates."""

import logging
import os

import click

from takehome import __version__

from .calc_commands import brackets, calc, compare, states
from .settings_commands import settings as settings_group


@click.group()
@click.version_option(version=__version__, prog_name="takehome")
def cli():
    """takehome - U.S. salary after tax, by state.

    Estimates federal income tax, FICA and state income tax for a
    single filer taking the standard deduction.

    The tax year is chosen from (in order):

    \b
    1. --year option
    2. TAKEHOME_TAX_YEAR environment variable
    3. settings.json 'tax_year' (set via 'takehome settings tax-year')
    4. Latest year with bundled tax rules
    """
    # Configure logging based on LOG_LEVEL environment variable
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


cli.add_command(calc)
cli.add_command(compare)
cli.add_command(states)
cli.add_command(brackets)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
