"""vntax CLI - Command-line interface for Vietnamese tax calculations."""

import json
import logging
import os
import sys

import click
from rich.console import Console

from vntax import __version__
from vntax.sdk import (
    CorporateTaxInput,
    PersonalIncomeTaxInput,
    SettingsError,
    TaxRulesError,
    VATInput,
    calculate,
    calculate_corporate_tax,
    calculate_personal_income_tax,
    calculate_vat,
    check_vat_rate,
    get_prefix_info,
    load_settings,
    load_tax_rules,
    to_record,
    validate_phone,
)

from .rules_commands import rules as rules_group
from .settings_commands import settings as settings_group


def _load_rules(year):
    """Load tax rules, converting config problems to CLI errors."""
    try:
        return load_tax_rules(year)
    except (FileNotFoundError, TaxRulesError) as e:
        raise click.ClickException(str(e))


def _echo_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__, prog_name="vntax")
def cli():
    """vntax - Vietnamese tax calculators.

    Personal income tax, corporate income tax, VAT settlement and
    mobile phone number validation.

    Rule files are loaded from (in order):

    \b
    1. VNTAX_RULES_PATH environment variable
    2. settings.json 'rules_dir' key (see 'vntax settings rules-dir')
    3. Rules bundled with the package
    """
    # Every command reads settings.json, so a broken file fails here once
    try:
        load_settings()
    except SettingsError as e:
        raise click.ClickException(f"{e}\nFix or delete the file and try again.")


cli.add_command(rules_group)
cli.add_command(settings_group)


@cli.command("pit")
@click.argument("income", type=float)
@click.option("--dependents", "-d", type=click.IntRange(min=0), default=0, help="Number of dependents.")
@click.option("--insurance", "-i", type=click.FloatRange(min=0), default=0, help="Monthly compulsory insurance.")
@click.option("--year", type=int, help="Tax year (default: latest available).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def pit(income, dependents, insurance, year, output_format):
    """Calculate monthly personal income tax on INCOME (VND).

    Examples:
        vntax pit 15000000
        vntax pit 50000000 --dependents 1 --insurance 1500000
    """
    rules = _load_rules(year)
    result = calculate_personal_income_tax(
        PersonalIncomeTaxInput(monthly_income=income, dependents=dependents, insurance=insurance),
        rules,
    )

    if output_format == "json":
        _echo_json(result.model_dump(by_alias=True))
        return

    from .renderers.tax_renderer import render_personal
    render_personal(Console(), result)


@cli.command("cit")
@click.argument("revenue", type=float)
@click.option("--expenses", type=float, default=0, help="Deductible expenses.")
@click.option("--depreciation", type=float, default=None, help="Depreciation.")
@click.option("--other-deductions", type=float, default=None, help="Other deductible amounts.")
@click.option("--year", type=int, help="Tax year (default: latest available).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def cit(revenue, expenses, depreciation, other_deductions, year, output_format):
    """Calculate corporate income tax on REVENUE (VND)."""
    rules = _load_rules(year)
    result = calculate_corporate_tax(
        CorporateTaxInput(
            revenue=revenue,
            expenses=expenses,
            depreciation=depreciation,
            other_deductions=other_deductions,
        ),
        rules,
    )

    if output_format == "json":
        _echo_json(result.model_dump(by_alias=True))
        return

    from .renderers.tax_renderer import render_corporate
    render_corporate(Console(), result)


@cli.command("vat")
@click.argument("sales", type=float)
@click.argument("purchases", type=float)
@click.option("--rate", type=float, default=10, help="VAT rate in percent (default: 10).")
@click.option("--year", type=int, help="Tax year (default: latest available).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def vat(sales, purchases, rate, year, output_format):
    """Calculate VAT payable from SALES and PURCHASES (VND)."""
    rules = _load_rules(year)
    error = check_vat_rate(rate, rules)
    if error:
        raise click.BadParameter(error, param_hint="--rate")

    result = calculate_vat(VATInput(sales_amount=sales, purchase_amount=purchases, vat_rate=rate))

    if output_format == "json":
        _echo_json(result.model_dump(by_alias=True))
        return

    from .renderers.tax_renderer import render_vat
    render_vat(Console(), result)


@cli.command("phone")
@click.argument("number")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def phone(number, output_format):
    """Validate a Vietnamese mobile NUMBER and show its carrier.

    Exits with status 1 if the number is not valid.
    """
    result = validate_phone(number)

    if output_format == "json":
        _echo_json(result.model_dump(by_alias=True, exclude_none=True))
    elif result.is_valid:
        click.echo(f"{result.formatted_phone} ({result.network})")
    else:
        click.echo(f"Error: {result.error}", err=True)

    if not result.is_valid:
        sys.exit(1)


@cli.command("phone-prefixes")
def phone_prefixes():
    """List valid mobile prefixes per carrier."""
    click.echo(get_prefix_info())


@cli.command("calculate")
@click.argument("calculation_type", type=click.Choice(["personal", "corporate", "vat"]))
@click.argument("data")
@click.option("--year", type=int, help="Tax year (default: latest available).")
def calculate_cmd(calculation_type, data, year):
    """Run a calculation from a JSON DATA object and print the stored record.

    DATA uses the camelCase field names, e.g.

    \b
        vntax calculate personal '{"monthlyIncome": 15000000, "dependents": 0, "insurance": 0}'
        vntax calculate vat '{"salesAmount": 100000000, "purchaseAmount": 60000000, "vatRate": 10}'
    """
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Not valid JSON: {e}", param_hint="DATA")

    outcome = calculate(calculation_type, payload, _load_rules(year))
    if not outcome.ok:
        raise click.ClickException(outcome.error)

    _echo_json(to_record(outcome, payload).model_dump(by_alias=True))


def main():
    """Entry point for the CLI."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    cli()


if __name__ == "__main__":
    main()
