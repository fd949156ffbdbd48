"""Rule table CLI commands.

Shows the tax rules and carrier table currently in effect.
"""

import json

import click

from vntax.sdk import (
    TaxRulesError,
    format_currency,
    format_percent,
    get_available_years,
    get_rules_dir,
    load_carrier_table,
    load_tax_rules,
)


@click.group()
def rules():
    """Inspect tax rules and the carrier prefix table."""
    pass


@rules.command("years")
def rules_years():
    """List years with tax rules available."""
    years = get_available_years()
    click.echo(f"Rules directory: {get_rules_dir()}")
    if not years:
        click.echo("No tax rule files found.")
        return
    for year in years:
        click.echo(f"  {year}")


@rules.command("show")
@click.option("--year", type=int, help="Tax year (default: latest available).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def rules_show(year, output_format):
    """Show deductions, brackets and rates for a tax year."""
    try:
        tax_rules = load_tax_rules(year)
        carriers = load_carrier_table()
    except (FileNotFoundError, TaxRulesError) as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps({
            "tax": tax_rules.model_dump(),
            "carriers": carriers.model_dump(),
        }, indent=2, ensure_ascii=False))
        return

    click.echo(f"Tax year {tax_rules.year}")
    click.echo(f"  Personal deduction:  {format_currency(tax_rules.personal_deduction)}")
    click.echo(f"  Dependent deduction: {format_currency(tax_rules.dependent_deduction)}")
    click.echo("  Brackets:")
    for level, bracket in enumerate(tax_rules.brackets, start=1):
        upper = format_currency(bracket.upper_bound) if bracket.upper_bound is not None else "and above"
        click.echo(
            f"    {level}. {format_currency(bracket.lower_bound)} - {upper}: {format_percent(bracket.rate)}"
        )
    click.echo(f"  Corporate rate: {format_percent(tax_rules.corporate_rate)}")
    click.echo(f"  VAT rates: {', '.join(f'{r:g}%' for r in tax_rules.vat_rates)}")
    click.echo()
    click.echo(f"Carrier table {carriers.version}")
    for code, carrier in carriers.carriers.items():
        click.echo(f"  {carrier.name} ({code}): {', '.join(carrier.prefixes)}")
