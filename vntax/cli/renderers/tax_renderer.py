"""Rich renderers for calculator results.

Transforms SDK result models into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from vntax.sdk import (
    CorporateTaxResult,
    PersonalIncomeTaxResult,
    VATResult,
    format_currency,
    format_percent,
)


def _summary_table(rows: list) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("label", style="dim")
    table.add_column("value", justify="right")
    for label, value in rows:
        table.add_row(label, value)
    return table


def render_personal(console: Console, result: PersonalIncomeTaxResult) -> None:
    """Render personal income tax result with its bracket breakdown."""
    summary = _summary_table([
        ("Monthly income", format_currency(result.monthly_income)),
        ("Personal deduction", format_currency(result.personal_deduction)),
        (f"Dependent deduction ({result.dependents})", format_currency(result.dependent_deduction)),
        ("Insurance", format_currency(result.insurance)),
        ("Total deductions", format_currency(result.total_deductions)),
        ("Taxable income", format_currency(result.taxable_income)),
    ])
    console.print(Panel(summary, title="Personal income tax", border_style="dim"))

    if result.breakdown:
        table = Table(box=box.SIMPLE_HEAD)
        table.add_column("Level", justify="right")
        table.add_column("From", justify="right")
        table.add_column("To", justify="right")
        table.add_column("Rate", justify="right")
        table.add_column("Tax", justify="right")
        for line in result.breakdown:
            table.add_row(
                str(line.level),
                format_currency(line.from_),
                format_currency(line.to),
                format_percent(line.rate),
                format_currency(line.amount),
            )
        console.print(table)
    else:
        console.print("[green]No tax due.[/green]")

    console.print(_summary_table([
        ("Tax", f"[bold]{format_currency(result.tax_amount)}[/bold]"),
        ("Effective rate", format_percent(result.effective_rate)),
        ("Net income", format_currency(result.net_income)),
    ]))


def render_corporate(console: Console, result: CorporateTaxResult) -> None:
    """Render corporate income tax result."""
    console.print(Panel(_summary_table([
        ("Revenue", format_currency(result.revenue)),
        ("Total expenses", format_currency(result.total_expenses)),
        ("Taxable income", format_currency(result.taxable_income)),
        ("Rate", format_percent(result.tax_rate)),
        ("Tax", f"[bold]{format_currency(result.tax_amount)}[/bold]"),
        ("Net income", format_currency(result.net_income)),
    ]), title="Corporate income tax", border_style="dim"))


def render_vat(console: Console, result: VATResult) -> None:
    """Render VAT settlement result."""
    console.print(Panel(_summary_table([
        ("Sales", format_currency(result.sales_amount)),
        ("Purchases", format_currency(result.purchase_amount)),
        ("Rate", format_percent(result.vat_rate / 100)),
        ("Output VAT", format_currency(result.output_vat)),
        ("Input VAT", format_currency(result.input_vat)),
        ("VAT payable", f"[bold]{format_currency(result.vat_payable)}[/bold]"),
    ]), title="VAT", border_style="dim"))
