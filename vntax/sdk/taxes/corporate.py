"""Flat-rate corporate income tax."""

from typing import Optional

from ..schemas import CorporateTaxInput, CorporateTaxResult
from .rules import load_tax_rules
from .schemas import TaxRules


def calculate_corporate_tax(
    data: CorporateTaxInput,
    rules: Optional[TaxRules] = None,
) -> CorporateTaxResult:
    """Calculate corporate income tax at the flat rate.

    Unset depreciation/other deductions count as zero. A loss (expenses
    above revenue) gives zero taxable income, not a negative one.
    """
    if rules is None:
        rules = load_tax_rules()

    total_expenses = data.expenses + (data.depreciation or 0) + (data.other_deductions or 0)
    taxable_income = max(0.0, data.revenue - total_expenses)
    tax_amount = taxable_income * rules.corporate_rate

    return CorporateTaxResult(
        revenue=data.revenue,
        total_expenses=total_expenses,
        taxable_income=taxable_income,
        tax_rate=rules.corporate_rate,
        tax_amount=tax_amount,
        net_income=taxable_income - tax_amount,
    )
