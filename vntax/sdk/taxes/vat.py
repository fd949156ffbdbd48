"""Value-added tax settlement for a period.

Payable VAT = output VAT (on sales) - input VAT (on purchases), floored at
zero. Excess input credit is not carried forward to later periods.
"""

from typing import Optional

from ..schemas import VATInput, VATResult
from .rules import load_tax_rules
from .schemas import TaxRules


def check_vat_rate(rate: float, rules: Optional[TaxRules] = None) -> Optional[str]:
    """Return an error message if rate is not a legal VAT rate, else None."""
    if rules is None:
        rules = load_tax_rules()

    if rate in rules.vat_rates:
        return None
    allowed = ", ".join(f"{r:g}%" for r in rules.vat_rates)
    return f"Invalid VAT rate {rate:g}%. Allowed rates: {allowed}"


def calculate_vat(data: VATInput) -> VATResult:
    """Calculate output, input and payable VAT.

    The rate is not checked against the legal set here; callers taking
    untrusted input use check_vat_rate() or calculations.calculate().
    """
    rate = data.vat_rate / 100
    output_vat = data.sales_amount * rate
    input_vat = data.purchase_amount * rate

    return VATResult(
        sales_amount=data.sales_amount,
        purchase_amount=data.purchase_amount,
        vat_rate=data.vat_rate,
        output_vat=output_vat,
        input_vat=input_vat,
        vat_payable=max(0.0, output_vat - input_vat),
    )
