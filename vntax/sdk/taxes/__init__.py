"""taxes - Vietnamese tax calculations.

Scope:
- Progressive personal income tax on monthly salary (7 brackets)
- Flat-rate corporate income tax
- VAT output/input settlement

Constraints:
- Pure calculation - inputs in, value objects out, no I/O
- Year-specific rules loaded from rules/tax/{year}.yaml

Modules:
- schemas: TaxRules / CarrierTable pydantic models for rule files
- rules: Rule file loading (load_tax_rules, load_carrier_table)
- personal: Personal income tax bracket fold
- corporate: Corporate income tax
- vat: VAT settlement and rate check

Usage:
    from vntax.sdk.taxes import calculate_personal_income_tax, load_tax_rules
    from vntax.sdk.schemas import PersonalIncomeTaxInput

    rules = load_tax_rules(2025)
    result = calculate_personal_income_tax(
        PersonalIncomeTaxInput(monthly_income=15_000_000), rules
    )
"""

from .schemas import TaxBracket, TaxRules, Carrier, CarrierTable

from .rules import (
    load_tax_rules,
    load_carrier_table,
    get_available_years,
    clear_rules_cache,
    TaxRulesError,
    TaxRulesNotFoundError,
    CarrierTableError,
)

from .personal import calculate_personal_income_tax, calculate_bracket_tax
from .corporate import calculate_corporate_tax
from .vat import calculate_vat, check_vat_rate

__all__ = [
    # Rules
    "TaxBracket",
    "TaxRules",
    "Carrier",
    "CarrierTable",
    "load_tax_rules",
    "load_carrier_table",
    "get_available_years",
    "clear_rules_cache",
    "TaxRulesError",
    "TaxRulesNotFoundError",
    "CarrierTableError",
    # Calculators
    "calculate_personal_income_tax",
    "calculate_bracket_tax",
    "calculate_corporate_tax",
    "calculate_vat",
    "check_vat_rate",
]
