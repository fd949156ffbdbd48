"""vntax SDK - Core tax calculations and phone validation."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_rules_dir,
    SettingsError,
)

from .schemas import (
    PersonalIncomeTaxInput,
    PersonalIncomeTaxResult,
    BracketLine,
    CorporateTaxInput,
    CorporateTaxResult,
    VATInput,
    VATResult,
    PhoneValidationResult,
    CalculationOutcome,
    CalculationRecord,
)

from .taxes import (
    TaxBracket,
    TaxRules,
    CarrierTable,
    load_tax_rules,
    load_carrier_table,
    get_available_years,
    TaxRulesError,
    TaxRulesNotFoundError,
    CarrierTableError,
    calculate_personal_income_tax,
    calculate_corporate_tax,
    calculate_vat,
    check_vat_rate,
)

from .phone import (
    validate_phone,
    is_valid_phone,
    normalize_phone,
    get_prefix_info,
)

from .formatting import (
    format_currency,
    format_number,
    format_percent,
)

from .calculations import calculate, to_record, CALCULATION_TYPES

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_rules_dir",
    "SettingsError",
    # Value objects
    "PersonalIncomeTaxInput",
    "PersonalIncomeTaxResult",
    "BracketLine",
    "CorporateTaxInput",
    "CorporateTaxResult",
    "VATInput",
    "VATResult",
    "PhoneValidationResult",
    "CalculationOutcome",
    "CalculationRecord",
    # Rules
    "TaxBracket",
    "TaxRules",
    "CarrierTable",
    "load_tax_rules",
    "load_carrier_table",
    "get_available_years",
    "TaxRulesError",
    "TaxRulesNotFoundError",
    "CarrierTableError",
    # Calculators
    "calculate_personal_income_tax",
    "calculate_corporate_tax",
    "calculate_vat",
    "check_vat_rate",
    # Phone
    "validate_phone",
    "is_valid_phone",
    "normalize_phone",
    "get_prefix_info",
    # Formatting
    "format_currency",
    "format_number",
    "format_percent",
    # Dispatch
    "calculate",
    "to_record",
    "CALCULATION_TYPES",
]
