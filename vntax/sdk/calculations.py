"""Calculation dispatch by type name.

Takes the JSON-shaped request data an API receives ({"type": ..., "data":
{...}}), runs the matching calculator and returns a CalculationOutcome.
Bad input never raises: unknown types, malformed data and illegal VAT
rates come back as ok=False with an error message.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .schemas import (
    CalculationOutcome,
    CalculationRecord,
    CorporateTaxInput,
    PersonalIncomeTaxInput,
    VATInput,
)
from .taxes import (
    TaxRules,
    calculate_corporate_tax,
    calculate_personal_income_tax,
    calculate_vat,
    check_vat_rate,
    load_tax_rules,
)

logger = logging.getLogger(__name__)

CALCULATION_TYPES = ("personal", "corporate", "vat")


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "data"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def calculate(
    calculation_type: str,
    data: Any,
    rules: Optional[TaxRules] = None,
) -> CalculationOutcome:
    """Run the calculator named by calculation_type on request data.

    Args:
        calculation_type: "personal", "corporate" or "vat"
        data: Input fields using the camelCase wire names
        rules: Tax rules to apply (default: latest year's rules)

    Returns:
        CalculationOutcome with result as a camelCase dict on success
    """
    if calculation_type not in CALCULATION_TYPES:
        logger.debug(f"Rejected calculation type {calculation_type!r}")
        return CalculationOutcome(
            ok=False,
            calculation_type=str(calculation_type),
            error=f"Invalid calculation type: {calculation_type}",
        )

    if rules is None:
        rules = load_tax_rules()

    try:
        if calculation_type == "personal":
            result = calculate_personal_income_tax(PersonalIncomeTaxInput.model_validate(data), rules)
        elif calculation_type == "corporate":
            result = calculate_corporate_tax(CorporateTaxInput.model_validate(data), rules)
        else:
            vat_input = VATInput.model_validate(data)
            error = check_vat_rate(vat_input.vat_rate, rules)
            if error:
                return CalculationOutcome(ok=False, calculation_type=calculation_type, error=error)
            result = calculate_vat(vat_input)
    except ValidationError as e:
        logger.debug(f"{calculation_type} input rejected: {e}")
        return CalculationOutcome(
            ok=False,
            calculation_type=calculation_type,
            error=_format_validation_error(e),
        )

    return CalculationOutcome(
        ok=True,
        calculation_type=calculation_type,
        result=result.model_dump(by_alias=True),
    )


def to_record(outcome: CalculationOutcome, data: dict) -> CalculationRecord:
    """Build the {calculationType, inputData, result} record for storage.

    Raises:
        ValueError: The outcome is a failure (there is nothing to store)
    """
    if not outcome.ok:
        raise ValueError(f"Cannot record failed calculation: {outcome.error}")
    return CalculationRecord(
        calculation_type=outcome.calculation_type,
        input_data=data,
        result=outcome.result,
    )
