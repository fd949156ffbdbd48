"""Pydantic schemas for calculator inputs and results.

All models are immutable value objects. Python attributes are snake_case;
the JSON shape (model_dump(by_alias=True) / model_validate on a request
body) uses the camelCase field names consumers already rely on.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


CalculationType = Literal["personal", "corporate", "vat"]


class _ValueObject(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Personal income tax
# =============================================================================


class PersonalIncomeTaxInput(_ValueObject):
    """Monthly salary income and family/insurance deductions."""

    monthly_income: float = Field(..., description="Gross monthly income (VND)")
    dependents: int = Field(default=0, ge=0, description="Number of registered dependents")
    insurance: float = Field(default=0, ge=0, description="Compulsory insurance contributions")
    social_insurance: Optional[float] = Field(default=None, ge=0)
    health_insurance: Optional[float] = Field(default=None, ge=0)
    unemployment_insurance: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def sum_insurance_components(cls, data: Any) -> Any:
        """Fill insurance from its components when only components are given."""
        if not isinstance(data, dict):
            return data
        if data.get("insurance"):
            return data
        keys = (
            ("social_insurance", "socialInsurance"),
            ("health_insurance", "healthInsurance"),
            ("unemployment_insurance", "unemploymentInsurance"),
        )
        components = [data.get(snake, data.get(camel)) for snake, camel in keys]
        if any(c is not None for c in components):
            data = dict(data)
            data["insurance"] = sum(c for c in components if c is not None)
        return data


class BracketLine(_ValueObject):
    """Tax contributed by one bracket."""

    level: int = Field(..., ge=1, description="1-based bracket number")
    from_: float = Field(..., alias="from")
    to: float
    rate: float
    amount: float


class PersonalIncomeTaxResult(_ValueObject):
    monthly_income: float
    dependents: int
    insurance: float
    personal_deduction: float
    dependent_deduction: float
    total_deductions: float
    taxable_income: float = Field(..., ge=0)
    tax_amount: float
    effective_rate: float
    tax_rate: float = Field(..., description="Same as effective_rate")
    net_income: float
    breakdown: List[BracketLine]


# =============================================================================
# Corporate income tax
# =============================================================================


class CorporateTaxInput(_ValueObject):
    revenue: float
    expenses: float = 0
    depreciation: Optional[float] = None
    other_deductions: Optional[float] = None


class CorporateTaxResult(_ValueObject):
    revenue: float
    total_expenses: float
    taxable_income: float = Field(..., ge=0)
    tax_rate: float
    tax_amount: float
    net_income: float


# =============================================================================
# VAT
# =============================================================================


class VATInput(_ValueObject):
    sales_amount: float
    purchase_amount: float
    vat_rate: float = Field(..., description="Rate in percent (0, 5 or 10)")


class VATResult(_ValueObject):
    sales_amount: float
    purchase_amount: float
    vat_rate: float
    output_vat: float = Field(..., alias="outputVAT")
    input_vat: float = Field(..., alias="inputVAT")
    vat_payable: float = Field(..., ge=0)


# =============================================================================
# Phone validation
# =============================================================================


class PhoneValidationResult(_ValueObject):
    """Outcome of validating a phone number.

    Either network and formatted_phone are set (valid) or error is set.
    """

    is_valid: bool
    network: Optional[str] = None
    formatted_phone: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "PhoneValidationResult":
        if self.is_valid:
            if self.error is not None or self.network is None or self.formatted_phone is None:
                raise ValueError("valid result needs network and formatted_phone and no error")
        elif self.error is None or self.network is not None or self.formatted_phone is not None:
            raise ValueError("invalid result needs an error and nothing else")
        return self


# =============================================================================
# Calculation dispatch and persistence shape
# =============================================================================


class CalculationOutcome(_ValueObject):
    """Result of dispatching a calculation by type name."""

    ok: bool
    calculation_type: str
    result: Optional[dict] = None
    error: Optional[str] = None


class CalculationRecord(_ValueObject):
    """Opaque {calculationType, inputData, result} shape handed to storage."""

    calculation_type: CalculationType
    input_data: dict
    result: dict
