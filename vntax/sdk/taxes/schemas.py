"""Pydantic schemas for rule table validation.

These schemas validate the rules/tax/*.yaml and rules/carriers.yaml files
and provide typed, immutable access to deductions, brackets, rates and
carrier prefixes.
"""

import re
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


PREFIX_PATTERN = re.compile(r"^0\d{2}$")


class TaxBracket(BaseModel):
    """Single progressive tax bracket."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: float = Field(..., ge=0, description="Lower bound of the bracket")
    upper_bound: Optional[float] = Field(default=None, description="Upper bound (None if unbounded)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")

    @property
    def width(self) -> float:
        """Width of the bracket (infinite for the top bracket)."""
        if self.upper_bound is None:
            return float("inf")
        return self.upper_bound - self.lower_bound


class TaxRules(BaseModel):
    """Complete tax rules for a year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: int
    personal_deduction: float = Field(..., ge=0)
    dependent_deduction: float = Field(..., ge=0)
    brackets: Tuple[TaxBracket, ...] = Field(..., min_length=1)
    corporate_rate: float = Field(..., ge=0, le=1)
    vat_rates: Tuple[float, ...] = Field(..., min_length=1, description="Legal VAT rates in percent")

    @model_validator(mode="after")
    def check_brackets(self) -> "TaxRules":
        """Brackets must start at zero, be contiguous, and have rising rates."""
        brackets = self.brackets
        if brackets[0].lower_bound != 0:
            raise ValueError("first bracket must start at 0")

        for i, (current, nxt) in enumerate(zip(brackets, brackets[1:]), start=1):
            if current.upper_bound is None:
                raise ValueError(f"bracket {i} is unbounded but is not the last bracket")
            if current.upper_bound <= current.lower_bound:
                raise ValueError(f"bracket {i} has no width")
            if current.upper_bound != nxt.lower_bound:
                raise ValueError(
                    f"bracket {i} ends at {current.upper_bound} "
                    f"but bracket {i + 1} starts at {nxt.lower_bound}"
                )
            if nxt.rate <= current.rate:
                raise ValueError(f"bracket {i + 1} rate must be higher than bracket {i}")

        if brackets[-1].upper_bound is not None:
            raise ValueError("last bracket must be unbounded (upper_bound: null)")

        for rate in self.vat_rates:
            if not 0 <= rate <= 100:
                raise ValueError(f"VAT rate {rate} outside 0-100 percent")

        return self


class Carrier(BaseModel):
    """A mobile network and the prefixes it was allocated."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Display name")
    prefixes: Tuple[str, ...] = Field(..., min_length=1)


class CarrierTable(BaseModel):
    """Versioned carrier prefix table."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    version: str
    carriers: Dict[str, Carrier]

    @model_validator(mode="after")
    def check_prefixes(self) -> "CarrierTable":
        """Prefixes must be 3 digits starting with 0 and unique across carriers."""
        owners: Dict[str, str] = {}
        for code, carrier in self.carriers.items():
            for prefix in carrier.prefixes:
                if not PREFIX_PATTERN.match(prefix):
                    raise ValueError(f"{code}: invalid prefix {prefix!r}")
                if prefix in owners:
                    raise ValueError(f"prefix {prefix} assigned to both {owners[prefix]} and {code}")
                owners[prefix] = code
        return self

    def lookup(self, prefix: str) -> Optional[Carrier]:
        """Find the carrier owning a 3-digit prefix."""
        for carrier in self.carriers.values():
            if prefix in carrier.prefixes:
                return carrier
        return None
