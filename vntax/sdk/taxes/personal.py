"""Progressive personal income tax on monthly salary income.

taxable = max(0, income - personal deduction - dependents * dependent
deduction - insurance), then each bracket taxes the slice of taxable
income that falls inside it at its marginal rate.
"""

from functools import reduce
from typing import NamedTuple, Optional, Tuple

from ..schemas import BracketLine, PersonalIncomeTaxInput, PersonalIncomeTaxResult
from .rules import load_tax_rules
from .schemas import TaxBracket, TaxRules


class _Fold(NamedTuple):
    remaining: float
    tax: float
    lines: Tuple[BracketLine, ...]


def _apply_bracket(state: _Fold, item: Tuple[int, TaxBracket]) -> _Fold:
    level, bracket = item
    taxed = min(state.remaining, bracket.width)
    if taxed <= 0:
        return state
    amount = taxed * bracket.rate
    lines = state.lines
    # Income in a 0% bracket is consumed but produces no breakdown line
    if amount > 0:
        upper = bracket.upper_bound if bracket.upper_bound is not None else bracket.lower_bound + taxed
        lines = lines + (
            BracketLine(level=level, from_=bracket.lower_bound, to=upper, rate=bracket.rate, amount=amount),
        )

    return _Fold(
        remaining=state.remaining - taxed,
        tax=state.tax + amount,
        lines=lines,
    )


def calculate_bracket_tax(taxable_income: float, brackets: Tuple[TaxBracket, ...]) -> Tuple[float, list]:
    """Tax a taxable amount against ordered brackets.

    A boundary amount belongs to the bracket it closes: 5,000,000 taxable
    is taxed entirely in the 0-5,000,000 bracket.

    Returns:
        (total tax, breakdown lines for brackets that contributed tax)
    """
    start = _Fold(remaining=max(0.0, taxable_income), tax=0.0, lines=())
    final = reduce(_apply_bracket, enumerate(brackets, start=1), start)
    return final.tax, list(final.lines)


def calculate_personal_income_tax(
    data: PersonalIncomeTaxInput,
    rules: Optional[TaxRules] = None,
) -> PersonalIncomeTaxResult:
    """Calculate monthly personal income tax.

    Args:
        data: Income, dependents and insurance contributions
        rules: Tax rules to apply (default: latest year's rules)

    Returns:
        Result with deductions, taxable income, per-bracket breakdown,
        total tax, effective rate and net income
    """
    if rules is None:
        rules = load_tax_rules()

    dependent_deduction = data.dependents * rules.dependent_deduction
    total_deductions = rules.personal_deduction + dependent_deduction + data.insurance
    taxable_income = max(0.0, data.monthly_income - total_deductions)

    tax_amount, breakdown = calculate_bracket_tax(taxable_income, rules.brackets)
    effective_rate = tax_amount / taxable_income if taxable_income > 0 else 0.0

    return PersonalIncomeTaxResult(
        monthly_income=data.monthly_income,
        dependents=data.dependents,
        insurance=data.insurance,
        personal_deduction=rules.personal_deduction,
        dependent_deduction=dependent_deduction,
        total_deductions=total_deductions,
        taxable_income=taxable_income,
        tax_amount=tax_amount,
        effective_rate=effective_rate,
        tax_rate=effective_rate,
        net_income=data.monthly_income - tax_amount,
        breakdown=breakdown,
    )
