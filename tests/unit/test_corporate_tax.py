"""Unit tests for flat-rate corporate income tax."""

import pytest

from vntax.sdk import CorporateTaxInput, calculate_corporate_tax, load_tax_rules


@pytest.fixture
def rules():
    return load_tax_rules(2025)


class TestCorporateTax:

    def test_profit_taxed_at_flat_rate(self, rules):
        result = calculate_corporate_tax(
            CorporateTaxInput(revenue=1_000_000_000, expenses=600_000_000), rules
        )

        assert result.total_expenses == 600_000_000
        assert result.taxable_income == 400_000_000
        assert result.tax_rate == 0.20
        assert result.tax_amount == pytest.approx(80_000_000)
        assert result.net_income == pytest.approx(320_000_000)

    def test_optional_deductions_added_to_expenses(self, rules):
        result = calculate_corporate_tax(
            CorporateTaxInput(
                revenue=1_000_000_000,
                expenses=500_000_000,
                depreciation=100_000_000,
                other_deductions=50_000_000,
            ),
            rules,
        )

        assert result.total_expenses == 650_000_000
        assert result.taxable_income == 350_000_000

    def test_unset_optional_deductions_count_as_zero(self, rules):
        result = calculate_corporate_tax(CorporateTaxInput(revenue=100, expenses=40), rules)
        assert result.total_expenses == 40

    def test_loss_gives_zero_tax(self, rules):
        result = calculate_corporate_tax(
            CorporateTaxInput(revenue=100_000_000, expenses=150_000_000), rules
        )

        assert result.taxable_income == 0
        assert result.tax_amount == 0
        assert result.net_income == 0

    def test_wire_names(self, rules):
        data = CorporateTaxInput.model_validate({
            "revenue": 500, "expenses": 100, "depreciation": 50, "otherDeductions": 50,
        })
        dumped = calculate_corporate_tax(data, rules).model_dump(by_alias=True)

        assert dumped["totalExpenses"] == 200
        assert dumped["taxableIncome"] == 300
        assert set(dumped) == {"revenue", "totalExpenses", "taxableIncome", "taxRate", "taxAmount", "netIncome"}
