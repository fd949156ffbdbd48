"""Unit tests for VAT settlement."""

import pytest

from vntax.sdk import VATInput, calculate_vat, check_vat_rate, load_tax_rules


class TestCalculateVat:

    def test_payable_is_output_minus_input(self):
        result = calculate_vat(VATInput(sales_amount=100_000_000, purchase_amount=60_000_000, vat_rate=10))

        assert result.output_vat == pytest.approx(10_000_000)
        assert result.input_vat == pytest.approx(6_000_000)
        assert result.vat_payable == pytest.approx(4_000_000)
        assert result.vat_rate == 10

    def test_excess_input_credit_clamps_to_zero(self):
        result = calculate_vat(VATInput(sales_amount=10_000_000, purchase_amount=50_000_000, vat_rate=10))

        assert result.output_vat == pytest.approx(1_000_000)
        assert result.input_vat == pytest.approx(5_000_000)
        assert result.vat_payable == 0

    def test_zero_rate(self):
        result = calculate_vat(VATInput(sales_amount=10_000_000, purchase_amount=5_000_000, vat_rate=0))
        assert result.vat_payable == 0

    def test_five_percent(self):
        result = calculate_vat(VATInput(sales_amount=20_000_000, purchase_amount=0, vat_rate=5))
        assert result.vat_payable == pytest.approx(1_000_000)

    def test_wire_names(self):
        dumped = calculate_vat(
            VATInput.model_validate({"salesAmount": 100, "purchaseAmount": 50, "vatRate": 10})
        ).model_dump(by_alias=True)

        assert set(dumped) == {"salesAmount", "purchaseAmount", "vatRate", "outputVAT", "inputVAT", "vatPayable"}


class TestCheckVatRate:

    @pytest.mark.parametrize("rate", [0, 5, 10])
    def test_legal_rates(self, rate):
        assert check_vat_rate(rate, load_tax_rules(2025)) is None

    @pytest.mark.parametrize("rate", [8, 12.5, -5, 100])
    def test_illegal_rates(self, rate):
        error = check_vat_rate(rate, load_tax_rules(2025))
        assert error is not None
        assert "0%, 5%, 10%" in error
