"""Tests for the vntax CLI commands.

Invokes commands through click's CliRunner against the bundled rules,
with settings isolated to a temp config directory.
"""

import json

import pytest
from click.testing import CliRunner

from vntax.cli.__main__ import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestTaxCommands:

    def test_pit_json(self, runner):
        result = runner.invoke(cli, ["pit", "50000000", "--dependents", "1", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["taxableIncome"] == 34_600_000
        assert data["taxAmount"] == pytest.approx(5_400_000)
        assert [line["level"] for line in data["breakdown"]] == [1, 2, 3, 4, 5]

    def test_pit_text(self, runner):
        result = runner.invoke(cli, ["pit", "15000000"])

        assert result.exit_code == 0, result.output
        assert "Personal income tax" in result.output
        assert "200.000" in result.output

    def test_pit_no_tax(self, runner):
        result = runner.invoke(cli, ["pit", "9000000"])

        assert result.exit_code == 0, result.output
        assert "No tax due" in result.output

    def test_pit_unknown_year(self, runner):
        result = runner.invoke(cli, ["pit", "15000000", "--year", "1990"])

        assert result.exit_code == 1
        assert "1990" in result.output

    def test_cit_json(self, runner):
        result = runner.invoke(cli, [
            "cit", "1000000000", "--expenses", "500000000", "--depreciation", "100000000", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["totalExpenses"] == 600_000_000
        assert data["taxAmount"] == pytest.approx(80_000_000)

    def test_vat_json(self, runner):
        result = runner.invoke(cli, ["vat", "100000000", "60000000", "--rate", "10", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["outputVAT"] == pytest.approx(10_000_000)
        assert data["vatPayable"] == pytest.approx(4_000_000)

    def test_vat_text(self, runner):
        result = runner.invoke(cli, ["vat", "10000000", "50000000"])

        assert result.exit_code == 0, result.output
        assert "VAT payable" in result.output

    def test_vat_rejects_illegal_rate(self, runner):
        result = runner.invoke(cli, ["vat", "100", "50", "--rate", "7"])

        assert result.exit_code == 2
        assert "Invalid VAT rate" in result.output


class TestPhoneCommands:

    def test_valid_phone(self, runner):
        result = runner.invoke(cli, ["phone", "+84 932-123 456"])

        assert result.exit_code == 0
        assert "0932 123 456 (MobiFone)" in result.output

    def test_valid_phone_json(self, runner):
        result = runner.invoke(cli, ["phone", "0987654321", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "isValid": True,
            "network": "Viettel",
            "formattedPhone": "0987 654 321",
        }

    def test_invalid_phone_exits_1(self, runner):
        result = runner.invoke(cli, ["phone", "0123456789"])

        assert result.exit_code == 1
        assert "Đầu số không hợp lệ" in result.output

    def test_prefixes(self, runner):
        result = runner.invoke(cli, ["phone-prefixes"])

        assert result.exit_code == 0
        assert "Viettel" in result.output


class TestCalculateCommand:

    def test_prints_record(self, runner):
        data = {"salesAmount": 100_000_000, "purchaseAmount": 60_000_000, "vatRate": 10}
        result = runner.invoke(cli, ["calculate", "vat", json.dumps(data)])

        assert result.exit_code == 0, result.output
        record = json.loads(result.output)
        assert record["calculationType"] == "vat"
        assert record["inputData"] == data
        assert record["result"]["vatPayable"] == pytest.approx(4_000_000)

    def test_bad_json(self, runner):
        result = runner.invoke(cli, ["calculate", "personal", "{not json"])
        assert result.exit_code == 2

    def test_failed_calculation(self, runner):
        result = runner.invoke(cli, ["calculate", "vat", '{"salesAmount": 1, "purchaseAmount": 1, "vatRate": 3}'])

        assert result.exit_code == 1
        assert "Invalid VAT rate" in result.output


class TestRulesAndSettings:

    def test_rules_show(self, runner):
        result = runner.invoke(cli, ["rules", "show", "--year", "2025"])

        assert result.exit_code == 0, result.output
        assert "Tax year 2025" in result.output
        assert "and above: 35,0%" in result.output
        assert "MobiFone (mobifone)" in result.output

    def test_rules_show_json(self, runner):
        result = runner.invoke(cli, ["rules", "show", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["tax"]["corporate_rate"] == 0.2
        assert "itel" in data["carriers"]["carriers"]

    def test_rules_years(self, runner):
        result = runner.invoke(cli, ["rules", "years"])

        assert result.exit_code == 0
        assert "2025" in result.output

    def test_default_year_roundtrip(self, runner, isolated_config):
        result = runner.invoke(cli, ["settings", "default-year", "2025"])
        assert result.exit_code == 0
        assert json.loads((isolated_config / "settings.json").read_text()) == {"default_year": 2025}

        result = runner.invoke(cli, ["settings", "default-year", "--clear"])
        assert result.exit_code == 0
        assert "Cleared" in result.output

    def test_rules_dir_requires_tax_subdir(self, runner, tmp_path):
        result = runner.invoke(cli, ["settings", "rules-dir", str(tmp_path)])

        assert result.exit_code == 1
        assert "tax/" in result.output

    def test_settings_show(self, runner):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0
        assert "No settings configured" in result.output

    @pytest.mark.parametrize("args", [
        ["phone", "0932123456"],
        ["pit", "15000000"],
        ["settings", "show"],
        ["rules", "years"],
    ])
    def test_corrupt_settings_is_reported(self, runner, isolated_config, args):
        (isolated_config / "settings.json").write_text("{not json")

        result = runner.invoke(cli, args)

        assert result.exit_code == 1
        assert "Invalid settings file" in result.output
        assert not isinstance(result.exception, ValueError)
