"""Rule table loading.

Tax rules live in <rules_dir>/tax/<year>.yaml, carrier prefixes in
<rules_dir>/carriers.yaml. See config.get_rules_dir() for how the rules
directory is resolved.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..config import get_rules_dir, get_setting
from .schemas import CarrierTable, TaxRules

logger = logging.getLogger(__name__)

CARRIERS_FILENAME = "carriers.yaml"


class TaxRulesError(ValueError):
    """Raised when a rule file exists but is not valid."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        super().__init__(f"Invalid rule file {path}: {detail}")


class TaxRulesNotFoundError(FileNotFoundError):
    """Raised when no rule file exists for the requested year."""
    pass


class CarrierTableError(TaxRulesError):
    """Raised when the carrier prefix table is not valid."""
    pass


def _get_tax_rules_dir() -> Path:
    return get_rules_dir() / "tax"


def get_available_years() -> list[int]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = _get_tax_rules_dir()
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def _read_yaml(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


# Cached per (path, mtime) so a file edited in place is reloaded on next use.
@lru_cache(maxsize=None)
def _load_tax_rules_file(path: Path, mtime_ns: int) -> TaxRules:
    logger.debug(f"Loading tax rules from {path}")
    try:
        rules = TaxRules.model_validate(_read_yaml(path))
    except (ValidationError, yaml.YAMLError) as e:
        raise TaxRulesError(path, str(e)) from e

    if path.stem.isdigit() and rules.year != int(path.stem):
        raise TaxRulesError(path, f"year {rules.year} does not match file name")
    return rules


@lru_cache(maxsize=None)
def _load_carrier_file(path: Path, mtime_ns: int) -> CarrierTable:
    logger.debug(f"Loading carrier table from {path}")
    try:
        return CarrierTable.model_validate(_read_yaml(path))
    except (ValidationError, yaml.YAMLError) as e:
        raise CarrierTableError(path, str(e)) from e


def load_tax_rules(year: Optional[Union[int, str]] = None) -> TaxRules:
    """Load tax rules for a year.

    Args:
        year: Tax year (e.g. 2025). When None, uses the "default_year"
            setting, then the latest year available.

    Raises:
        TaxRulesNotFoundError: No rule file for the year
        TaxRulesError: The rule file failed validation
    """
    if year is None:
        year = get_setting("default_year")
    if year is None:
        available = get_available_years()
        if not available:
            raise TaxRulesNotFoundError(f"No tax rule files found in {_get_tax_rules_dir()}")
        year = available[0]

    config_file = _get_tax_rules_dir() / f"{year}.yaml"
    if not config_file.exists():
        raise TaxRulesNotFoundError(f"Tax rules file not found for year {year}: {config_file}")

    path = config_file.resolve()
    return _load_tax_rules_file(path, path.stat().st_mtime_ns)


def load_carrier_table() -> CarrierTable:
    """Load the carrier prefix table.

    Raises:
        FileNotFoundError: carriers.yaml missing from the rules directory
        CarrierTableError: The table failed validation
    """
    path = get_rules_dir() / CARRIERS_FILENAME
    if not path.exists():
        raise FileNotFoundError(f"Carrier table not found: {path}")
    path = path.resolve()
    return _load_carrier_file(path, path.stat().st_mtime_ns)


def clear_rules_cache() -> None:
    """Forget all cached rule files.

    Files edited in place are picked up without this (the cache is keyed
    on modification time); it only frees memory held by old versions.
    """
    _load_tax_rules_file.cache_clear()
    _load_carrier_file.cache_clear()
