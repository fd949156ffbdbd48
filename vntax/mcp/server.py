"""vntax MCP Server - FastMCP implementation for tax calculation tools."""

import json
import logging
import os
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from vntax.sdk import (
    SettingsError,
    TaxRulesError,
    calculate,
    get_available_years,
    get_prefix_info,
    load_tax_rules,
    validate_phone,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("vntax")


# --- Tools ---

@mcp.tool()
async def calculate_tax(
    calculation_type: str = Field(description="'personal', 'corporate' or 'vat'"),
    data: dict[str, Any] = Field(description=(
        "Input fields. personal: monthlyIncome, dependents, insurance. "
        "corporate: revenue, expenses, depreciation, otherDeductions. "
        "vat: salesAmount, purchaseAmount, vatRate (0, 5 or 10)."
    )),
    year: int | None = Field(default=None, description="Tax year (default: latest available)"),
) -> dict[str, Any]:
    """Calculate Vietnamese personal income tax, corporate income tax or VAT. Amounts are in VND."""
    try:
        rules = load_tax_rules(year)
    except (FileNotFoundError, TaxRulesError, SettingsError) as e:
        logger.error(f"Error loading tax rules: {e}")
        return {"error": str(e), "result": None}

    outcome = calculate(calculation_type, data, rules)
    if not outcome.ok:
        return {"error": outcome.error, "result": None}

    return {"calculationType": outcome.calculation_type, "year": rules.year, "result": outcome.result}


@mcp.tool()
async def check_phone(
    phone: str = Field(description="Phone number, e.g. '+84 932 123 456' or '0932123456'"),
) -> dict[str, Any]:
    """Validate a Vietnamese mobile phone number and identify its carrier."""
    try:
        result = validate_phone(phone)
    except (FileNotFoundError, TaxRulesError, SettingsError) as e:
        logger.error(f"Error loading carrier table: {e}")
        return {"error": str(e), "isValid": False}

    return result.model_dump(by_alias=True, exclude_none=True)


# --- Resources (optional, for browsing) ---

@mcp.resource("vntax://rules/years")
async def list_years_resource() -> str:
    """List years with tax rules available."""
    return json.dumps({"years": get_available_years()}, indent=2)


@mcp.resource("vntax://phone/prefixes")
async def phone_prefixes_resource() -> str:
    """Valid mobile prefixes per carrier."""
    return get_prefix_info()


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
