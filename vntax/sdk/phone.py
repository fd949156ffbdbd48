"""Vietnamese mobile phone number validation.

Normalizes a raw number to the 10-digit national form (0xxxxxxxxx),
checks its prefix against the carrier table and formats it as
"0xxx xxx xxx".
"""

import re
from typing import Optional

from .schemas import PhoneValidationResult
from .taxes.rules import load_carrier_table
from .taxes.schemas import CarrierTable


EMPTY_ERROR = "Số điện thoại không được để trống"
FORMAT_ERROR = "Số điện thoại phải có 10 chữ số và bắt đầu bằng số 0"
PREFIX_ERROR = "Đầu số không hợp lệ. Vui lòng sử dụng số điện thoại của nhà mạng Việt Nam"

_SEPARATORS = re.compile(r"[\s\-().]")
_NATIONAL = re.compile(r"^0[0-9]{9}$")


def clean_phone(raw: str) -> str:
    """Strip separators and rewrite the +84/84 country code as a leading 0."""
    phone = _SEPARATORS.sub("", raw)
    if phone.startswith("+84"):
        return "0" + phone[3:]
    if phone.startswith("84") and len(phone) == 11:
        return "0" + phone[2:]
    return phone


def normalize_phone(raw: Optional[str]) -> Optional[str]:
    """Return the 10-digit national form, or None if raw isn't one."""
    if not raw:
        return None
    phone = clean_phone(raw)
    return phone if _NATIONAL.match(phone) else None


def format_phone(national: str) -> str:
    """Group a 10-digit number 4-3-3."""
    return f"{national[:4]} {national[4:7]} {national[7:]}"


def validate_phone(raw: Optional[str], table: Optional[CarrierTable] = None) -> PhoneValidationResult:
    """Validate a Vietnamese mobile number and identify its carrier.

    Never raises for string input; failures come back as a result with
    is_valid=False and a Vietnamese error message.

    Examples:
        validate_phone("+84 932-123 456")
        # -> is_valid=True, network="MobiFone", formatted_phone="0932 123 456"
        validate_phone("0123456789")
        # -> is_valid=False, error="Đầu số không hợp lệ. ..."
    """
    if raw is None or not raw.strip():
        return PhoneValidationResult(is_valid=False, error=EMPTY_ERROR)

    national = normalize_phone(raw)
    if national is None:
        return PhoneValidationResult(is_valid=False, error=FORMAT_ERROR)

    if table is None:
        table = load_carrier_table()

    carrier = table.lookup(national[:3])
    if carrier is None:
        names = ", ".join(c.name for c in table.carriers.values())
        return PhoneValidationResult(is_valid=False, error=f"{PREFIX_ERROR} ({names})")

    return PhoneValidationResult(
        is_valid=True,
        network=carrier.name,
        formatted_phone=format_phone(national),
    )


def is_valid_phone(raw: Optional[str], table: Optional[CarrierTable] = None) -> bool:
    """Quick yes/no check for form inputs."""
    return validate_phone(raw, table).is_valid


def get_prefix_info(table: Optional[CarrierTable] = None) -> str:
    """Help text listing the valid prefixes of each carrier."""
    if table is None:
        table = load_carrier_table()

    lines = ["Đầu số di động hợp lệ của Việt Nam:"]
    for carrier in table.carriers.values():
        lines.append(f"• {carrier.name}: {', '.join(sorted(carrier.prefixes))}")
    return "\n".join(lines)
