"""Column constraint checks applied before rows reach the database."""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Type

from sms.app.core.errors import FieldValidationError


def require_text(error: Type[FieldValidationError], field: str, value: Optional[str], max_length: int) -> str:
    if value is None or not str(value).strip():
        raise error(field, "is required")
    return optional_text(error, field, value, max_length)


def optional_text(error: Type[FieldValidationError], field: str, value: Optional[str], max_length: int) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise error(field, "must be text")
    if len(value) > max_length:
        raise error(field, f"must be at most {max_length} characters")
    return value


def fixed_point(error: Type[FieldValidationError], field: str, value, precision: int, scale: int) -> Decimal:
    """Coerce ``value`` to a Decimal that fits NUMERIC(precision, scale).

    Extra fractional digits are rounded half-up to ``scale`` places.
    """
    if value is None:
        raise error(field, "is required")
    if isinstance(value, bool):
        raise error(field, "must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise error(field, "must be a number") from exc
    if not amount.is_finite():
        raise error(field, "must be a finite number")
    too_large = f"must have at most {precision - scale} digits before the decimal point"
    # quantize overflows the decimal context on huge magnitudes
    if amount and amount.adjusted() >= precision - scale:
        raise error(field, too_large)

    quantized = amount.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
    if abs(quantized) >= Decimal(10) ** (precision - scale):
        raise error(field, too_large)
    return quantized


def calendar_date(error: Type[FieldValidationError], field: str, value) -> date:
    if value is None:
        raise error(field, "is required")
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise error(field, "must be a date")
    return value
