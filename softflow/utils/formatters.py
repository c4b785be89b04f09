"""Display helpers: dates, money, phone numbers, sizes and relative times.

All functions are pure; none of them raise on unexpected-but-plausible input,
they fall back to returning something printable instead.
"""
import logging
import re
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, str]

# ISO code -> (symbol, minor units)
CURRENCIES = {
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "INR": ("₹", 2),
    "JPY": ("¥", 0),
    "CNY": ("CN¥", 2),
    "CAD": ("CA$", 2),
    "AUD": ("A$", 2),
    "NZD": ("NZ$", 2),
    "CHF": ("CHF ", 2),
    "SGD": ("SGD ", 2),
    "AED": ("AED ", 2),
    "ZAR": ("ZAR ", 2),
    "BRL": ("R$", 2),
    "MXN": ("MX$", 2),
}

_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _to_decimal(amount: Number) -> Decimal:
    return Decimal(str(amount))


def _parse_datetime(value: Union[str, date, datetime]) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(value: Union[str, date, datetime]) -> str:
    """'2024-03-05' -> 'Mar 5, 2024'. None gives ''; unparseable values are returned as is."""
    if value is None:
        return ""
    try:
        d = value if isinstance(value, (date, datetime)) else _parse_datetime(value)
    except (AttributeError, TypeError, ValueError):
        logger.warning("Error formatting date: %r", value)
        return str(value)
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


def format_number(num: Number, decimals: Optional[int] = None) -> str:
    value = _to_decimal(num)
    if decimals is None:
        if value == value.to_integral_value():
            return f"{int(value):,}"
        # up to 3 fraction digits, trailing zeros dropped
        text = f"{value.quantize(Decimal('0.001'), rounding=ROUND_HALF_UP):,}"
        return text.rstrip("0").rstrip(".")
    quant = Decimal(1).scaleb(-decimals)
    return f"{value.quantize(quant, rounding=ROUND_HALF_UP):,.{decimals}f}"


def format_currency(amount: Number, currency_code: str = "USD") -> str:
    """1234.5, 'USD' -> '$1,234.50'; unknown codes -> 'XXX 1234.50'."""
    code = (currency_code or "").upper()
    try:
        value = _to_decimal(amount)
    except InvalidOperation:
        logger.warning("Error formatting currency amount: %r", amount)
        return f"{currency_code} {amount}"
    if code not in CURRENCIES:
        return f"{currency_code} {value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}"
    symbol, digits = CURRENCIES[code]
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{format_number(abs(value), digits)}"


def format_phone_number(phone_number: str) -> str:
    cleaned = re.sub(r"\D", "", phone_number or "")
    if len(cleaned) == 10:
        return f"({cleaned[:3]}) {cleaned[3:6]}-{cleaned[6:]}"
    if len(cleaned) == 11 and cleaned.startswith("1"):
        return f"+1 ({cleaned[1:4]}) {cleaned[4:7]}-{cleaned[7:]}"
    return phone_number


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    sizes = ["Bytes", "KB", "MB", "GB", "TB"]
    i = 0
    while num_bytes >= 1024 ** (i + 1) and i < len(sizes) - 1:
        i += 1
    value = round(num_bytes / 1024 ** i, 2)
    # 1.50 -> 1.5, 2.00 -> 2
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {sizes[i]}"


def format_percentage(value: float) -> str:
    return f"{_to_decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_relative_time(value: Union[str, datetime], now: Optional[datetime] = None) -> str:
    then = _parse_datetime(value)
    now = _parse_datetime(now) if now is not None else datetime.now(timezone.utc)
    seconds = int((now - then).total_seconds())

    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")
    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")
    days = hours // 24
    if days < 30:
        return _plural(days, "day")
    months = days // 30
    if months < 12:
        return _plural(months, "month")
    return _plural(months // 12, "year")
