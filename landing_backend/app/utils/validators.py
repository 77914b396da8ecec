"""
Small field validators shared by services.
"""
import re
from urllib.parse import urlparse

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


def is_valid_email(value: str | None) -> bool:
    return bool(value) and bool(EMAIL_PATTERN.match(value))


def is_hex_color(value: str | None) -> bool:
    return bool(value) and bool(HEX_COLOR_PATTERN.match(value))


def is_http_url(value: str | None) -> bool:
    if not value:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()
