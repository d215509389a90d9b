import re
from datetime import date, datetime
from typing import Optional

NOT_AVAILABLE = 'N/A'

_ISO_LIKE = re.compile(r'\d{4}[-/]\d{2}[-/]\d{2}')


def parse_date(text) -> Optional[date]:
    """
    Parse a YYYY-MM-DD or YYYY/MM/DD string.

    Returns None for empty, malformed or out-of-range input. Never raises.
    """
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not _ISO_LIKE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text.replace('/', '-'), '%Y-%m-%d').date()
    except ValueError:
        return None


format_date = lambda value: value.isoformat() if value else NOT_AVAILABLE


def diff_days(a: Optional[date], b: Optional[date]) -> Optional[int]:
    """Absolute whole-day difference, or None if either date is missing"""
    if a is None or b is None:
        return None
    return abs((a - b).days)
