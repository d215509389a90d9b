"""
Keyword-proximity date mining over section text units.

A unit (one table row or leaf division) fills a slot when it mentions one of
the slot's keywords and carries a date-shaped token near that mention.
"""

import re
from itertools import chain
from typing import Dict, Iterable, Optional, Tuple

from models.enums import DateSlot
from models.extraction_results import DateFindings
from utils.dates import parse_date

DATE_TOKEN = re.compile(r'(?<!\d)\d{4}[-/]\d{2}[-/]\d{2}(?!\d)')

SLOT_KEYWORDS: Dict[DateSlot, Tuple[str, ...]] = {
    DateSlot.FILING: ('filing date', 'filed', 'application date'),
    DateSlot.PUBLICATION: ('publication date', 'published', 'pub. date'),
    DateSlot.GRANT: ('grant date', 'granted', 'patent grant'),
}

_normalize = lambda token: token.replace('/', '-')


def _keyword_position(text: str, keywords: Iterable[str]) -> Optional[int]:
    """Index of the earliest keyword hit (case-insensitive), or None"""
    lowered = text.lower()
    hits = [pos for pos in (lowered.find(k.lower()) for k in keywords) if pos >= 0]
    return min(hits) if hits else None


def find_labeled_date(text: str, keywords: Iterable[str]) -> Optional[str]:
    """
    Find the date belonging to a labeled line.

    Tokens after the label are preferred (closest first), then tokens before
    it (closest first). Tokens that are not real calendar dates are skipped.

    Returns:
        Normalized YYYY-MM-DD string, or None if no label or no valid date.
    """
    if not text:
        return None
    position = _keyword_position(text, keywords)
    if position is None:
        return None

    tokens = list(DATE_TOKEN.finditer(text))
    after = [m for m in tokens if m.start() >= position]
    before = [m for m in reversed(tokens) if m.start() < position]

    for match in chain(after, before):
        token = _normalize(match.group(0))
        if parse_date(token):
            return token
        print(f"[MINER] Skipping malformed date token: {match.group(0)}")
    return None


def mine_units(units: Iterable[str], findings: Optional[DateFindings] = None) -> DateFindings:
    """
    Scan text units in order and fill empty slots.

    Filled slots are never changed; later units only contribute to slots
    still missing.
    """
    findings = findings if findings is not None else DateFindings()
    for unit in units:
        if findings.is_complete:
            break
        for slot in findings.missing_slots:
            findings = findings.with_finding(slot, find_labeled_date(unit, SLOT_KEYWORDS[slot]))
    return findings
