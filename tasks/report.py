from typing import Optional

from models.enums import DateSlot
from models.extraction_results import DateFindings, DateDifference, DateReport
from utils.dates import parse_date, diff_days

# Display order for the date listing and the pairwise differences
DATE_ORDER = (DateSlot.PUBLICATION, DateSlot.GRANT, DateSlot.FILING)
DIFFERENCE_PAIRS = (
    (DateSlot.PUBLICATION, DateSlot.GRANT),
    (DateSlot.PUBLICATION, DateSlot.FILING),
    (DateSlot.GRANT, DateSlot.FILING),
)


def build_report(findings: DateFindings, search_term: Optional[str] = None) -> DateReport:
    """
    Parse found dates and compute each pairwise difference independently.

    A pair with a missing or unparseable member gets days=None.
    """
    dates = {slot: parse_date(findings.get(slot)) for slot in DATE_ORDER}
    differences = [
        DateDifference(first=a, second=b, days=diff_days(dates[a], dates[b]))
        for a, b in DIFFERENCE_PAIRS
    ]
    return DateReport(findings=findings, dates=dates, differences=differences, search_term=search_term)
