from .resolver import resolve_first
from .miner import find_labeled_date, mine_units
from .navigation import derive_search_term, open_site, submit_search, dismiss_consent, open_first_result
from .sections import scan_sections
from .report import build_report

__all__ = [
    'resolve_first',
    'find_labeled_date',
    'mine_units',
    'derive_search_term',
    'open_site',
    'submit_search',
    'dismiss_consent',
    'open_first_result',
    'scan_sections',
    'build_report'
]
