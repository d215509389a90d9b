from typing import Callable, Optional
from playwright.sync_api import Error as PlaywrightError

from config import SECTION_SELECTORS
from models.enums import DateSlot
from models.extraction_results import DateFindings
from utils.html_parser import section_units
from .miner import mine_units


def _read_section(sections, idx: int) -> Optional[str]:
    try:
        return sections.nth(idx).inner_html()
    except PlaywrightError as e:
        print(f"[SECTIONS] Could not read section instance {idx + 1}: {e}")
        return None


def scan_sections(page, selectors=SECTION_SELECTORS, findings: Optional[DateFindings] = None,
                  on_found: Optional[Callable[[DateSlot, str], None]] = None) -> DateFindings:
    """
    Mine dates from candidate sections until every slot is filled.

    Selectors are tried in order (specific tables first, generic containers
    last); every matching element of a selector is mined before moving on.

    Args:
        page: Playwright page showing a patent record
        selectors: Section selectors, most specific first
        findings: Dates already known; these are never replaced
        on_found: Called with (slot, date) for each newly filled slot
    """
    findings = findings if findings is not None else DateFindings()

    for idx, selector in enumerate(selectors, 1):
        if findings.is_complete:
            break
        print(f"[SECTIONS] Searching section {idx}: {selector}")

        try:
            sections = page.locator(selector)
            count = sections.count()
        except PlaywrightError as e:
            print(f"[SECTIONS] Selector failed: {selector} ({e})")
            continue

        for instance in range(count):
            if findings.is_complete:
                break
            html = _read_section(sections, instance)
            if html is None:
                continue

            before = findings
            findings = mine_units(section_units(html), findings)
            for slot in before.missing_slots:
                if findings.get(slot) and on_found:
                    on_found(slot, findings.get(slot))

    return findings
