from typing import Optional

from config import SITE_URL, LINGER_MS
from models.enums import RunStage
from models.errors import DateCheckError
from models.extraction_results import DateFindings, DateReport
from tasks.navigation import open_site, submit_search, dismiss_consent, open_first_result
from tasks.sections import scan_sections
from tasks.report import build_report
from utils.browser import page_session
from utils.workflow_observer import ConsoleObserver


def run_date_check(search_term: Optional[str] = None, observer=None,
                   session_factory=page_session, site_url: str = SITE_URL) -> DateReport:
    """
    Search the patent site, open the first result and report its dates.

    Stages run strictly in order. Missing search box, consent dialog or date
    sections only degrade the report; a missing search result, an
    underivable search term or a browser failure aborts the run.

    Raises:
        DateCheckError: run-terminal failure, with the stage reached and
        any dates found so far
    """
    observer = observer or ConsoleObserver()
    stage = RunStage.INIT
    findings = DateFindings()

    def advance(next_stage: RunStage):
        nonlocal stage
        stage = next_stage
        observer.on_stage(stage)

    observer.on_start(site_url, search_term)
    try:
        with session_factory() as page:
            open_site(page, site_url)

            term = submit_search(page, search_term)
            advance(RunStage.SEARCH_SUBMITTED)

            dismiss_consent(page)
            advance(RunStage.CONSENT_HANDLED)

            open_first_result(page)
            advance(RunStage.RESULT_SELECTED)

            print("\n[SECTIONS] Extracting patent dates...")
            findings = scan_sections(page, on_found=observer.on_date_found)
            advance(RunStage.SECTIONS_SCANNED)

            report = build_report(findings, search_term=term)
            observer.on_complete(report)
            advance(RunStage.REPORTED)

            if LINGER_MS:
                page.wait_for_timeout(LINGER_MS)
            return report

    except DateCheckError as e:
        e.stage = e.stage or stage
        e.findings = findings
        observer.on_abort(e)
        raise
