from typing import Optional

from models.enums import RunStage
from models.extraction_results import DateFindings


class DateCheckError(Exception):
    """Run-terminal failure. Carries the stage reached and dates gathered so far."""

    def __init__(self, message: str, stage: Optional[RunStage] = None,
                 findings: Optional[DateFindings] = None):
        super().__init__(message)
        self.stage = stage
        self.findings = findings or DateFindings()


class NoSearchTerm(DateCheckError):
    """No search term supplied and none could be derived from the page"""


class NoResultFound(DateCheckError):
    """No search result could be located or opened"""


class ProviderFailure(DateCheckError):
    """The browser failed to launch or navigate"""
