from enum import Enum

class DateSlot(str, Enum):
    """Semantic date slots on a patent record"""
    FILING = "filing"
    PUBLICATION = "publication"
    GRANT = "grant"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} date"

class ResolveStatus(str, Enum):
    """Outcome of probing one selector"""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"

class RunStage(str, Enum):
    """Orchestration stages, in order"""
    INIT = "init"
    SEARCH_SUBMITTED = "search_submitted"
    CONSENT_HANDLED = "consent_handled"
    RESULT_SELECTED = "result_selected"
    SECTIONS_SCANNED = "sections_scanned"
    REPORTED = "reported"
