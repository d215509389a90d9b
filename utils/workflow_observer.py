from typing import Optional
from models.enums import DateSlot, RunStage
from models.extraction_results import DateReport
from models.errors import DateCheckError
from utils.dates import format_date

_RULE = '─' * 37


class WorkflowObserver:
    """Base observer for date check events"""

    def on_start(self, url: str, search_term: Optional[str]):
        pass

    def on_stage(self, stage: RunStage):
        pass

    def on_date_found(self, slot: DateSlot, value: str):
        pass

    def on_complete(self, report: DateReport):
        pass

    def on_abort(self, error: DateCheckError):
        pass


class ConsoleObserver(WorkflowObserver):
    """Console output observer for the patent date check"""

    def on_start(self, url: str, search_term: Optional[str]):
        print(f"\n{'='*60}")
        print(f"Patent date check: {url}")
        print(f"Search term: {search_term or '(from placeholder)'}")
        print(f"{'='*60}")

    def on_date_found(self, slot: DateSlot, value: str):
        print(f"  Found {slot.label.lower()}: {value}")

    def on_complete(self, report: DateReport):
        print("\nExtracted Dates:")
        print(_RULE)
        for slot, value in report.dates.items():
            print(f"{slot.label}: {format_date(value)}")

        print("\nDate Differences:")
        print(_RULE)
        for diff in report.differences:
            a, b = diff.first.label, diff.second.label
            if diff.computable:
                print(f"Difference between {a} and {b} are {diff.days} days.")
            else:
                print(f"Cannot calculate difference between {a} and {b} (one or both dates missing).")

    def on_abort(self, error: DateCheckError):
        stage = error.stage.value if error.stage else 'unknown'
        print(f"\n[ABORTED] {type(error).__name__} after stage '{stage}': {error}")


class SilentObserver(WorkflowObserver):
    """No-op observer for silent execution"""
    pass
