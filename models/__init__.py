from .enums import DateSlot, ResolveStatus, RunStage
from .extraction_results import DateFindings, DateDifference, DateReport
from .errors import DateCheckError, NoSearchTerm, NoResultFound, ProviderFailure

__all__ = [
    'DateSlot', 'ResolveStatus', 'RunStage',
    'DateFindings', 'DateDifference', 'DateReport',
    'DateCheckError', 'NoSearchTerm', 'NoResultFound', 'ProviderFailure'
]
