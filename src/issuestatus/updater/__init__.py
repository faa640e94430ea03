"""Status updater - the issue status workflow."""

from issuestatus.updater.models import UpdateOutcome, UpdateStatus
from issuestatus.updater.updater import StatusUpdater

__all__ = [
    "StatusUpdater",
    "UpdateOutcome",
    "UpdateStatus",
]
