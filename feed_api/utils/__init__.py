from .datetime_utils import utc_now, ensure_utc, to_iso
from .task_tracker import TaskTracker

__all__ = ["utc_now", "ensure_utc", "to_iso", "TaskTracker"]
