"""Core logic layer.

Functions and classes:
    capture: Record a speaker's state as a Snapshot.
    restore: Reinstate a Snapshot on a speaker.
    build_restore_plan: Ordered restore actions for a Snapshot.
    ConfigManager: QSettings wrapper for configuration.
"""

from sonosctrl.core.config import ConfigManager
from sonosctrl.core.restore import RestorePlan, build_restore_plan
from sonosctrl.core.snapshot import capture, plan_restore, restore

__all__ = [
    "ConfigManager",
    "RestorePlan",
    "build_restore_plan",
    "capture",
    "plan_restore",
    "restore",
]
