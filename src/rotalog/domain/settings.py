from __future__ import annotations

"""
Rotation Policy Model.

Passive description of how a file-backed logger manages its output file.
Policies are replaced wholesale on reconfiguration; no history is kept.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RotationPolicy:
    """
    Immutable rotation settings for a file-backed logger.

    Attributes:
        clear_on_startup: Truncate the log file when the logger opens it.
        enable_rotation: Check the file size before every record.
        max_file_size: Size threshold in bytes that triggers rotation.
        max_backup_count: Number of numbered backups to preserve.

    Raises:
        ValueError: If a size or count is negative.
    """
    clear_on_startup: bool = False
    enable_rotation: bool = False
    max_file_size: int = 0
    max_backup_count: int = 0

    def __post_init__(self) -> None:
        for name in ("max_file_size", "max_backup_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"'{name}' must be a non-negative integer")
