"""Application watch – which filesystem events count as a rotation."""
from __future__ import annotations

import os

from watchdog.events import FileSystemEvent

# CSI drivers repoint this symlink to a fresh versioned directory on rotation.
DATA_DIR_ENTRY = "..data"


def event_entry_names(event: FileSystemEvent) -> set[str]:
    """Base names touched by *event* (source, and destination for moves)."""
    names = {os.path.basename(os.fsdecode(event.src_path))}
    dest_path = getattr(event, "dest_path", "")
    if dest_path:
        names.add(os.path.basename(os.fsdecode(dest_path)))
    names.discard("")
    return names


def is_rotation_event(event: FileSystemEvent, secret_name: str) -> bool:
    """True when *event* touches the secret file or the ``..data`` entry."""
    if event.event_type in ("opened", "closed_no_write"):
        return False
    return bool(event_entry_names(event) & {secret_name, DATA_DIR_ENTRY})


__all__ = ["DATA_DIR_ENTRY", "event_entry_names", "is_rotation_event"]
