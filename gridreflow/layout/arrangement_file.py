"""
Arrangement File Handler

Persists the canonical arrangement as a YAML document. Only the canonical
(widest) breakpoint is ever written; every other breakpoint is derived from
it when needed.

File Format (YAML):
```yaml
version: 1
created: 2026-01-14T10:30:00
modified: 2026-01-14T11:45:00
columns: 12
widgets:
  clock:
    x: 0
    y: 0
    w: 6
    h: 2
    locked: true
  notes:
    x: 6
    y: 0
    w: 6
    h: 2
    locked: false
    min_h: 3
```

``min_w``/``min_h`` are only written when they differ from the defaults.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from .abstraction import DEFAULT_MIN_H, DEFAULT_MIN_W, GridArrangement, WidgetPlacement

logger = logging.getLogger(__name__)

# Arrangement file version for format compatibility
ARRANGEMENT_FILE_VERSION = 1


def _placement_to_dict(item: WidgetPlacement) -> Dict[str, Any]:
    d = {
        "x": item.x,
        "y": item.y,
        "w": item.w,
        "h": item.h,
        "locked": item.locked,
    }
    if item.min_w != DEFAULT_MIN_W:
        d["min_w"] = item.min_w
    if item.min_h != DEFAULT_MIN_H:
        d["min_h"] = item.min_h
    return d


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


@dataclass
class ArrangementFile:
    """
    Represents a stored canonical arrangement.

    Holds the arrangement together with file metadata so that timestamps
    survive a load/save cycle.
    """
    arrangement: GridArrangement
    version: int = ARRANGEMENT_FILE_VERSION
    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    # Path this document was loaded from or last saved to
    source_file: Optional[Path] = None

    def __post_init__(self):
        """Initialize timestamps if not set."""
        now = datetime.now()
        if self.created is None:
            self.created = now
        if self.modified is None:
            self.modified = now

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "version": self.version,
            "created": self.created.isoformat() if self.created else None,
            "modified": self.modified.isoformat() if self.modified else None,
            "columns": self.arrangement.columns,
            "widgets": {
                item.id: _placement_to_dict(item) for item in self.arrangement
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArrangementFile":
        """Create from dictionary."""
        if "columns" not in data:
            raise ValueError("Arrangement file is missing 'columns'")

        arrangement = GridArrangement(columns=int(data["columns"]))
        for widget_id, widget_data in (data.get("widgets") or {}).items():
            if not isinstance(widget_data, dict):
                continue
            arrangement.add(WidgetPlacement.from_dict({"id": widget_id, **widget_data}))

        return cls(
            arrangement=arrangement,
            version=data.get("version", ARRANGEMENT_FILE_VERSION),
            created=_parse_timestamp(data.get("created")),
            modified=_parse_timestamp(data.get("modified")),
        )

    def __repr__(self) -> str:
        locked_count = sum(1 for item in self.arrangement if item.locked)
        return (
            f"ArrangementFile(columns={self.arrangement.columns}, "
            f"widgets={len(self.arrangement)}, "
            f"locked={locked_count})"
        )


def parse_arrangement_file(path: Path) -> Optional[ArrangementFile]:
    """
    Parse a stored arrangement file.

    Args:
        path: Path to the arrangement file

    Returns:
        ArrangementFile instance or None if the file is missing or unreadable
    """
    path = Path(path)

    if not path.exists():
        logger.debug("Arrangement file not found: %s", path)
        return None

    try:
        data = yaml.safe_load(path.read_text())
        if not data:
            return None

        doc = ArrangementFile.from_dict(data)
        doc.source_file = path
        logger.debug("Loaded arrangement file: %s", doc)
        return doc

    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning("Failed to parse arrangement file %s: %s", path, e)
        return None


def write_arrangement_file(doc: ArrangementFile, path: Path) -> bool:
    """
    Write an arrangement file.

    Args:
        doc: Arrangement document to write
        path: Path to write to

    Returns:
        True if successful
    """
    path = Path(path)

    try:
        doc.modified = datetime.now()
        content = yaml.dump(
            doc.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        path.write_text(content)
        doc.source_file = path
        logger.info("Saved arrangement file: %s (%d widgets)", path, len(doc.arrangement))
        return True

    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to write arrangement file %s: %s", path, e)
        return False
