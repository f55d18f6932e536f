"""
Breakpoint Profiles

Defines the viewport tiers a dashboard is laid out for. Each profile pairs
a grid column count with the viewport width at which it becomes active.
Profile sets are loaded from YAML so that deployments can change the tiers
without touching code.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_breakpoints.yaml"


@dataclass(frozen=True)
class BreakpointProfile:
    """A named viewport tier and its grid column count."""

    name: str
    columns: int
    min_width: int = 0  # px - viewport width at which this tier activates

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "columns": self.columns, "min_width": self.min_width}


@dataclass
class BreakpointSet:
    """
    Ordered set of breakpoint profiles.

    Profiles are kept sorted by column count, widest first, so the first
    profile is always the canonical breakpoint.
    """
    profiles: List[BreakpointProfile] = field(default_factory=list)

    def __post_init__(self):
        if not self.profiles:
            raise ValueError("A breakpoint set needs at least one profile")

        seen = set()
        for profile in self.profiles:
            if profile.name in seen:
                raise ValueError(f"Duplicate breakpoint name '{profile.name}'")
            if profile.columns < 1:
                raise ValueError(
                    f"Breakpoint '{profile.name}' must have at least one column "
                    f"(got {profile.columns})"
                )
            seen.add(profile.name)

        self.profiles = sorted(self.profiles, key=lambda p: (-p.columns, -p.min_width))

    def __iter__(self):
        return iter(self.profiles)

    def __len__(self) -> int:
        return len(self.profiles)

    def __contains__(self, name: str) -> bool:
        return any(p.name == name for p in self.profiles)

    @property
    def canonical(self) -> BreakpointProfile:
        """The breakpoint with the most columns."""
        return self.profiles[0]

    @property
    def narrowest(self) -> BreakpointProfile:
        """The breakpoint with the fewest columns."""
        return self.profiles[-1]

    def get(self, name: str) -> BreakpointProfile:
        """
        Get a profile by name.

        Raises:
            ValueError: If the breakpoint name is not found
        """
        for profile in self.profiles:
            if profile.name == name:
                return profile
        available = ", ".join(self.names())
        raise ValueError(f"Unknown breakpoint '{name}'. Available: {available}")

    def names(self) -> List[str]:
        """Profile names, widest first."""
        return [p.name for p in self.profiles]

    def columns_for(self, name: str) -> int:
        """Column count of the named breakpoint."""
        return self.get(name).columns

    def for_width(self, viewport_width: float) -> BreakpointProfile:
        """
        Resolve the active breakpoint for a viewport width.

        Returns the widest profile whose activation width the viewport meets
        or exceeds, falling back to the narrowest profile.
        """
        by_width = sorted(self.profiles, key=lambda p: p.min_width, reverse=True)
        for profile in by_width:
            if viewport_width >= profile.min_width:
                return profile
        return self.narrowest

    def to_dict(self) -> Dict[str, Any]:
        return {"breakpoints": [p.to_dict() for p in self.profiles]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakpointSet":
        """Create from the ``breakpoints:`` section of a config document."""
        if not isinstance(data, dict) or "breakpoints" not in data:
            raise ValueError("Configuration is missing required section: 'breakpoints'")

        entries = data["breakpoints"]
        if isinstance(entries, dict):
            # Mapping form: {lg: {columns: 12, min_width: 1200}, ...}
            entries = [{"name": name, **(values or {})} for name, values in entries.items()]

        profiles = []
        for entry in entries or []:
            if "name" not in entry or "columns" not in entry:
                raise ValueError(f"Breakpoint entry needs 'name' and 'columns': {entry!r}")
            profiles.append(BreakpointProfile(
                name=str(entry["name"]),
                columns=int(entry["columns"]),
                min_width=int(entry.get("min_width", 0)),
            ))
        return cls(profiles=profiles)


def load_breakpoints(config_path: Optional[Union[str, Path]] = None) -> BreakpointSet:
    """
    Load a breakpoint set from a YAML file.

    Args:
        config_path: Optional path to a custom breakpoints YAML file.
                    If None, uses the bundled default_breakpoints.yaml.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is a symlink or its content is invalid
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    if not path.exists():
        raise FileNotFoundError(f"Breakpoint configuration file not found: {path}")

    # Security: Check for symlinks to prevent reading unintended files
    if path.is_symlink():
        raise ValueError(f"Breakpoint configuration file cannot be a symlink: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    breakpoints = BreakpointSet.from_dict(data)
    logger.debug("Loaded breakpoints from %s: %s", path, ", ".join(breakpoints.names()))
    return breakpoints


# Pre-defined breakpoint sets

DEFAULT_BREAKPOINTS = BreakpointSet(profiles=[
    BreakpointProfile(name="lg", columns=12, min_width=1200),
    BreakpointProfile(name="md", columns=10, min_width=996),
    BreakpointProfile(name="sm", columns=6, min_width=768),
])

COMPACT_BREAKPOINTS = BreakpointSet(profiles=[
    BreakpointProfile(name="lg", columns=12, min_width=1200),
    BreakpointProfile(name="md", columns=10, min_width=996),
    BreakpointProfile(name="sm", columns=6, min_width=768),
    BreakpointProfile(name="xs", columns=4, min_width=480),
    BreakpointProfile(name="xxs", columns=2, min_width=0),
])

# Breakpoint set registry
BREAKPOINT_SETS: Dict[str, BreakpointSet] = {
    "default": DEFAULT_BREAKPOINTS,
    "compact": COMPACT_BREAKPOINTS,
}


def get_breakpoint_set(name: str) -> BreakpointSet:
    """
    Get a pre-defined breakpoint set by name.

    Raises:
        ValueError: If the set name is not found
    """
    if name not in BREAKPOINT_SETS:
        available = ", ".join(sorted(BREAKPOINT_SETS.keys()))
        raise ValueError(f"Unknown breakpoint set '{name}'. Available: {available}")
    return BREAKPOINT_SETS[name]


def list_breakpoint_sets() -> List[str]:
    """List all pre-defined breakpoint set names."""
    return sorted(BREAKPOINT_SETS.keys())


# Default set loaded from the bundled YAML file
_default_breakpoints: Optional[BreakpointSet] = None


def get_breakpoints(config_path: Optional[Union[str, Path]] = None) -> BreakpointSet:
    """
    Get the configured breakpoint set.

    Args:
        config_path: Optional path to a custom breakpoints file.
                    If None, uses the cached default set.
    """
    global _default_breakpoints

    if config_path is not None:
        return load_breakpoints(config_path)

    if _default_breakpoints is None:
        _default_breakpoints = load_breakpoints()

    return _default_breakpoints


def reload_breakpoints() -> BreakpointSet:
    """Reload the default breakpoint set from its configuration file."""
    global _default_breakpoints
    _default_breakpoints = load_breakpoints()
    return _default_breakpoints
