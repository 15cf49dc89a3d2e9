"""Configuration management."""

# ============================================================
# Imports
# ============================================================

import sys
from pathlib import Path


# ============================================================
# Configuration
# ============================================================

class Config:
    """Base directory and runtime flags for a single run."""

    def __init__(self, base_dir: Path | str | None = None, show_all: bool = False,
                 branch_search: str = ""):
        # Default to the folder the tool itself lives in
        if base_dir is None:
            base_dir = tool_directory()
        self.base_dir = Path(base_dir).expanduser().resolve()

        # Runtime flags
        self.show_all = show_all
        self.branch_search = (branch_search or "").strip()

    @property
    def has_filter(self) -> bool:
        return bool(self.branch_search)

    @property
    def filter_suffix(self) -> str:
        """Suffix appended to "No branches found" messages when filtering."""
        if not self.has_filter:
            return ""
        return f" matching '{self.branch_search}'"

    def __repr__(self) -> str:
        return (f"Config(base_dir={str(self.base_dir)!r}, show_all={self.show_all}, "
                f"branch_search={self.branch_search!r})")


def tool_directory() -> Path:
    """Return the directory containing the script that was launched."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else __file__
    return Path(script).resolve().parent
