"""projtrack: hierarchical task tracking for a single project."""

from projtrack.config import VERSION

__version__ = VERSION
