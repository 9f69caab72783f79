"""Analysis helpers: per-attribute breakdown of a match."""

from supertrunfo.analysis.breakdown import BREAKDOWN_COLUMNS, breakdown_frame

__all__ = ["BREAKDOWN_COLUMNS", "breakdown_frame"]
