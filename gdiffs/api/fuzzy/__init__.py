"""Fuzzy matching used by file filtering and content search."""

from .fuzzy_match import fuzzy_match
from .FuzzyMatch import FuzzyMatch

__all__ = ["FuzzyMatch", "fuzzy_match"]
