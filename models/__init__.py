"""
Data Models

Defines the core data structures:
- Line
- ExistenceResult
- ConstructionResult
"""

from .line import Line
from .results import ExistenceResult, ConstructionResult

__all__ = ["Line", "ExistenceResult", "ConstructionResult"]
