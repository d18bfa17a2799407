"""
Core utility functions for the feature request board backend.
"""

from .date_utils import utcnow

__all__ = ["utcnow"]
