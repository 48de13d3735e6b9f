"""
Rubrics module.

Point-based criteria used as guidance for manual and AI-assisted grading.
"""

from .models import Rubric, RubricCriteria

__all__ = ["Rubric", "RubricCriteria"]
