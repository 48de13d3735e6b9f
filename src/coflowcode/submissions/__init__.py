"""
Submissions module.

Submission bundles and the in-session state they are exported from.
"""

from .models import AttemptHistory, Collaborator, StudentAnswer, SubmissionBundle
from .session import TakingSession

__all__ = [
    "AttemptHistory",
    "Collaborator",
    "StudentAnswer",
    "SubmissionBundle",
    "TakingSession",
]
