from .assignment import Assignment
from .question import Question

__all__ = [
    "Assignment",
    "Question",
]
