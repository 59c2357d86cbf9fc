# apps/domains/exams/models/__init__.py
from .catalog import SchoolClass, Subject, Unit
from .question import Question, Comment
from .exam import Exam

__all__ = [
    "SchoolClass",
    "Subject",
    "Unit",
    "Question",
    "Comment",
    "Exam",
]
