from academy.application.ports.unit_of_work import UnitOfWork
from academy.application.ports.repositories import (
    AssignmentRepository,
    CourseRepository,
    EnrollmentRepository,
    UserRepository,
)

__all__ = [
    "UnitOfWork",
    "AssignmentRepository",
    "CourseRepository",
    "EnrollmentRepository",
    "UserRepository",
]
