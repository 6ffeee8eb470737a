"""Persistence errors raised by the repositories."""

from typing import Optional


class PersistenceError(Exception):
    """A write or read against storage failed."""


class FieldValidationError(PersistenceError):
    """A record broke a storage constraint on one of its fields."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class StudentValidationError(FieldValidationError):
    pass


class CourseValidationError(FieldValidationError):
    pass


class DuplicateEmailError(PersistenceError):
    def __init__(self, email: str):
        super().__init__(f"A student with email {email!r} already exists")
        self.email = email


class DuplicateCourseError(PersistenceError):
    def __init__(self, course_name: str):
        super().__init__(f"A course named {course_name!r} already exists")
        self.course_name = course_name


class StudentNotFoundError(PersistenceError):
    def __init__(self, student_id: Optional[int]):
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


class CourseNotFoundError(PersistenceError):
    def __init__(self, course_id: Optional[int]):
        super().__init__(f"Course {course_id} not found")
        self.course_id = course_id
