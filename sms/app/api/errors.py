"""Translate repository errors into HTTP responses."""

from fastapi import HTTPException, status

from sms.app.core.errors import (
    CourseNotFoundError,
    DuplicateCourseError,
    DuplicateEmailError,
    FieldValidationError,
    PersistenceError,
    StudentNotFoundError,
)


def to_http_exception(exc: PersistenceError) -> HTTPException:
    if isinstance(exc, StudentNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    if isinstance(exc, CourseNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    if isinstance(exc, (DuplicateEmailError, DuplicateCourseError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, FieldValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Persistence failed")
