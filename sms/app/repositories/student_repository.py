"""Student storage.

The repository is the only place a ``Student`` meets the database. It
assigns identifiers, enforces the column constraints of the ``students``
table and always returns students with their course already loaded.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from sms.app.core.errors import (
    CourseNotFoundError,
    DuplicateEmailError,
    PersistenceError,
    StudentNotFoundError,
    StudentValidationError,
)
from sms.app.entities.course import Course
from sms.app.entities.student import Student
from sms.app.models.course import CourseRow
from sms.app.models.student import StudentRow
from sms.app.repositories.course_repository import to_course
from sms.app.repositories.storage import storage_errors
from sms.app.repositories.validation import calendar_date, fixed_point, optional_text, require_text

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100
MAX_PHONE_LENGTH = 15
BALANCE_PRECISION = 10
BALANCE_SCALE = 2


def to_student(row: StudentRow) -> Student:
    return Student(
        id=row.id,
        name=row.name,
        email=row.email,
        phone=row.phone,
        course=to_course(row.course),
        balance=row.balance,
        enrollment_date=row.enrollment_date,
    )


class StudentRepository(ABC):
    @abstractmethod
    def insert(self, student: Student) -> Student:
        """Store a new student and return it with its generated id."""

    @abstractmethod
    def update(self, student: Student) -> Student:
        """Overwrite the stored student with the same id."""

    @abstractmethod
    def delete(self, student_id: int) -> None:
        ...

    @abstractmethod
    def find_by_id(self, student_id: int) -> Optional[Student]:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Student]:
        ...

    @abstractmethod
    def list_all(self) -> List[Student]:
        ...

    @abstractmethod
    def list_by_course(self, course_id: int) -> List[Student]:
        ...


class SqlAlchemyStudentRepository(StudentRepository):
    def __init__(self, db: Session):
        self.db = db

    def insert(self, student: Student) -> Student:
        if student.id is not None:
            raise StudentValidationError("id", "is assigned by storage and must be empty on insert")
        with storage_errors(self.db, "store student"):
            values = self._validated_values(student)
            self._ensure_email_available(values["email"])

            row = StudentRow(**values)
            self.db.add(row)
            self._commit(values["email"], exclude_id=None)
            self.db.refresh(row)
            stored = to_student(row)
        logger.info("Inserted %s", stored)
        return stored

    def update(self, student: Student) -> Student:
        with storage_errors(self.db, "store student"):
            row = self._get_row(student.id) if student.id is not None else None
            if row is None:
                logger.warning("Rejected update of unknown student %s", student.id)
                raise StudentNotFoundError(student.id)
            values = self._validated_values(student)
            self._ensure_email_available(values["email"], exclude_id=row.id)

            for field, value in values.items():
                setattr(row, field, value)
            self._commit(values["email"], exclude_id=row.id)
            self.db.refresh(row)
            stored = to_student(row)
        logger.info("Updated %s", stored)
        return stored

    def delete(self, student_id: int) -> None:
        with storage_errors(self.db, "delete student"):
            row = self._get_row(student_id)
            if row is None:
                raise StudentNotFoundError(student_id)
            self.db.delete(row)
            self._commit(row.email, exclude_id=student_id)
        logger.info("Deleted student %s", student_id)

    def find_by_id(self, student_id: int) -> Optional[Student]:
        with storage_errors(self.db, "load student"):
            row = self._get_row(student_id)
            return to_student(row) if row is not None else None

    def find_by_email(self, email: str) -> Optional[Student]:
        with storage_errors(self.db, "load student"):
            row = self._query().filter(StudentRow.email == email).first()
            return to_student(row) if row is not None else None

    def list_all(self) -> List[Student]:
        with storage_errors(self.db, "list students"):
            return [to_student(row) for row in self._query().order_by(StudentRow.id).all()]

    def list_by_course(self, course_id: int) -> List[Student]:
        with storage_errors(self.db, "list students"):
            rows = self._query().filter(StudentRow.course_id == course_id).order_by(StudentRow.id).all()
            return [to_student(row) for row in rows]

    def _query(self):
        # Course is joined into every student fetch
        return self.db.query(StudentRow).options(joinedload(StudentRow.course))

    def _get_row(self, student_id: int) -> Optional[StudentRow]:
        return self._query().filter(StudentRow.id == student_id).first()

    def _validated_values(self, student: Student) -> dict:
        try:
            return {
                "name": require_text(StudentValidationError, "name", student.name, MAX_NAME_LENGTH),
                "email": require_text(StudentValidationError, "email", student.email, MAX_EMAIL_LENGTH),
                "phone": optional_text(StudentValidationError, "phone", student.phone, MAX_PHONE_LENGTH),
                "balance": fixed_point(StudentValidationError, "balance", student.balance, BALANCE_PRECISION, BALANCE_SCALE),
                "enrollment_date": calendar_date(StudentValidationError, "enrollment_date", student.enrollment_date),
                "course": self._resolve_course(student.course),
            }
        except StudentValidationError as exc:
            logger.warning("Rejected %s: %s", student, exc)
            raise

    def _resolve_course(self, course: Optional[Course]) -> Optional[CourseRow]:
        if course is None:
            return None
        row = self.db.get(CourseRow, course.id) if course.id is not None else None
        if row is None:
            logger.warning("Rejected student write, course %s does not exist", course.id)
            raise CourseNotFoundError(course.id)
        return row

    def _ensure_email_available(self, email: str, exclude_id: Optional[int] = None) -> None:
        query = self.db.query(StudentRow.id).filter(StudentRow.email == email)
        if exclude_id is not None:
            query = query.filter(StudentRow.id != exclude_id)
        if query.first() is not None:
            logger.warning("Rejected student write, email %s already used", email)
            raise DuplicateEmailError(email)

    def _commit(self, email: str, exclude_id: Optional[int]) -> None:
        # Other database errors propagate to the caller's storage_errors block
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            clash = self.db.query(StudentRow.id).filter(StudentRow.email == email)
            if exclude_id is not None:
                clash = clash.filter(StudentRow.id != exclude_id)
            if clash.first() is not None:
                raise DuplicateEmailError(email) from exc
            raise PersistenceError("Failed to store student") from exc
