"""Course storage."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sms.app.core.errors import CourseValidationError, DuplicateCourseError
from sms.app.entities.course import Course
from sms.app.models.course import CourseRow
from sms.app.repositories.storage import storage_errors
from sms.app.repositories.validation import require_text

logger = logging.getLogger(__name__)

MAX_COURSE_NAME_LENGTH = 100


def to_course(row: Optional[CourseRow]) -> Optional[Course]:
    if row is None:
        return None
    return Course(course_name=row.course_name, description=row.description, id=row.id)


class CourseRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, course: Course) -> Course:
        if course.id is not None:
            raise CourseValidationError("id", "is assigned by storage and must be empty on insert")
        name = require_text(CourseValidationError, "course_name", course.course_name, MAX_COURSE_NAME_LENGTH)
        if self.find_by_name(name) is not None:
            logger.warning("Rejected course insert, name %r already used", name)
            raise DuplicateCourseError(name)

        with storage_errors(self.db, "store course"):
            row = CourseRow(course_name=name, description=course.description)
            self.db.add(row)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise DuplicateCourseError(name) from exc
            self.db.refresh(row)
        logger.info("Inserted course %s (id=%s)", row.course_name, row.id)
        return to_course(row)

    def find_by_id(self, course_id: int) -> Optional[Course]:
        with storage_errors(self.db, "load course"):
            return to_course(self.db.get(CourseRow, course_id))

    def find_by_name(self, course_name: str) -> Optional[Course]:
        with storage_errors(self.db, "load course"):
            return to_course(self.db.query(CourseRow).filter(CourseRow.course_name == course_name).first())

    def list_all(self) -> List[Course]:
        with storage_errors(self.db, "list courses"):
            return [to_course(row) for row in self.db.query(CourseRow).order_by(CourseRow.id).all()]
