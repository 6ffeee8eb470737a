"""Student value type.

A ``Student`` is a plain in-memory record. It performs no validation and
never talks to storage; identifier assignment and constraint checks belong
to :mod:`sms.app.repositories.student_repository`.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from sms.app.core.time import today
from sms.app.entities.course import Course

NO_COURSE = "None"


@dataclass
class Student:
    """One enrolled student.

    ``Student()`` and ``Student(name, email, phone)`` both stamp
    ``enrollment_date`` with today's date and start with a zero balance.
    ``id`` stays ``None`` until the repository stores the record.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    course: Optional[Course] = None
    balance: Decimal = Decimal("0.00")
    enrollment_date: Optional[date] = field(default_factory=today)
    id: Optional[int] = None

    def with_changes(self, **fields) -> "Student":
        """Return a copy with ``fields`` replaced, leaving this one untouched."""
        return replace(self, **fields)

    def __str__(self) -> str:
        course_name = str(self.course) if self.course is not None else NO_COURSE
        return (
            f"Student(id={self.id}, name={self.name!r}, email={self.email!r}, "
            f"phone={self.phone!r}, course={course_name}, balance={self.balance}, "
            f"enrollment_date={self.enrollment_date})"
        )
