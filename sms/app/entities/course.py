"""Course value type referenced by students."""

from dataclasses import dataclass
from typing import Optional

UNNAMED_COURSE = "<unnamed>"


@dataclass
class Course:
    course_name: Optional[str] = None
    description: Optional[str] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        """Render the course name, or ``<unnamed>`` when it is unset."""
        return self.course_name if self.course_name is not None else UNNAMED_COURSE
