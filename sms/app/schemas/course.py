"""Course schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CourseCreate(BaseModel):
    course_name: str
    description: Optional[str] = None


class CourseRead(CourseCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)
