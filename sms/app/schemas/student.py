"""Student schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from sms.app.schemas.course import CourseRead


class StudentBase(BaseModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    course_id: Optional[int] = None


class StudentCreate(StudentBase):
    balance: Optional[Decimal] = None
    enrollment_date: Optional[date] = None


class StudentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    course_id: Optional[int] = None
    balance: Optional[Decimal] = None
    enrollment_date: Optional[date] = None


class StudentRead(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    course: Optional[CourseRead] = None
    balance: Decimal
    enrollment_date: date

    model_config = ConfigDict(from_attributes=True)
