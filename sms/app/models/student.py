"""Student table mapping."""

from sqlalchemy import Column, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from sms.app.core.time import today
from sms.app.db.base_class import Base
from sms.app.models.course import IdType


class StudentRow(Base):
    __tablename__ = "students"

    id = Column("student_id", IdType, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    phone = Column(String(15), nullable=True)
    course_id = Column(IdType, ForeignKey("courses.course_id"), nullable=True, index=True)
    balance = Column(Numeric(10, 2), nullable=False, default=0)
    enrollment_date = Column(Date, nullable=False, default=today)

    course = relationship("CourseRow", back_populates="students", lazy="joined")
