"""Course table mapping."""

from sqlalchemy import BigInteger, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from sms.app.db.base_class import Base

# SQLite only autoincrements INTEGER primary keys
IdType = BigInteger().with_variant(Integer, "sqlite")


class CourseRow(Base):
    __tablename__ = "courses"

    id = Column("course_id", IdType, primary_key=True, index=True)
    course_name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    students = relationship("StudentRow", back_populates="course")
