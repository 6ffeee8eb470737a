from fastapi import Depends
from sqlalchemy.orm import Session

from sms.app.db.session import get_db
from sms.app.repositories.course_repository import CourseRepository
from sms.app.repositories.student_repository import SqlAlchemyStudentRepository, StudentRepository


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    return SqlAlchemyStudentRepository(db)


def get_course_repository(db: Session = Depends(get_db)) -> CourseRepository:
    return CourseRepository(db)
