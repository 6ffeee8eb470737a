"""Course endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sms.app.api.errors import to_http_exception
from sms.app.core.errors import PersistenceError
from sms.app.dependencies.repositories import get_course_repository, get_student_repository
from sms.app.entities.course import Course
from sms.app.repositories.course_repository import CourseRepository
from sms.app.repositories.student_repository import StudentRepository
from sms.app.schemas.course import CourseCreate, CourseRead
from sms.app.schemas.student import StudentRead

router = APIRouter(prefix="/courses", tags=["courses"])


def _get_course_or_404(repo: CourseRepository, course_id: int) -> Course:
    course = repo.find_by_id(course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@router.post("/", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
async def create_course(course_in: CourseCreate, repo: CourseRepository = Depends(get_course_repository)):
    try:
        return repo.insert(Course(course_name=course_in.course_name, description=course_in.description))
    except PersistenceError as exc:
        raise to_http_exception(exc) from exc


@router.get("/", response_model=list[CourseRead])
async def list_courses(repo: CourseRepository = Depends(get_course_repository)):
    return repo.list_all()


@router.get("/{course_id}", response_model=CourseRead)
async def get_course(course_id: int, repo: CourseRepository = Depends(get_course_repository)):
    return _get_course_or_404(repo, course_id)


@router.get("/{course_id}/students", response_model=list[StudentRead])
async def list_course_students(
    course_id: int,
    repo: CourseRepository = Depends(get_course_repository),
    students: StudentRepository = Depends(get_student_repository),
):
    course = _get_course_or_404(repo, course_id)
    return students.list_by_course(course.id)
