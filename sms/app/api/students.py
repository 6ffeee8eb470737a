"""Student endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from sms.app.api.errors import to_http_exception
from sms.app.core.errors import PersistenceError
from sms.app.dependencies.repositories import get_student_repository
from sms.app.entities.course import Course
from sms.app.entities.student import Student
from sms.app.repositories.student_repository import StudentRepository
from sms.app.schemas.student import StudentCreate, StudentRead, StudentUpdate

router = APIRouter(prefix="/students", tags=["students"])


def _get_student_or_404(repo: StudentRepository, student_id: int) -> Student:
    student = repo.find_by_id(student_id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.post("/", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(student_in: StudentCreate, repo: StudentRepository = Depends(get_student_repository)):
    student = Student(student_in.name, student_in.email, student_in.phone)
    if student_in.course_id is not None:
        student.course = Course(id=student_in.course_id)
    if student_in.balance is not None:
        student.balance = student_in.balance
    if student_in.enrollment_date is not None:
        student.enrollment_date = student_in.enrollment_date
    try:
        return repo.insert(student)
    except PersistenceError as exc:
        raise to_http_exception(exc) from exc


@router.get("/", response_model=list[StudentRead])
async def list_students(repo: StudentRepository = Depends(get_student_repository)):
    return repo.list_all()


@router.get("/by-email", response_model=StudentRead)
async def get_student_by_email(email: str, repo: StudentRepository = Depends(get_student_repository)):
    student = repo.find_by_email(email)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(student_id: int, repo: StudentRepository = Depends(get_student_repository)):
    return _get_student_or_404(repo, student_id)


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(student_id: int, student_in: StudentUpdate, repo: StudentRepository = Depends(get_student_repository)):
    student = _get_student_or_404(repo, student_id)
    update_data = student_in.model_dump(exclude_unset=True)
    if "course_id" in update_data:
        course_id = update_data.pop("course_id")
        update_data["course"] = Course(id=course_id) if course_id is not None else None
    try:
        return repo.update(student.with_changes(**update_data))
    except PersistenceError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: int, repo: StudentRepository = Depends(get_student_repository)):
    try:
        repo.delete(student_id)
    except PersistenceError as exc:
        raise to_http_exception(exc) from exc
