# Student management backend entrypoint: minimal FastAPI app.

from fastapi import FastAPI

from sms.app.api import courses, students
from sms.app.core.logging import configure_logging
from sms.app.core.settings import get_settings
from sms.app.db.base import Base
from sms.app.db.session import engine

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.include_router(courses.router)
app.include_router(students.router)


@app.get("/")
def read_root():
    return {"app": "Student Management System", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
