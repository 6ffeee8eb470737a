from sms.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from sms.app.models.course import CourseRow  # noqa: F401
from sms.app.models.student import StudentRow  # noqa: F401
