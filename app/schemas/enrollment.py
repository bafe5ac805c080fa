from app.models.enrollment import Semester
from app.schemas.course import CamelModel


class EnrollmentRequest(CamelModel):
    enrollment_year: int
    semester: Semester
    student_id: str
    course_id: str


class EnrollmentResponse(CamelModel):
    enrollment_id: str
    enrollment_year: int
    semester: Semester
    student_id: str
    student_first_name: str
    student_last_name: str
    course_id: str
    course_number: str
    course_name: str
