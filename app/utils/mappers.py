# app/utils/mappers.py
"""
request / entity / response 之間的轉換。
每個方向一個函式，欄位全部列出來，不做反射複製。
"""
import uuid

from app.models.course import Course
from app.models.enrollment import Enrollment
from app.schemas.course import CourseRequest, CourseResponse
from app.schemas.enrollment import EnrollmentRequest, EnrollmentResponse
from app.schemas.student import StudentResponse


def generate_uuid_string() -> str:
    return str(uuid.uuid4())


def to_course_entity(request: CourseRequest) -> Course:
    return Course(
        course_number=request.course_number,
        course_name=request.course_name,
        num_hours=request.num_hours,
        num_credits=request.num_credits,
        department=request.department,
    )


def to_course_response(course: Course) -> CourseResponse:
    return CourseResponse(
        course_id=course.course_id,
        course_number=course.course_number,
        course_name=course.course_name,
        num_hours=course.num_hours,
        num_credits=course.num_credits,
        department=course.department,
    )


def to_enrollment_entity(
    request: EnrollmentRequest,
    student: StudentResponse,
    course: CourseResponse,
) -> Enrollment:
    return Enrollment(
        enrollment_year=request.enrollment_year,
        semester=request.semester,
        student_id=request.student_id,
        student_first_name=student.first_name,
        student_last_name=student.last_name,
        course_id=request.course_id,
        course_number=course.course_number,
        course_name=course.course_name,
    )


def to_enrollment_response(enrollment: Enrollment) -> EnrollmentResponse:
    return EnrollmentResponse(
        enrollment_id=enrollment.enrollment_id,
        enrollment_year=enrollment.enrollment_year,
        semester=enrollment.semester,
        student_id=enrollment.student_id,
        student_first_name=enrollment.student_first_name,
        student_last_name=enrollment.student_last_name,
        course_id=enrollment.course_id,
        course_number=enrollment.course_number,
        course_name=enrollment.course_name,
    )
