# app/dependencies.py
# lifespan 把 session factory / httpx client 放在 app.state，這裡組成 service 給 router 用
from fastapi import Depends, Request

from app.clients.courses_client import CoursesClient
from app.clients.students_client import StudentsClient
from app.repositories.course_repository import CourseRepository
from app.repositories.enrollment_repository import EnrollmentRepository
from app.services.course_service import CourseService
from app.services.enrollment_service import EnrollmentService


def get_course_repository(request: Request) -> CourseRepository:
    return CourseRepository(request.app.state.session_factory)


def get_course_service(repository: CourseRepository = Depends(get_course_repository)) -> CourseService:
    return CourseService(repository)


def get_enrollment_repository(request: Request) -> EnrollmentRepository:
    return EnrollmentRepository(request.app.state.session_factory)


def get_students_client(request: Request) -> StudentsClient:
    return StudentsClient(request.app.state.http_client, request.app.state.settings.STUDENTS_SERVICE_URL)


def get_courses_client(request: Request) -> CoursesClient:
    return CoursesClient(request.app.state.http_client, request.app.state.settings.COURSES_SERVICE_URL)


def get_enrollment_service(
    repository: EnrollmentRepository = Depends(get_enrollment_repository),
    students_client: StudentsClient = Depends(get_students_client),
    courses_client: CoursesClient = Depends(get_courses_client),
) -> EnrollmentService:
    return EnrollmentService(repository, students_client, courses_client)
