import logging
from typing import AsyncIterator

from app.clients.courses_client import CoursesClient
from app.clients.result import Found, NotFound
from app.clients.students_client import StudentsClient
from app.models.enrollment import Enrollment
from app.repositories.enrollment_repository import EnrollmentRepository
from app.schemas.course import CourseResponse
from app.schemas.enrollment import EnrollmentRequest, EnrollmentResponse
from app.schemas.student import StudentResponse
from app.utils.exceptions import NotFoundException, RemoteServiceException
from app.utils.mappers import (
    generate_uuid_string,
    to_enrollment_entity,
    to_enrollment_response,
)

logger = logging.getLogger("app.enrollments")


class EnrollmentService:
    """
    Enrollment 的 CRUD。
    新增 / 修改時會先後查 Students、Courses 兩個服務，把姓名與課程資料
    複製進 enrollment 再存檔；任何一邊查不到就整筆失敗，不會寫入。
    """

    def __init__(
        self,
        repository: EnrollmentRepository,
        students_client: StudentsClient,
        courses_client: CoursesClient,
    ):
        self.repository = repository
        self.students_client = students_client
        self.courses_client = courses_client

    async def get_all(self) -> AsyncIterator[EnrollmentResponse]:
        async for enrollment in self.repository.find_all():
            yield to_enrollment_response(enrollment)

    async def _get_existing(self, enrollment_id: str) -> Enrollment:
        enrollment = await self.repository.find_by_enrollment_id(enrollment_id)
        if enrollment is None:
            raise NotFoundException(f"Enrollment id not found: {enrollment_id}")
        logger.debug("The enrollment entity is: %r", enrollment)
        return enrollment

    async def get_by_id(self, enrollment_id: str) -> EnrollmentResponse:
        return to_enrollment_response(await self._get_existing(enrollment_id))

    async def _resolve_student(self, student_id: str) -> StudentResponse:
        result = await self.students_client.get_student_by_student_id(student_id)
        if isinstance(result, Found):
            return result.entity
        if isinstance(result, NotFound):
            raise NotFoundException(f"StudentId not found: {student_id}")
        raise RemoteServiceException(
            f"Students service lookup failed for {student_id}: {result.reason}"
        )

    async def _resolve_course(self, course_id: str) -> CourseResponse:
        result = await self.courses_client.get_course_by_course_id(course_id)
        if isinstance(result, Found):
            return result.entity
        if isinstance(result, NotFound):
            raise NotFoundException(f"CourseId not found: {course_id}")
        raise RemoteServiceException(
            f"Courses service lookup failed for {course_id}: {result.reason}"
        )

    async def _enrich(self, request: EnrollmentRequest) -> Enrollment:
        # 先查學生，成功才查課程
        student = await self._resolve_student(request.student_id)
        course = await self._resolve_course(request.course_id)
        return to_enrollment_entity(request, student, course)

    async def add(self, request: EnrollmentRequest) -> EnrollmentResponse:
        enrollment = await self._enrich(request)
        enrollment.enrollment_id = generate_uuid_string()
        saved = await self.repository.save(enrollment)
        logger.info(
            "Created enrollment %s (student=%s, course=%s)",
            saved.enrollment_id, saved.student_id, saved.course_id,
        )
        return to_enrollment_response(saved)

    async def update_by_id(
        self, request: EnrollmentRequest, enrollment_id: str
    ) -> EnrollmentResponse:
        found = await self._get_existing(enrollment_id)

        enrollment = await self._enrich(request)
        enrollment.enrollment_id = found.enrollment_id
        enrollment.id = found.id

        saved = await self.repository.save(enrollment)
        logger.info("Updated enrollment %s", saved.enrollment_id)
        return to_enrollment_response(saved)

    async def delete_by_id(self, enrollment_id: str) -> EnrollmentResponse:
        found = await self._get_existing(enrollment_id)
        await self.repository.delete(found)
        logger.info("Deleted enrollment %s", enrollment_id)
        return to_enrollment_response(found)
