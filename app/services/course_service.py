import logging
from typing import AsyncIterator

from app.repositories.course_repository import CourseRepository
from app.schemas.course import CourseRequest, CourseResponse
from app.utils.exceptions import NotFoundException
from app.utils.mappers import generate_uuid_string, to_course_entity, to_course_response

logger = logging.getLogger("app.courses")


class CourseService:
    def __init__(self, repository: CourseRepository):
        self.repository = repository

    async def get_all(self) -> AsyncIterator[CourseResponse]:
        async for course in self.repository.find_all():
            yield to_course_response(course)

    async def _get_existing(self, course_id: str):
        course = await self.repository.find_by_course_id(course_id)
        if course is None:
            raise NotFoundException(f"Course id not found: {course_id}")
        logger.debug("The course entity is: %r", course)
        return course

    async def get_by_id(self, course_id: str) -> CourseResponse:
        return to_course_response(await self._get_existing(course_id))

    async def add(self, request: CourseRequest) -> CourseResponse:
        course = to_course_entity(request)
        course.course_id = generate_uuid_string()
        saved = await self.repository.save(course)
        logger.info("Created course %s", saved.course_id)
        return to_course_response(saved)

    async def update_by_id(self, request: CourseRequest, course_id: str) -> CourseResponse:
        found = await self._get_existing(course_id)

        # 身分欄位一律沿用原本那筆
        course = to_course_entity(request)
        course.course_id = found.course_id
        course.id = found.id

        saved = await self.repository.save(course)
        logger.info("Updated course %s", saved.course_id)
        return to_course_response(saved)

    async def delete_by_id(self, course_id: str) -> CourseResponse:
        found = await self._get_existing(course_id)
        await self.repository.delete(found)
        logger.info("Deleted course %s", course_id)
        return to_course_response(found)
