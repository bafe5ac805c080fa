import httpx

from app.clients.base import fetch_entity
from app.clients.result import LookupResult
from app.schemas.course import CourseResponse


class CoursesClient:
    """Enrollments 用來查 Courses service 的 client。"""

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/") + "/api/v1/courses"

    async def get_course_by_course_id(self, course_id: str) -> LookupResult[CourseResponse]:
        url = f"{self._base_url}/{course_id}"
        return await fetch_entity(self._http, url, course_id, CourseResponse)
