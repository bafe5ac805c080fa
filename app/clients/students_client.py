import httpx

from app.clients.base import fetch_entity
from app.clients.result import LookupResult
from app.schemas.student import StudentResponse


class StudentsClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/") + "/api/v1/students"

    async def get_student_by_student_id(self, student_id: str) -> LookupResult[StudentResponse]:
        return await fetch_entity(
            self._http, f"{self._base_url}/{student_id}", student_id, StudentResponse
        )
