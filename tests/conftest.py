import json
import os
import tempfile
from pathlib import Path

os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "course-enrollment-logs"))

import httpx
import pytest
from fastapi.testclient import TestClient

from app.clients.result import Found, NotFound, TransportError
from app.config import Settings
from app.main import create_courses_app, create_enrollments_app
from app.models.enrollment import Semester
from app.schemas.course import CourseResponse
from app.schemas.student import StudentResponse


STUDENT_ID = "c3540a89-cb47-4c96-888e-ff96708db4d8"
NON_EXISTING_STUDENT_ID = "c3540a89-cb47-4c96-888e-ff96708db4j4"
COURSE_ID = "9a29fff7-564a-4cc9-8fe1-36f6ca9bc223"
OTHER_COURSE_ID = "d819e4f4-25af-4d33-91e9-2c45f0071606"
NON_EXISTING_COURSE_ID = "9a29fff7-564a-4cc9-8fe1-36f6ca9b0000"
UNREACHABLE_COURSE_ID = "9a29fff7-564a-4cc9-8fe1-36f6ca9bffff"

STUDENT_PAYLOAD = {
    "studentId": STUDENT_ID,
    "firstName": "Christine",
    "lastName": "Gerard",
    "program": "Computer Science",
    "stuff": "stuff",
}
COURSE_PAYLOAD = {
    "courseId": COURSE_ID,
    "courseNumber": "trs-075",
    "courseName": "Web Services",
    "numHours": 45,
    "numCredits": 3.0,
    "department": "Computer Science",
}
OTHER_COURSE_PAYLOAD = {
    "courseId": OTHER_COURSE_ID,
    "courseNumber": "ygo-675",
    "courseName": "Shakespeare's Greatest Works",
    "numHours": 60,
    "numCredits": 4.0,
    "department": "English",
}


def parse_events(text: str) -> list:
    return [json.loads(line[len("data:"):]) for line in text.splitlines() if line.startswith("data:")]


# ----- in-memory fakes for service tests -----

class FakeRepository:
    """Dict-backed stand-in for the SQLAlchemy repositories."""

    def __init__(self, business_key: str):
        self.business_key = business_key
        self.rows = {}
        self.store_calls = 0
        self._next_id = 1

    async def find_all(self):
        self.store_calls += 1
        for row in list(self.rows.values()):
            yield row

    async def _find(self, value):
        self.store_calls += 1
        for row in self.rows.values():
            if getattr(row, self.business_key) == value:
                return row
        return None

    async def find_by_course_id(self, course_id):
        return await self._find(course_id)

    async def find_by_enrollment_id(self, enrollment_id):
        return await self._find(enrollment_id)

    async def save(self, entity):
        self.store_calls += 1
        if entity.id is None:
            entity.id = self._next_id
            self._next_id += 1
        self.rows[entity.id] = entity
        return entity

    async def delete(self, entity):
        self.store_calls += 1
        self.rows.pop(entity.id, None)

    async def count(self):
        return len(self.rows)


class FakeStudentsClient:
    def __init__(self, results):
        self.results = results
        self.calls = []

    async def get_student_by_student_id(self, student_id):
        self.calls.append(student_id)
        return self.results.get(student_id, NotFound(student_id))


class FakeCoursesClient:
    def __init__(self, results):
        self.results = results
        self.calls = []

    async def get_course_by_course_id(self, course_id):
        self.calls.append(course_id)
        return self.results.get(course_id, NotFound(course_id))


@pytest.fixture
def fake_course_repository():
    return FakeRepository("course_id")


@pytest.fixture
def fake_enrollment_repository():
    return FakeRepository("enrollment_id")


@pytest.fixture
def fake_students_client():
    return FakeStudentsClient({
        STUDENT_ID: Found(StudentResponse.model_validate(STUDENT_PAYLOAD)),
    })


@pytest.fixture
def fake_courses_client():
    return FakeCoursesClient({
        COURSE_ID: Found(CourseResponse.model_validate(COURSE_PAYLOAD)),
        OTHER_COURSE_ID: Found(CourseResponse.model_validate(OTHER_COURSE_PAYLOAD)),
        UNREACHABLE_COURSE_ID: TransportError(UNREACHABLE_COURSE_ID, "connection refused"),
    })


# ----- full applications -----

@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        COURSES_DATABASE_URL="sqlite+aiosqlite://",
        ENROLLMENTS_DATABASE_URL="sqlite+aiosqlite://",
        COURSES_SERVICE_URL="http://courses.test",
        STUDENTS_SERVICE_URL="http://students.test",
    )


@pytest.fixture
def courses_client(settings):
    with TestClient(create_courses_app(settings)) as client:
        yield client


class RemoteServices:
    """httpx.MockTransport handler standing in for the Students and Courses services."""

    def __init__(self):
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(f"{request.url.host}{request.url.path}")
        host, path = request.url.host, request.url.path

        if host == "students.test" and path == f"/api/v1/students/{STUDENT_ID}":
            return httpx.Response(200, json=STUDENT_PAYLOAD)
        if host == "courses.test" and path == f"/api/v1/courses/{COURSE_ID}":
            return httpx.Response(200, json=COURSE_PAYLOAD)
        if host == "courses.test" and path == f"/api/v1/courses/{OTHER_COURSE_ID}":
            return httpx.Response(200, json=OTHER_COURSE_PAYLOAD)
        if path.endswith(UNREACHABLE_COURSE_ID):
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(404, json={"message": "not found"})


@pytest.fixture
def remote_services():
    return RemoteServices()


@pytest.fixture
def enrollments_client(settings, remote_services):
    app = create_enrollments_app(settings, transport=httpx.MockTransport(remote_services))
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def enrollment_body():
    return {
        "enrollmentYear": 2021,
        "semester": Semester.FALL.value,
        "studentId": STUDENT_ID,
        "courseId": COURSE_ID,
    }
