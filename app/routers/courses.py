# app/routers/courses.py
from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_course_service
from app.schemas.course import CourseRequest, CourseResponse
from app.schemas.error import HttpErrorInfo
from app.services.course_service import CourseService
from app.utils.event_stream import EVENT_STREAM_MEDIA_TYPE, event_stream_response
from app.utils.validation import validate_id

router = APIRouter(prefix="/api/v1/courses", tags=["Courses"])

ERROR_RESPONSES = {
    404: {"model": HttpErrorInfo},
    422: {"model": HttpErrorInfo},
}


@router.get(
    "",
    response_class=Response,
    responses={200: {"content": {EVENT_STREAM_MEDIA_TYPE: {}}}},
)
async def get_all_courses(service: CourseService = Depends(get_course_service)):
    return event_stream_response(service.get_all())


@router.get("/{course_id}", response_model=CourseResponse, responses=ERROR_RESPONSES)
async def get_course_by_course_id(course_id: str, service: CourseService = Depends(get_course_service)):
    validate_id(course_id, "course")
    return await service.get_by_id(course_id)


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Empty result"}},
)
async def add_course(body: CourseRequest, service: CourseService = Depends(get_course_service)):
    course = await service.add(body)
    if course is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return course


@router.put("/{course_id}", response_model=CourseResponse, responses=ERROR_RESPONSES)
async def update_course_by_course_id(
    course_id: str,
    body: CourseRequest,
    service: CourseService = Depends(get_course_service),
):
    validate_id(course_id, "course")
    course = await service.update_by_id(body, course_id)
    if course is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return course


@router.delete("/{course_id}", response_model=CourseResponse, responses=ERROR_RESPONSES)
async def delete_course_by_course_id(course_id: str, service: CourseService = Depends(get_course_service)):
    validate_id(course_id, "course")
    return await service.delete_by_id(course_id)
