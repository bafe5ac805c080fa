# app/routers/enrollments.py
from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_enrollment_service
from app.schemas.enrollment import EnrollmentRequest, EnrollmentResponse
from app.schemas.error import HttpErrorInfo
from app.services.enrollment_service import EnrollmentService
from app.utils.event_stream import EVENT_STREAM_MEDIA_TYPE, event_stream_response
from app.utils.validation import validate_id

router = APIRouter(prefix="/api/v1/enrollment", tags=["Enrollments"])

ERROR_RESPONSES = {
    404: {"model": HttpErrorInfo},
    422: {"model": HttpErrorInfo},
}


@router.get(
    "",
    response_class=Response,
    responses={200: {"content": {EVENT_STREAM_MEDIA_TYPE: {}}}},
)
async def get_all_enrollments(service: EnrollmentService = Depends(get_enrollment_service)):
    return event_stream_response(service.get_all())


@router.get("/{enrollment_id}", response_model=EnrollmentResponse, responses=ERROR_RESPONSES)
async def get_enrollment_by_enrollment_id(
    enrollment_id: str,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    validate_id(enrollment_id, "enrollment")
    return await service.get_by_id(enrollment_id)


# 新增時會去查 Students / Courses service，查不到回 404
@router.post(
    "",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Empty result"}, 404: {"model": HttpErrorInfo}},
)
async def add_enrollment(
    body: EnrollmentRequest,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    enrollment = await service.add(body)
    if enrollment is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return enrollment


@router.put("/{enrollment_id}", response_model=EnrollmentResponse, responses=ERROR_RESPONSES)
async def update_enrollment_by_enrollment_id(
    enrollment_id: str,
    body: EnrollmentRequest,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    validate_id(enrollment_id, "enrollment")
    enrollment = await service.update_by_id(body, enrollment_id)
    if enrollment is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return enrollment


@router.delete("/{enrollment_id}", response_model=EnrollmentResponse, responses=ERROR_RESPONSES)
async def delete_enrollment_by_enrollment_id(
    enrollment_id: str,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    validate_id(enrollment_id, "enrollment")
    return await service.delete_by_id(enrollment_id)
