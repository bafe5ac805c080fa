import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.schemas.error import HttpErrorInfo

logger = logging.getLogger("app.errors")


class NotFoundException(Exception):
    """id 格式正確，但找不到對應資料（或遠端服務回 404）"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputException(Exception):
    """path 上的 id 格式錯誤，在碰到 service / DB 前就擋下"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RemoteServiceException(Exception):
    """遠端服務連線失敗或回傳非預期狀態；不轉成 404，直接往上拋"""


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, message)
    return JSONResponse(
        status_code=status_code,
        content=HttpErrorInfo(message=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(NotFoundException)
    async def handle_not_found(request: Request, exc: NotFoundException):
        return _error_response(request, 404, exc.message)

    @app.exception_handler(InvalidInputException)
    async def handle_invalid_input(request: Request, exc: InvalidInputException):
        return _error_response(request, 422, exc.message)
