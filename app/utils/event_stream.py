from typing import AsyncIterator

from fastapi.responses import StreamingResponse
from pydantic import BaseModel

EVENT_STREAM_MEDIA_TYPE = "text/event-stream"


def to_event(model: BaseModel) -> str:
    """
    CourseResponse(...) -> 'data:{"courseId": ...}\\n\\n'
    """
    return f"data:{model.model_dump_json(by_alias=True)}\n\n"


async def _frames(items: AsyncIterator[BaseModel]) -> AsyncIterator[str]:
    async for item in items:
        yield to_event(item)


def event_stream_response(items: AsyncIterator[BaseModel]) -> StreamingResponse:
    # 一筆一筆送出，不先收集整個結果；client 斷線時 Starlette 會取消 generator
    return StreamingResponse(_frames(items), media_type=EVENT_STREAM_MEDIA_TYPE)
