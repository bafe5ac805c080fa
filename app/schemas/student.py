from typing import Optional

from pydantic import ConfigDict

from app.schemas.course import CamelModel


class StudentResponse(CamelModel):
    """Students service 回傳的學生資料（唯讀），多出來的欄位直接忽略。"""

    model_config = ConfigDict(extra="ignore")

    student_id: str
    first_name: str
    last_name: str
    program: Optional[str] = None
