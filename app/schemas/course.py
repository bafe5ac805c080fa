from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON 用 camelCase，程式內用 snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CourseRequest(CamelModel):
    course_number: str
    course_name: str
    num_hours: int
    num_credits: float
    department: str


class CourseResponse(CamelModel):
    course_id: str
    course_number: str
    course_name: str
    num_hours: int
    num_credits: float
    department: str
