from pydantic import BaseModel


class HttpErrorInfo(BaseModel):
    message: str
