"""
遠端查詢的結果：找到 / 404 / 連線或非預期錯誤 三種情況分開表示，
呼叫端用 isinstance 分支，不靠 None 或例外來判斷。
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    entity: T


@dataclass(frozen=True)
class NotFound:
    entity_id: str


@dataclass(frozen=True)
class TransportError:
    entity_id: str
    reason: str
    status_code: Optional[int] = None


LookupResult = Union[Found[T], NotFound, TransportError]
