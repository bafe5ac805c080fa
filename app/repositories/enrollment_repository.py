from typing import AsyncIterator, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.models.enrollment import Enrollment


class EnrollmentRepository:
    """enrollments 表的 CRUD，每個操作自己開一個 session。"""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def find_all(self) -> AsyncIterator[Enrollment]:
        # 不排序，照資料庫回傳順序，邊讀邊送
        async with self._session_factory() as session:
            result = await session.stream_scalars(select(Enrollment))
            async for enrollment in result:
                yield enrollment

    async def find_by_enrollment_id(self, enrollment_id: str) -> Optional[Enrollment]:
        async with self._session_factory() as session:
            stmt = select(Enrollment).where(Enrollment.enrollment_id == enrollment_id)
            result = await session.execute(stmt)
            return result.scalars().first()

    async def save(self, enrollment: Enrollment) -> Enrollment:
        # id 是 None -> insert；有 id -> 用 PK 覆蓋原本那筆
        async with self._session_factory() as session:
            saved = await session.merge(enrollment)
            await session.commit()
            return saved

    async def delete(self, enrollment: Enrollment):
        async with self._session_factory() as session:
            await session.execute(delete(Enrollment).where(Enrollment.id == enrollment.id))
            await session.commit()

    async def count(self) -> int:
        async with self._session_factory() as session:
            return await session.scalar(select(func.count()).select_from(Enrollment))
