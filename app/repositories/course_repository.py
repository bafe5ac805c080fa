from typing import AsyncIterator, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.models.course import Course


class CourseRepository:
    """courses 表的 CRUD，每個操作自己開一個 session。"""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def find_all(self) -> AsyncIterator[Course]:
        # 不排序，照資料庫回傳順序，邊讀邊送
        async with self._session_factory() as session:
            result = await session.stream_scalars(select(Course))
            async for course in result:
                yield course

    async def find_by_course_id(self, course_id: str) -> Optional[Course]:
        async with self._session_factory() as session:
            result = await session.execute(select(Course).where(Course.course_id == course_id))
            return result.scalars().first()

    async def save(self, course: Course) -> Course:
        # id 是 None -> insert；有 id -> 用 PK 覆蓋原本那筆
        async with self._session_factory() as session:
            saved = await session.merge(course)
            await session.commit()
            return saved

    async def delete(self, course: Course):
        async with self._session_factory() as session:
            await session.execute(delete(Course).where(Course.id == course.id))
            await session.commit()

    async def count(self) -> int:
        async with self._session_factory() as session:
            return await session.scalar(select(func.count()).select_from(Course))
