import enum

from sqlalchemy import Column, Enum, Integer, String
from app.database import Base


class Semester(str, enum.Enum):
    FALL = "FALL"
    WINTER = "WINTER"
    SUMMER = "SUMMER"


class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    enrollment_id = Column(String(36), unique=True, index=True, nullable=False)

    enrollment_year = Column(Integer)
    semester = Column(Enum(Semester, name="semester"))

    # student / course 欄位在寫入時複製，之後不再同步
    student_id = Column(String(36), nullable=False)
    student_first_name = Column(String(100))
    student_last_name = Column(String(100))

    course_id = Column(String(36), nullable=False)
    course_number = Column(String(50))
    course_name = Column(String(255))

    def __repr__(self):
        return (
            f"Enrollment(id={self.id!r}, enrollment_id={self.enrollment_id!r}, "
            f"student_id={self.student_id!r}, course_id={self.course_id!r})"
        )
