from sqlalchemy import Column, Float, Integer, String
from app.database import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # business id, UUID 字串
    course_id = Column(String(36), unique=True, index=True, nullable=False)

    course_number = Column(String(50))
    course_name = Column(String(255))
    num_hours = Column(Integer)
    num_credits = Column(Float)
    department = Column(String(255))

    def __repr__(self):
        return (
            f"Course(id={self.id!r}, course_id={self.course_id!r}, "
            f"course_number={self.course_number!r}, course_name={self.course_name!r})"
        )
