from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from ..database import Base

class Instructor(Base):
    __tablename__ = "instructors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_mid_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    hire_date = Column(Date)

    course_assignments = relationship(
        "CourseAssignment",
        back_populates="instructor",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self):
        return f"{self.last_name}, {self.first_mid_name}"

    def __repr__(self):
        return f"<Instructor {self.id}: {self.full_name}>"
