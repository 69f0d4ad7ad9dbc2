import enum
from sqlalchemy import Column, Integer, ForeignKey, Enum
from sqlalchemy.orm import relationship
from ..database import Base

class Grade(enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    # No grade yet is stored as NULL
    grade = Column(Enum(Grade), nullable=True)

    course = relationship("Course", back_populates="enrollments")
    student = relationship("Student", back_populates="enrollments")

    def __repr__(self):
        return f"<Enrollment Student:{self.student_id} Course:{self.course_id}>"
