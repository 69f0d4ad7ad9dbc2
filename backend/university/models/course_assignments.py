from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class CourseAssignment(Base):
    __tablename__ = "course_assignments"

    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True)
    instructor_id = Column(Integer, ForeignKey("instructors.id", ondelete="CASCADE"), primary_key=True)

    course = relationship("Course", back_populates="course_assignments")
    instructor = relationship("Instructor", back_populates="course_assignments")

    def __repr__(self):
        return f"<CourseAssignment Course:{self.course_id} Instructor:{self.instructor_id}>"
