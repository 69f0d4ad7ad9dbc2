from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from ..database import Base

class Course(Base):
    __tablename__ = "courses"

    # Course ids are chosen by the registrar, not generated
    id = Column(Integer, primary_key=True, autoincrement=False)
    course_number = Column(Integer, nullable=False)
    title = Column(String(50), nullable=False)
    credits = Column(Integer, nullable=False)
    department_id = Column(Integer, ForeignKey("departments.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        CheckConstraint("credits >= 0 AND credits <= 5", name="check_course_credits"),
    )

    department = relationship("Department", back_populates="courses")
    enrollments = relationship("Enrollment", back_populates="course")
    course_assignments = relationship("CourseAssignment", back_populates="course")

    def __repr__(self):
        return f"<Course {self.id}: {self.title}>"
