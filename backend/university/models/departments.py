from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base

class Department(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    budget = Column(Numeric(19, 4), nullable=False, default=0)
    added_date = Column(DateTime)
    modified_date = Column(DateTime)
    start_date = Column(Date)
    instructor_id = Column(Integer, ForeignKey("instructors.id", ondelete="SET NULL"), nullable=True)

    administrator = relationship("Instructor")
    courses = relationship("Course", back_populates="department")

    def __repr__(self):
        return f"<Department {self.id}: {self.name}>"
