from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from ..database import Base

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_mid_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    enrollment_date = Column(Date)

    enrollments = relationship("Enrollment", back_populates="student")

    @property
    def full_name(self):
        return f"{self.last_name}, {self.first_mid_name}"

    def __repr__(self):
        return f"<Student {self.id}: {self.full_name}>"
