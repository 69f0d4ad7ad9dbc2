from pydantic import BaseModel
from typing import Optional
from university.models.enrollments import Grade

class CourseBase(BaseModel):
    id: int
    course_number: int
    title: str
    credits: int
    department_id: int

    class Config:
        from_attributes = True

class StudentSummary(BaseModel):
    id: int
    first_mid_name: str
    last_name: str
    full_name: str

    class Config:
        from_attributes = True

class EnrollmentRead(BaseModel):
    student_id: int
    course_id: int
    grade: Optional[Grade] = None
    student: Optional[StudentSummary] = None

    class Config:
        from_attributes = True

class AssignedCourse(BaseModel):
    course_id: int
    title: str
    assigned: bool
    department: Optional[str] = None

    class Config:
        from_attributes = True
