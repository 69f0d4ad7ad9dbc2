from pydantic import BaseModel, field_validator
from datetime import date
from typing import Any, Dict, List, Optional
from university.schemas.courses import CourseBase, EnrollmentRead

class InstructorForm(BaseModel):
    """Fields an instructor form is allowed to bind."""
    first_mid_name: str
    last_name: str
    hire_date: Optional[date] = None

    @field_validator("first_mid_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        if len(value) > 50:
            raise ValueError("cannot be longer than 50 characters")
        return value

class CourseAssignmentRead(BaseModel):
    course_id: int
    instructor_id: Optional[int] = None

    class Config:
        from_attributes = True

class InstructorRead(BaseModel):
    id: Optional[int] = None
    first_mid_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    hire_date: Optional[date] = None
    course_assignments: List[CourseAssignmentRead] = []

    class Config:
        from_attributes = True

class InstructorIndexRead(BaseModel):
    instructors: List[InstructorRead]
    courses: Optional[List[CourseBase]] = None
    enrollments: Optional[List[EnrollmentRead]] = None

    class Config:
        from_attributes = True

class ViewPayload(BaseModel):
    """A re-rendered form or page: model, view data and model-state errors."""
    model: Any = None
    view_data: Dict[str, Any] = {}
    errors: Dict[str, List[str]] = {}
