from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional

class DepartmentBase(BaseModel):
    name: str
    budget: float
    start_date: Optional[date] = None
    instructor_id: Optional[int] = None

class DepartmentCreate(DepartmentBase):
    pass

class DepartmentRead(DepartmentBase):
    id: int
    added_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None

    class Config:
        from_attributes = True
