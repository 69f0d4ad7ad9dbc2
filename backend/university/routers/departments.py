import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from typing import List

from university.controllers.departments import DepartmentsController
from university.controllers.results import NotFoundResult
from university.dependencies.controllers import get_departments_controller
from university.models.departments import Department
from university.schemas.departments import DepartmentCreate, DepartmentRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/departments", tags=["Departments"])

@router.get("/", response_model=List[DepartmentRead])
def list_departments(controller: DepartmentsController = Depends(get_departments_controller)):
    """
        List all departments.
    """
    return controller.get_all()

@router.get("/{department_id}", response_model=DepartmentRead, name="departments:get")
def get_department(department_id: int, controller: DepartmentsController = Depends(get_departments_controller)):
    """
        Get a department by ID.
    """
    result = controller.get_by_id(department_id)
    if isinstance(result, NotFoundResult):
        raise HTTPException(status_code=404, detail="Department not found")
    return result.value

@router.post("/", response_model=DepartmentRead, status_code=201)
def add_department(department: DepartmentCreate, controller: DepartmentsController = Depends(get_departments_controller)):
    """
        Create a new department.
        Expects JSON: { "name": "Physics", "budget": 200000, "start_date": "2024-09-01", "instructor_id": 3 }
    """
    try:
        result = controller.create(Department(**department.model_dump()))
    except SQLAlchemyError as e:
        logger.error(f"Department creation failed: {str(e)}", exc_info=True)
        raise HTTPException(status_code=400, detail="Department could not be saved, check instructor_id")
    return result.value
