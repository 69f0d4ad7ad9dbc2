from typing import List, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from university.controllers.binding import add_validation_errors
from university.controllers.instructors import COURSES_KEY, InstructorIndexData, InstructorsController
from university.controllers.results import NotFoundResult, RedirectToActionResult, ViewResult
from university.dependencies.controllers import get_instructors_controller
from university.models.instructors import Instructor
from university.schemas.courses import AssignedCourse, CourseBase, EnrollmentRead
from university.schemas.instructors import (
    InstructorForm, InstructorIndexRead, InstructorRead, ViewPayload
)

router = APIRouter(prefix="/instructors", tags=["Instructors"])

# Controller action name -> route name
ACTION_ROUTES = {
    "Index": "instructors:index",
}

def _serialize_model(model):
    if model is None:
        return None
    if isinstance(model, InstructorIndexData):
        return InstructorIndexRead(
            instructors=[InstructorRead.model_validate(i) for i in model.instructors],
            courses=None if model.courses is None else [
                CourseBase.model_validate(c) for c in model.courses if c is not None
            ],
            enrollments=None if model.enrollments is None else [
                EnrollmentRead.model_validate(e) for e in model.enrollments
            ],
        ).model_dump(mode="json")
    if isinstance(model, Instructor):
        return InstructorRead.model_validate(model).model_dump(mode="json")
    return model

def _serialize_view_data(view_data: dict):
    serialized = dict(view_data)
    if COURSES_KEY in serialized:
        serialized[COURSES_KEY] = [
            AssignedCourse.model_validate(course).model_dump() for course in serialized[COURSES_KEY]
        ]
    return serialized

def render(request: Request, result):
    """Turn a controller action result into an HTTP response."""
    if isinstance(result, NotFoundResult):
        raise HTTPException(status_code=404, detail="Instructor not found")
    if isinstance(result, RedirectToActionResult):
        url = request.url_for(ACTION_ROUTES[result.action_name], **(result.route_values or {}))
        return RedirectResponse(url=str(url), status_code=result.status_code)
    if isinstance(result, ViewResult):
        return ViewPayload(
            model=_serialize_model(result.model),
            view_data=_serialize_view_data(result.view_data),
            errors=result.model_state.to_dict(),
        )
    raise TypeError(f"Unsupported action result {type(result).__name__}")

def _bind_form(controller: InstructorsController, **fields):
    """
        Validate submitted fields, recording failures as model errors
        instead of rejecting the request.
    """
    controller.form = {name: value for name, value in fields.items() if value is not None}
    try:
        form = InstructorForm(**controller.form)
    except ValidationError as e:
        add_validation_errors(controller.model_state, e)
        return Instructor(**{k: v for k, v in controller.form.items() if k != "hire_date"})
    return Instructor(**form.model_dump())

@router.get("/", response_model=ViewPayload, name="instructors:index")
async def list_instructors(
    request: Request,
    instructor_id: Optional[int] = None,
    course_id: Optional[int] = None,
    controller: InstructorsController = Depends(get_instructors_controller)
):
    """
        List instructors. Pass instructor_id to include that instructor's courses
        and course_id to include that course's enrollments.
    """
    return render(request, await controller.index(instructor_id, course_id))

@router.get("/create", response_model=ViewPayload)
def create_form(request: Request, controller: InstructorsController = Depends(get_instructors_controller)):
    """
        Blank instructor form with the list of courses that can be assigned.
    """
    return render(request, controller.create())

@router.post("/create")
async def create_instructor(
    request: Request,
    first_mid_name: Optional[str] = Form(None),
    last_name: Optional[str] = Form(None),
    hire_date: Optional[str] = Form(None),
    selected_courses: List[str] = Form([]),
    controller: InstructorsController = Depends(get_instructors_controller)
):
    """
        Create an instructor from form data.
        Redirects to the instructor list, or returns the form with errors.
    """
    instructor = _bind_form(
        controller,
        first_mid_name=first_mid_name,
        last_name=last_name,
        hire_date=hire_date or None,
    )
    return render(request, await controller.create_post(instructor, selected_courses))

@router.get("/edit/{instructor_id}", response_model=ViewPayload)
async def edit_form(
    request: Request,
    instructor_id: int,
    controller: InstructorsController = Depends(get_instructors_controller)
):
    """
        Instructor form pre-filled for editing.
    """
    return render(request, await controller.edit(instructor_id))

@router.post("/edit/{instructor_id}")
async def edit_instructor(
    request: Request,
    instructor_id: int,
    first_mid_name: Optional[str] = Form(None),
    last_name: Optional[str] = Form(None),
    hire_date: Optional[str] = Form(None),
    selected_courses: List[str] = Form([]),
    controller: InstructorsController = Depends(get_instructors_controller)
):
    """
        Update an instructor's name, hire date and course assignments.
    """
    fields = {"first_mid_name": first_mid_name, "last_name": last_name, "hire_date": hire_date or None}
    controller.form = {name: value for name, value in fields.items() if value is not None}
    return render(request, await controller.edit_post(instructor_id, selected_courses))

@router.get("/{instructor_id}", response_model=ViewPayload)
async def instructor_details(
    request: Request,
    instructor_id: int,
    controller: InstructorsController = Depends(get_instructors_controller)
):
    """
        Get an instructor by ID.
    """
    return render(request, await controller.details(instructor_id))
