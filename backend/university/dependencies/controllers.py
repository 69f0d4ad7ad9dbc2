from fastapi import Depends
from sqlalchemy.orm import Session

from university.database import SessionLocal
from university.controllers.binding import FormModelBinder
from university.controllers.departments import DepartmentsController
from university.controllers.instructors import InstructorsController
from university.models import Department, Instructor, Course, CourseAssignment
from university.repositories.sql import SqlAlchemyRepository, SqlAlchemyPersonRepository
from university.schemas.instructors import InstructorForm

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_departments_controller(db: Session = Depends(get_db)):
    return DepartmentsController(SqlAlchemyRepository(db, Department))

def get_instructors_controller(db: Session = Depends(get_db)):
    return InstructorsController(
        SqlAlchemyPersonRepository(db, Instructor),
        SqlAlchemyRepository(db, Department),
        SqlAlchemyRepository(db, Course),
        SqlAlchemyRepository(db, CourseAssignment),
        FormModelBinder(InstructorForm),
    )
