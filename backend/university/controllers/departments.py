import logging
from datetime import datetime, timezone

from university.controllers.base import Controller
from university.models.departments import Department
from university.repositories.base import Repository

logger = logging.getLogger(__name__)

class DepartmentsController(Controller):
    """JSON API over departments."""

    def __init__(self, department_repo: Repository):
        super().__init__()
        self.departments = department_repo

    def get_all(self):
        return list(self.departments.get_all())

    def get_by_id(self, id: int):
        department = self.departments.get(id)
        if department is None:
            return self.not_found()
        return self.ok(department)

    def create(self, department: Department):
        now = datetime.now(timezone.utc)
        department.added_date = now
        department.modified_date = now
        self.departments.add(department)
        self.departments.save_changes()
        logger.info(f"Created department {department.id} ({department.name})")
        return self.ok(department, status_code=201)
