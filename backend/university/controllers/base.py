from typing import Any, Dict, Optional

from university.controllers.model_state import ModelState
from university.controllers.results import (
    NotFoundResult, ObjectResult, RedirectToActionResult, ViewResult
)

class Controller:
    """
        Per-request state shared by controller actions.
        One instance serves one request: view_data and model_state start empty.
    """

    def __init__(self):
        self.model_state = ModelState()
        self.view_data: Dict[str, Any] = {}
        # Submitted form values, filled in by the router before a POST action runs
        self.form: Dict[str, Any] = {}

    def view(self, model: Any = None) -> ViewResult:
        return ViewResult(model=model, view_data=self.view_data, model_state=self.model_state)

    def not_found(self) -> NotFoundResult:
        return NotFoundResult()

    def ok(self, value: Any, status_code: int = 200) -> ObjectResult:
        return ObjectResult(value=value, status_code=status_code)

    def redirect_to_action(self, action_name: str, route_values: Optional[Dict[str, Any]] = None):
        return RedirectToActionResult(action_name=action_name, route_values=route_values)
