from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from university.controllers.model_state import ModelState

@dataclass
class ObjectResult:
    value: Any
    status_code: int = 200

@dataclass
class ViewResult:
    model: Any = None
    view_data: Dict[str, Any] = field(default_factory=dict)
    model_state: ModelState = field(default_factory=ModelState)
    status_code: int = 200

@dataclass
class RedirectToActionResult:
    action_name: str
    route_values: Optional[Dict[str, Any]] = None
    status_code: int = 302

@dataclass
class NotFoundResult:
    status_code: int = 404
