"""
Model binding: copy submitted form values onto an entity.

Only whitelisted fields are bound, so a form cannot overwrite ids or
relationships.
"""
import abc
from typing import Sequence

from pydantic import BaseModel, ValidationError

def add_validation_errors(model_state, error: ValidationError):
    """Record each failing field of a pydantic ValidationError as a model error."""
    for item in error.errors():
        field_name = ".".join(str(part) for part in item["loc"])
        model_state.add_model_error(field_name, item["msg"])

class ModelBinder(abc.ABC):
    @abc.abstractmethod
    async def try_update_model(self, controller, model, prefix: str, fields: Sequence[str]) -> bool:
        """
            Bind controller.form onto model.
            Returns False and records model errors on the controller when binding fails.
        """
        raise NotImplementedError


class FormModelBinder(ModelBinder):
    def __init__(self, schema: type[BaseModel]):
        self.schema = schema

    def _values(self, form: dict, model, prefix: str, fields: Sequence[str]) -> dict:
        values = {}
        for name in fields:
            key = f"{prefix}.{name}" if prefix else name
            if key in form:
                values[name] = form[key]
            else:
                # Fields missing from the form keep their current value
                values[name] = getattr(model, name)
        return values

    async def try_update_model(self, controller, model, prefix: str, fields: Sequence[str]) -> bool:
        values = self._values(controller.form or {}, model, prefix, fields)
        try:
            bound = self.schema(**values)
        except ValidationError as e:
            add_validation_errors(controller.model_state, e)
            return False

        for name in fields:
            setattr(model, name, getattr(bound, name))
        return True
