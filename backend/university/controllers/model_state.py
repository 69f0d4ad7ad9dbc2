from collections import OrderedDict
from typing import Dict, List

class ModelState:
    """
        Validation errors attached to a form submission, keyed by field name.
        The empty key holds form-level errors.
    """

    def __init__(self):
        self._errors: "OrderedDict[str, List[str]]" = OrderedDict()

    def add_model_error(self, key: str, message: str):
        self._errors.setdefault(key, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not any(self._errors.values())

    def keys(self):
        return self._errors.keys()

    def errors(self, key: str) -> List[str]:
        return list(self._errors.get(key, []))

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: list(messages) for key, messages in self._errors.items()}

    def __contains__(self, key):
        return key in self._errors

    def __len__(self):
        return len(self._errors)

    def __repr__(self):
        return f"ModelState({self.to_dict()!r})"
