"""Plain value objects and their JSON round trip."""

import json
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict

ModelT = TypeVar("ModelT", bound=BaseModel)


class Rectangle(BaseModel):
    """Rectangle with width and height.

    Fields not declared here are kept when an instance is loaded from JSON.
    """

    model_config = ConfigDict(extra="allow")

    # ints stay ints so the JSON text matches the input numbers
    width: Union[int, float]
    height: Union[int, float]

    def get_area(self) -> Union[int, float]:
        return self.width * self.height


def _encode(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of ``obj``.

    Examples:
        [1, 2, 3] -> '[1,2,3]'
        Rectangle(width=10, height=20) -> '{"width":10,"height":20}'
    """
    return json.dumps(obj, default=_encode, separators=(",", ":"))


def from_json(model_cls: Type[ModelT], json_text: str) -> ModelT:
    """Create an instance of ``model_cls`` from its JSON representation."""
    return model_cls.model_validate(json.loads(json_text))
