from typing import Iterable, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def check_required_params(given, required: Iterable[str]) -> None:
    """Raise for the first required name missing from ``given`` (a body or its keys)."""
    if isinstance(given, Mapping):
        given = list(given.keys())

    for param in required:
        if param not in given:
            raise ValidationError(f"'{param}' is required", field=param)


def parse_body(model: Type[ModelT], data: Mapping, required: Iterable[str] = ()) -> ModelT:
    """Check required fields, then build the typed request model."""
    check_required_params(data, required)
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ValidationError(f"'{field}' {error['msg'].lower()}", field=field) from e
