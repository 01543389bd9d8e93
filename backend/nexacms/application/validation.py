from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from nexacms.domain.errors import BadInput

T = TypeVar("T", bound=BaseModel)


def describe_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "body"
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def parse_input(schema: Type[T], data: Optional[Dict[str, Any]]) -> T:
    """Validate a request payload, reporting failures as BadInput."""
    if data is not None and not isinstance(data, dict):
        raise BadInput("Request body must be a JSON object")

    try:
        return schema.model_validate(data or {})
    except ValidationError as exc:
        raise BadInput(describe_errors(exc)) from exc
