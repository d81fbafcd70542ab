# backend/utils/validation.py
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import ValidationError

from schemas.product import FieldViolation, ProductDTO

# Location prefixes FastAPI adds in front of the field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldViolation]:
    """Flatten pydantic/FastAPI error dicts into field-level violations."""
    violations = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        message = err.get("msg", "Invalid value")
        # pydantic prefixes custom validator messages with "Value error, "
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        violations.append(FieldViolation(field=field, message=message))
    return violations


def validate_product(data: Dict[str, Any]) -> List[FieldViolation]:
    """Check a raw product payload against the ProductDTO constraints.

    Returns an empty list when the payload is valid.
    """
    try:
        ProductDTO.model_validate(data)
    except ValidationError as e:
        return violations_from_errors(e.errors())
    return []
