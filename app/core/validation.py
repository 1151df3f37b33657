"""Schema validation of untrusted payloads.

``validate_payload`` is pure: it never touches persistence and returns the
same outcome for the same input. Routes get the same behaviour from FastAPI's
body parsing, whose errors are rendered through ``violations_from_errors``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)

# FastAPI prefixes request errors with where the value came from
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class Violation(BaseModel):
    path: str
    message: str


@dataclass(frozen=True)
class ValidationOutcome(Generic[M]):
    value: Optional[M] = None
    violations: List[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def violations_from_errors(
    errors: Iterable[Mapping[str, Any]], strip_location: bool = False
) -> List[Violation]:
    """Collapse pydantic error dicts into one violation per field path."""
    violations: List[Violation] = []
    seen = set()
    for error in errors:
        loc = list(error.get("loc") or ())
        if strip_location and loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        path = ".".join(str(part) for part in loc)
        if path in seen:
            continue
        seen.add(path)
        violations.append(Violation(path=path, message=str(error.get("msg", ""))))
    return violations


def validate_payload(schema: Type[M], data: Any) -> ValidationOutcome[M]:
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        return ValidationOutcome(violations=violations_from_errors(exc.errors()))
    return ValidationOutcome(value=value)
