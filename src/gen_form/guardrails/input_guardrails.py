"""
Input guardrails for Gen-Form.

These checks run on the field list before any code is emitted.
"""

import logging
import re
from collections import Counter

from pydantic import BaseModel, Field

from gen_form.exceptions import EmptyModelError, NameCollisionError
from gen_form.models.field_definitions import BaseField

logger = logging.getLogger("gen-form")

# Names outside this pattern are still emitted, as quoted object keys
PLAIN_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class FieldModelCheckResult(BaseModel):
    """Result of checking a field list before generation."""

    is_valid: bool = Field(..., description="Whether generation may proceed")
    errors: list[str] = Field(default_factory=list, description="Blocking problems")
    warnings: list[str] = Field(default_factory=list, description="Non-blocking findings")


def _duplicate_names(fields: list[BaseField]) -> list[str]:
    counts = Counter(field.name for field in fields)
    return [name for name, count in counts.items() if count > 1]


def check_field_model(fields: list[BaseField]) -> FieldModelCheckResult:
    """
    Inspect ``fields`` without raising.

    Checks for:
    1. At least one field
    2. Unique names
    3. Names that are not plain identifiers (warning only)
    """
    errors = []
    warnings = []

    if not fields:
        errors.append(str(EmptyModelError()))

    duplicates = _duplicate_names(fields)
    if duplicates:
        errors.append(str(NameCollisionError(duplicates)))

    for field in fields:
        if not PLAIN_IDENTIFIER.match(field.name):
            warnings.append(f"Field name '{field.name}' is not a plain identifier")

    return FieldModelCheckResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def empty_model_guardrail(fields: list[BaseField]) -> None:
    """Refuse to generate a form without fields."""
    if not fields:
        raise EmptyModelError()


def name_collision_guardrail(fields: list[BaseField]) -> None:
    """
    Fail hard on duplicate names.

    The store cannot produce duplicates, so this indicates a defect.
    """
    duplicates = _duplicate_names(fields)
    if duplicates:
        logger.error(f"Duplicate field names reached the generator: {duplicates}")
        raise NameCollisionError(duplicates)
