"""
Output guardrails for Gen-Form.

These checks validate generated code before it is returned.
"""

from pydantic import BaseModel, Field

from gen_form.codegen.constants import SCHEMA_NAME
from gen_form.codegen.dialect import has_type_annotations
from gen_form.exceptions import DialectDerivationError
from gen_form.models.generated_code import GeneratedCode


class CodeValidationResult(BaseModel):
    """Result of generated code validation."""

    is_valid: bool = Field(..., description="Whether the code is valid")
    errors: list[str] = Field(
        default_factory=list, description="List of validation errors"
    )


def validate_generated_code(code: GeneratedCode) -> CodeValidationResult:
    """
    Check the structure of both dialects.

    Ensures:
    1. Both dialects declare the schema and export the component
    2. The untyped dialect carries no type annotations
    3. The dialects differ only where annotations were stripped
    """
    errors = []

    for dialect, text in (("typescript", code.typescript), ("javascript", code.javascript)):
        if f"const {SCHEMA_NAME} = z.object({{" not in text:
            errors.append(f"{dialect}: schema declaration missing")
        if f"export function {code.component_name}()" not in text:
            errors.append(f"{dialect}: component '{code.component_name}' not exported")

    if has_type_annotations(code.javascript):
        errors.append("javascript: type annotations left in untyped dialect")

    if code.typescript.count("\n") != code.javascript.count("\n"):
        errors.append("javascript: line structure differs from typescript")

    return CodeValidationResult(is_valid=len(errors) == 0, errors=errors)


def dialect_guardrail(code: GeneratedCode) -> None:
    """Raise ``DialectDerivationError`` when the generated pair is inconsistent."""
    result = validate_generated_code(code)
    if not result.is_valid:
        raise DialectDerivationError("; ".join(result.errors))
