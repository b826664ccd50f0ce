"""
Guardrails for Gen-Form.

Checks run on the field list before generation and on the generated code
afterwards.
"""

from gen_form.guardrails.input_guardrails import (
    check_field_model,
    empty_model_guardrail,
    name_collision_guardrail,
)
from gen_form.guardrails.output_guardrails import (
    dialect_guardrail,
    validate_generated_code,
)

__all__ = [
    "check_field_model",
    "empty_model_guardrail",
    "name_collision_guardrail",
    "dialect_guardrail",
    "validate_generated_code",
]
