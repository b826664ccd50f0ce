"""
Schema emitter.

Emits the zod object schema of a form: one clause per field, in field
order. Number fields are validated as strings; coercion is left to the
consuming code.
"""

from typing import Iterable

from gen_form.codegen.constants import REQUIRED_MESSAGE_TEMPLATE, SCHEMA_NAME
from gen_form.codegen.render import Block, js_key, js_string, render
from gen_form.models.field_definitions import BaseField, ChoiceField, FieldKind

_STRING_KINDS = frozenset({FieldKind.TEXT, FieldKind.TEXTAREA, FieldKind.NUMBER})


def schema_rule(field: BaseField) -> str:
    """
    Zod rule for one field, without the key.

    Example:
        >>> schema_rule(TextField(id="f1", name="full_name", label="Full Name"))
        'z.string().min(1, { message: "Full Name is required" })'
    """
    kind = field.field_kind

    if kind in _STRING_KINDS:
        rule = "z.string()"
        if not field.is_optional:
            message = js_string(REQUIRED_MESSAGE_TEMPLATE.format(label=field.label), quote='"')
            rule += f".min(1, {{ message: {message} }})"
    elif kind == FieldKind.DATE:
        rule = "z.date()"
    elif kind == FieldKind.CHECKBOX:
        rule = "z.boolean()"
    elif isinstance(field, ChoiceField):
        values = ", ".join(js_string(option.value) for option in field.options)
        rule = f"z.enum([{values}])"
    else:
        raise ValueError(f"Unsupported field kind: {kind}")

    if field.is_optional:
        rule += ".optional()"
    return rule


def schema_clause(field: BaseField) -> str:
    return f"{js_key(field.name)}: {schema_rule(field)},"


def emit_schema(fields: Iterable[BaseField]) -> Block:
    """Emit ``const formSchema = z.object({...})`` for ``fields``."""
    return Block(
        [
            f"const {SCHEMA_NAME} = z.object({{",
            Block([schema_clause(field) for field in fields]),
            "})",
        ],
        indent=0,
    )


def render_schema(fields: Iterable[BaseField], indent_unit: str = "  ") -> str:
    return render(emit_schema(fields), indent_unit)
