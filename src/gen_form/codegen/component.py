"""
Form component emitter.

Composes the pieces produced by the other emitters into one module:
imports, the zod schema, and an exported React component holding the
``useForm`` hook, default values, a submit handler stub and the field
widgets.
"""

import re
from typing import Iterable

from gen_form.codegen.constants import INFERRED_TYPE, SCHEMA_NAME, SUBMIT_HANDLER_COMMENT
from gen_form.codegen.imports import ImportStatement, emit_imports
from gen_form.codegen.render import Block, js_key, js_string, jsx_text
from gen_form.codegen.schema import emit_schema
from gen_form.codegen.widgets import emit_widget
from gen_form.models.field_definitions import BaseField, FieldKind

_WHITESPACE = re.compile(r"\s+")


def component_name(form_title: str, fallback: str = "GeneratedForm") -> str:
    """Form title with all whitespace removed, or ``fallback`` when that is empty."""
    return _WHITESPACE.sub("", form_title) or fallback


def default_value(field: BaseField) -> str:
    """JavaScript expression for the initial value of ``field``."""
    kind = field.field_kind
    if kind == FieldKind.CHECKBOX:
        return "false"
    if kind == FieldKind.DATE:
        return "undefined"
    if not field.default_value.strip():
        return "undefined"
    return js_string(field.default_value)


def emit_default_values(fields: Iterable[BaseField]) -> Block:
    return Block(
        [
            "defaultValues: {",
            Block([f"{js_key(field.name)}: {default_value(field)}," for field in fields]),
            "},",
        ],
        indent=0,
    )


def emit_component(
    fields: list[BaseField],
    name: str,
    form_title: str,
    form_description: str,
    submit_text: str = "Submit",
) -> Block:
    """Emit the exported component function."""
    form_hook = Block([
        f"const form = useForm<{INFERRED_TYPE}>({{",
        Block([
            f"resolver: zodResolver({SCHEMA_NAME}),",
            emit_default_values(fields),
        ]),
        "})",
    ])
    submit_handler = Block([
        f"function onSubmit(values: {INFERRED_TYPE}) {{",
        Block([SUBMIT_HANDLER_COMMENT, "console.log(values)"]),
        "}",
    ])

    form_body = Block([emit_widget(field) for field in fields])
    form_body.add(f"<Button type=\"submit\">{jsx_text(submit_text)}</Button>")

    card = Block([
        '<Card className="w-full pt-12 mx-12">',
        Block([
            "<CardHeader>",
            Block([
                f"<CardTitle>{jsx_text(form_title)}</CardTitle>",
                f"<CardDescription>{jsx_text(form_description)}</CardDescription>",
            ]),
            "</CardHeader>",
            "<CardContent>",
            Block([
                "<Form {...form}>",
                Block([
                    '<form onSubmit={form.handleSubmit(onSubmit)} className="space-y-6">',
                    form_body,
                    "</form>",
                ]),
                "</Form>",
            ]),
            "</CardContent>",
        ]),
        "</Card>",
    ])
    render_block = Block(["return (", card, ")"])

    return Block(
        [
            f"export function {name}() {{",
            Block([form_hook, submit_handler, render_block], indent=0, gap=True),
            "}",
        ],
        indent=0,
    )


def emit_module(
    imports: list[ImportStatement],
    fields: list[BaseField],
    name: str,
    form_title: str,
    form_description: str,
    submit_text: str = "Submit",
) -> Block:
    """Emit the complete typed module."""
    return Block(
        [
            emit_imports(imports),
            emit_schema(fields),
            emit_component(fields, name, form_title, form_description, submit_text),
        ],
        indent=0,
        gap=True,
    )
