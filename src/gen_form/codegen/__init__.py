"""
Code emitters for Gen-Form.

Each emitter turns part of the field model into a ``Block``; ``render``
serializes blocks to text.
"""

from gen_form.codegen.component import (
    component_name,
    default_value,
    emit_component,
    emit_module,
)
from gen_form.codegen.dialect import derive_untyped, has_type_annotations
from gen_form.codegen.imports import (
    IMPORT_TABLE,
    ImportStatement,
    emit_imports,
    resolve_imports,
    resolve_symbols,
)
from gen_form.codegen.render import Block, render
from gen_form.codegen.schema import emit_schema, render_schema, schema_rule
from gen_form.codegen.widgets import emit_control, emit_widget, render_widget

__all__ = [
    "Block",
    "render",
    "IMPORT_TABLE",
    "ImportStatement",
    "resolve_imports",
    "resolve_symbols",
    "emit_imports",
    "schema_rule",
    "emit_schema",
    "render_schema",
    "emit_control",
    "emit_widget",
    "render_widget",
    "component_name",
    "default_value",
    "emit_component",
    "emit_module",
    "derive_untyped",
    "has_type_annotations",
]
