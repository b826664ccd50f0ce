"""
Data models for Gen-Form.

This module contains Pydantic models for:
- Field descriptors (one model per field kind)
- Store commands
- Generated code output
"""

from gen_form.models.field_definitions import (
    CHOICE_KINDS,
    DEFAULT_OPTION,
    FIELD_CLASSES,
    FIELD_KIND_CHOICES,
    BaseField,
    CheckboxField,
    ChoiceField,
    DateField,
    FieldDescriptor,
    FieldKind,
    FieldPatch,
    NumberField,
    Option,
    RadioField,
    SelectField,
    TextareaField,
    TextField,
    dump_fields,
    parse_fields,
)
from gen_form.models.commands import (
    AddField,
    AddOption,
    CleanOptions,
    Command,
    RemoveField,
    RemoveOption,
    ReorderField,
    UpdateField,
    UpdateOption,
    parse_command,
)
from gen_form.models.generated_code import GeneratedCode

__all__ = [
    # Field descriptors
    "FieldKind",
    "FIELD_KIND_CHOICES",
    "CHOICE_KINDS",
    "FIELD_CLASSES",
    "Option",
    "DEFAULT_OPTION",
    "BaseField",
    "ChoiceField",
    "TextField",
    "TextareaField",
    "NumberField",
    "CheckboxField",
    "DateField",
    "RadioField",
    "SelectField",
    "FieldDescriptor",
    "FieldPatch",
    "parse_fields",
    "dump_fields",
    # Commands
    "Command",
    "AddField",
    "UpdateField",
    "RemoveField",
    "ReorderField",
    "AddOption",
    "UpdateOption",
    "RemoveOption",
    "CleanOptions",
    "parse_command",
    # Output
    "GeneratedCode",
]
