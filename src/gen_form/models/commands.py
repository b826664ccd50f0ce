"""
Store commands.

Every change to a form model is expressed as one of these values and
applied to an immutable snapshot by ``gen_form.store.apply_command``.
Keeping them as data makes a session replayable.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from gen_form.models.field_definitions import FieldKind, FieldPatch


class AddField(BaseModel):
    """Append a new field of ``kind`` with default attributes."""

    type: Literal["add_field"] = "add_field"
    kind: FieldKind = Field(..., description="Kind of the new field")

    model_config = {"frozen": True}


class UpdateField(BaseModel):
    """Merge ``patch`` into the field identified by ``field_id``."""

    type: Literal["update_field"] = "update_field"
    field_id: str
    patch: FieldPatch

    model_config = {"frozen": True}


class RemoveField(BaseModel):
    type: Literal["remove_field"] = "remove_field"
    field_id: str

    model_config = {"frozen": True}


class ReorderField(BaseModel):
    """Move the field at ``from_index`` to ``to_index``."""

    type: Literal["reorder_field"] = "reorder_field"
    from_index: int
    to_index: int

    model_config = {"frozen": True}


class AddOption(BaseModel):
    """Append an empty option to a Radio or Select field."""

    type: Literal["add_option"] = "add_option"
    field_id: str

    model_config = {"frozen": True}


class UpdateOption(BaseModel):
    """Relabel an option; its value follows the label."""

    type: Literal["update_option"] = "update_option"
    field_id: str
    index: int
    label: str

    model_config = {"frozen": True}


class RemoveOption(BaseModel):
    type: Literal["remove_option"] = "remove_option"
    field_id: str
    index: int

    model_config = {"frozen": True}


class CleanOptions(BaseModel):
    """Drop malformed options, falling back to the default option."""

    type: Literal["clean_options"] = "clean_options"
    field_id: str

    model_config = {"frozen": True}


Command = Annotated[
    Union[
        AddField,
        UpdateField,
        RemoveField,
        ReorderField,
        AddOption,
        UpdateOption,
        RemoveOption,
        CleanOptions,
    ],
    Field(discriminator="type"),
]

_command_adapter = TypeAdapter(Command)


def parse_command(data: dict) -> Command:
    """Validate a JSON-style dict into a command value."""
    return _command_adapter.validate_python(data)
