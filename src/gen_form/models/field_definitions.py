"""
Field definition models for form code generation.

A form is an ordered list of field descriptors. Each descriptor is a
frozen pydantic model; the concrete class is selected by ``kind`` so that
only Radio and Select fields ever carry an ``options`` list.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from gen_form.naming import slugify


class FieldKind(str, Enum):
    """Closed set of field kinds the generator knows how to emit."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    DATE = "date"

    @property
    def display_label(self) -> str:
        return FIELD_KIND_LABELS[self]

    @property
    def has_options(self) -> bool:
        return self in CHOICE_KINDS


FIELD_KIND_LABELS: dict[FieldKind, str] = {
    FieldKind.TEXT: "Text Input",
    FieldKind.TEXTAREA: "Textarea",
    FieldKind.SELECT: "Select",
    FieldKind.CHECKBOX: "Checkbox",
    FieldKind.RADIO: "Radio",
    FieldKind.DATE: "Date",
    FieldKind.NUMBER: "Number",
}

# Order in which an editor offers the kinds
FIELD_KIND_CHOICES: list[tuple[FieldKind, str]] = list(FIELD_KIND_LABELS.items())

CHOICE_KINDS = frozenset({FieldKind.RADIO, FieldKind.SELECT})


class Option(BaseModel):
    """A selectable option of a Radio or Select field."""

    label: str = Field(default="", description="Human-readable option label")
    value: str = Field(default="", description="Slug of the label, used as the enum value")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _derive_value(cls, data):
        if isinstance(data, str):
            return {"label": data, "value": slugify(data)}
        if isinstance(data, dict) and not data.get("value"):
            return {**data, "value": slugify(data.get("label", ""))}
        return data

    @classmethod
    def from_label(cls, label: str) -> "Option":
        return cls(label=label, value=slugify(label))

    @property
    def is_well_formed(self) -> bool:
        return bool(self.label.strip()) and bool(self.value.strip())


DEFAULT_OPTION = Option(label="Option 1", value="option_1")


class BaseField(BaseModel):
    """
    Attributes shared by every field kind.

    ``id`` and ``kind`` never change after creation. ``name`` is derived
    from ``label`` by the store and must stay unique within a form.
    """

    id: str = Field(..., description="Stable field identity")
    label: str = Field(default="", description="Human-facing label")
    name: str = Field(..., description="Schema key and form data key")
    description: str = Field(default="", description="Help text shown below the control")
    is_optional: bool = Field(default=False, alias="isOptional")
    is_disabled: bool = Field(default=False, alias="isDisabled")
    default_value: str = Field(default="", alias="defaultValue")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    @property
    def field_kind(self) -> FieldKind:
        return FieldKind(self.kind)


class TextField(BaseField):
    kind: Literal["text"] = "text"


class TextareaField(BaseField):
    kind: Literal["textarea"] = "textarea"


class NumberField(BaseField):
    """Number input; validated as a string by the emitted schema."""

    kind: Literal["number"] = "number"


class CheckboxField(BaseField):
    kind: Literal["checkbox"] = "checkbox"


class DateField(BaseField):
    kind: Literal["date"] = "date"


class ChoiceField(BaseField):
    """Base for fields that offer a fixed list of options."""

    options: list[Option] = Field(
        default_factory=lambda: [DEFAULT_OPTION],
        description="Options in display order",
    )

    @property
    def well_formed_options(self) -> list[Option]:
        return [option for option in self.options if option.is_well_formed]


class RadioField(ChoiceField):
    kind: Literal["radio"] = "radio"


class SelectField(ChoiceField):
    kind: Literal["select"] = "select"


FieldDescriptor = Annotated[
    Union[
        TextField,
        TextareaField,
        NumberField,
        CheckboxField,
        DateField,
        RadioField,
        SelectField,
    ],
    Field(discriminator="kind"),
]

FIELD_CLASSES: dict[FieldKind, type[BaseField]] = {
    FieldKind.TEXT: TextField,
    FieldKind.TEXTAREA: TextareaField,
    FieldKind.NUMBER: NumberField,
    FieldKind.CHECKBOX: CheckboxField,
    FieldKind.DATE: DateField,
    FieldKind.RADIO: RadioField,
    FieldKind.SELECT: SelectField,
}

_field_list_adapter = TypeAdapter(list[FieldDescriptor])


def parse_fields(data: list[dict]) -> list[BaseField]:
    """Validate a JSON-style list of field dicts into descriptors."""
    return _field_list_adapter.validate_python(data)


def dump_fields(fields: list[BaseField]) -> list[dict]:
    """Dump descriptors to JSON-ready dicts using the camelCase aliases."""
    return [field.model_dump(mode="json", by_alias=True) for field in fields]


class FieldPatch(BaseModel):
    """
    Partial update of a field.

    Only attributes that are set are applied. ``id``, ``kind`` and ``name``
    cannot be patched; ``name`` follows ``label``.
    """

    label: str | None = None
    description: str | None = None
    is_optional: bool | None = Field(default=None, alias="isOptional")
    is_disabled: bool | None = Field(default=None, alias="isDisabled")
    default_value: str | None = Field(default=None, alias="defaultValue")
    options: list[Option] | None = None

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    def changes(self) -> dict:
        """Return the attributes explicitly set on this patch."""
        return {
            key: getattr(self, key)
            for key in self.model_fields_set
            if getattr(self, key) is not None
        }
