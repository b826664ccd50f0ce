"""Tests for the schema emitter."""

import pytest

from gen_form.codegen.schema import render_schema, schema_clause, schema_rule
from gen_form.models.field_definitions import (
    CheckboxField,
    DateField,
    NumberField,
    Option,
    RadioField,
    SelectField,
    TextareaField,
    TextField,
)


class TestSchemaRule:
    """Tests for per-kind zod rules."""

    def test_required_string(self):
        """Required text fields need at least one character."""
        field = TextField(id="a", name="full_name", label="Full Name")
        assert schema_rule(field) == 'z.string().min(1, { message: "Full Name is required" })'

    @pytest.mark.parametrize("field_class", [TextField, TextareaField, NumberField])
    def test_optional_string(self, field_class):
        """Optional string kinds skip the minimum and allow undefined."""
        field = field_class(id="a", name="x", label="X", is_optional=True)
        assert schema_rule(field) == "z.string().optional()"

    def test_number_is_string(self):
        """Number fields are validated as strings."""
        field = NumberField(id="a", name="age", label="Age")
        assert schema_rule(field).startswith("z.string()")

    def test_date(self):
        """Date fields have no custom required message."""
        assert schema_rule(DateField(id="a", name="dob", label="Birthday")) == "z.date()"
        optional = DateField(id="a", name="dob", label="Birthday", is_optional=True)
        assert schema_rule(optional) == "z.date().optional()"

    def test_checkbox(self):
        """Checkboxes are booleans."""
        assert schema_rule(CheckboxField(id="a", name="agree")) == "z.boolean()"
        optional = CheckboxField(id="a", name="agree", is_optional=True)
        assert schema_rule(optional) == "z.boolean().optional()"

    @pytest.mark.parametrize("field_class", [RadioField, SelectField])
    def test_enum(self, field_class):
        """Choice fields enumerate their option values in order."""
        field = field_class(
            id="a",
            name="size",
            options=[Option(label="Small"), Option(label="Extra Large")],
        )
        assert schema_rule(field) == "z.enum(['small', 'extra_large'])"

    def test_label_escaped(self):
        """Quotes and angle brackets in labels cannot break the literal."""
        field = TextField(id="a", name="x", label='Say "hi" <now>')
        assert schema_rule(field) == (
            'z.string().min(1, { message: "Say \\"hi\\" \\u003cnow> is required" })'
        )

    def test_enum_values_escaped(self):
        """Option values are quoted as JS strings."""
        field = SelectField(id="a", name="x", options=[Option(label="It's")])
        assert schema_rule(field) == "z.enum(['it\\'s'])"


class TestSchemaClause:
    """Tests for schema keys."""

    def test_plain_key(self):
        """Identifier names are used as bare keys."""
        assert schema_clause(CheckboxField(id="a", name="agree")) == "agree: z.boolean(),"

    def test_quoted_key(self):
        """Names with punctuation are quoted."""
        field = CheckboxField(id="a", name="email_(work)")
        assert schema_clause(field) == "'email_(work)': z.boolean(),"


class TestRenderSchema:
    """Tests for the complete schema declaration."""

    def test_signup_schema(self):
        """One clause per field, in field order."""
        fields = [
            TextField(id="field-1", name="full_name", label="Full Name"),
            CheckboxField(id="field-2", name="subscribe", label="Subscribe", is_optional=True),
        ]
        assert render_schema(fields) == "\n".join([
            "const formSchema = z.object({",
            '  full_name: z.string().min(1, { message: "Full Name is required" }),',
            "  subscribe: z.boolean().optional(),",
            "})",
        ])

    def test_indent_unit(self):
        """Indentation follows the given unit."""
        text = render_schema([CheckboxField(id="a", name="agree")], indent_unit="    ")
        assert "\n    agree: z.boolean(),\n" in text
