"""
Widget emitter.

Each field kind maps to one control template. ``emit_widget`` wraps the
control in the ``FormField`` / ``FormItem`` shell shared by every kind:
label above the control (except checkboxes, whose label sits beside the
box), optional help text below it, and the validation message last.
"""

from typing import Callable

from gen_form.codegen.constants import (
    DATE_DISPLAY_FORMAT,
    DATE_FLOOR,
    DATE_PLACEHOLDER,
    DISABLED_CONDITION,
    SELECT_PLACEHOLDER,
)
from gen_form.codegen.render import Block, js_bool, jsx_attr, jsx_text, render
from gen_form.models.field_definitions import BaseField, ChoiceField, FieldKind

_INLINE_LABEL_CLASS = (
    "text-sm font-medium leading-none "
    "peer-disabled:cursor-not-allowed peer-disabled:opacity-70"
)


def _disabled(field: BaseField) -> str:
    condition = DISABLED_CONDITION.format(disabled=js_bool(field.is_disabled))
    return f"disabled={{{condition}}}"


def _input_control(field: BaseField) -> Block:
    return Block(
        [f"<Input {{...field}} type={jsx_attr(field.kind)} {_disabled(field)} />"],
        indent=0,
    )


def _textarea_control(field: BaseField) -> Block:
    return Block([f"<Textarea {{...field}} {_disabled(field)} />"], indent=0)


def _checkbox_control(field: BaseField) -> Block:
    return Block(
        [
            '<div className="flex items-center space-x-2">',
            Block([
                "<Checkbox",
                Block([
                    "checked={field.value}",
                    "onCheckedChange={field.onChange}",
                    _disabled(field),
                    "id={field.name}",
                ]),
                "/>",
                "<label",
                Block([
                    "htmlFor={field.name}",
                    f"className={jsx_attr(_INLINE_LABEL_CLASS)}",
                ]),
                ">",
                Block([jsx_text(field.label)]),
                "</label>",
            ]),
            "</div>",
        ],
        indent=0,
    )


def _radio_control(field: ChoiceField) -> Block:
    items = Block()
    for option in field.options:
        item_id = jsx_attr(f"{field.name}-{option.value}")
        items.add(
            '<div className="flex items-center space-x-2">',
            Block([
                f"<RadioGroupItem value={jsx_attr(option.value)} id={item_id} />",
                f"<FormLabel htmlFor={item_id}>{jsx_text(option.label)}</FormLabel>",
            ]),
            "</div>",
        )
    return Block(
        [
            "<RadioGroup",
            Block([
                "onValueChange={field.onChange}",
                "defaultValue={field.value}",
                _disabled(field),
            ]),
            ">",
            items,
            "</RadioGroup>",
        ],
        indent=0,
    )


def _select_control(field: ChoiceField) -> Block:
    items = Block([
        f"<SelectItem value={jsx_attr(option.value)}>{jsx_text(option.label)}</SelectItem>"
        for option in field.options
    ])
    return Block(
        [
            "<Select",
            Block([
                "onValueChange={field.onChange}",
                "defaultValue={field.value}",
                _disabled(field),
            ]),
            ">",
            Block([
                "<SelectTrigger>",
                Block([f"<SelectValue placeholder={jsx_attr(SELECT_PLACEHOLDER)} />"]),
                "</SelectTrigger>",
                "<SelectContent>",
                items,
                "</SelectContent>",
            ]),
            "</Select>",
        ],
        indent=0,
    )


def _date_control(field: BaseField) -> Block:
    trigger = Block([
        "<Button",
        Block([
            'variant="outline"',
            "className={cn(",
            Block([
                '"w-full justify-start text-left font-normal",',
                '!field.value && "text-muted-foreground"',
            ]),
            ")}",
            _disabled(field),
        ]),
        ">",
        Block([
            '<CalendarIcon className="mr-2 h-4 w-4" />',
            f'{{field.value ? format(field.value, "{DATE_DISPLAY_FORMAT}") '
            f": <span>{DATE_PLACEHOLDER}</span>}}",
        ]),
        "</Button>",
    ])
    calendar = Block([
        "<Calendar",
        Block([
            'mode="single"',
            "selected={field.value}",
            "onSelect={field.onChange}",
            "disabled={(date) =>",
            Block([f'date > new Date() || date < new Date("{DATE_FLOOR}")']),
            "}",
            "initialFocus",
        ]),
        "/>",
    ])
    return Block(
        [
            "<Popover>",
            Block(["<PopoverTrigger asChild>", trigger, "</PopoverTrigger>"]),
            Block(['<PopoverContent className="w-auto p-0">', calendar, "</PopoverContent>"]),
            "</Popover>",
        ],
        indent=0,
    )


CONTROL_EMITTERS: dict[FieldKind, Callable[..., Block]] = {
    FieldKind.TEXT: _input_control,
    FieldKind.NUMBER: _input_control,
    FieldKind.TEXTAREA: _textarea_control,
    FieldKind.CHECKBOX: _checkbox_control,
    FieldKind.RADIO: _radio_control,
    FieldKind.SELECT: _select_control,
    FieldKind.DATE: _date_control,
}


def emit_control(field: BaseField) -> Block:
    """Emit only the input control of ``field``."""
    return CONTROL_EMITTERS[field.field_kind](field)


def emit_widget(field: BaseField) -> Block:
    """Emit the complete ``<FormField>`` element for ``field``."""
    label = None
    if field.field_kind != FieldKind.CHECKBOX:
        label = f"<FormLabel>{jsx_text(field.label)}</FormLabel>"

    description = None
    if field.description.strip():
        description = f"<FormDescription>{jsx_text(field.description)}</FormDescription>"

    item = Block(
        [
            "<FormItem>",
            Block([
                label,
                "<FormControl>",
                Block([emit_control(field)]),
                "</FormControl>",
                description,
                "<FormMessage />",
            ]),
            "</FormItem>",
        ],
        indent=2,
    )
    return Block(
        [
            "<FormField",
            Block([
                "control={form.control}",
                f"name={jsx_attr(field.name)}",
                "render={({ field }) => (",
            ]),
            item,
            Block([")}"]),
            "/>",
        ],
        indent=0,
    )


def render_widget(field: BaseField, indent_unit: str = "  ") -> str:
    return render(emit_widget(field), indent_unit)
