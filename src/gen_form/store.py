"""
Field Model Store.

The form model is an immutable snapshot: an ordered tuple of field
descriptors plus the counter used to mint field ids. Commands from
``gen_form.models.commands`` are applied by ``apply_command``, which
returns a new snapshot and never touches the old one.

``FieldStore`` holds the current snapshot for an editing session and
keeps the previous snapshots so edits can be undone.

Usage:
    store = FieldStore()
    email = store.add_field(FieldKind.TEXT)
    store.update_field(email.id, label="Email")
    store.add_field(FieldKind.CHECKBOX)
    store.reorder(1, 0)
"""

import logging
from functools import reduce
from typing import Any, Callable, Iterable, Iterator

from pydantic import BaseModel, Field

from gen_form.exceptions import (
    FieldNotFoundError,
    InvalidCommandError,
    OptionRemovalError,
)
from gen_form.guardrails.input_guardrails import name_collision_guardrail
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
from gen_form.models.field_definitions import (
    DEFAULT_OPTION,
    FIELD_CLASSES,
    BaseField,
    ChoiceField,
    FieldDescriptor,
    FieldKind,
    FieldPatch,
    Option,
)
from gen_form.naming import allocate_unique, slugify

logger = logging.getLogger("gen-form-store")


class FormModel(BaseModel):
    """Immutable snapshot of a form's fields."""

    fields: tuple[FieldDescriptor, ...] = Field(default_factory=tuple)
    next_id: int = Field(default=1, description="Counter for minting field ids")

    model_config = {"frozen": True}

    @classmethod
    def from_fields(cls, fields: Iterable[BaseField]) -> "FormModel":
        fields = tuple(fields)
        return cls(fields=fields, next_id=len(fields) + 1)

    def names(self, exclude_id: str | None = None) -> list[str]:
        """Names of all fields, optionally leaving one field out."""
        return [field.name for field in self.fields if field.id != exclude_id]

    def ids(self) -> set[str]:
        return {field.id for field in self.fields}

    def index_of(self, field_id: str) -> int:
        for index, field in enumerate(self.fields):
            if field.id == field_id:
                return index
        raise FieldNotFoundError(field_id)

    def get(self, field_id: str) -> BaseField:
        return self.fields[self.index_of(field_id)]

    def _replace(self, index: int, field: BaseField) -> "FormModel":
        fields = list(self.fields)
        fields[index] = field
        return self.model_copy(update={"fields": tuple(fields)})


def repair_field_options(field: ChoiceField) -> ChoiceField:
    """
    Keep only well-formed options, or fall back to the single default option
    when none are left.
    """
    options = field.well_formed_options or [DEFAULT_OPTION]
    if options == field.options:
        return field
    return field.model_copy(update={"options": options})


def repair_options(fields: Iterable[BaseField]) -> tuple[list[BaseField], bool]:
    """
    Repair the option lists of every Radio and Select field.

    Returns:
        The repaired list and whether anything changed.
    """
    repaired: list[BaseField] = []
    changed = False
    for field in fields:
        if isinstance(field, ChoiceField):
            fixed = repair_field_options(field)
            if fixed is not field:
                logger.info(f"Repaired options of field '{field.name}' ({field.id})")
                changed = True
            field = fixed
        repaired.append(field)
    return repaired, changed


def _add_field(model: FormModel, command: AddField) -> FormModel:
    counter = model.next_id
    ids = model.ids()
    while f"field-{counter}" in ids:
        counter += 1

    field_class = FIELD_CLASSES[FieldKind(command.kind)]
    field = field_class(
        id=f"field-{counter}",
        name=allocate_unique(f"field_{counter}", model.names()),
    )
    return model.model_copy(update={
        "fields": model.fields + (field,),
        "next_id": counter + 1,
    })


def _update_field(model: FormModel, command: UpdateField) -> FormModel:
    index = model.index_of(command.field_id)
    field = model.fields[index]
    changes = command.patch.changes()

    if "options" in changes and not isinstance(field, ChoiceField):
        raise InvalidCommandError(
            f"Field '{field.id}' of kind '{field.kind}' has no options"
        )

    # A blank label keeps the previous name so the binding never goes empty
    if changes.get("label"):
        changes["name"] = allocate_unique(
            slugify(changes["label"]),
            model.names(exclude_id=field.id),
        )

    return model._replace(index, field.model_copy(update=changes))


def _remove_field(model: FormModel, command: RemoveField) -> FormModel:
    index = model.index_of(command.field_id)
    return model.model_copy(update={
        "fields": model.fields[:index] + model.fields[index + 1:],
    })


def _reorder_field(model: FormModel, command: ReorderField) -> FormModel:
    size = len(model.fields)
    for index in (command.from_index, command.to_index):
        if not 0 <= index < size:
            raise InvalidCommandError(f"Index {index} out of range for {size} fields")

    fields = list(model.fields)
    field = fields.pop(command.from_index)
    fields.insert(command.to_index, field)
    return model.model_copy(update={"fields": tuple(fields)})


def _choice_field(model: FormModel, field_id: str) -> tuple[int, ChoiceField]:
    index = model.index_of(field_id)
    field = model.fields[index]
    if not isinstance(field, ChoiceField):
        raise InvalidCommandError(
            f"Field '{field.id}' of kind '{field.kind}' has no options"
        )
    return index, field


def _option_index(field: ChoiceField, index: int) -> int:
    if not 0 <= index < len(field.options):
        raise InvalidCommandError(
            f"Option index {index} out of range for field '{field.id}'"
        )
    return index


def _add_option(model: FormModel, command: AddOption) -> FormModel:
    index, field = _choice_field(model, command.field_id)
    options = [*field.options, Option(label="", value="")]
    return model._replace(index, field.model_copy(update={"options": options}))


def _update_option(model: FormModel, command: UpdateOption) -> FormModel:
    index, field = _choice_field(model, command.field_id)
    options = list(field.options)
    options[_option_index(field, command.index)] = Option.from_label(command.label)
    return model._replace(index, field.model_copy(update={"options": options}))


def _remove_option(model: FormModel, command: RemoveOption) -> FormModel:
    index, field = _choice_field(model, command.field_id)
    position = _option_index(field, command.index)
    if len(field.options) <= 1:
        raise OptionRemovalError(
            f"Field '{field.id}' must keep at least one option"
        )
    options = field.options[:position] + field.options[position + 1:]
    return model._replace(index, field.model_copy(update={"options": options}))


def _clean_options(model: FormModel, command: CleanOptions) -> FormModel:
    index, field = _choice_field(model, command.field_id)
    return model._replace(index, repair_field_options(field))


_HANDLERS: dict[type, Callable[[FormModel, Any], FormModel]] = {
    AddField: _add_field,
    UpdateField: _update_field,
    RemoveField: _remove_field,
    ReorderField: _reorder_field,
    AddOption: _add_option,
    UpdateOption: _update_option,
    RemoveOption: _remove_option,
    CleanOptions: _clean_options,
}


def apply_command(model: FormModel, command: Command) -> FormModel:
    """Apply one command to ``model`` and return the new snapshot."""
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise InvalidCommandError(f"Unsupported command: {type(command).__name__}")
    return handler(model, command)


def replay(commands: Iterable[Command], model: FormModel | None = None) -> FormModel:
    """Apply ``commands`` in order, starting from ``model`` or an empty form."""
    return reduce(apply_command, commands, model or FormModel())


class FieldStore:
    """
    Mutable holder of the current form snapshot for one editing session.

    Every change goes through ``dispatch``; the previous snapshot is kept
    on an undo stack. Field ids are minted from a session-wide counter that
    undo never rewinds, so an id is never handed out twice.
    """

    def __init__(self, fields: Iterable[BaseField] | None = None):
        fields = list(fields or [])
        name_collision_guardrail(fields)
        self._model = FormModel.from_fields(fields)
        self._next_id = self._model.next_id
        self._history: list[tuple[FormModel, Command | None]] = []

    @property
    def snapshot(self) -> FormModel:
        return self._model

    @property
    def fields(self) -> list[BaseField]:
        return list(self._model.fields)

    @property
    def commands(self) -> list[Command]:
        """Commands applied so far, oldest first."""
        return [command for _, command in self._history if command is not None]

    def __len__(self) -> int:
        return len(self._model.fields)

    def __iter__(self) -> Iterator[BaseField]:
        return iter(self._model.fields)

    def get(self, field_id: str) -> BaseField:
        return self._model.get(field_id)

    def dispatch(self, command: Command | dict) -> FormModel:
        """
        Apply ``command`` to the current snapshot and make the result current.

        ``command`` may also be a JSON-style dict such as
        ``{"type": "remove_field", "field_id": "field-2"}``.
        """
        if isinstance(command, dict):
            command = parse_command(command)
        new_model = apply_command(self._model, command)
        self._next_id = max(self._next_id, new_model.next_id)
        logger.debug(f"Applied {command.type}: {len(new_model.fields)} fields")
        self._history.append((self._model, command))
        self._model = new_model
        return new_model

    def add_field(self, kind: FieldKind | str) -> BaseField:
        """Append a field of ``kind`` and return it."""
        self.dispatch(AddField(kind=FieldKind(kind)))
        return self._model.fields[-1]

    def update_field(
        self,
        field_id: str,
        patch: FieldPatch | None = None,
        **changes: Any,
    ) -> BaseField:
        """
        Update a field from a ``FieldPatch`` or keyword arguments.

        Example:
            >>> store.update_field(field.id, label="Email", is_optional=True)
        """
        if patch is None:
            patch = FieldPatch(**changes)
        self.dispatch(UpdateField(field_id=field_id, patch=patch))
        return self.get(field_id)

    def remove_field(self, field_id: str) -> None:
        self.dispatch(RemoveField(field_id=field_id))

    def reorder(self, from_index: int, to_index: int) -> None:
        self.dispatch(ReorderField(from_index=from_index, to_index=to_index))

    def add_option(self, field_id: str) -> BaseField:
        self.dispatch(AddOption(field_id=field_id))
        return self.get(field_id)

    def update_option(self, field_id: str, index: int, label: str) -> BaseField:
        self.dispatch(UpdateOption(field_id=field_id, index=index, label=label))
        return self.get(field_id)

    def remove_option(self, field_id: str, index: int) -> BaseField:
        self.dispatch(RemoveOption(field_id=field_id, index=index))
        return self.get(field_id)

    def clean_options(self, field_id: str) -> BaseField:
        self.dispatch(CleanOptions(field_id=field_id))
        return self.get(field_id)

    def replace_fields(self, fields: Iterable[BaseField]) -> None:
        """
        Swap in a repaired field list.

        Used after code generation; ids and names must be unchanged.
        """
        fields = tuple(fields)
        if [field.id for field in fields] != [field.id for field in self._model.fields]:
            raise InvalidCommandError("Replacement must keep the same fields in the same order")
        self._history.append((self._model, None))
        self._model = self._model.model_copy(update={"fields": fields})

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False when there is nothing to undo."""
        if not self._history:
            return False
        model, _ = self._history.pop()
        if model.next_id < self._next_id:
            model = model.model_copy(update={"next_id": self._next_id})
        self._model = model
        return True
