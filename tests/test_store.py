"""Tests for the field model store."""

import random

import pytest

from gen_form.exceptions import (
    FieldNotFoundError,
    InvalidCommandError,
    NameCollisionError,
    OptionRemovalError,
)
from gen_form.models.commands import AddField, ReorderField, UpdateField
from gen_form.models.field_definitions import (
    DEFAULT_OPTION,
    FieldKind,
    FieldPatch,
    Option,
    SelectField,
    TextField,
)
from gen_form.store import (
    FieldStore,
    FormModel,
    apply_command,
    repair_options,
    replay,
)


class TestAddField:
    """Tests for adding fields."""

    def test_placeholder_ids_and_names(self):
        """New fields get field-<n> ids and field_<n> names."""
        store = FieldStore()
        first = store.add_field(FieldKind.TEXT)
        second = store.add_field("checkbox")
        assert (first.id, first.name) == ("field-1", "field_1")
        assert (second.id, second.name) == ("field-2", "field_2")
        assert second.kind == "checkbox"

    def test_choice_kinds_seeded(self):
        """Radio and select fields start with one option."""
        store = FieldStore()
        field = store.add_field(FieldKind.SELECT)
        assert field.options == [DEFAULT_OPTION]

    def test_placeholder_avoids_user_names(self):
        """A placeholder name never collides with a label-derived name."""
        store = FieldStore()
        first = store.add_field(FieldKind.TEXT)
        store.update_field(first.id, label="Field 2")
        second = store.add_field(FieldKind.TEXT)
        assert store.get(first.id).name == "field_2"
        assert second.name == "field_2_1"

    def test_seed_fields_with_duplicate_names(self):
        """A store cannot be seeded with colliding names."""
        fields = [TextField(id="a", name="email"), TextField(id="b", name="email")]
        with pytest.raises(NameCollisionError):
            FieldStore(fields)

    def test_ids_not_reused_after_remove(self):
        """Removing a field does not free its id for the next add."""
        store = FieldStore()
        first = store.add_field(FieldKind.TEXT)
        store.remove_field(first.id)
        assert store.add_field(FieldKind.TEXT).id == "field-2"


class TestUpdateField:
    """Tests for updating fields."""

    def test_label_renames(self):
        """Changing the label derives the name."""
        store = FieldStore()
        field = store.add_field(FieldKind.TEXT)
        updated = store.update_field(field.id, label="Full Name")
        assert updated.label == "Full Name"
        assert updated.name == "full_name"
        assert updated.id == field.id

    def test_duplicate_labels(self):
        """Two 'Email' labels become email and email_1."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        b = store.add_field(FieldKind.TEXT)
        store.update_field(a.id, label="Email")
        store.update_field(b.id, label="Email")
        assert [f.name for f in store] == ["email", "email_1"]

    def test_relabel_keeps_own_name(self):
        """A field does not collide with its own current name."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        store.update_field(a.id, label="Email")
        assert store.update_field(a.id, label="Email").name == "email"

    def test_blank_label_keeps_name(self):
        """Clearing the label leaves the previous name in place."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        store.update_field(a.id, label="Email")
        updated = store.update_field(a.id, label="")
        assert updated.label == ""
        assert updated.name == "email"

    def test_other_attributes(self):
        """Non-label changes leave the name alone."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        updated = store.update_field(
            a.id,
            FieldPatch(description="Help", is_optional=True, is_disabled=True, default_value="x"),
        )
        assert updated.name == "field_1"
        assert updated.description == "Help"
        assert updated.is_optional and updated.is_disabled
        assert updated.default_value == "x"

    def test_options_patch_on_choice_field(self):
        """Choice fields accept a full option list."""
        store = FieldStore()
        a = store.add_field(FieldKind.RADIO)
        updated = store.update_field(a.id, options=[Option(label="Yes"), Option(label="No")])
        assert [o.value for o in updated.options] == ["yes", "no"]

    def test_options_patch_on_text_field(self):
        """Options on a non-choice field are rejected."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        with pytest.raises(InvalidCommandError):
            store.update_field(a.id, options=[Option(label="Yes")])
        assert store.get(a.id) == a

    def test_unknown_id(self):
        """Unknown ids raise FieldNotFoundError, which is also a KeyError."""
        store = FieldStore()
        with pytest.raises(FieldNotFoundError):
            store.update_field("field-99", label="X")
        with pytest.raises(KeyError):
            store.remove_field("field-99")


class TestRemoveAndReorder:
    """Tests for removing and reordering fields."""

    def test_remove_has_no_side_effects(self):
        """Removing a field does not rename the others."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        b = store.add_field(FieldKind.TEXT)
        store.update_field(a.id, label="Email")
        store.update_field(b.id, label="Email")
        store.remove_field(a.id)
        assert [f.name for f in store] == ["email_1"]

    def test_reorder_preserves_attributes(self):
        """Reorder moves fields without touching them."""
        store = FieldStore()
        ids = [store.add_field(kind).id for kind in (FieldKind.TEXT, FieldKind.DATE, FieldKind.CHECKBOX)]
        before = {f.id: f for f in store}

        store.reorder(2, 0)

        assert [f.id for f in store] == [ids[2], ids[0], ids[1]]
        assert all(store.get(f.id) == before[f.id] for f in store)

    def test_reorder_out_of_range(self):
        """Indices outside the list are rejected."""
        store = FieldStore()
        store.add_field(FieldKind.TEXT)
        with pytest.raises(InvalidCommandError):
            store.reorder(0, 1)
        with pytest.raises(InvalidCommandError):
            store.reorder(-1, 0)


class TestOptionCommands:
    """Tests for option editing."""

    def test_add_and_update_option(self):
        """New options are blank until labelled; the value follows the label."""
        store = FieldStore()
        field = store.add_field(FieldKind.SELECT)
        field = store.add_option(field.id)
        assert field.options[-1] == Option(label="", value="")

        field = store.update_option(field.id, 1, "Dark Blue")
        assert field.options[1].label == "Dark Blue"
        assert field.options[1].value == "dark_blue"

    def test_remove_option(self):
        """Options can be removed while more than one remains."""
        store = FieldStore()
        field = store.add_field(FieldKind.RADIO)
        store.add_option(field.id)
        field = store.remove_option(field.id, 0)
        assert len(field.options) == 1

    def test_last_option_kept(self):
        """The last option cannot be removed."""
        store = FieldStore()
        field = store.add_field(FieldKind.RADIO)
        with pytest.raises(OptionRemovalError):
            store.remove_option(field.id, 0)

    def test_option_index_out_of_range(self):
        """Option indices are checked."""
        store = FieldStore()
        field = store.add_field(FieldKind.RADIO)
        with pytest.raises(InvalidCommandError):
            store.update_option(field.id, 3, "X")

    def test_option_command_on_text_field(self):
        """Option commands require a radio or select field."""
        store = FieldStore()
        field = store.add_field(FieldKind.TEXT)
        with pytest.raises(InvalidCommandError):
            store.add_option(field.id)

    def test_clean_options_drops_blank(self):
        """Blank options are dropped, well-formed ones kept."""
        store = FieldStore()
        field = store.add_field(FieldKind.SELECT)
        store.update_option(field.id, 0, "Red")
        store.add_option(field.id)
        field = store.clean_options(field.id)
        assert [o.value for o in field.options] == ["red"]

    def test_clean_options_falls_back(self):
        """With no well-formed option left, the default option returns."""
        store = FieldStore()
        field = store.add_field(FieldKind.SELECT)
        store.update_option(field.id, 0, "   ")
        field = store.clean_options(field.id)
        assert field.options == [DEFAULT_OPTION]


class TestRepairOptions:
    """Tests for repair_options."""

    def test_reports_changes(self):
        """Only degenerate option lists are replaced."""
        good = SelectField(id="a", name="a", options=[Option(label="Red")])
        bad = SelectField(id="b", name="b", options=[Option(label="")])
        text = TextField(id="c", name="c")

        repaired, changed = repair_options([good, bad, text])

        assert changed
        assert repaired[0] is good
        assert repaired[1].options == [DEFAULT_OPTION]
        assert repaired[2] is text

    def test_nothing_to_repair(self):
        """Well-formed input is returned unchanged."""
        fields = [SelectField(id="a", name="a")]
        repaired, changed = repair_options(fields)
        assert not changed
        assert repaired == fields


class TestSnapshots:
    """Tests for immutable snapshots, undo and replay."""

    def test_apply_command_is_pure(self):
        """Applying a command leaves the old snapshot untouched."""
        model = FormModel()
        new_model = apply_command(model, AddField(kind=FieldKind.TEXT))
        assert len(model.fields) == 0
        assert len(new_model.fields) == 1

    def test_replay_matches_store(self):
        """Replaying the recorded commands rebuilds the same snapshot."""
        store = FieldStore()
        a = store.add_field(FieldKind.TEXT)
        b = store.add_field(FieldKind.SELECT)
        store.update_field(a.id, label="Name")
        store.update_option(b.id, 0, "Red")
        store.reorder(1, 0)

        rebuilt = replay(store.commands)
        assert list(rebuilt.fields) == store.fields
        assert rebuilt.next_id == store.snapshot.next_id

    def test_replay_explicit_commands(self):
        """replay applies command values in order."""
        model = replay([
            AddField(kind=FieldKind.TEXT),
            AddField(kind=FieldKind.TEXT),
            UpdateField(field_id="field-1", patch=FieldPatch(label="Email")),
            UpdateField(field_id="field-2", patch=FieldPatch(label="Email")),
            ReorderField(from_index=1, to_index=0),
        ])
        assert [(f.id, f.name) for f in model.fields] == [("field-2", "email_1"), ("field-1", "email")]

    def test_undo(self):
        """Undo restores the previous snapshot."""
        store = FieldStore()
        field = store.add_field(FieldKind.TEXT)
        store.update_field(field.id, label="Email")

        assert store.undo()
        assert store.get(field.id).name == "field_1"
        assert store.undo()
        assert len(store) == 0
        assert not store.undo()

    def test_undo_never_reuses_ids(self):
        """Undoing past an add does not hand its id out again."""
        store = FieldStore()
        field = store.add_field(FieldKind.TEXT)
        store.remove_field(field.id)
        store.undo()
        store.undo()

        assert len(store) == 0
        assert store.add_field(FieldKind.TEXT).id == "field-2"

    def test_undo_keeps_restored_fields(self):
        """Fields brought back by undo keep their ids; new ids stay fresh."""
        store = FieldStore()
        first = store.add_field(FieldKind.TEXT)
        store.add_field(FieldKind.TEXT)
        store.remove_field(first.id)
        store.undo()

        assert [f.id for f in store] == ["field-1", "field-2"]
        assert store.add_field(FieldKind.DATE).id == "field-3"

    def test_dispatch_accepts_dicts(self):
        """Commands can be dispatched in their JSON form."""
        store = FieldStore()
        store.dispatch({"type": "add_field", "kind": "number"})
        store.dispatch({"type": "update_field", "field_id": "field-1", "patch": {"label": "Age"}})

        assert store.get("field-1").name == "age"
        assert isinstance(store.commands[0], AddField)

    def test_failed_command_not_recorded(self):
        """A rejected command leaves snapshot and history unchanged."""
        store = FieldStore()
        store.add_field(FieldKind.TEXT)
        snapshot = store.snapshot
        with pytest.raises(InvalidCommandError):
            store.reorder(0, 5)
        assert store.snapshot is snapshot
        assert len(store.commands) == 1

    def test_replace_fields(self):
        """replace_fields swaps in repaired fields and can be undone."""
        store = FieldStore()
        field = store.add_field(FieldKind.SELECT)
        store.update_option(field.id, 0, "")
        repaired, _ = repair_options(store.fields)

        store.replace_fields(repaired)
        assert store.get(field.id).options == [DEFAULT_OPTION]
        assert store.undo()
        assert store.get(field.id).options[0].label == ""

    def test_replace_fields_requires_same_ids(self):
        """Replacement lists must keep the fields and their order."""
        store = FieldStore()
        store.add_field(FieldKind.TEXT)
        with pytest.raises(InvalidCommandError):
            store.replace_fields([])


class TestUniqueness:
    """Names stay unique under any edit sequence."""

    LABELS = ["Email", "email", "E mail", "Name", "Field 1", "field_2", "", "Email 1", "email_1"]

    @pytest.mark.parametrize("seed", range(20))
    def test_random_edits(self, seed):
        """Random adds, relabels, removes and reorders never duplicate a name."""
        rng = random.Random(seed)
        store = FieldStore()

        for _ in range(60):
            action = rng.choice(["add", "add", "update", "update", "remove", "reorder"])
            fields = store.fields
            if action == "add" or not fields:
                store.add_field(rng.choice(list(FieldKind)))
            elif action == "update":
                store.update_field(rng.choice(fields).id, label=rng.choice(self.LABELS))
            elif action == "remove":
                store.remove_field(rng.choice(fields).id)
            else:
                store.reorder(rng.randrange(len(fields)), rng.randrange(len(fields)))

            names = [f.name for f in store]
            assert len(names) == len(set(names))
            assert all(names)
