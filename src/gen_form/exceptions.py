"""
Exceptions raised by the Gen-Form core.

Degenerate option lists are not an error: the orchestrator repairs them.
"""


class GenFormError(Exception):
    """Base class for all Gen-Form errors."""


class EmptyModelError(GenFormError):
    """Code generation was requested for a form without fields."""

    def __init__(self, message: str = "Please add at least one field before generating code."):
        super().__init__(message)


class NameCollisionError(GenFormError):
    """
    Two live fields share a name.

    The store never produces this state, so seeing it means a bug in the
    store rather than bad user input. It is never recovered from.
    """

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"Duplicate field names: {', '.join(names)}")


class FieldNotFoundError(GenFormError, KeyError):
    """No field with the given id exists in the model."""

    def __init__(self, field_id: str):
        self.field_id = field_id
        super().__init__(f"Unknown field id: {field_id}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidCommandError(GenFormError, ValueError):
    """A store command does not apply to the current model."""


class OptionRemovalError(InvalidCommandError):
    """The last option of a Radio or Select field cannot be removed."""


class DialectDerivationError(GenFormError):
    """The untyped dialect still contains type annotations."""
