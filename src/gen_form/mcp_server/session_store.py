"""
In-memory store of form editing sessions.

Each MCP session id maps to a ``FormSession`` holding a ``FieldStore``.
The oldest session is dropped once ``max_sessions`` is exceeded.
"""

import uuid
from collections import OrderedDict
from dataclasses import dataclass, field

from gen_form.config import get_config
from gen_form.exceptions import GenFormError
from gen_form.store import FieldStore


class SessionNotFoundError(GenFormError, KeyError):
    """No form session with the given id."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Unknown form session: {session_id}")

    def __str__(self) -> str:
        return self.args[0]


@dataclass
class FormSession:
    """Field store plus the form metadata of one editing session."""

    session_id: str
    store: FieldStore = field(default_factory=FieldStore)
    form_title: str = ""
    form_description: str = ""
    use_nextjs: bool | None = None


# Key: session_id, Value: FormSession (insertion order = age)
form_sessions: "OrderedDict[str, FormSession]" = OrderedDict()


def create_session(
    form_title: str = "",
    form_description: str = "",
    use_nextjs: bool | None = None,
) -> FormSession:
    """Open a new empty session."""
    session_id = str(uuid.uuid4()).replace("-", "")
    session = FormSession(
        session_id=session_id,
        form_title=form_title,
        form_description=form_description,
        use_nextjs=use_nextjs,
    )
    form_sessions[session_id] = session

    max_sessions = get_config().max_sessions
    while len(form_sessions) > max_sessions:
        form_sessions.popitem(last=False)
    return session


def get_session(session_id: str) -> FormSession:
    try:
        return form_sessions[session_id]
    except KeyError:
        raise SessionNotFoundError(session_id) from None

