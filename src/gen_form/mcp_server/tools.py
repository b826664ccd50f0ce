"""
MCP Tool definitions for Gen-Form.

Exposes code generation and session-based form editing as MCP tools.
Handlers are synchronous and return JSON-ready dicts; the server wraps
them in ``TextContent``.
"""

import logging
from typing import Any, Callable

from pydantic import ValidationError

from gen_form.exceptions import DialectDerivationError, GenFormError, NameCollisionError
from gen_form.models.field_definitions import FieldKind, FieldPatch, dump_fields, parse_fields
from gen_form.mcp_server.session_store import create_session, get_session
from gen_form.orchestrator import FormCodeOrchestrator

logger = logging.getLogger("gen-form-mcp")


def generate_form_code(arguments: dict[str, Any]) -> dict[str, Any]:
    """Generate code for a complete field list sent by the client."""
    fields = parse_fields(arguments.get("fields", []))
    orchestrator = FormCodeOrchestrator()
    code = orchestrator.generate(
        fields=fields,
        form_title=arguments.get("form_title", ""),
        form_description=arguments.get("form_description", ""),
        use_nextjs=arguments.get("use_nextjs"),
    )
    return code.to_dict()


def create_form_session(arguments: dict[str, Any]) -> dict[str, Any]:
    session = create_session(
        form_title=arguments.get("form_title", ""),
        form_description=arguments.get("form_description", ""),
        use_nextjs=arguments.get("use_nextjs"),
    )
    logger.info(f"Created form session {session.session_id}")
    return {"session_id": session.session_id, "fields": []}


def _session_fields(session_id: str) -> dict[str, Any]:
    session = get_session(session_id)
    return {"session_id": session_id, "fields": dump_fields(session.store.fields)}


def add_field(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    field = session.store.add_field(FieldKind(arguments["kind"]))
    result = _session_fields(session.session_id)
    result["field_id"] = field.id
    return result


def update_field(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    patch = FieldPatch.model_validate(arguments.get("patch", {}))
    session.store.update_field(arguments["field_id"], patch)
    return _session_fields(session.session_id)


def remove_field(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    session.store.remove_field(arguments["field_id"])
    return _session_fields(session.session_id)


def reorder_field(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    session.store.reorder(int(arguments["from_index"]), int(arguments["to_index"]))
    return _session_fields(session.session_id)


def add_option(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    session.store.add_option(arguments["field_id"])
    return _session_fields(session.session_id)


def update_option(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    session.store.update_option(
        arguments["field_id"],
        int(arguments["index"]),
        arguments["label"],
    )
    return _session_fields(session.session_id)


def remove_option(arguments: dict[str, Any]) -> dict[str, Any]:
    session = get_session(arguments["session_id"])
    session.store.remove_option(arguments["field_id"], int(arguments["index"]))
    return _session_fields(session.session_id)


def list_fields(arguments: dict[str, Any]) -> dict[str, Any]:
    return _session_fields(arguments["session_id"])


def generate_session_code(arguments: dict[str, Any]) -> dict[str, Any]:
    """Generate code from a session; arguments override the session metadata."""
    session = get_session(arguments["session_id"])
    use_nextjs = arguments.get("use_nextjs", session.use_nextjs)
    code = FormCodeOrchestrator().generate_for_store(
        session.store,
        form_title=arguments.get("form_title", session.form_title),
        form_description=arguments.get("form_description", session.form_description),
        use_nextjs=use_nextjs,
    )
    return code.to_dict()


TOOL_HANDLERS: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
    "generate_form_code": generate_form_code,
    "create_form_session": create_form_session,
    "add_field": add_field,
    "update_field": update_field,
    "remove_field": remove_field,
    "reorder_field": reorder_field,
    "add_option": add_option,
    "update_option": update_option,
    "remove_option": remove_option,
    "list_fields": list_fields,
    "generate_session_code": generate_session_code,
}


def handle_tool_call(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Dispatch a tool call.

    Errors caused by the request (unknown tool, bad arguments, store
    command errors) come back as ``{"error": ...}``. Defects such as
    ``NameCollisionError`` are reported the same way but logged as errors.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return {"error": f"Unknown tool: {name}"}

    try:
        return handler(arguments)
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}: {e}")
        return {"error": f"Invalid arguments: {e}"}
    except (NameCollisionError, DialectDerivationError) as e:
        logger.error(f"Error in {name}: {e}")
        return {"error": str(e)}
    except GenFormError as e:
        return {"error": str(e)}
    except KeyError as e:
        return {"error": f"Missing argument: {e.args[0]}"}
    except ValueError as e:
        return {"error": str(e)}


_SESSION_ID = {
    "type": "string",
    "description": "Form session id returned by create_form_session",
}
_FIELD_ID = {"type": "string", "description": "Field id, e.g. field-1"}
_FORM_META = {
    "form_title": {
        "type": "string",
        "description": "Form title; also the component name without whitespace",
    },
    "form_description": {"type": "string", "description": "Form description"},
    "use_nextjs": {
        "type": "boolean",
        "description": "Whether to add the next/link import",
    },
}

FIELD_DESCRIPTOR_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "kind": {"type": "string", "enum": [kind.value for kind in FieldKind]},
        "label": {"type": "string"},
        "name": {"type": "string"},
        "description": {"type": "string"},
        "isOptional": {"type": "boolean"},
        "isDisabled": {"type": "boolean"},
        "defaultValue": {"type": "string"},
        "options": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "label": {"type": "string"},
                    "value": {"type": "string"},
                },
                "required": ["label"],
            },
        },
    },
    "required": ["id", "kind", "name"],
}


def _tool(name: str, description: str, properties: dict, required: list[str]) -> dict:
    return {
        "name": name,
        "description": description,
        "inputSchema": {
            "type": "object",
            "properties": properties,
            "required": required,
        },
    }


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        _tool(
            "generate_form_code",
            """
Generate a React form component (react-hook-form + zod + shadcn/ui) from a
complete field list. Returns the TypeScript and JavaScript source.

Field names must be unique. Radio and Select fields without usable options
get a single "Option 1" option.
""".strip(),
            {
                "fields": {
                    "type": "array",
                    "items": FIELD_DESCRIPTOR_SCHEMA,
                    "description": "Field descriptors in display order",
                },
                **_FORM_META,
            },
            ["fields"],
        ),
        _tool(
            "create_form_session",
            "Start an empty form editing session. Returns its session_id.",
            dict(_FORM_META),
            [],
        ),
        _tool(
            "add_field",
            "Append a field of the given kind. Returns the new field_id and all fields.",
            {
                "session_id": _SESSION_ID,
                "kind": {"type": "string", "enum": [kind.value for kind in FieldKind]},
            },
            ["session_id", "kind"],
        ),
        _tool(
            "update_field",
            """
Update attributes of a field. Changing the label renames the field to a
unique snake_case name.
""".strip(),
            {
                "session_id": _SESSION_ID,
                "field_id": _FIELD_ID,
                "patch": {
                    "type": "object",
                    "properties": {
                        "label": {"type": "string"},
                        "description": {"type": "string"},
                        "isOptional": {"type": "boolean"},
                        "isDisabled": {"type": "boolean"},
                        "defaultValue": {"type": "string"},
                        "options": FIELD_DESCRIPTOR_SCHEMA["properties"]["options"],
                    },
                },
            },
            ["session_id", "field_id", "patch"],
        ),
        _tool(
            "remove_field",
            "Remove a field.",
            {"session_id": _SESSION_ID, "field_id": _FIELD_ID},
            ["session_id", "field_id"],
        ),
        _tool(
            "reorder_field",
            "Move the field at from_index to to_index.",
            {
                "session_id": _SESSION_ID,
                "from_index": {"type": "integer"},
                "to_index": {"type": "integer"},
            },
            ["session_id", "from_index", "to_index"],
        ),
        _tool(
            "add_option",
            "Append an empty option to a radio or select field.",
            {"session_id": _SESSION_ID, "field_id": _FIELD_ID},
            ["session_id", "field_id"],
        ),
        _tool(
            "update_option",
            "Set the label of an option; its value becomes the snake_case label.",
            {
                "session_id": _SESSION_ID,
                "field_id": _FIELD_ID,
                "index": {"type": "integer"},
                "label": {"type": "string"},
            },
            ["session_id", "field_id", "index", "label"],
        ),
        _tool(
            "remove_option",
            "Remove an option. The last option of a field cannot be removed.",
            {
                "session_id": _SESSION_ID,
                "field_id": _FIELD_ID,
                "index": {"type": "integer"},
            },
            ["session_id", "field_id", "index"],
        ),
        _tool(
            "list_fields",
            "List the fields of a session in display order.",
            {"session_id": _SESSION_ID},
            ["session_id"],
        ),
        _tool(
            "generate_session_code",
            "Generate the form component from a session's fields.",
            {"session_id": _SESSION_ID, **_FORM_META},
            ["session_id"],
        ),
    ]
