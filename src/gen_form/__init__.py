"""
Gen-Form: React form code generation from a declarative field list.

Build a list of field descriptors, then generate a validated form
component (react-hook-form + zod + shadcn/ui) in TypeScript and
JavaScript.

Simple Usage:
    from gen_form import FieldStore, FieldKind, generate_code

    store = FieldStore()
    name = store.add_field(FieldKind.TEXT)
    store.update_field(name.id, label="Full Name")
    subscribe = store.add_field(FieldKind.CHECKBOX)
    store.update_field(subscribe.id, label="Subscribe", is_optional=True)

    code = generate_code(store.fields, form_title="Signup")
    print(code.typescript)
    print(code.javascript)

Advanced Usage:
    from gen_form import FormCodeOrchestrator

    orchestrator = FormCodeOrchestrator(
        use_nextjs=False,
        submit_button_text="Create account",
    )

    # Writes repaired option lists back into the store
    code = orchestrator.generate_for_store(store, form_title="Signup")

MCP Server:
    python run_mcp_server.py --transport stdio
"""

from gen_form.orchestrator import (
    FormCodeOrchestrator,
    generate_code,
)
from gen_form.models.field_definitions import (
    FieldKind,
    FieldPatch,
    Option,
    parse_fields,
)
from gen_form.models.generated_code import GeneratedCode
from gen_form.naming import (
    allocate_unique,
    slugify,
)
from gen_form.store import (
    FieldStore,
    FormModel,
    apply_command,
    replay,
)
from gen_form.codegen import (
    derive_untyped,
    render_schema,
    render_widget,
    resolve_imports,
)
from gen_form.exceptions import (
    EmptyModelError,
    GenFormError,
    NameCollisionError,
)

__all__ = [
    # Main interface
    "FormCodeOrchestrator",
    "generate_code",
    # Field model
    "FieldKind",
    "FieldPatch",
    "Option",
    "parse_fields",
    "FieldStore",
    "FormModel",
    "apply_command",
    "replay",
    # Naming
    "slugify",
    "allocate_unique",
    # Emitters
    "resolve_imports",
    "render_schema",
    "render_widget",
    "derive_untyped",
    # Output
    "GeneratedCode",
    # Errors
    "GenFormError",
    "EmptyModelError",
    "NameCollisionError",
]

__version__ = "0.1.0"
