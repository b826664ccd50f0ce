"""
Form Code Orchestrator.

This is the main entry point for the Gen-Form system.
It provides a simple interface: give it a field list, get back the form
component in TypeScript and JavaScript.
"""

import logging
from dataclasses import dataclass, field

from gen_form.codegen.component import component_name, emit_module
from gen_form.codegen.dialect import derive_untyped
from gen_form.codegen.imports import resolve_imports
from gen_form.codegen.render import render
from gen_form.config import get_config
from gen_form.guardrails.input_guardrails import (
    check_field_model,
    empty_model_guardrail,
    name_collision_guardrail,
)
from gen_form.guardrails.output_guardrails import dialect_guardrail
from gen_form.models.field_definitions import BaseField
from gen_form.models.generated_code import GeneratedCode
from gen_form.store import FieldStore, repair_options

logger = logging.getLogger("gen-form")


@dataclass
class GenerationContext:
    """Inputs of one generation run, after option repair."""

    fields: list[BaseField] = field(default_factory=list)
    form_title: str = ""
    form_description: str = ""
    use_nextjs: bool = True
    options_repaired: bool = False


class FormCodeOrchestrator:
    """
    Orchestrator for generating form components from field lists.

    Usage:
        orchestrator = FormCodeOrchestrator()

        code = orchestrator.generate(
            fields=store.fields,
            form_title="Signup",
            form_description="Create your account",
        )

        code.typescript  # .tsx source
        code.javascript  # .jsx source
    """

    def __init__(
        self,
        use_nextjs: bool | None = None,
        submit_button_text: str | None = None,
        default_component_name: str | None = None,
        indent: int | None = None,
        check_output: bool = True,
    ):
        """
        Initialize the orchestrator.

        Args:
            use_nextjs: Default for the next/link import. If None, uses config.use_nextjs.
            submit_button_text: Label of the submit button. If None, uses config.
            default_component_name: Component name for forms with a blank title.
            indent: Spaces per indentation level of the emitted code.
            check_output: Whether to run the output guardrail on every result.
        """
        config = get_config()
        self.use_nextjs = config.use_nextjs if use_nextjs is None else use_nextjs
        self.submit_button_text = submit_button_text or config.submit_button_text
        self.default_component_name = default_component_name or config.default_component_name
        self.indent_unit = config.indent_unit if indent is None else " " * indent
        self.check_output = check_output

    def prepare(
        self,
        fields: list[BaseField],
        form_title: str = "",
        form_description: str = "",
        use_nextjs: bool | None = None,
    ) -> GenerationContext:
        """
        Run the input guardrails and repair option lists.

        Findings that do not block generation, such as names that have to be
        emitted as quoted keys, are logged as warnings.

        Raises:
            EmptyModelError: If ``fields`` is empty.
            NameCollisionError: If two fields share a name.
        """
        fields = list(fields)
        for warning in check_field_model(fields).warnings:
            logger.warning(warning)
        empty_model_guardrail(fields)
        name_collision_guardrail(fields)

        repaired, changed = repair_options(fields)
        return GenerationContext(
            fields=repaired,
            form_title=form_title,
            form_description=form_description,
            use_nextjs=self.use_nextjs if use_nextjs is None else use_nextjs,
            options_repaired=changed,
        )

    def generate(
        self,
        fields: list[BaseField],
        form_title: str = "",
        form_description: str = "",
        use_nextjs: bool | None = None,
    ) -> GeneratedCode:
        """
        Generate the form component in both dialects.

        This is the main entry point.

        Args:
            fields: Field descriptors in display order.
            form_title: Card title; also the component name without whitespace.
            form_description: Card description.
            use_nextjs: Whether to import next/link. If None, uses the orchestrator default.

        Returns:
            GeneratedCode with the typed and untyped source text.

        Raises:
            EmptyModelError: If ``fields`` is empty.
            NameCollisionError: If two fields share a name.
        """
        context = self.prepare(fields, form_title, form_description, use_nextjs)
        return self._generate(context)

    def generate_for_store(
        self,
        store: FieldStore,
        form_title: str = "",
        form_description: str = "",
        use_nextjs: bool | None = None,
    ) -> GeneratedCode:
        """
        Generate from the store's current snapshot.

        Repaired option lists are written back to ``store`` so later edits
        start from what was generated.
        """
        context = self.prepare(store.fields, form_title, form_description, use_nextjs)
        if context.options_repaired:
            store.replace_fields(context.fields)
        return self._generate(context)

    def _generate(self, context: GenerationContext) -> GeneratedCode:
        fields = context.fields
        name = component_name(context.form_title, self.default_component_name)
        imports = resolve_imports(
            (field.field_kind for field in fields),
            use_nextjs=context.use_nextjs,
        )

        module = emit_module(
            imports=imports,
            fields=fields,
            name=name,
            form_title=context.form_title,
            form_description=context.form_description,
            submit_text=self.submit_button_text,
        )
        typescript = render(module, self.indent_unit) + "\n"

        code = GeneratedCode(
            component_name=name,
            typescript=typescript,
            javascript=derive_untyped(typescript),
            fields=fields,
        )
        if self.check_output:
            dialect_guardrail(code)

        logger.info(
            f"Generated {name}: {len(fields)} fields, {len(imports)} imports"
        )
        return code


def generate_code(
    fields: list[BaseField],
    form_title: str = "",
    form_description: str = "",
    use_nextjs: bool | None = None,
) -> GeneratedCode:
    """
    Convenience function to generate a form component.

    Args:
        fields: Field descriptors in display order
        form_title: Form title
        form_description: Form description
        use_nextjs: Whether to import next/link. If None, uses config.use_nextjs.

    Returns:
        GeneratedCode

    Example:
        >>> from gen_form import FieldStore, generate_code
        >>> store = FieldStore()
        >>> name = store.add_field("text")
        >>> store.update_field(name.id, label="Full Name")
        >>> code = generate_code(store.fields, form_title="Signup")
    """
    orchestrator = FormCodeOrchestrator(use_nextjs=use_nextjs)
    return orchestrator.generate(
        fields=fields,
        form_title=form_title,
        form_description=form_description,
    )
