"""
Import resolver.

A fixed table lists every import the generated component can need, in
emission order, together with the field kinds that need it. Rows without
kinds are the baseline every form needs. Output order always follows the
table, never the order fields were added.
"""

from dataclasses import dataclass
from typing import Iterable

from gen_form.codegen.render import Block, js_string, render
from gen_form.models.field_definitions import FieldKind


@dataclass(frozen=True)
class ImportStatement:
    """One ``import`` line of the generated module."""

    module: str
    names: tuple[str, ...] = ()
    default: str | None = None

    @property
    def symbols(self) -> tuple[str, ...]:
        return ((self.default,) if self.default else ()) + self.names

    def emit(self) -> Block:
        """Short imports stay on one line; longer ones list one name per line."""
        source = js_string(self.module)
        if self.default and not self.names:
            return Block([f"import {self.default} from {source}"], indent=0)
        if len(self.names) <= 2:
            return Block([f"import {{ {', '.join(self.names)} }} from {source}"], indent=0)
        return Block(
            [
                "import {",
                Block([f"{name}," for name in self.names]),
                f"}} from {source}",
            ],
            indent=0,
        )

    def render(self) -> str:
        return render(self.emit())


@dataclass(frozen=True)
class ImportRule:
    statement: ImportStatement
    kinds: frozenset[FieldKind] | None = None  # None: always needed
    nextjs_only: bool = False

    def applies(self, kinds: frozenset[FieldKind], use_nextjs: bool) -> bool:
        if self.nextjs_only:
            return use_nextjs
        if self.kinds is None:
            return True
        return bool(self.kinds & kinds)


_DATE = frozenset({FieldKind.DATE})

IMPORT_TABLE: list[ImportRule] = [
    ImportRule(ImportStatement("zod", ("z",))),
    ImportRule(ImportStatement("@hookform/resolvers/zod", ("zodResolver",))),
    ImportRule(ImportStatement("react-hook-form", ("useForm",))),
    ImportRule(ImportStatement("next/link", default="Link"), nextjs_only=True),
    ImportRule(ImportStatement("@/components/ui/card", (
        "Card",
        "CardContent",
        "CardDescription",
        "CardHeader",
        "CardTitle",
    ))),
    ImportRule(ImportStatement("@/components/ui/button", ("Button",))),
    ImportRule(ImportStatement("@/components/ui/form", (
        "Form",
        "FormControl",
        "FormDescription",
        "FormField",
        "FormItem",
        "FormLabel",
        "FormMessage",
    ))),
    ImportRule(
        ImportStatement("@/components/ui/input", ("Input",)),
        kinds=frozenset({FieldKind.TEXT, FieldKind.NUMBER}),
    ),
    ImportRule(
        ImportStatement("@/components/ui/textarea", ("Textarea",)),
        kinds=frozenset({FieldKind.TEXTAREA}),
    ),
    ImportRule(
        ImportStatement("@/components/ui/checkbox", ("Checkbox",)),
        kinds=frozenset({FieldKind.CHECKBOX}),
    ),
    ImportRule(
        ImportStatement("@/components/ui/radio-group", ("RadioGroup", "RadioGroupItem")),
        kinds=frozenset({FieldKind.RADIO}),
    ),
    ImportRule(
        ImportStatement("@/components/ui/select", (
            "Select",
            "SelectContent",
            "SelectItem",
            "SelectTrigger",
            "SelectValue",
        )),
        kinds=frozenset({FieldKind.SELECT}),
    ),
    ImportRule(ImportStatement("@/components/ui/calendar", ("Calendar",)), kinds=_DATE),
    ImportRule(ImportStatement("lucide-react", ("CalendarIcon",)), kinds=_DATE),
    ImportRule(ImportStatement("date-fns", ("format",)), kinds=_DATE),
    ImportRule(
        ImportStatement("@/components/ui/popover", ("Popover", "PopoverContent", "PopoverTrigger")),
        kinds=_DATE,
    ),
    ImportRule(ImportStatement("@/lib/utils", ("cn",)), kinds=_DATE),
]


def resolve_imports(
    kinds: Iterable[FieldKind | str],
    use_nextjs: bool = False,
) -> list[ImportStatement]:
    """
    Compute the imports needed by a form containing ``kinds``.

    Args:
        kinds: Field kinds present in the form (duplicates are fine).
        use_nextjs: Whether to include the ``next/link`` import.

    Returns:
        Import statements in table order.
    """
    present = frozenset(FieldKind(kind) for kind in kinds)
    return [
        rule.statement
        for rule in IMPORT_TABLE
        if rule.applies(present, use_nextjs)
    ]


def resolve_symbols(
    kinds: Iterable[FieldKind | str],
    use_nextjs: bool = False,
) -> tuple[str, ...]:
    """Flattened, ordered symbol names of ``resolve_imports``."""
    return tuple(
        symbol
        for statement in resolve_imports(kinds, use_nextjs)
        for symbol in statement.symbols
    )


def emit_imports(statements: Iterable[ImportStatement]) -> Block:
    return Block([statement.emit() for statement in statements], indent=0)
