"""
Untyped dialect derivation.

The JavaScript variant is the TypeScript module with its two type
annotation forms removed. This is a plain text rewrite; every other
character is left untouched. Removal repeats until no annotation is left,
so applying it twice changes nothing more.
"""

from gen_form.codegen.constants import TYPE_ANNOTATION_PATTERNS


def derive_untyped(typed_text: str) -> str:
    """Strip the inferred-type annotations from ``typed_text``."""
    text = typed_text
    previous = None
    # Removing one annotation can join its neighbours into a new one
    while text != previous:
        previous = text
        for pattern in TYPE_ANNOTATION_PATTERNS:
            text = pattern.sub("", text)
    return text


def has_type_annotations(text: str) -> bool:
    return any(pattern.search(text) for pattern in TYPE_ANNOTATION_PATTERNS)
