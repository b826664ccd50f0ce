"""
Output models for code generation.
"""

from typing import Any

from pydantic import BaseModel, Field

from gen_form.models.field_definitions import FieldDescriptor, dump_fields


class GeneratedCode(BaseModel):
    """
    Both dialects of a generated form component.

    ``fields`` is the field list the code was generated from, after option
    repair. Callers holding a live model should adopt it.
    """

    component_name: str = Field(..., description="Name of the exported component")
    typescript: str = Field(..., description="Typed dialect (.tsx)")
    javascript: str = Field(..., description="Untyped dialect (.jsx)")
    fields: list[FieldDescriptor] = Field(default_factory=list, description="Repaired field list")

    def file_names(self) -> dict[str, str]:
        """Map suggested file names to their contents."""
        return {
            f"{self.component_name}.tsx": self.typescript,
            f"{self.component_name}.jsx": self.javascript,
        }

    def to_dict(self) -> dict[str, Any]:
        """Export for JSON transports."""
        return {
            "componentName": self.component_name,
            "typescript": self.typescript,
            "javascript": self.javascript,
            "files": sorted(self.file_names()),
            "fields": dump_fields(self.fields),
        }
