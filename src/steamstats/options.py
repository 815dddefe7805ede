"""Code generation options."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

DEFAULT_NAMESPACE = "BS"
DEFAULT_CLASS_NAME = "StatsAndAchievementsDefinitions"


class CodegenOptions(BaseModel):
    """Settings for the generated C# module.

    Only the wrapper names are validated. Record ids from the dump are
    emitted as-is.
    """
    namespace: str = DEFAULT_NAMESPACE
    class_name: str = DEFAULT_CLASS_NAME
    enum_base: int = Field(0, ge=0, description="Ordinal of the first enum member")
    escape_strings: bool = Field(
        False,
        description="Escape backslashes and double quotes in string literals",
    )
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Namespace must be a dotted sequence of identifiers."""
        parts = v.split(".")
        if not all(_IDENTIFIER_RE.match(p) for p in parts):
            raise ValueError(f"Namespace '{v}' is not a valid C# namespace (e.g., 'Game.Stats')")
        return v

    @field_validator("class_name")
    @classmethod
    def validate_class_name(cls, v: str) -> str:
        if not _IDENTIFIER_RE.match(v):
            raise ValueError(f"Class name '{v}' is not a valid C# identifier")
        return v
