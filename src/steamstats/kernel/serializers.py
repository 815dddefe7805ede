"""Serializers that render a ParseResult into an output document.

Two variants share the Serializer interface:
- JsonSerializer: records as a JSON object, fields in model order.
- CodeSerializer: a C# module with an Achievement enum, an achievement
  definitions table and a Stat enum, in that order.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from steamstats._internal.json_output import ordered_dumps
from steamstats.codes import OutputFormat
from steamstats.options import CodegenOptions

from .records import Achievement, ParseResult


class Serializer(ABC):
    """Renders a ParseResult as a single string."""

    output_format: OutputFormat

    @abstractmethod
    def serialize(self, result: ParseResult) -> str:
        raise NotImplementedError


class JsonSerializer(Serializer):
    """Renders {"achievements": [...], "stats": [...]}."""

    output_format = OutputFormat.JSON

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def serialize(self, result: ParseResult) -> str:
        return ordered_dumps(result.model_dump(), indent=self.indent)


def escape_csharp_string(value: str) -> str:
    """Escape a value for use inside a regular C# string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


class CodeSerializer(Serializer):
    """Renders a C# definitions module.

    Ids are used verbatim as enum member names and string fields are quoted
    without escaping unless options.escape_strings is set. Invalid or
    duplicate ids therefore surface as compile errors in the generated code.
    """

    output_format = OutputFormat.CSHARP

    def __init__(self, options: Optional[CodegenOptions] = None):
        self.options = options or CodegenOptions()

    def serialize(self, result: ParseResult) -> str:
        opts = self.options
        body: List[str] = []
        body.extend(self._enum_block("Achievement", result.achievement_ids()))
        body.append("")
        body.extend(self._definition_class())
        body.append("")
        body.extend(self._definitions_table(result.achievements))
        body.append("")
        body.extend(self._enum_block("Stat", result.stat_ids()))

        lines = [
            "using System.Collections;",
            "",
            f"namespace {opts.namespace} {{",
            f"\tpublic class {opts.class_name} {{",
            "",
        ]
        lines.extend(f"\t\t{line}" if line else "" for line in body)
        lines.extend([
            "",
            "\t}",
            "}",
        ])
        return "\n".join(lines) + "\n"

    def _literal(self, value: str) -> str:
        if self.options.escape_strings:
            value = escape_csharp_string(value)
        return f'"{value}"'

    def _enum_block(self, enum_name: str, members: List[str]) -> List[str]:
        block = [f"public enum {enum_name} : int {{"]
        for ordinal, member in enumerate(members, start=self.options.enum_base):
            block.append(f"\t{member} = {ordinal},")
        block.append("};")
        return block

    def _definition_class(self) -> List[str]:
        return [
            "public class AchievementDefinition {",
            "\tpublic readonly Achievement Id;",
            "\tpublic readonly string Name;",
            "\tpublic readonly string Description;",
            "",
            "\tpublic AchievementDefinition(Achievement id, string name, string description) {",
            "\t\tId = id;",
            "\t\tName = name;",
            "\t\tDescription = description;",
            "\t}",
            "}",
        ]

    def _definitions_table(self, achievements: tuple[Achievement, ...]) -> List[str]:
        block = ["public static readonly AchievementDefinition[] Achievements = new AchievementDefinition[] {"]
        for ach in achievements:
            block.append(
                f"\tnew AchievementDefinition(Achievement.{ach.id}, "
                f"{self._literal(ach.name)}, {self._literal(ach.display)}),"
            )
        block.append("};")
        return block


def get_serializer(
    output_format: OutputFormat,
    *,
    indent: Optional[int] = None,
    options: Optional[CodegenOptions] = None,
) -> Serializer:
    """Return the serializer for an output format.

    Raises:
        ValueError: If output_format is not a known format
    """
    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.CSHARP:
        return CodeSerializer(options)
    return JsonSerializer(indent=indent)
