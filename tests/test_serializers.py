"""Tests for kernel/serializers.py."""

import json

import pytest
from pydantic import ValidationError

from steamstats.codes import OutputFormat
from steamstats.kernel.parser import LineParser
from steamstats.kernel.records import Achievement, ParseResult, Stat
from steamstats.kernel.serializers import (
    CodeSerializer,
    JsonSerializer,
    Serializer,
    escape_csharp_string,
    get_serializer,
)
from steamstats.options import CodegenOptions


@pytest.fixture
def example_result(example_text) -> ParseResult:
    return LineParser().parse(example_text)


def test_json_exact_output(example_result):
    """Test the compact JSON document for the example dump."""
    out = JsonSerializer().serialize(example_result)

    assert out == (
        '{"achievements":[{"id":"ach_first","name":"First","display":"First desc"}],'
        '"stats":[{"id":"stat_count","display":"Count Stat"}]}'
    )


def test_json_field_order():
    """Test that record fields keep id, name, display order rather than sorted order."""
    result = ParseResult(
        achievements=(Achievement(id="ach_b", name="B", display="b"),),
        stats=(Stat(id="stat_b", display="b"),),
    )
    data = json.loads(JsonSerializer().serialize(result))

    assert list(data) == ["achievements", "stats"]
    assert list(data["achievements"][0]) == ["id", "name", "display"]
    assert list(data["stats"][0]) == ["id", "display"]


def test_json_round_trip(fixtures_dir):
    """Test that JSON output validates back into an equal ParseResult."""
    text = (fixtures_dir / "steam_raw_stats.txt").read_text(encoding="utf-8")
    result = LineParser().parse(text)

    restored = ParseResult.model_validate(json.loads(JsonSerializer().serialize(result)))

    assert restored == result


def test_json_empty_result():
    assert JsonSerializer().serialize(ParseResult()) == '{"achievements":[],"stats":[]}'


def test_json_indent_and_unicode():
    """Test pretty-printing and that non-ASCII text is written verbatim."""
    result = ParseResult(achievements=(Achievement(id="ach_u", name="Übermensch", display="✓"),))
    out = JsonSerializer(indent=2).serialize(result)

    assert "Übermensch" in out
    assert "✓" in out
    assert out.startswith('{\n  "achievements": [')


def test_code_output_block_order(example_result):
    """Test that the Achievement enum, definitions table and Stat enum appear in order."""
    out = CodeSerializer().serialize(example_result)

    ach_enum = out.index("public enum Achievement : int {")
    table = out.index("public static readonly AchievementDefinition[] Achievements")
    stat_enum = out.index("public enum Stat : int {")
    assert ach_enum < table < stat_enum


def test_code_output_enum_members(example_result):
    """Test that each enum has exactly the discovered members."""
    out = CodeSerializer().serialize(example_result)
    lines = [line.strip() for line in out.splitlines()]

    ach_start = lines.index("public enum Achievement : int {")
    stat_start = lines.index("public enum Stat : int {")
    assert lines[ach_start + 1:ach_start + 3] == ["ach_first = 0,", "};"]
    assert lines[stat_start + 1:stat_start + 3] == ["stat_count = 0,", "};"]
    assert "unrelated_thing" not in out


def test_code_output_definition_entries(example_result):
    out = CodeSerializer().serialize(example_result)

    assert 'new AchievementDefinition(Achievement.ach_first, "First", "First desc"),' in out


def test_code_output_wrapper_defaults(example_result):
    """Test the default namespace and class wrapper."""
    out = CodeSerializer().serialize(example_result)

    assert out.startswith("using System.Collections;\n\nnamespace BS {\n")
    assert "\tpublic class StatsAndAchievementsDefinitions {\n" in out
    assert out.endswith("\t}\n}\n")


def test_code_output_preserves_discovery_order():
    result = ParseResult(
        achievements=(Achievement(id="ach_z"), Achievement(id="ach_a"), Achievement(id="ach_m")),
        stats=(Stat(id="stat_z"), Stat(id="stat_a")),
    )
    out = CodeSerializer().serialize(result)

    assert out.index("ach_z = 0,") < out.index("ach_a = 1,") < out.index("ach_m = 2,")
    assert out.index("stat_z = 0,") < out.index("stat_a = 1,")


def test_code_output_enum_base():
    result = ParseResult(
        achievements=(Achievement(id="ach_a"), Achievement(id="ach_b")),
        stats=(Stat(id="stat_a"),),
    )
    out = CodeSerializer(CodegenOptions(enum_base=1)).serialize(result)

    assert "ach_a = 1," in out
    assert "ach_b = 2," in out
    assert "stat_a = 1," in out


def test_code_output_custom_wrapper():
    out = CodeSerializer(
        CodegenOptions(namespace="Game.Stats", class_name="SteamDefs")
    ).serialize(ParseResult())

    assert "namespace Game.Stats {" in out
    assert "public class SteamDefs {" in out


def test_code_output_duplicates_and_invalid_ids_emitted_as_is():
    """Test that ids are not sanitized or deduplicated."""
    result = ParseResult(
        achievements=(Achievement(id="ach_dup"), Achievement(id="ach_dup"), Achievement(id="ach-bad id")),
    )
    out = CodeSerializer().serialize(result)

    assert "ach_dup = 0," in out
    assert "ach_dup = 1," in out
    assert "ach-bad id = 2," in out


def test_code_output_no_escaping_by_default():
    """Test that quotes are embedded verbatim unless escaping is requested."""
    result = ParseResult(achievements=(Achievement(id="ach_q", name='Say "hi"', display="C:\\path"),))

    raw = CodeSerializer().serialize(result)
    escaped = CodeSerializer(CodegenOptions(escape_strings=True)).serialize(result)

    assert '"Say "hi"", "C:\\path"' in raw
    assert '"Say \\"hi\\"", "C:\\\\path"' in escaped


def test_escape_csharp_string():
    assert escape_csharp_string('a"b\\c') == 'a\\"b\\\\c'


def test_codegen_options_validation():
    with pytest.raises(ValidationError, match="not a valid C# namespace"):
        CodegenOptions(namespace="Bad Namespace")
    with pytest.raises(ValidationError, match="not a valid C# identifier"):
        CodegenOptions(class_name="1Class")
    with pytest.raises(ValidationError):
        CodegenOptions(enum_base=-1)
    with pytest.raises(ValidationError):
        CodegenOptions(unknown="x")


def test_get_serializer_selects_variant():
    assert isinstance(get_serializer(OutputFormat.JSON), JsonSerializer)
    assert isinstance(get_serializer(OutputFormat.CSHARP), CodeSerializer)
    assert isinstance(get_serializer("csharp"), CodeSerializer)
    assert get_serializer(OutputFormat.JSON, indent=4).indent == 4

    options = CodegenOptions(namespace="X")
    assert get_serializer(OutputFormat.CSHARP, options=options).options is options


def test_get_serializer_unknown_format():
    with pytest.raises(ValueError):
        get_serializer("yaml")


def test_serializer_is_abstract():
    with pytest.raises(TypeError):
        Serializer()
