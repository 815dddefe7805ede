"""Performance sentinel budgets and synthetic dumps for large inputs."""

from __future__ import annotations

import os


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_PARSE_LARGE_DUMP_MS = _budget_from_env("STEAMSTATS_MAX_PARSE_LARGE_DUMP_MS", 1500.0)
MAX_CSHARP_LARGE_DUMP_MS = _budget_from_env("STEAMSTATS_MAX_CSHARP_LARGE_DUMP_MS", 500.0)

LARGE_DUMP_ACHIEVEMENTS = 5000
LARGE_DUMP_STATS = 5000


def build_synthetic_dump(achievements: int, stats: int) -> str:
    """Build a dump shaped like a Steamworks raw stats export.

    Every record is padded with non-matching lines (ids, flags, braces) the
    way a real export is.
    """
    lines = ['"stats"', "{"]
    for i in range(stats):
        lines.extend([
            f'\t"{i}"',
            "\t{",
            '\t\t"type"\t"1"',
            f'\t\t"name"\t"stat_{i}"',
            f'\t\t"name"\t"Stat {i}"',
            '\t\t"incrementonly"\t"0"',
            "\t}",
        ])
    for i in range(achievements):
        lines.extend([
            f'\t"{stats + i}"',
            "\t{",
            '\t\t"type"\t"4"',
            f'\t\t"name"\t"ach_{i}"',
            '\t\t"display"',
            "\t\t{",
            '\t\t\t"name"',
            "\t\t\t{",
            f'\t\t\t\t"english"\t"Achievement {i}"',
            '\t\t\t\t"token"\t"NEW_ACHIEVEMENT_NAME"',
            "\t\t\t}",
            '\t\t\t"desc"',
            "\t\t\t{",
            f'\t\t\t\t"english"\t"Description {i}"',
            "\t\t\t}",
            "\t\t}",
            "\t}",
        ])
    lines.append("}")
    return "\n".join(lines)
