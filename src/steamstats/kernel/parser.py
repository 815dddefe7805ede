"""Line-oriented parser for Steam raw stats/achievements dumps.

A dump is a flat list of tab-delimited key/value lines:

    "name"      "ach_first_blood"
    "english"   "First Blood"
    "english"   "Defeat your first enemy."
    "name"      "stat_kills"
    "name"      "Kills"

Records are found by scanning forward for an identifying "name" line and then
scanning forward again for that record's field lines. Lines are consumed as
the scan advances and are never revisited, so a line read while looking for
one record's field is not available to later records.
"""

import logging
import re
from collections import deque
from typing import Deque, Iterable, List, Optional, Pattern

from .records import Achievement, ParseResult, Stat

logger = logging.getLogger(__name__)

NAME_LINE_RE = re.compile(r'"name"(?:\s|\t+)".*"$')
ENGLISH_LINE_RE = re.compile(r'"english"(?:\s|\t+)".*"$')

ACHIEVEMENT_PREFIX = "ach_"
STAT_PREFIX = "stat_"


def split_lines(text: str) -> List[str]:
    """Split text on newlines and trim every line. Blank lines are kept."""
    return [line.strip() for line in text.split("\n")]


def extract_value(line: str) -> str:
    """Return the value cell of a key/value line without its quotes.

    The value is the second tab-delimited field. Runs of tabs count as a
    single delimiter. Every leading and trailing '"' is removed.
    """
    fields = [f for f in line.split("\t") if f]
    if len(fields) < 2:
        return ""
    return fields[1].strip('"')


class LineParser:
    """Groups dump lines into achievement and stat records."""

    def parse(self, text: str) -> ParseResult:
        """Parse a whole dump."""
        return self.parse_lines(split_lines(text))

    def parse_lines(self, lines: Iterable[str]) -> ParseResult:
        """Parse already split and trimmed lines."""
        queue: Deque[str] = deque(lines)
        achievements: List[Achievement] = []
        stats: List[Stat] = []

        while queue:
            item = self._consume_until(NAME_LINE_RE, queue)
            if item is None:
                break
            if item.startswith(ACHIEVEMENT_PREFIX):
                achievements.append(self._parse_achievement(item, queue))
            elif item.startswith(STAT_PREFIX):
                stats.append(self._parse_stat(item, queue))
            else:
                logger.info("Skipping unrecognized record id: %s", item)

        result = ParseResult(achievements=tuple(achievements), stats=tuple(stats))
        logger.debug(
            "Parsed %d achievements and %d stats",
            len(result.achievements),
            len(result.stats),
        )
        return result

    def _consume_until(self, pattern: Pattern[str], queue: Deque[str]) -> Optional[str]:
        """Pop lines until one matches pattern and return its value.

        Returns None when the queue runs out first.
        """
        while queue:
            line = queue.popleft()
            if pattern.search(line):
                return extract_value(line)
            if line:
                logger.debug("Skipping line: %s", line)
        return None

    def _parse_achievement(self, achievement_id: str, queue: Deque[str]) -> Achievement:
        name = self._consume_until(ENGLISH_LINE_RE, queue)
        display = self._consume_until(ENGLISH_LINE_RE, queue)
        return Achievement(id=achievement_id, name=name or "", display=display or "")

    def _parse_stat(self, stat_id: str, queue: Deque[str]) -> Stat:
        display = self._consume_until(NAME_LINE_RE, queue)
        return Stat(id=stat_id, display=display or "")
