"""steamstats: convert Steam raw stats/achievements dumps to JSON or C#."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("steamstats")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from steamstats.api import parse_text, parse_file, convert, convert_file
from steamstats.codes import OutputFormat
from steamstats.kernel.records import Achievement, Stat, ParseResult
from steamstats.options import CodegenOptions

__all__ = [
    "__version__",
    "parse_text",
    "parse_file",
    "convert",
    "convert_file",
    "OutputFormat",
    "Achievement",
    "Stat",
    "ParseResult",
    "CodegenOptions",
]
