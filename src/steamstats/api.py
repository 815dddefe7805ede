"""Public API for steamstats.

High-level functions that take dump text or a dump path and return either the
parsed records or the converted document.
"""

import os
from pathlib import Path
from typing import Optional, Union

from steamstats.codes import OutputFormat
from steamstats.kernel.parser import LineParser
from steamstats.kernel.records import ParseResult
from steamstats.kernel.serializers import get_serializer
from steamstats.options import CodegenOptions


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def parse_text(text: str) -> ParseResult:
    """Parse dump text into records."""
    return LineParser().parse(text)


def parse_file(
    path: Union[str, os.PathLike, Path],
    encoding: str = "utf-8",
) -> ParseResult:
    """Read and parse a dump file.

    The whole file is read into memory before parsing.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
    """
    text = _normalize_path(path).read_text(encoding=encoding)
    return parse_text(text)


def convert(
    text: str,
    output_format: Union[OutputFormat, str] = OutputFormat.JSON,
    *,
    indent: Optional[int] = None,
    options: Optional[CodegenOptions] = None,
) -> str:
    """Convert dump text to JSON or C#.

    Args:
        text: Raw dump text
        output_format: OutputFormat.JSON (default) or OutputFormat.CSHARP
        indent: JSON pretty-print indent (JSON only)
        options: Code generation options (C# only)

    Returns:
        The converted document
    """
    serializer = get_serializer(OutputFormat(output_format), indent=indent, options=options)
    return serializer.serialize(parse_text(text))


def convert_file(
    path: Union[str, os.PathLike, Path],
    output_format: Union[OutputFormat, str] = OutputFormat.JSON,
    *,
    encoding: str = "utf-8",
    indent: Optional[int] = None,
    options: Optional[CodegenOptions] = None,
) -> str:
    """Read a dump file and convert it to JSON or C#."""
    serializer = get_serializer(OutputFormat(output_format), indent=indent, options=options)
    return serializer.serialize(parse_file(path, encoding=encoding))
