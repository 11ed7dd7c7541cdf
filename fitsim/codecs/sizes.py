"""
Size list codec for FitSim.

Chunk and request files hold one size per line. Lines are parsed like C
``atoi``: leading whitespace is skipped, an optional sign and the leading
decimal digits are parsed, and anything unparseable counts as 0. Negative
values wrap around as unsigned 64-bit sizes.
"""

from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import SizeFileError

logger = logging.getLogger(__name__)

SIZE_T_MODULUS = 1 << 64

_LEADING_INT = re.compile(rb"[ \t\n\v\f\r]*([+-]?[0-9]+)")

SizeData = Union[str, bytes]


def _as_bytes(data: SizeData) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return data


def decode_size(line: SizeData) -> int:
    match = _LEADING_INT.match(_as_bytes(line))
    if match is None:
        return 0
    return int(match.group(1)) % SIZE_T_MODULUS


def decode_sizes(data: SizeData) -> List[int]:
    """Decode one size per ``\\n``-terminated line; no other byte ends a line."""
    lines = _as_bytes(data).split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [decode_size(line) for line in lines]


def encode_sizes(sizes: Iterable[int]) -> str:
    return ''.join(f"{size}\n" for size in sizes)


def load_sizes(path: Union[str, Path]) -> List[int]:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SizeFileError(f"Cannot read size file {path}: {e}", path=str(path)) from e

    sizes = decode_sizes(data)
    logger.debug("Loaded %d sizes from %s", len(sizes), path)
    return sizes


def save_sizes(path: Union[str, Path], sizes: Iterable[int]) -> None:
    Path(path).write_text(encode_sizes(sizes))
