import logging
import re
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

# ASCII digits only: fullwidth or other Unicode digits do not number a chunk
_DIGITS = re.compile(r"[0-9]+")

# Numbers past the signed 64-bit range are treated as unnumbered
MAX_SEQUENCE_NUMBER = 2**63 - 1

# Key given to chunks whose name carries no number; sorts ahead of chunk 0.
UNNUMBERED_KEY = -1


def extract_sequence_number(path: Path) -> int:
    """
    Returns the first run of digits in the base filename as an integer.
    "chunk_10.chunk" -> 10, "part-007-of-9.chunk" -> 7, "intro.chunk" -> -1
    """
    match = _DIGITS.search(Path(path).name)
    if not match:
        return UNNUMBERED_KEY
    digits = match.group().lstrip("0") or "0"
    if len(digits) > len(str(MAX_SEQUENCE_NUMBER)):
        return UNNUMBERED_KEY
    number = int(digits)
    if number > MAX_SEQUENCE_NUMBER:
        return UNNUMBERED_KEY
    return number


def order_chunks(paths: Iterable[Path]) -> List[Path]:
    """
    Sorts chunk paths by sequence number.
    Paths are name-sorted first so equal keys keep a deterministic order
    regardless of how the filesystem enumerated them.
    """
    by_name = sorted((Path(p) for p in paths), key=lambda p: p.name)

    for p in by_name:
        if extract_sequence_number(p) == UNNUMBERED_KEY:
            logger.warning(f"Chunk has no sequence number, it will be merged first: {p.name}")

    return sorted(by_name, key=extract_sequence_number)
