"""Split a topic explanation into display blocks.

Line rules, applied to each trimmed non-blank line:

- ends with ``:`` and is shorter than 100 characters → heading
- starts with ``- `` or ``• `` → list item (marker removed)
- anything else → paragraph
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

HEADING_MAX_LENGTH = 100
_LIST_MARKERS = ("- ", "• ")


class BlockKind(str, Enum):
    HEADING = "heading"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    kind: BlockKind
    text: str

    def to_dict(self) -> dict[str, str]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


def classify_line(line: str) -> Block | None:
    """Classify one explanation line, or return ``None`` for a blank line."""
    trimmed = line.strip()
    if not trimmed:
        return None
    if trimmed.endswith(":") and len(trimmed) < HEADING_MAX_LENGTH:
        return Block(BlockKind.HEADING, trimmed)
    if trimmed.startswith(_LIST_MARKERS):
        return Block(BlockKind.LIST_ITEM, trimmed[2:])
    return Block(BlockKind.PARAGRAPH, trimmed)


def parse_explanation(text: str) -> list[Block]:
    return [block for block in map(classify_line, text.split("\n")) if block is not None]
