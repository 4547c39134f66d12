"""
Chain model: the commands to be laid out and a plain text reader for them.

Chain file format, one command per line:
    # comments and blank lines are skipped
    say first
    ?say only runs if the previous command succeeded
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List

from .constants import COMMENT_PREFIX, CONDITIONAL_PREFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """A single command block's command."""
    text: str
    conditional: bool = False

    def __str__(self) -> str:
        prefix = CONDITIONAL_PREFIX if self.conditional else ""
        return prefix + self.text


# Empty command block used to pad a chain
NOP = Command("")


def is_conditional(command) -> bool:
    """Caller-defined commands without a ``conditional`` attribute are unconditional."""
    return bool(getattr(command, "conditional", False))


def parse_chain(lines: Iterable[str]) -> List[Command]:
    chain = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        conditional = line.startswith(CONDITIONAL_PREFIX)
        if conditional:
            line = line[len(CONDITIONAL_PREFIX):].lstrip()
        if line.startswith("/"):
            line = line[1:]
        chain.append(Command(line, conditional=conditional))
    return chain


def load_chain_from_file(file_path: str) -> List[Command]:
    """
    Loads a chain from a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file_path does not exist.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Chain file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        chain = parse_chain(f)
    logger.info("Loaded %d commands from %s", len(chain), file_path)
    return chain
