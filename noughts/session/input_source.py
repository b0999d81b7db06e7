"""
Input Source - Where the game loop gets its raw lines from.

An InputSource produces one raw line per read(), or None when no
more input is available. None is end-of-input and is distinct from
an empty line.

Implementations:
- InteractiveInputSource: reads from a text stream (stdin by default)
- ScriptedInputSource: replays a fixed list of lines, for tests and replays
"""

from __future__ import annotations
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, TextIO

logger = logging.getLogger(__name__)


class InputSource(ABC):
    """
    Abstract base class for line sources.

    The game loop only ever calls read().
    """

    @abstractmethod
    def read(self) -> str | None:
        """
        Produce the next raw line.

        Returns None once input is exhausted or can no longer be read.
        """
        pass


class InteractiveInputSource(InputSource):
    """
    Reads lines from a text stream, blocking until one arrives.

    End of stream and read failures both surface as None.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin

    def read(self) -> str | None:
        try:
            line = self.stream.readline()
        except (OSError, ValueError) as e:
            logger.warning("Reading input failed: %s", e)
            return None

        if line == "":
            logger.info("Input stream closed")
            return None
        return line


class ScriptedInputSource(InputSource):
    """
    Replays a fixed, ordered sequence of lines.

    Usage:
        source = ScriptedInputSource(["0,0", "1,1", "q"])
        source.read()  # "0,0"
    """

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.index = 0

    @classmethod
    def from_file(cls, path: str | Path) -> ScriptedInputSource:
        """Load one move per line from a text file."""
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        logger.debug("Loaded %d scripted lines from %s", len(lines), path)
        return cls(lines)

    @property
    def remaining(self) -> int:
        return len(self.lines) - self.index

    def read(self) -> str | None:
        if self.index >= len(self.lines):
            return None
        line = self.lines[self.index]
        self.index += 1
        return line
