"""Reading of the environment description file (``env.txt``)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

MAX_VALUES = 512
DEFAULT_NUM_OBJECTS = 1
DEFAULT_OBJECT_STARTING_INDEX = 10


@dataclass(frozen=True)
class EnvConfig:
    """Screen size and the raw integers read from an environment file."""

    width: int
    height: int
    values: tuple[int, ...] = field(default_factory=tuple)
    num_objects: int = DEFAULT_NUM_OBJECTS
    object_starting_index: int = DEFAULT_OBJECT_STARTING_INDEX

    def value(self, index: int) -> int:
        """Return the integer stored at ``index`` in the file."""
        return self.values[index]


def _leading_integers(text: str):
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def parse_env(text: str) -> EnvConfig:
    """Parse the whitespace-separated integers of an environment file.

    Reading stops at the first token that is not an integer and after
    ``MAX_VALUES`` values. The first two values are width and height.
    """
    values: list[int] = []
    for number in _leading_integers(text):
        if len(values) >= MAX_VALUES:
            break
        values.append(number)
    if len(values) < 2:
        raise ValueError("environment file must start with a width and a height")
    return EnvConfig(width=values[0], height=values[1], values=tuple(values))


def read_env(path: str | os.PathLike[str] = "env.txt") -> EnvConfig:
    """Read and parse the environment file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_env(handle.read())