"""
Input Loading
=============
Line-oriented readers shared by every day's solver.

Each puzzle input is a plain text file at a fixed location,
``<input dir>/day<N>.txt``.  The input directory is resolved with the
usual override order:

1) explicit ``input_dir`` argument
2) env ADVENT_INPUT_DIR
3) DEFAULT_INPUT_DIR (``inputs`` under the working directory)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

DEFAULT_INPUT_DIR = "inputs"

PathLike = Union[str, "os.PathLike[str]"]


def read_lines(path: PathLike) -> List[str]:
    """
    Read a text file into a list of lines without line terminators.

    Raises OSError (FileNotFoundError, PermissionError, ...) when the file
    cannot be opened or read.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def to_lines(text: str) -> List[str]:
    """Split a literal multi-line string the same way read_lines splits a file."""
    return text.splitlines()


def split_blocks(lines: Iterable[str]) -> List[List[str]]:
    """Group lines into blocks separated by empty lines."""
    blocks: List[List[str]] = [[]]
    for line in lines:
        if line == "":
            blocks.append([])
        else:
            blocks[-1].append(line)
    return [block for block in blocks if block]


def resolve_input_dir(input_dir: Optional[PathLike] = None) -> Path:
    if input_dir is not None:
        return Path(input_dir)
    return Path(os.getenv("ADVENT_INPUT_DIR") or DEFAULT_INPUT_DIR)


def input_path(day: int, input_dir: Optional[PathLike] = None) -> Path:
    return resolve_input_dir(input_dir) / f"day{day}.txt"
