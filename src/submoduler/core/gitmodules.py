"""Minimal .gitmodules reader.

Only two line shapes are recognized:

    [submodule "<name>"]
    path = <value>

A path line is only meaningful while a submodule section is open. Everything
else in the file is ignored.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r'\[submodule "(.+)"\]')
_PATH_RE = re.compile(r"path = (.+)")


@dataclass
class SubmoduleInfo:
    """A submodule declared in .gitmodules.

    path is None when the section had no path line.
    """

    name: str
    path: str | None = None


def parse_gitmodules(text: str) -> list[SubmoduleInfo]:
    """Parse submodule records from .gitmodules content, in file order.

    A duplicate path line inside one section overwrites the earlier value.
    """
    submodules: list[SubmoduleInfo] = []
    current: SubmoduleInfo | None = None

    for line in text.splitlines():
        section_match = _SECTION_RE.search(line)
        if section_match:
            current = SubmoduleInfo(name=section_match.group(1))
            submodules.append(current)
            continue

        path_match = _PATH_RE.search(line)
        if path_match and current is not None:
            current.path = path_match.group(1).strip()

    return submodules


def read_gitmodules(gitmodules_path: Path) -> list[SubmoduleInfo]:
    """Read and parse a .gitmodules file.

    Returns an empty list if the file cannot be read.
    """
    try:
        text = gitmodules_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", gitmodules_path, e)
        return []
    return parse_gitmodules(text)
