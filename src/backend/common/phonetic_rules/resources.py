"""Rule resource naming and loading.

Resources are UTF-8 text files named after the naming system, rule phase and
language they cover, e.g. ``gen_exact_english.txt``. Included files are
referenced by bare name (``#include gen_exact_approx_common`` loads
``gen_exact_approx_common.txt``).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Mapping, Protocol, Union

from .errors import ConfigurationError
from .models import NameType, RuleType

ENCODING = "utf-8"
LINE_COMMENT = "//"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"
INCLUDE = "#include"

_LINE_TERMINATOR = re.compile("\r\n|[\n\r\u2028\u2029\u0085]")


def rules_resource_name(name_type: NameType, rule_type: RuleType, language: str) -> str:
    return f"{name_type.value}_{rule_type.value}_{language}.txt"


def include_resource_name(name: str) -> str:
    return f"{name}.txt"


def languages_resource_name(name_type: NameType) -> str:
    return f"{name_type.value}_languages.txt"


class ResourceLoader(Protocol):
    def load(self, identifier: str) -> Iterator[str]:
        """Return the resource's lines without line terminators.

        Raises ConfigurationError when the resource does not exist.
        """
        ...


class DirectoryResourceLoader:
    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root)
        if not self._root.is_dir():
            raise ConfigurationError(f"Rules directory does not exist: {self._root}")

    @property
    def root(self) -> Path:
        return self._root

    def load(self, identifier: str) -> Iterator[str]:
        path = self._root / identifier
        if not path.is_file():
            raise ConfigurationError(f"Unable to load resource: {identifier}")
        return _read_lines(path)


class MappingResourceLoader:
    """Serves resources from an in-memory ``{identifier: text}`` mapping."""

    def __init__(self, resources: Mapping[str, str]) -> None:
        self._resources = dict(resources)

    def load(self, identifier: str) -> Iterator[str]:
        if identifier not in self._resources:
            raise ConfigurationError(f"Unable to load resource: {identifier}")
        return iter(split_lines(self._resources[identifier]))


def split_lines(text: str) -> List[str]:
    """Split resource text into lines without their terminators.

    A trailing terminator does not start an extra empty line.
    """
    lines = _LINE_TERMINATOR.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _read_lines(path: Path) -> Iterator[str]:
    with path.open("r", encoding=ENCODING, newline="") as handle:
        text = handle.read()
    return iter(split_lines(text))
