"""
Byte-stream providers for resource files.

Resources are addressed by a static path-like key such as
"en/top_10000_words_inflected.txt". The default provider reads the files
shipped inside the package (queries_resources/data); other providers let
callers point at a directory or hand over bytes directly.
"""

from __future__ import annotations

import io
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Dict, Mapping, Optional, Protocol, Union

from .errors import ResourceIOError, ResourceNotFoundError

DATA_PACKAGE = "queries_resources.data"


class ResourceProvider(Protocol):
    """Anything that can open a resource key as a binary stream."""

    def open(self, key: str) -> BinaryIO:
        ...

    def exists(self, key: str) -> bool:
        ...


def _check_key(key: str) -> str:
    parts = key.split("/")
    if not key or key.startswith("/") or any(part in ("", ".", "..") for part in parts):
        raise ResourceNotFoundError(f"invalid resource key {key!r}", source=key)
    return key


class PackageResourceProvider:
    """Read resources bundled with the installed package."""

    def __init__(self, package: str = DATA_PACKAGE) -> None:
        self.package = package

    def _traversable(self, key: str):
        node = resources.files(self.package)
        for part in _check_key(key).split("/"):
            node = node.joinpath(part)
        return node

    def exists(self, key: str) -> bool:
        try:
            return self._traversable(key).is_file()
        except ResourceNotFoundError:
            return False

    def open(self, key: str) -> BinaryIO:
        node = self._traversable(key)
        if not node.is_file():
            raise ResourceNotFoundError(f"no bundled resource in {self.package}", source=key)
        try:
            return node.open("rb")
        except OSError as exc:
            raise ResourceIOError(f"cannot open bundled resource: {exc}", source=key) from exc

    def __repr__(self) -> str:
        return f"PackageResourceProvider({self.package!r})"


class DirectoryResourceProvider:
    """Read resources from a directory laid out as <root>/<lang>/<file>."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root).expanduser()

    def _path(self, key: str) -> Path:
        return self.root.joinpath(*_check_key(key).split("/"))

    def exists(self, key: str) -> bool:
        try:
            return self._path(key).is_file()
        except ResourceNotFoundError:
            return False

    def open(self, key: str) -> BinaryIO:
        path = self._path(key)
        if not path.is_file():
            raise ResourceNotFoundError(f"not found under {self.root}", source=key)
        try:
            return path.open("rb")
        except OSError as exc:
            raise ResourceIOError(f"cannot open {path}: {exc}", source=key) from exc

    def __repr__(self) -> str:
        return f"DirectoryResourceProvider({str(self.root)!r})"


class InMemoryResourceProvider:
    """Serve resources from a {key: bytes} mapping, mostly for tests and embedding."""

    def __init__(self, contents: Optional[Mapping[str, Union[bytes, str]]] = None) -> None:
        self._contents: Dict[str, bytes] = {}
        for key, value in (contents or {}).items():
            self._contents[key] = value.encode("utf-8") if isinstance(value, str) else bytes(value)

    def exists(self, key: str) -> bool:
        return key in self._contents

    def open(self, key: str) -> BinaryIO:
        try:
            return io.BytesIO(self._contents[key])
        except KeyError:
            raise ResourceNotFoundError("not found in memory provider", source=key) from None

    def __repr__(self) -> str:
        return f"InMemoryResourceProvider({len(self._contents)} resources)"
