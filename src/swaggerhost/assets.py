"""Read-only store for the Swagger UI static files."""

from __future__ import annotations

import mimetypes
from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import Iterator

from starlette.staticfiles import StaticFiles


class AssetNotFoundError(KeyError):
    """Raised when a path is not part of the asset store."""


def _default_root() -> Path:
    return Path(str(files("swaggerhost.web").joinpath("static")))


class AssetStore(Mapping):
    """Mapping of POSIX relative path to file content.

    The store never writes to ``root``; paths that leave it are treated
    as missing.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = Path(root if root is not None else _default_root()).resolve()

    def _locate(self, path: str) -> Path:
        candidate = (self.root / path.lstrip("/")).resolve()
        if not candidate.is_relative_to(self.root) or not candidate.is_file():
            raise AssetNotFoundError(path)
        return candidate

    def __getitem__(self, path: str) -> bytes:
        return self._locate(path).read_bytes()

    def __iter__(self) -> Iterator[str]:
        for item in sorted(self.root.rglob("*")):
            if item.is_file():
                yield item.relative_to(self.root).as_posix()

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            self._locate(path)
        except AssetNotFoundError:
            return False
        return True

    def read_text(self, path: str) -> str:
        return self[path].decode("utf-8")

    @staticmethod
    def media_type(path: str) -> str:
        guessed, _ = mimetypes.guess_type(path)
        return guessed or "application/octet-stream"

    def static_app(self) -> StaticFiles:
        return StaticFiles(directory=str(self.root))
