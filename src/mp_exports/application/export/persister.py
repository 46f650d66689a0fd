"""Application export – ArtifactPersister port and filesystem implementation."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Protocol, runtime_checkable

from mp_exports.config.settings import ExportSettings
from mp_exports.observability.logging import get_logger

__all__ = ["Artifact", "ArtifactPersister", "FileSystemArtifactPersister"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class Artifact:
    """A finished export, ready to be saved."""

    content: bytes
    filename: str
    media_type: str | None = None


@runtime_checkable
class ArtifactPersister(Protocol):
    """Port: hand an artifact to the caller's local environment."""

    def persist(self, artifact: Artifact) -> None: ...


class FileSystemArtifactPersister:
    """Saves artifacts into *directory* the way a browser download would.

    Only the basename of the artifact's filename is used, and an existing file
    is never overwritten: ``report.csv`` becomes ``report (1).csv`` and so on.
    """

    def __init__(self, directory: str | Path = ".") -> None:
        self._directory = Path(directory)

    @classmethod
    def from_settings(cls, settings: ExportSettings) -> "FileSystemArtifactPersister":
        return cls(settings.download_dir)

    @property
    def directory(self) -> Path:
        return self._directory

    def persist(self, artifact: Artifact) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._free_path(PurePath(artifact.filename).name or "export")
        path.write_bytes(artifact.content)
        logger.info("artifact.saved", path=str(path), size=len(artifact.content))

    def _free_path(self, name: str) -> Path:
        candidate = self._directory / name
        stem, suffix = Path(name).stem, Path(name).suffix
        n = 0
        while candidate.exists():
            n += 1
            candidate = self._directory / f"{stem} ({n}){suffix}"
        return candidate
