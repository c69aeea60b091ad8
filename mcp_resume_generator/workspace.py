from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from .security import resolve_in_root, sanitize_path

logger = logging.getLogger(__name__)

PDF_EXTENSION = ".pdf"
DEFAULT_STEM = "resume"


@dataclass(slots=True)
class ResumeFile:
    """A generated PDF found while listing a folder."""

    relative_path: str
    size_bytes: int
    modified: datetime

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.2f}"


@dataclass(slots=True)
class FolderListing:
    relative_path: str
    folders: List[str] = field(default_factory=list)
    files: List[ResumeFile] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.folders and not self.files


@dataclass(slots=True)
class SavedResume:
    path: Path
    relative_path: str
    size_bytes: int


class ResumeWorkspace:
    """
    Filesystem side of the server, confined to a single root directory.

    Every caller-supplied path goes through `resolve`, which cannot point
    outside `root`. Filesystem errors are left to propagate.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def resolve(self, candidate: Optional[str]) -> Path:
        return resolve_in_root(candidate, self.root)

    def relative(self, path: Path) -> str:
        return os.path.relpath(path, self.root)

    def create_folder(self, folder_path: str) -> Path:
        """mkdir -p inside the root; an existing folder is not an error."""
        if not folder_path or not folder_path.strip():
            raise ValueError("Folder path cannot be empty")

        target = self.resolve(folder_path)
        target.mkdir(parents=True, exist_ok=True)
        logger.info("Created folder %s", target)
        return target

    def list_folder(self, path: Optional[str] = "") -> FolderListing:
        """List subfolders and PDFs, creating the folder first if it is missing."""
        sanitized = sanitize_path(path)
        target = self.resolve(sanitized)
        target.mkdir(parents=True, exist_ok=True)

        listing = FolderListing(relative_path=sanitized)
        for child in sorted(target.iterdir(), key=lambda p: p.name.lower()):
            item_path = os.path.join(sanitized, child.name)
            if child.is_dir():
                listing.folders.append(item_path)
            elif child.name.endswith(PDF_EXTENSION):
                stats = child.stat()
                listing.files.append(
                    ResumeFile(
                        relative_path=item_path,
                        size_bytes=stats.st_size,
                        modified=datetime.fromtimestamp(stats.st_mtime),
                    )
                )
        return listing

    def prepare_folder(self, folder_path: Optional[str]) -> Path:
        target = self.resolve(folder_path)
        target.mkdir(parents=True, exist_ok=True)
        return target

    def save_resume(
        self,
        content: bytes,
        *,
        filename: Optional[str] = DEFAULT_STEM,
        folder_path: Optional[str] = None,
        today: Optional[date] = None,
    ) -> SavedResume:
        """Write `<stem>-<YYYY-MM-DD>.pdf`; an existing file of that name is replaced."""
        stamp = (today or datetime.now(timezone.utc).date()).isoformat()
        stem = sanitize_path(filename) or DEFAULT_STEM
        target = self.prepare_folder(folder_path) / f"{stem}-{stamp}{PDF_EXTENSION}"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

        logger.info("Saved resume %s (%s bytes)", target, len(content))
        return SavedResume(path=target, relative_path=self.relative(target), size_bytes=len(content))
