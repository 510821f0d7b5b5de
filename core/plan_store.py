# =============================================================================
# core/plan_store.py  —  Sandboxed Document Storage
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the knowledge base and reads/writes the plan document, and makes
#   sure neither ever leaves the sandbox root.
#
# TWO LAYERS:
#   PlanRepository: where bytes live.  get(path) / put(path, text).
#     FileRepository hits the disk; InMemoryRepository is a dict, used by
#     the tests.
#   PlanStore: the policy on top.
#     * every path is resolved and checked against the sandbox root BEFORE
#       the repository is touched
#     * reads degrade to a placeholder document
#     * writes fail loudly (PlanStorageError)
#
# SHARED STATE:
#   The plan document is one overwritable location.  Two overlapping
#   generations both write it; whichever finishes last wins.
# =============================================================================

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from core.errors import AccessDenied, PlanStorageError

logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Raw text storage addressed by absolute, already-checked paths."""

    def get(self, path: Path) -> str:
        """Return the stored text, or raise OSError."""
        ...

    def put(self, path: Path, text: str) -> None:
        """Store ``text`` at ``path``, replacing what was there."""
        ...


class FileRepository:
    """UTF-8 files on the local filesystem."""

    def get(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def put(self, path: Path, text: str) -> None:
        """Write to a temp file next to ``path``, then rename it into place.

        Readers see either the previous document or the new one, never a
        partly written file.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, path)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise


class InMemoryRepository:
    """Dict-backed storage with filesystem-like errors."""

    def __init__(self, documents: dict[Path, str] | None = None):
        self.documents: dict[Path, str] = dict(documents or {})

    def get(self, path: Path) -> str:
        try:
            return self.documents[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def put(self, path: Path, text: str) -> None:
        self.documents[path] = text


class PlanStore:
    """Sandboxed read/write access to the planner's documents.

    Args:
        root: Sandbox root.  Every path is resolved against it and must stay
            inside it.
        repository: Storage backend.  Defaults to the local filesystem.
    """

    def __init__(self, root: str | Path, repository: PlanRepository | None = None):
        self.root = Path(root).resolve()
        self.repository = repository if repository is not None else FileRepository()

    def resolve(self, path: str | Path) -> Path:
        """Resolve ``path`` (relative paths are taken from the root).

        Raises:
            AccessDenied: If the resolved path is not inside the root.
        """
        resolved = (self.root / path).resolve()
        if not resolved.is_relative_to(self.root):
            logger.warning("Rejected path outside sandbox: %s", path)
            raise AccessDenied(path, self.root)
        return resolved

    def read(self, path: str | Path, fallback: str) -> str:
        """Return the document at ``path``, or ``fallback`` if it can't be read.

        Raises:
            AccessDenied: If ``path`` escapes the sandbox.  This is checked
                before any read is attempted.
        """
        target = self.resolve(path)
        try:
            return self.repository.get(target)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s, using placeholder: %s", target.name, exc)
            return fallback

    def write(self, path: str | Path, text: str) -> Path:
        """Overwrite the document at ``path`` with ``text``.

        Returns:
            The resolved path that was written.

        Raises:
            AccessDenied: If ``path`` escapes the sandbox.
            PlanStorageError: If the write itself fails.  The previous
                document, if any, is left as it was.
        """
        target = self.resolve(path)
        try:
            self.repository.put(target, text)
        except (OSError, UnicodeEncodeError) as exc:
            raise PlanStorageError(target, exc) from exc
        return target
