from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK_FILE = "symlink_file"  # link whose target is a regular file
    SYMLINK_DIRECTORY = "symlink_directory"
    SYMLINK_DANGLING = "symlink_dangling"


@dataclass(frozen=True)
class Entry:
    name: str
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind in (
            EntryKind.SYMLINK_FILE,
            EntryKind.SYMLINK_DIRECTORY,
            EntryKind.SYMLINK_DANGLING,
        )


@dataclass(frozen=True)
class ExclusionPolicy:
    """Names never copied, matched exactly at every depth."""

    directories: frozenset[str] = frozenset({"node_modules", "dist"})
    files: frozenset[str] = frozenset({"package-lock.json", ".env", "eslint-report.json"})

    def excludes(self, name: str, kind: EntryKind) -> bool:
        """Pure predicate: should an entry with this name and kind be skipped?

        Directory names are only checked against directory entries and file
        names against everything else, so a file called ``dist`` is copied.
        """
        if kind == EntryKind.DIRECTORY:
            return name in self.directories
        return name in self.files

    def excludes_entry(self, entry: Entry) -> bool:
        return self.excludes(entry.name, entry.kind)


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    DESTINATION_CONFLICT = "destination_conflict"
    IO_FAILURE = "io_failure"
    MANIFEST_PARSE_FAILURE = "manifest_parse_failure"


@dataclass
class Success:
    """Operation completed. ``detail`` holds operation-specific output."""

    detail: dict = field(default_factory=dict)
    ok: bool = field(default=True, init=False)


@dataclass
class Failure:
    kind: ErrorKind
    message: str
    ok: bool = field(default=False, init=False)


Result = Success | Failure


@dataclass(frozen=True)
class CopyStep:
    """One unit of work in a copy plan: create a directory or copy a file."""

    action: str  # mkdir | copy | skip
    source: str
    dest: str
    reason: str = ""


@dataclass
class CopyPlan:
    steps: list[CopyStep] = field(default_factory=list)

    @property
    def files(self) -> list[CopyStep]:
        return [s for s in self.steps if s.action == "copy"]

    @property
    def directories(self) -> list[CopyStep]:
        return [s for s in self.steps if s.action == "mkdir"]

    @property
    def skipped(self) -> list[CopyStep]:
        return [s for s in self.steps if s.action == "skip"]
