"""Copy the bundled project template into a new project directory."""
from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Callable

from express_api_starter.pipeline.models import (
    CopyPlan,
    CopyStep,
    Entry,
    EntryKind,
    ErrorKind,
    ExclusionPolicy,
    Failure,
    Result,
    Success,
)

# Returns the entries of a directory, or None if the directory does not exist.
EntryLister = Callable[[str], list[Entry] | None]


def _classify(path: Path) -> EntryKind:
    if path.is_symlink():
        if not path.exists():
            return EntryKind.SYMLINK_DANGLING
        if path.is_dir():
            return EntryKind.SYMLINK_DIRECTORY
        return EntryKind.SYMLINK_FILE
    if path.is_dir():
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def scan_entries(path: str) -> list[Entry] | None:
    """List the immediate entries of a directory on disk, sorted by name."""
    directory = Path(path)
    if not directory.is_dir():
        return None
    entries = [Entry(child.name, _classify(child)) for child in directory.iterdir()]
    return sorted(entries, key=lambda e: e.name)


def plan_copy(
    source: str,
    dest: str,
    policy: ExclusionPolicy,
    list_entries: EntryLister = scan_entries,
) -> CopyPlan:
    """Walk *source* and return the ordered steps that reproduce it at *dest*.

    Nothing is touched on disk unless *list_entries* does so. A missing source
    yields an empty plan. Every directory gets a ``mkdir`` step before any of
    its children, and excluded entries are recorded as ``skip`` steps so the
    caller can report them.

    Symlinks to files are copied as data. Symlinks to directories are skipped
    rather than followed. Dangling symlinks are planned as copies and fail at
    execution time.
    """
    plan = CopyPlan()
    worklist: list[tuple[str, str]] = [(source, dest)]

    while worklist:
        src_dir, dest_dir = worklist.pop(0)
        entries = list_entries(src_dir)
        if entries is None:
            continue

        plan.steps.append(CopyStep("mkdir", src_dir, dest_dir))
        subdirs: list[tuple[str, str]] = []

        for entry in entries:
            src_path = os.path.join(src_dir, entry.name)
            dest_path = os.path.join(dest_dir, entry.name)

            if policy.excludes_entry(entry):
                plan.steps.append(CopyStep("skip", src_path, dest_path, "excluded"))
            elif entry.kind == EntryKind.DIRECTORY:
                subdirs.append((src_path, dest_path))
            elif entry.kind == EntryKind.SYMLINK_DIRECTORY:
                plan.steps.append(
                    CopyStep("skip", src_path, dest_path, "symlinked directory")
                )
            else:
                plan.steps.append(CopyStep("copy", src_path, dest_path))

        # Depth-first so a directory's subtree stays contiguous in the plan
        worklist[:0] = subdirs

    return plan


def execute_plan(plan: CopyPlan) -> Result:
    """Apply a copy plan to the filesystem, stopping at the first error."""
    copied: list[str] = []
    skipped: list[str] = []

    for step in plan.steps:
        try:
            if step.action == "mkdir":
                Path(step.dest).mkdir(parents=True, exist_ok=True)
            elif step.action == "copy":
                shutil.copy2(step.source, step.dest)
                copied.append(step.dest)
            else:
                skipped.append(step.source)
                print(f"[template] Skipping {step.source} ({step.reason})")
        except OSError as e:
            return Failure(
                ErrorKind.IO_FAILURE,
                f"Failed to {step.action} {step.source} -> {step.dest}: {e}",
            )

    return Success({"copied": copied, "skipped": skipped})


def copy_tree(
    source: str,
    dest: str,
    policy: ExclusionPolicy | None = None,
) -> Result:
    """Reproduce *source* at *dest*, minus excluded names.

    A missing *source* is a no-op, not an error.
    """
    if policy is None:
        policy = ExclusionPolicy()
    try:
        plan = plan_copy(source, dest, policy)
    except OSError as e:
        return Failure(ErrorKind.IO_FAILURE, f"Failed to read template {source}: {e}")
    return execute_plan(plan)


def copy_file(source: str, dest: str) -> Result:
    """Copy a single template file if it exists. Missing sources are skipped."""
    src = Path(source)
    if not src.is_file():
        return Success({"copied": []})
    try:
        Path(dest).parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
    except OSError as e:
        return Failure(ErrorKind.IO_FAILURE, f"Failed to copy {source} -> {dest}: {e}")
    return Success({"copied": [dest]})
