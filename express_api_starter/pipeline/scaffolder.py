"""Materialize a new project from the template."""
from __future__ import annotations

from pathlib import Path

from express_api_starter.config import Config
from express_api_starter.pipeline.env_file import derive_env_file
from express_api_starter.pipeline.manifest import patch_manifest
from express_api_starter.pipeline.models import ErrorKind, Failure, Result, Success
from express_api_starter.pipeline.template import copy_file, copy_tree


def scaffold_project(
    template_path: str,
    project_path: str,
    project_name: str,
    config: Config,
) -> Result:
    """Copy the template into *project_path* and patch it for *project_name*.

    Stops at the first failure and returns it. Leaves whatever was already
    written in place; removing a half-built project is up to the caller.
    """
    project = Path(project_path)
    if project.exists():
        return Failure(
            ErrorKind.DESTINATION_CONFLICT,
            f"Directory \"{project.name}\" already exists",
        )

    try:
        project.mkdir(parents=True)
    except OSError as e:
        return Failure(ErrorKind.IO_FAILURE, f"Failed to create {project}: {e}")
    print(f"[scaffolder] Created directory: {project.name}")

    template = Path(template_path)
    policy = config.exclusion_policy
    copied: list[str] = []

    for dirname in config.template_dirs:
        src_dir = template / dirname
        if not src_dir.is_dir():
            continue
        result = copy_tree(str(src_dir), str(project / dirname), policy)
        if not result.ok:
            return result
        copied.append(f"{dirname}/")
        print(f"[scaffolder] Copied {dirname}/ directory")

    for filename in config.config_files:
        result = copy_file(str(template / filename), str(project / filename))
        if not result.ok:
            return result
        if result.detail["copied"]:
            copied.append(filename)
            print(f"[scaffolder] Copied {filename}")

    manifest = patch_manifest(str(project), project_name, config.manifest_name)
    if not manifest.ok:
        return manifest

    env = derive_env_file(str(project), config.env_example_name, config.env_file_name)
    if not env.ok:
        return env

    return Success({
        "project_path": str(project),
        "copied": copied,
        "manifest_patched": manifest.detail["patched"],
        "env_created": env.detail["created"],
    })
