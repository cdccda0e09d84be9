from __future__ import annotations

import json
from pathlib import Path

from express_api_starter.pipeline.models import ErrorKind, Failure, Result, Success

MANIFEST_NAME = "package.json"


def _reject_constant(name: str) -> None:
    # NaN, Infinity and -Infinity are not JSON and would be written back out
    raise ValueError(f"Unsupported JSON constant {name}")


def patch_manifest_data(data: dict, project_name: str) -> dict:
    """Rename the package and drop publish-only fields. Mutates and returns *data*."""
    data["name"] = project_name
    # The generated project is an app, not the starter CLI
    data.pop("bin", None)
    scripts = data.get("scripts")
    if isinstance(scripts, dict):
        scripts.pop("prepublishOnly", None)
    return data


def patch_manifest(
    project_path: str,
    project_name: str,
    manifest_name: str = MANIFEST_NAME,
) -> Result:
    """Rewrite the project's package.json for *project_name*.

    No manifest means nothing to do. The file is only written once it has
    been parsed successfully, so a broken manifest is left as it was.
    """
    manifest_path = Path(project_path) / manifest_name
    if not manifest_path.exists():
        return Success({"patched": False})

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        return Failure(
            ErrorKind.MANIFEST_PARSE_FAILURE,
            f"{manifest_path} is not valid UTF-8: {e}",
        )
    except OSError as e:
        return Failure(ErrorKind.IO_FAILURE, f"Failed to read {manifest_path}: {e}")

    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        return Failure(
            ErrorKind.MANIFEST_PARSE_FAILURE,
            f"Invalid JSON in {manifest_path}: {e}",
        )
    if not isinstance(data, dict):
        return Failure(
            ErrorKind.MANIFEST_PARSE_FAILURE,
            f"Expected a JSON object in {manifest_path}, got {type(data).__name__}",
        )

    patch_manifest_data(data, project_name)

    try:
        manifest_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        return Failure(ErrorKind.IO_FAILURE, f"Failed to write {manifest_path}: {e}")

    print(f"[manifest] Set name to '{project_name}' in {manifest_name}")
    return Success({"patched": True})
