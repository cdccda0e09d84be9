from __future__ import annotations

import shutil
from pathlib import Path

from express_api_starter.pipeline.models import ErrorKind, Failure, Result, Success

ENV_EXAMPLE = ".env.example"
ENV_FILE = ".env"


def derive_env_file(
    project_path: str,
    example_name: str = ENV_EXAMPLE,
    env_name: str = ENV_FILE,
) -> Result:
    """Create .env from .env.example unless .env already exists.

    Safe to call repeatedly: an existing .env is never overwritten.
    """
    example = Path(project_path) / example_name
    env = Path(project_path) / env_name

    if not example.exists() or env.exists():
        return Success({"created": False})

    try:
        shutil.copyfile(example, env)
    except OSError as e:
        return Failure(ErrorKind.IO_FAILURE, f"Failed to create {env}: {e}")

    print(f"[env] Created {env_name} from {example_name}")
    return Success({"created": True})
