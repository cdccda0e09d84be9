from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from express_api_starter.pipeline.models import ExclusionPolicy

BUNDLED_TEMPLATE_PATH = str(Path(__file__).resolve().parent / "template")


class Config(BaseModel):
    """Starter configuration. Paths and names can be overridden from the environment."""

    # Template location (defaults to the copy shipped inside this package)
    template_path: str = BUNDLED_TEMPLATE_PATH
    default_project_name: str = "my-express-api"

    # Where new projects are created; empty means the current working directory
    workspace_path: str = ""

    # Template layout
    template_dirs: list[str] = Field(default_factory=lambda: ["src", "scripts"])
    config_files: list[str] = Field(
        default_factory=lambda: [
            "package.json",
            "tsconfig.json",
            "eslint.config.js",
            "jest.config.ts",
            ".env.example",
            ".gitignore",
            "README.md",
            "LICENSE",
        ]
    )
    manifest_name: str = "package.json"
    env_example_name: str = ".env.example"
    env_file_name: str = ".env"

    # Exclusion policy, matched by exact name at every depth
    excluded_dirs: list[str] = Field(default_factory=lambda: ["node_modules", "dist"])
    excluded_files: list[str] = Field(
        default_factory=lambda: ["package-lock.json", ".env", "eslint-report.json"]
    )

    @property
    def exclusion_policy(self) -> ExclusionPolicy:
        return ExclusionPolicy(
            directories=frozenset(self.excluded_dirs),
            files=frozenset(self.excluded_files),
        )

    def resolve_workspace(self) -> str:
        return self.workspace_path or os.getcwd()

    @classmethod
    def from_env(cls) -> Config:
        """Load config from environment variables."""
        return cls(
            template_path=os.environ.get("STARTER_TEMPLATE_PATH", BUNDLED_TEMPLATE_PATH),
            default_project_name=os.environ.get("STARTER_DEFAULT_NAME", "my-express-api"),
            workspace_path=os.environ.get("STARTER_WORKSPACE_PATH", ""),
        )
