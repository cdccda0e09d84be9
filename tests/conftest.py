from __future__ import annotations

import json
from pathlib import Path

import pytest

from express_api_starter.config import Config


def write(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content)
    return path


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A small template tree with excluded names sprinkled at several depths."""
    root = tmp_path / "template"
    write(root / "src" / "index.ts", "console.log('hi');\n")
    write(root / "src" / "routes" / "users.ts", "export {};\n")
    write(root / "src" / "node_modules" / "dep" / "index.js", "module.exports = 1;\n")
    write(root / "src" / "dist" / "index.js", "compiled\n")
    write(root / "src" / ".env", "SECRET=1\n")
    write(root / "scripts" / "seed.sh", "#!/bin/sh\necho seed\n")
    write(root / "scripts" / "eslint-report.json", "[]\n")
    write(
        root / "package.json",
        json.dumps({
            "name": "tpl",
            "version": "1.0.0",
            "bin": "./cli.js",
            "scripts": {"build": "x", "prepublishOnly": "y"},
        }),
    )
    write(root / "package-lock.json", "{}\n")
    write(root / "tsconfig.json", "{}\n")
    write(root / ".env.example", "PORT=3000")
    write(root / ".env", "PORT=9999")
    write(root / "README.md", "# tpl\n")
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


@pytest.fixture
def config(template_dir: Path, workspace: Path) -> Config:
    return Config(template_path=str(template_dir), workspace_path=str(workspace))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "STARTER_TEMPLATE_PATH",
        "STARTER_DEFAULT_NAME",
        "STARTER_WORKSPACE_PATH",
    ):
        monkeypatch.delenv(var, raising=False)


def relative_files(root: Path) -> set[str]:
    return {str(p.relative_to(root)) for p in root.rglob("*") if p.is_file()}
