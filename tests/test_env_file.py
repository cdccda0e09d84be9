from __future__ import annotations

from conftest import write
from express_api_starter.pipeline.env_file import derive_env_file


def test_creates_env_from_example(tmp_path):
    write(tmp_path / ".env.example", b"PORT=3000\r\nKEY=\xff\n")

    result = derive_env_file(str(tmp_path))

    assert result.ok and result.detail["created"]
    assert (tmp_path / ".env").read_bytes() == b"PORT=3000\r\nKEY=\xff\n"


def test_idempotent(tmp_path):
    write(tmp_path / ".env.example", "PORT=3000")

    derive_env_file(str(tmp_path))
    first = (tmp_path / ".env").read_bytes()
    second_result = derive_env_file(str(tmp_path))

    assert not second_result.detail["created"]
    assert (tmp_path / ".env").read_bytes() == first


def test_never_overwrites_existing_env(tmp_path):
    write(tmp_path / ".env.example", "PORT=3000")
    write(tmp_path / ".env", "PORT=8080")

    result = derive_env_file(str(tmp_path))

    assert result.ok and not result.detail["created"]
    assert (tmp_path / ".env").read_text() == "PORT=8080"


def test_no_example_no_env(tmp_path):
    result = derive_env_file(str(tmp_path))
    assert result.ok and not result.detail["created"]
    assert not (tmp_path / ".env").exists()


def test_custom_names(tmp_path):
    write(tmp_path / "env.sample", "A=1")
    assert derive_env_file(str(tmp_path), "env.sample", "local.env").detail["created"]
    assert (tmp_path / "local.env").read_text() == "A=1"
