"""Starter entrypoint: validate the name, materialize the template, exit."""
from __future__ import annotations

import argparse
import re
import shutil
import sys
from pathlib import Path

from express_api_starter.config import Config
from express_api_starter.pipeline.models import ErrorKind, Failure
from express_api_starter.pipeline.scaffolder import scaffold_project

PROJECT_NAME_RE = re.compile(r"^[a-z0-9-]+$")

# Arguments the parser owns; anything else in first position is the project name
PARSER_FLAGS = ("-h", "--help", "--template-dir")


def is_valid_project_name(name: str) -> bool:
    return bool(PROJECT_NAME_RE.fullmatch(name))


def _is_parser_flag(arg: str) -> bool:
    return arg in PARSER_FLAGS or arg.startswith("--template-dir=")


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="express-api-starter",
        usage="%(prog)s [project_name] [--template-dir DIR]",
        description="Create a new Express + TypeScript API project.",
        epilog=f"project_name defaults to {config.default_project_name}",
    )
    parser.add_argument(
        "--template-dir",
        default=config.template_path,
        help="Template directory to copy from (default: bundled template)",
    )
    return parser


def parse_args(argv: list[str], config: Config) -> tuple[str, argparse.Namespace]:
    """Return the project name and the parsed options.

    The first argument is the project name unless it is one of the parser's
    own flags, so names such as ``-api`` or ``--`` are taken literally.
    Unrecognised extra arguments are ignored.
    """
    parser = build_parser(config)
    if argv and not _is_parser_flag(argv[0]):
        project_name, rest = argv[0], argv[1:]
        args, _ = parser.parse_known_args(rest)
        return project_name, args

    args, extra = parser.parse_known_args(argv)
    project_name = extra[0] if extra else config.default_project_name
    return project_name, args


def cleanup(project_path: Path) -> None:
    """Best-effort removal of a partially created project."""
    if not project_path.exists():
        return
    try:
        shutil.rmtree(project_path)
        print(f"[main] Removed partially created {project_path.name}")
    except OSError as e:
        print(f"[main] Cleanup of {project_path} failed: {e}")


def print_next_steps(project_name: str) -> None:
    print("\n✅ Project created successfully!\n")
    print("📝 Next steps:")
    print(f"   cd {project_name}")
    print("   npm install")
    print("   npm run dev")
    print("\n🎉 Happy coding!\n")


def main(argv: list[str] | None = None, config: Config | None = None) -> int:
    config = config or Config.from_env()
    if argv is None:
        argv = sys.argv[1:]

    try:
        project_name, args = parse_args(argv, config)
    except SystemExit as e:
        # --help exits 0; usage errors (e.g. --template-dir without a value) exit 1
        return 0 if e.code in (0, None) else 1

    print("\n🚀 Express TypeScript API Starter")
    print("=====================================\n")

    if not is_valid_project_name(project_name):
        print("❌ Error: Invalid project name!")
        print("   Project name should only contain lowercase letters, numbers, and hyphens.\n")
        return 1

    project_path = Path(config.resolve_workspace()) / project_name

    # Checked before anything is written so a conflict never triggers cleanup
    if project_path.exists():
        print(f"❌ Error: Directory \"{project_name}\" already exists!")
        print("   Please choose a different name or remove the existing directory.\n")
        return 1

    print(f"📦 Creating project: {project_name}...\n")

    try:
        result = scaffold_project(args.template_dir, str(project_path), project_name, config)
    except Exception as e:
        result = Failure(ErrorKind.IO_FAILURE, str(e))

    if isinstance(result, Failure):
        print(f"\n❌ Error: {result.message}")
        if result.kind != ErrorKind.DESTINATION_CONFLICT:
            cleanup(project_path)
        return 1

    print_next_steps(project_name)
    return 0


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
