"""Command line interface for creating projects from template repositories."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import __version__
from .config import ProjectConfig
from .errors import MakeMineError
from .scaffold import ProjectCreator, ScaffoldResult

EPILOG = """Examples:
  $ make-mine https://github.com/user/repo.git my-new-project
  $ make-mine https://github.com/bladnman/vite-react-ts-mui-zustand.git my-cool-app
  $ mkdir my-app && cd my-app && make-mine https://github.com/user/repo.git .

NOTE: If your project name contains spaces, wrap it in quotes:
  $ make-mine repo-url "my project name"
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="make-mine",
        usage="%(prog)s [options] <repo-url> <project-name>",
        description="CLI to create new projects from a template repository",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "repo_url",
        nargs="?",
        metavar="repo-url",
        help="Git repository URL to clone from (e.g., https://github.com/user/repo.git)",
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        metavar="project-name",
        help="New name for your project (e.g., my-awesome-app, use hyphens instead of spaces)",
    )
    parser.add_argument(
        "--literal",
        action="store_true",
        help="Match the template name literally instead of as a regular expression",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output, including the git commands being run",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger("makemine").setLevel(level)


def _report(result: ScaffoldResult) -> None:
    config = result.config
    for path in result.modified_files:
        print(f"Updated {path.name}")

    print("\n✨ Project successfully created!")
    print(f"Modified {result.modified_count} files")

    print("\nNote: Some files might still contain the original template name.")
    print("You may need to manually search for and replace any remaining instances of:")
    print(f'  - "{config.template_name}"')

    print("\nNext steps:")
    if not config.in_place:
        print(f"  1. cd {config.display_name}")
    print("  2. Review the updated files")
    print(f'  3. Search for any remaining instances of "{config.template_name}"')
    print("  4. Follow project-specific setup instructions in README.md")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    if not raw:
        parser.print_help()
        return 0

    args, extras = parser.parse_known_args(raw)
    unknown_options = [extra for extra in extras if extra.startswith("-")]
    if unknown_options:
        parser.error(f"unrecognized arguments: {' '.join(unknown_options)}")
    if extras:
        print("Error: Too many arguments provided.", file=sys.stderr)
        print("\nUse hyphens instead of spaces in your project name:", file=sys.stderr)
        print("  $ make-mine repo-url my-project-name", file=sys.stderr)
        print(f"\nReceived arguments: {', '.join(raw)}", file=sys.stderr)
        return 1

    if not args.repo_url or not args.project_name:
        print("Error: Both repository URL and project name are required", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    _configure_logging(args.verbose)

    try:
        config = ProjectConfig.from_arguments(args.repo_url, args.project_name)
        print(f"Creating project in: {config.display_name}")
        creator = ProjectCreator(literal=args.literal, progress=print)
        result = creator.create(config)
    except (MakeMineError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _report(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
