"""Scaffold a new Demo, Game or Test project.

Usage::

    wendy-makeproject Game spaceship
    wendy-makeproject demo bloom ../demos/bloom --src --link-media
"""

from __future__ import annotations

import sys

from wendy_tools.cli import build_parser, print_usage
from wendy_tools.config import AliasPolicy, ToolConfig
from wendy_tools.errors import SpecValidationError, UsageError, WendyToolError
from wendy_tools.scaffolder import ProjectGenerator, validate_spec
from wendy_tools.utils import print_error, print_success, print_summary_table


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``wendy-makeproject``."""
    parser = build_parser(
        "wendy-makeproject",
        description="Create a new engine project with its data layout and stub sources",
        epilog=(
            "Examples:\n"
            "  wendy-makeproject Game spaceship\n"
            "  wendy-makeproject test particles ./tests/particles --src\n"
        ),
    )
    parser.add_argument("kind", help="Project kind: Demo, Game or Test (case-insensitive)")
    parser.add_argument("name", help="Project name (letter followed by letters, digits or '_')")
    parser.add_argument("path", nargs="?", default=None, help="Target directory (default: <name>)")
    parser.add_argument("--src", action="store_true", help="Also create a src/ directory")
    parser.add_argument(
        "--link-media",
        action="store_true",
        help="Link the shared engine media into the data directory",
    )
    parser.add_argument(
        "--replace-alias",
        action="store_true",
        help="Replace an existing shared media link instead of keeping it",
    )

    try:
        args = parser.parse_args(argv)
        spec = validate_spec(args.kind, args.name, args.path)
    except (UsageError, SpecValidationError) as exc:
        print_error(str(exc))
        print_usage(parser)
        return 1

    overrides: dict[str, object] = {}
    if args.src:
        overrides["create_src"] = True
    if args.link_media:
        overrides["link_shared_media"] = True
    if args.replace_alias:
        overrides["alias_policy"] = AliasPolicy.REPLACE

    try:
        config = ToolConfig.from_env(**overrides)
        result = ProjectGenerator(config).generate(spec)
    except WendyToolError as exc:
        print_error(str(exc))
        return 1
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1
    except OSError as exc:
        print_error(f"Failed to create project: {exc}")
        return 1

    print_summary_table(
        {
            "Project": f"{spec.type_name} {spec.name}",
            "Root": str(result.root),
            "Directories created": str(len(result.created_dirs)),
            "Files written": ", ".join(p.name for p in result.written_files),
            "Media link": str(result.alias) if result.alias else "-",
        },
        title="Scaffold",
    )
    print_success(f"Created {spec.type_name.lower()} project {spec.name} in {result.root}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
