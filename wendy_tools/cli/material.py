"""Generate ``.material`` descriptors from the ``usemtl`` lines of meshes.

Usage::

    wendy-material -d data/materials -p lit models/*.obj
"""

from __future__ import annotations

import sys

from wendy_tools.assets import DescriptorWriter, extract_material_names, material_descriptor
from wendy_tools.assets.extractor import is_mesh_source
from wendy_tools.cli import build_parser, existing_dir, print_usage
from wendy_tools.config import DEFAULT_PROGRAM
from wendy_tools.errors import InvalidOption, SpecValidationError, UsageError, WendyToolError
from wendy_tools.utils import print_error


def program_name(value: str) -> str:
    """Validate ``--program``: every material needs a non-blank program name."""
    if not value.strip():
        raise InvalidOption("--program", value, "--program must name a shader program")
    return value


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``wendy-material``."""
    parser = build_parser(
        "wendy-material",
        description="Create a material descriptor for every material used by the given meshes",
    )
    parser.add_argument("--verbose", "-V", action="store_true", help="Report every file")
    parser.add_argument("--dir", "-d", default=".", help="Output directory (default: .)")
    parser.add_argument(
        "--program", "-p",
        default=DEFAULT_PROGRAM,
        help=f"Shader program for every material (default: {DEFAULT_PROGRAM})",
    )
    parser.add_argument("meshes", nargs="+", help="Wavefront .obj files; other files are ignored")

    try:
        args = parser.parse_args(argv)
        output_dir = existing_dir(args.dir)
        program = program_name(args.program)
    except (UsageError, SpecValidationError) as exc:
        print_error(str(exc))
        print_usage(parser)
        return 1

    meshes = [m for m in args.meshes if is_mesh_source(m)]

    try:
        names = extract_material_names(meshes)
    except OSError as exc:
        print_error(f"Failed to read {exc.filename or exc}")
        return 1

    writer = DescriptorWriter(output_dir, verbose=args.verbose)
    try:
        writer.write_all(material_descriptor(name, program) for name in names)
    except WendyToolError as exc:
        print_error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
