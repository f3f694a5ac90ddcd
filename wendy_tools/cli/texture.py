"""Generate ``.texture`` descriptors for ``.png`` images.

Usage::

    wendy-texture -d data/textures -f trilinear -a wrap -m art/*.png
"""

from __future__ import annotations

import sys

from wendy_tools.assets import (
    AddressMode,
    DescriptorWriter,
    FilterMode,
    TextureOptions,
    extract_texture_names,
    texture_descriptor,
)
from wendy_tools.cli import build_parser, existing_dir, print_usage
from wendy_tools.errors import InvalidOption, SpecValidationError, UsageError, WendyToolError
from wendy_tools.utils import print_error


def parse_options(filter_mode: str | None, address_mode: str | None,
                  rectangular: bool, mipmapped: bool) -> TextureOptions:
    """Validate the sampling options into one ``TextureOptions``."""
    try:
        filter_value = FilterMode(filter_mode) if filter_mode is not None else None
    except ValueError:
        raise InvalidOption("filter mode", filter_mode) from None
    try:
        address_value = AddressMode(address_mode) if address_mode is not None else None
    except ValueError:
        raise InvalidOption("address mode", address_mode) from None
    return TextureOptions(
        filter=filter_value,
        address=address_value,
        rectangular=rectangular,
        mipmapped=mipmapped,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``wendy-texture``."""
    parser = build_parser(
        "wendy-texture",
        description="Create a texture descriptor for every given .png image",
    )
    parser.add_argument("--verbose", "-V", action="store_true", help="Report every file")
    parser.add_argument("--dir", "-d", default=".", help="Output directory (default: .)")
    parser.add_argument("--filter", "-f", default=None, help="nearest, linear or trilinear")
    parser.add_argument("--address", "-a", default=None, help="wrap or clamp")
    parser.add_argument("--rectangular", "-r", action="store_true", help="Rectangular texture")
    parser.add_argument("--mipmapped", "-m", action="store_true", help="Generate mipmaps")
    parser.add_argument("images", nargs="+", help="Image files; only .png files are used")

    try:
        args = parser.parse_args(argv)
        output_dir = existing_dir(args.dir)
        options = parse_options(args.filter, args.address, args.rectangular, args.mipmapped)
    except (UsageError, SpecValidationError) as exc:
        print_error(str(exc))
        print_usage(parser)
        return 1

    writer = DescriptorWriter(output_dir, verbose=args.verbose)
    try:
        writer.write_all(
            texture_descriptor(name, options) for name in extract_texture_names(args.images)
        )
    except WendyToolError as exc:
        print_error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
