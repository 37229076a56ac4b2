"""Command-line interface for inspecting Wavefront MTL files.

Usage:
    python -m wavefront_mtl.cli trace scene.mtl
    python -m wavefront_mtl.cli lookup scene.mtl brick
    python -m wavefront_mtl.cli export scene.mtl scene.yaml
    python -m wavefront_mtl.cli swatches scene.mtl --output swatches.png
    python -m wavefront_mtl.cli info
"""

import argparse
import logging
import sys

from wavefront_mtl import __version__
from wavefront_mtl.config import LoaderConfig, get_default
from wavefront_mtl.core.material import MaterialDocument
from wavefront_mtl.parsing.dispatch import KEYWORD_DECODERS
from wavefront_mtl.parsing.loader import MaterialLoader
from wavefront_mtl.utils.trace import format_material, trace

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else get_default("logging.level", "INFO")
    logging.basicConfig(
        level=level,
        format=get_default(
            "logging.format",
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        ),
    )


def _load(args: argparse.Namespace) -> MaterialDocument | None:
    config = LoaderConfig(encoding=args.encoding) if args.encoding else LoaderConfig()
    loader = MaterialLoader(config=config)

    if not loader.load(args.file):
        logger.error(f"No material could be read from {args.file}")
        return None

    return loader.finalize()


def cmd_trace(args: argparse.Namespace) -> int:
    """Print every field supplied by the file."""
    document = _load(args)
    if document is None:
        return 1

    trace(document)
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Print a single material."""
    document = _load(args)
    if document is None:
        return 1

    try:
        material = document.get_material(args.name)
    except KeyError as e:
        logger.error(e.args[0])
        return 1

    print("\n".join(format_material(material)))
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Write the decoded values to YAML."""
    document = _load(args)
    if document is None:
        return 1

    document.save_to_yaml(args.output, parsed_only=not args.all_fields)
    logger.info(f"Exported {len(document)} material(s) to {args.output}")
    return 0


def cmd_swatches(args: argparse.Namespace) -> int:
    """Plot the RGB colors of every material."""
    from wavefront_mtl.utils.visualization import plot_material_swatches

    document = _load(args)
    if document is None:
        return 1

    plot_material_swatches(
        document,
        channels=tuple(args.channels),
        title=args.file,
        save_path=args.output,
    )
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Display the supported statements and active settings."""
    config = LoaderConfig()

    print("\n" + "=" * 60)
    print(f"WAVEFRONT MTL DECODER {__version__}")
    print("=" * 60)

    print("\n[Supported Statements]")
    print("  newmtl")
    for i, keyword in enumerate(KEYWORD_DECODERS, 1):
        print(f"  {i:2d}. {keyword:<10} {KEYWORD_DECODERS[keyword].__name__}")

    print("\n[Settings]")
    print(f"  Encoding:      {config.encoding}")
    print(f"  Decode errors: {config.errors}")
    print(f"  Log level:     {get_default('logging.level', 'INFO')}")

    print("\n" + "=" * 60)
    return 0


def create_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode and inspect Wavefront MTL material files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump all fields found in a file
  python -m wavefront_mtl.cli trace scene.mtl

  # Show one material
  python -m wavefront_mtl.cli lookup scene.mtl brick

  # Export decoded values, including defaults
  python -m wavefront_mtl.cli export scene.mtl scene.yaml --all-fields

  # Save color swatches
  python -m wavefront_mtl.cli swatches scene.mtl --output swatches.png
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped statements",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    def add_file_command(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", help="Path to .mtl file")
        sub.add_argument(
            "--encoding",
            default=None,
            help="Text encoding (default: from defaults.yaml)",
        )
        return sub

    add_file_command("trace", "Print all fields supplied by the file")

    lookup_parser = add_file_command("lookup", "Print one material")
    lookup_parser.add_argument("name", help="Material name")

    export_parser = add_file_command("export", "Export decoded values to YAML")
    export_parser.add_argument("output", help="Output YAML path")
    export_parser.add_argument(
        "--all-fields",
        action="store_true",
        help="Include fields left at their defaults",
    )

    swatch_parser = add_file_command("swatches", "Plot material colors")
    swatch_parser.add_argument(
        "--output",
        default=None,
        help="Image path (default: show window)",
    )
    swatch_parser.add_argument(
        "--channels",
        nargs="+",
        choices=["Ka", "Kd", "Ks", "Ke", "Tf"],
        default=["Ka", "Kd", "Ks"],
        help="Color statements to plot (default: Ka Kd Ks)",
    )

    subparsers.add_parser("info", help="Display supported statements and settings")

    return parser


COMMANDS = {
    "trace": cmd_trace,
    "lookup": cmd_lookup,
    "export": cmd_export,
    "swatches": cmd_swatches,
    "info": cmd_info,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_cli_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    return command(args)


if __name__ == "__main__":
    sys.exit(main())
