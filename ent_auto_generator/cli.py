import argparse
import logging
import sys
from typing import List, Optional

from ent_auto_generator.codegen_main import generate_ent_schemas
from ent_auto_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_section
)
from ent_auto_generator.config import load_config
from ent_auto_generator.exceptions import EntGeneratorError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate ent (entgo.io) schema files from a Prisma DMMF document."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a YAML configuration file.",
    )
    parser.add_argument(
        "-s",
        "--schema-path",
        dest="schema_path",
        help="Path of the DMMF JSON dump. Overrides config file setting.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directory to write schema files to. Overrides config file setting.",
    )
    parser.add_argument(
        "--package-name",
        dest="package_name",
        help="Go package name of the generated files.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of threads used to write files.",
    )
    parser.add_argument(
        "--go-generate",
        dest="run_go_generate",
        action="store_const",
        const=True,
        default=None,
        help="Run `go generate` after writing the schema files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging for the generator tool.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # --- Logging Setup ---
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)
    logger = get_colored_logger(__name__)

    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    try:
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, args)
        logger.debug(f"Effective configuration loaded: {config}")

        log_section(logger, "ent Schema Generation")
        generate_ent_schemas(config)

        log_section(logger, "COMPLETION")
        log_success(logger, "Done!")
        return 0

    except EntGeneratorError as e:
        logger.error(str(e), exc_info=args.verbose)
        return 1
    except Exception as e:
        logger.error(f"An unexpected error occurred during generation: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
