"""
ent schema generation entry point.

Wires the pieces of a generation run together: load the DMMF document,
render every entity, write the batch and optionally run `go generate`.
"""

import logging
import subprocess
from typing import List, Optional

from ent_auto_generator.codegen import emit_schemas
from ent_auto_generator.colored_logging import log_progress, log_success
from ent_auto_generator.config import GeneratorConfig
from ent_auto_generator.domain.models import Document, GeneratedFile
from ent_auto_generator.exceptions import GoGenerateError
from ent_auto_generator.introspection_dmmf import introspect_schema
from ent_auto_generator.persistence import write_generated_files


logger = logging.getLogger(__name__)


def run_go_generate(target: str, cwd: Optional[str] = None) -> None:
    """Run `go generate <target>`, raising GoGenerateError on any failure."""
    command = ["go", "generate", target]
    log_progress(logger, f"Running {' '.join(command)}...")
    try:
        result = subprocess.run(command, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        raise GoGenerateError(f"Could not start the Go toolchain: {e}", command=command) from e

    if result.returncode != 0:
        logger.error(result.stderr.strip())
        raise GoGenerateError(
            "go generate exited with a non-zero status",
            command=command,
            returncode=result.returncode,
        )
    log_success(logger, "go generate finished.")


def generate_ent_schemas(config: GeneratorConfig, document: Optional[Document] = None) -> List[GeneratedFile]:
    """
    Run a full generation pass.

    Args:
        config: Validated generator configuration
        document: Pre-loaded model document; read from config.schema_path if omitted

    Returns:
        The generated files, in document order
    """
    if document is None:
        log_progress(logger, f"Loading model document from {config.schema_path}...")
        document = introspect_schema(config.schema_path)

    if not document.entities:
        logger.warning("The model document declares no models. Nothing to generate.")

    context = config.to_generation_context()

    log_progress(logger, f"Generating {len(document.entities)} ent schema files...")
    files = emit_schemas(
        document,
        persist=lambda batch: write_generated_files(batch, context.output_dir, config.workers),
        context=context,
    )
    log_success(logger, f"Wrote {len(files)} schema files to {context.output_dir}")

    if config.run_go_generate:
        run_go_generate(config.go_generate_target)

    return files
