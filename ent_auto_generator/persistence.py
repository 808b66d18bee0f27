"""
Filesystem persistence for generated schema files.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Union

from ent_auto_generator.domain.models import GeneratedFile
from ent_auto_generator.exceptions import OutputWriteError


logger = logging.getLogger(__name__)


def ensure_directory(path: Union[str, Path]) -> Path:
    """Create `path` and its parents if needed."""
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Could not create output directory: {e}", path=str(directory)) from e
    return directory


def write_file(path: Union[str, Path], content: str) -> None:
    """Write `content` to `path`, replacing any existing file."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(f"Could not write file: {e}", path=str(path)) from e
    logger.debug(f"Generated file: {path}")


def write_generated_files(
    files: List[GeneratedFile],
    output_dir: Union[str, Path],
    workers: int = 1,
) -> None:
    """
    Ensure the output directory once, then write every file.

    With more than one worker the writes run on a thread pool. The first
    failure propagates; files already written are left in place.
    """
    ensure_directory(output_dir)

    if workers <= 1 or len(files) <= 1:
        for generated in files:
            write_file(generated.path, generated.content)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(write_file, g.path, g.content) for g in files]
        for future in futures:
            future.result()
