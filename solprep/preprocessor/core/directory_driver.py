"""
Directory driver for the preprocessing pipeline.

Runs every selected source file through include resolution and macro
evaluation and writes the result to the destination folder under the same
name. The run stops at the first failing file.
"""

import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any

from solprep.preprocessor.processing.file_discovery import FileDiscovery
from solprep.preprocessor.processing.include_resolver import (
    IncludeCache,
    IncludeResolver,
    read_text_file,
)
from solprep.preprocessor.processing.macro_processor import MacroProcessor
from solprep.preprocessor.shared.constants import DEFAULT_SOURCE_EXTENSION, FILE_ENCODING
from solprep.preprocessor.shared.exceptions import OutputWriteError, SourceReadError
from solprep.preprocessor.shared.types import (
    DefineSet,
    FilePath,
    FileReader,
    PreprocessResult,
    ProcessingJob,
    ProgressCallback,
)

# Configure logging
logger = logging.getLogger(__name__)


def normalize_dir(path: FilePath) -> str:
    """Return the directory path as a string ending with exactly one separator."""
    text = str(path).rstrip("/" + os.sep)
    return text + os.sep


def format_defines(defines: DefineSet) -> str:
    """Render defines as the one-line JSON summary printed before a run."""
    return json.dumps(dict(defines), sort_keys=True, default=str)


def preprocess_file(
    job: ProcessingJob,
    cache: IncludeCache | None = None,
    include_root: FilePath | None = None,
    macro_processor: MacroProcessor | None = None,
    read_file: FileReader | None = None,
) -> str:
    """
    Read one source file, expand its includes and evaluate its macros.

    Nothing is written; the caller decides what to do with the returned text.

    Args:
        job: The file to process
        cache: Include cache for this job (a fresh one if omitted)
        include_root: Base directory for relative include paths
        macro_processor: Processor to render with (default Jinja2 setup if omitted)
        read_file: Callable used for the source file and every include target

    Returns:
        Fully processed text

    Raises:
        SourceReadError: If the source file cannot be read
        IncludeError: If an include target cannot be read
        MacroEvaluationError: If macro evaluation fails
    """
    read_file = read_file or read_text_file
    try:
        content = read_file(job.source_path)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read source file {job.source_path}: {e}") from e

    resolver = IncludeResolver(cache=cache, include_root=include_root, read_file=read_file)
    expanded = resolver.resolve(content, job.name)

    processor = macro_processor or MacroProcessor()
    return processor.process(expanded, job.defines, job.name)


class DirectoryDriver:
    """Preprocesses every matching file of a source folder into a destination folder."""

    def __init__(
        self,
        source_dir: FilePath,
        destination_dir: FilePath,
        defines: DefineSet | None = None,
        extension: str = DEFAULT_SOURCE_EXTENSION,
        include_root: FilePath | None = None,
        share_include_cache: bool = False,
        progress: ProgressCallback | None = None,
        read_file: FileReader | None = None,
    ) -> None:
        """
        Initialize the driver.

        Args:
            source_dir: Folder holding the source files
            destination_dir: Folder the processed files are written to
            defines: Values applied to every file of the run
            extension: File name suffix that selects source files
            include_root: Base directory for relative include paths
                (the working directory if omitted)
            share_include_cache: Reuse one include cache for every file of the run
                instead of starting each file with an empty cache
            progress: Receives user-facing progress lines (logged at INFO if omitted)
            read_file: Callable used to read sources and include targets
        """
        self.source_dir = normalize_dir(source_dir)
        self.destination_dir = normalize_dir(destination_dir)
        self.defines: DefineSet = MappingProxyType(dict(defines or {}))
        self.extension = extension
        self.include_root = include_root
        self.share_include_cache = share_include_cache
        self.progress = progress or logger.info
        self.read_file = read_file or read_text_file
        self.discovery = FileDiscovery(Path(self.source_dir), extension)
        self.macro_processor = MacroProcessor()
        self.run_cache = IncludeCache()

    def plan(self) -> list[ProcessingJob]:
        """
        Build the list of jobs for this run.

        Raises:
            FileDiscoveryError: If the source folder cannot be listed
        """
        ignored = self.discovery.discover_ignored_files()
        if ignored:
            logger.debug(f"Skipping {len(ignored)} entries without {self.extension} suffix in {self.source_dir}")

        return [
            ProcessingJob(
                source_path=Path(self.source_dir + path.name),
                destination_path=Path(self.destination_dir + path.name),
                defines=self.defines,
            )
            for path in self.discovery.discover_source_files()
        ]

    def cache_for_job(self) -> IncludeCache:
        if self.share_include_cache:
            return self.run_cache
        return IncludeCache()

    def process_job(self, job: ProcessingJob) -> Path:
        """
        Process one job and write its output.

        The destination file is only written once both stages have succeeded.

        Returns:
            The path that was written
        """
        self.progress(f"Processing {job.name} ...")
        output = preprocess_file(
            job,
            cache=self.cache_for_job(),
            include_root=self.include_root,
            macro_processor=self.macro_processor,
            read_file=self.read_file,
        )
        write_output(job.destination_path, output)
        return job.destination_path

    def run(self) -> PreprocessResult:
        """
        Process every selected file, stopping at the first error.

        Returns:
            Names and output paths of the processed files plus the defines used

        Raises:
            PreprocessorError: On the first file that cannot be processed
        """
        jobs = self.plan()
        ensure_directory(self.destination_dir)

        self.progress(f"Defines: {format_defines(self.defines)}")
        result = PreprocessResult(defines=dict(self.defines))
        for job in jobs:
            result.output_paths.append(self.process_job(job))
            result.processed_files.append(job.name)

        logger.debug(
            f"Processed {result.count} files from {self.source_dir} into {self.destination_dir}"
        )
        return result


def ensure_directory(path: FilePath) -> None:
    """Create the destination folder (and parents) if it does not exist."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Cannot create destination folder {path}: {e}") from e


def write_output(path: Path, content: str) -> None:
    """Write processed text, replacing any existing file. Line endings are written as given."""
    try:
        with open(path, "w", encoding=FILE_ENCODING, newline="") as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}") from e
    logger.debug(f"Wrote {path} ({len(content)} chars)")


def preprocess_directory(
    source_dir: FilePath,
    destination_dir: FilePath,
    defines: DefineSet | None = None,
    extension: str = DEFAULT_SOURCE_EXTENSION,
    include_root: FilePath | None = None,
    share_include_cache: bool = False,
    progress: ProgressCallback | None = None,
) -> PreprocessResult:
    """
    Preprocess all matching files of source_dir into destination_dir.

    Args:
        source_dir: Folder holding the source files
        destination_dir: Folder the processed files are written to
        defines: Values applied to every file of the run
        extension: File name suffix that selects source files
        include_root: Base directory for relative include paths
        share_include_cache: Reuse one include cache for the whole run
        progress: Receives user-facing progress lines

    Returns:
        PreprocessResult for the run
    """
    driver = DirectoryDriver(
        source_dir=source_dir,
        destination_dir=destination_dir,
        defines=defines,
        extension=extension,
        include_root=include_root,
        share_include_cache=share_include_cache,
        progress=progress,
    )
    return driver.run()


def summarize(result: PreprocessResult) -> dict[str, Any]:
    """Describe a result as plain data, for verbose CLI output."""
    return {
        "processed_files": list(result.processed_files),
        "output_paths": [str(path) for path in result.output_paths],
        "defines": dict(result.defines),
    }
