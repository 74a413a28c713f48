"""
OutputWriter - Handles output file management for selected variants.

This module provides functionality for:
- Output path handling (--output flag)
- Default filename generation (append variant ordinal)
- Directory creation
- Overwrite protection
- Sidecar metadata file generation (SelectionV1)

Variant text is written exactly as selected. Nothing is prepended or
appended, and newlines are not translated.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from docbundle.errors import OutputWriteError
from docbundle.schemas.selection_v1 import SelectionV1


logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    """Result of a successful write operation.

    Attributes:
        output_path: Path where content was written
        metadata_path: Path to sidecar metadata file (if generated)
        overwritten: Whether an existing file was overwritten
    """
    output_path: str
    metadata_path: Optional[str] = None
    overwritten: bool = False


class OutputWriter:
    """Handles output file management for selected variants.

    Example:
        >>> writer = OutputWriter()
        >>> result = writer.write(
        ...     text=variant,
        ...     output_path="published/post.md",
        ... )
    """

    DEFAULT_EXTENSION = ".md"

    def __init__(self, force_overwrite: bool = False):
        """Initialize the OutputWriter.

        Args:
            force_overwrite: If True, overwrite existing files without complaint
        """
        self._force_overwrite = force_overwrite

    def write(
        self,
        text: str,
        output_path: Optional[str] = None,
        input_path: Optional[str] = None,
        output_dir: Optional[str] = None,
        variant_index: Optional[int] = None,
        metadata: Optional[SelectionV1] = None,
        generate_sidecar: bool = False,
        force: bool = False,
    ) -> WriteResult:
        """Write a variant (or a packed bundle) to a file.

        Args:
            text: Content to write, unmodified
            output_path: Explicit output path (overrides default generation)
            input_path: Bundle file path (used for default filename generation)
            output_dir: Output directory (used with default filename)
            variant_index: Ordinal used in the default filename
            metadata: SelectionV1 metadata for the sidecar file
            generate_sidecar: Whether to generate a sidecar .meta.json file
            force: Force overwrite of an existing file

        Returns:
            WriteResult with the paths written

        Raises:
            OutputWriteError: If the file exists and force is not set, or the
                path cannot be written
        """
        resolved_path = self._resolve_output_path(
            output_path=output_path,
            input_path=input_path,
            output_dir=output_dir,
            variant_index=variant_index,
        )

        if os.path.isdir(resolved_path):
            raise OutputWriteError(
                f"Output path is a directory: {resolved_path}",
                output_path=resolved_path,
            )

        write_sidecar = generate_sidecar and metadata is not None
        targets = [resolved_path]
        if write_sidecar:
            targets.append(self.sidecar_path(resolved_path))

        # Nothing is written unless every target may be replaced
        if not (force or self._force_overwrite):
            for target in targets:
                if os.path.exists(target):
                    raise OutputWriteError(
                        f"File already exists: {target}. Use --force to overwrite.",
                        output_path=target,
                    )
        overwritten = os.path.exists(resolved_path)

        try:
            self._ensure_directory(resolved_path)
            with open(resolved_path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Failed to write output: {e}")
            raise OutputWriteError(
                f"Failed to write {resolved_path}: {e}",
                output_path=resolved_path,
                original_error=e,
            ) from e

        logger.info(f"Wrote output to: {resolved_path}")

        metadata_path = None
        if write_sidecar:
            metadata_path = self._write_sidecar_metadata(resolved_path, metadata)

        return WriteResult(
            output_path=resolved_path,
            metadata_path=metadata_path,
            overwritten=overwritten,
        )

    def write_variants(
        self,
        variants: Sequence[str],
        output_dir: str,
        input_path: Optional[str] = None,
        force: bool = False,
    ) -> List[WriteResult]:
        """Write every variant of a bundle into a directory.

        Targets are checked before anything is written, so an existing file
        without force leaves the directory untouched.
        """
        paths = [
            os.path.join(output_dir, self.generate_filename(input_path, i))
            for i in range(len(variants))
        ]

        if not (force or self._force_overwrite):
            for path in paths:
                if os.path.exists(path):
                    raise OutputWriteError(
                        f"File already exists: {path}. Use --force to overwrite.",
                        output_path=path,
                    )

        return [
            self.write(text=variant, output_path=path, force=True)
            for variant, path in zip(variants, paths)
        ]

    def _resolve_output_path(
        self,
        output_path: Optional[str],
        input_path: Optional[str],
        output_dir: Optional[str],
        variant_index: Optional[int],
    ) -> str:
        """Resolve the output file path.

        Priority:
        1. Explicit output_path if provided
        2. Generated from input_path + variant ordinal in output_dir
        3. Generated from the variant ordinal in output_dir or current directory
        """
        if output_path:
            return output_path

        filename = self.generate_filename(
            input_path=input_path,
            variant_index=variant_index if variant_index is not None else 0,
        )

        if output_dir:
            return os.path.join(output_dir, filename)

        return filename

    def generate_filename(self, input_path: Optional[str], variant_index: int) -> str:
        """Generate a default output filename.

        post.md, variant 1 -> post.variant-1.md
        no input, variant 1 -> variant-1.md
        """
        if input_path:
            path = Path(input_path)
            extension = path.suffix or self.DEFAULT_EXTENSION
            return f"{path.stem}.variant-{variant_index}{extension}"

        return f"variant-{variant_index}{self.DEFAULT_EXTENSION}"

    def _ensure_directory(self, file_path: str) -> None:
        """Ensure the directory for a file path exists."""
        parent = Path(file_path).parent
        if parent and not parent.exists():
            parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Created directory: {parent}")

    def sidecar_path(self, output_path: str) -> str:
        """Path of the .meta.json file that accompanies an output file."""
        return f"{output_path}.meta.json"

    def _write_sidecar_metadata(self, output_path: str, metadata: SelectionV1) -> str:
        """Write a .meta.json file alongside the output file."""
        sidecar_path = self.sidecar_path(output_path)

        try:
            with open(sidecar_path, "w", encoding="utf-8") as f:
                json.dump(metadata.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to write sidecar metadata: {e}")
            raise OutputWriteError(
                f"Failed to write {sidecar_path}: {e}",
                output_path=sidecar_path,
                original_error=e,
            ) from e

        logger.debug(f"Wrote sidecar metadata to: {sidecar_path}")

        return sidecar_path

    @property
    def force_overwrite(self) -> bool:
        """Get the force overwrite setting."""
        return self._force_overwrite

    @force_overwrite.setter
    def force_overwrite(self, value: bool) -> None:
        """Set the force overwrite setting."""
        self._force_overwrite = value
