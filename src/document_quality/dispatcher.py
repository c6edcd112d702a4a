"""Dispatcher - the public entry point for file quality validation."""

import logging
import mimetypes
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from document_quality.page_aggregator import MultiPageAggregator
from document_quality.raster import PillowImageDecoder, RasterError
from document_quality.raster_analyzer import RasterAnalyzer
from document_quality.standards import constants
from document_quality.standards.types import QualityVerdict

logger = logging.getLogger(__name__)

__all__ = ['InputKind', 'QualityDispatcher', 'validate_file_quality']


class InputKind(Enum):
    """Kinds of input the dispatcher knows how to validate."""

    IMAGE = "image"
    DOCUMENT = "document"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_content_type(cls, content_type: Optional[str]) -> "InputKind":
        """
        Resolve a declared MIME type.

        Args:
            content_type: MIME type such as "image/png" or "application/pdf"

        Returns:
            DOCUMENT for PDF, IMAGE for any image/* type, UNSUPPORTED otherwise
        """
        if not content_type:
            return cls.UNSUPPORTED
        content_type = content_type.split(";", 1)[0].strip().lower()
        if content_type == constants.PDF_CONTENT_TYPE:
            return cls.DOCUMENT
        if content_type.startswith(constants.IMAGE_CONTENT_TYPE_PREFIX):
            return cls.IMAGE
        return cls.UNSUPPORTED


class QualityDispatcher:
    """
    Routes each input file to the analyzer that understands it.

    Images are decoded and analyzed as a single raster, PDFs are analyzed
    page by page, and anything else is rejected without being decoded.
    """

    def __init__(
        self,
        analyzer: Optional[RasterAnalyzer] = None,
        aggregator: Optional[MultiPageAggregator] = None,
        decoder: Optional[PillowImageDecoder] = None,
    ):
        self.analyzer = analyzer or RasterAnalyzer()
        self.decoder = decoder or PillowImageDecoder()
        self.aggregator = aggregator or MultiPageAggregator(
            analyzer=self.analyzer, decoder=self.decoder
        )

    def validate(
        self, data: bytes, content_type: Optional[str], file_size: Optional[int] = None
    ) -> QualityVerdict:
        """
        Validate one input file.

        Args:
            data: Raw file contents
            content_type: Declared MIME type of the file
            file_size: Declared size in bytes (default: len(data))

        Returns:
            QualityVerdict for the file
        """
        kind = InputKind.from_content_type(content_type)
        logger.info(f"Validating {kind.value} input ({content_type}, {len(data)} bytes)")

        if kind is InputKind.DOCUMENT:
            return self.aggregator.analyze(data)
        if kind is InputKind.IMAGE:
            return self._validate_image(data, len(data) if file_size is None else file_size)

        logger.warning(f"Unsupported content type: {content_type!r}")
        return QualityVerdict.rejected(constants.UNSUPPORTED_FILE_TYPE)

    def _validate_image(self, data: bytes, file_size: int) -> QualityVerdict:
        try:
            raster = self.decoder.decode(data)
        except RasterError as e:
            logger.warning(f"Image could not be decoded: {e}")
            return QualityVerdict.rejected(constants.IMAGE_LOAD_ERROR)
        return self.analyzer.analyze(raster, file_size)

    def validate_file(self, path: Union[str, Path]) -> QualityVerdict:
        """
        Validate a file on disk, resolving its kind from the suffix.

        Args:
            path: Path to the file

        Returns:
            QualityVerdict for the file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        content_type, _ = mimetypes.guess_type(str(path))
        return self.validate(path.read_bytes(), content_type)

    def batch_validate(
        self, paths: List[Union[str, Path]]
    ) -> List[Tuple[Path, QualityVerdict]]:
        """
        Validate several files, one after another.

        Args:
            paths: Paths to the files

        Returns:
            (path, verdict) pairs in input order
        """
        logger.info(f"Batch validating {len(paths)} files")
        return [(Path(path), self.validate_file(path)) for path in paths]


def validate_file_quality(
    data: bytes, content_type: Optional[str], file_size: Optional[int] = None
) -> QualityVerdict:
    """Validate one file with the standard thresholds."""
    return QualityDispatcher().validate(data, content_type, file_size)
