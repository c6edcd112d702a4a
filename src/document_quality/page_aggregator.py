"""Multi-Page Aggregator - one verdict for a paginated document."""

import logging
from typing import List, Optional

from document_quality.page_renderer import DocumentError, PyMuPDFPageRenderer
from document_quality.raster import PillowImageDecoder, RasterError
from document_quality.raster_analyzer import RasterAnalyzer
from document_quality.standards import constants
from document_quality.standards.types import DocumentMetrics, PageVerdict, QualityVerdict

logger = logging.getLogger(__name__)

__all__ = ['MultiPageAggregator']


class MultiPageAggregator:
    """
    Validates every page of a PDF and folds the results.

    Each page is rendered at 2x its native size, encoded to PNG and
    analyzed as an image whose file size is the PNG's byte length. The
    document is acceptable only if every page is. For each failing page
    the first problem is reported, prefixed with the page number.
    """

    def __init__(
        self,
        analyzer: Optional[RasterAnalyzer] = None,
        renderer: Optional[PyMuPDFPageRenderer] = None,
        decoder: Optional[PillowImageDecoder] = None,
        max_pages: Optional[int] = None,
    ):
        """
        Initialize the aggregator.

        Args:
            analyzer: Per-page analyzer (default: RasterAnalyzer with standard thresholds)
            renderer: Page renderer (default: PyMuPDFPageRenderer at scale 2.0)
            decoder: Decoder for rendered page images (default: PillowImageDecoder)
            max_pages: Reject documents with more pages than this (default: no limit)
        """
        if max_pages is not None and max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {max_pages}")

        self.analyzer = analyzer or RasterAnalyzer()
        self.renderer = renderer or PyMuPDFPageRenderer()
        self.decoder = decoder or PillowImageDecoder()
        self.max_pages = max_pages

    def analyze_pages(self, document_bytes: bytes) -> List[PageVerdict]:
        """
        Analyze every page of a document.

        Args:
            document_bytes: Raw PDF file contents

        Returns:
            PageVerdict per page, in page order

        Raises:
            DocumentError: If the document cannot be opened or rendered
        """
        page_verdicts = []
        for page in self.renderer.render_pages(document_bytes):
            try:
                raster = self.decoder.decode(page.png_bytes)
            except RasterError as e:
                logger.warning(f"Page {page.page_number} could not be decoded: {e}")
                verdict = QualityVerdict.rejected(constants.IMAGE_LOAD_ERROR)
            else:
                verdict = self.analyzer.analyze(raster, len(page.png_bytes))
                del raster

            logger.debug(f"Page {page.page_number}: {verdict.level.value}")
            page_verdicts.append(PageVerdict(page_number=page.page_number, verdict=verdict))

        return page_verdicts

    def analyze(self, document_bytes: bytes) -> QualityVerdict:
        """
        Analyze a paginated document.

        Args:
            document_bytes: Raw PDF file contents

        Returns:
            QualityVerdict with DocumentMetrics, or a REJECTED verdict
            without metrics if the document cannot be parsed
        """
        logger.info(f"Analyzing document ({len(document_bytes)} bytes)")

        try:
            if self.max_pages is not None:
                count = self.renderer.page_count(document_bytes)
                if count > self.max_pages:
                    logger.warning(f"Rejecting document with {count} pages (limit {self.max_pages})")
                    return QualityVerdict.rejected(
                        constants.TOO_MANY_PAGES_PROBLEM.format(count=count, maximum=self.max_pages)
                    )
            page_verdicts = self.analyze_pages(document_bytes)
        except DocumentError as e:
            logger.error(f"Error analyzing PDF: {e}")
            return QualityVerdict.rejected(constants.DOCUMENT_ANALYSIS_ERROR)

        return self.aggregate(page_verdicts)

    @staticmethod
    def aggregate(page_verdicts: List[PageVerdict]) -> QualityVerdict:
        """
        Fold page verdicts into one document verdict.

        Args:
            page_verdicts: Verdicts in page order

        Returns:
            Document QualityVerdict with page counts and page-attributed problems,
            or a REJECTED verdict without metrics if there are no pages
        """
        if not page_verdicts:
            logger.error("Error analyzing PDF: no pages were analyzed")
            return QualityVerdict.rejected(constants.DOCUMENT_ANALYSIS_ERROR)

        problems = [
            constants.PAGE_PROBLEM.format(page_number=p.page_number, problem=p.verdict.problems[0])
            for p in page_verdicts
            if p.verdict.problems
        ]
        valid_pages = sum(1 for p in page_verdicts if p.verdict.is_acceptable)
        metrics = DocumentMetrics(total_pages=len(page_verdicts), valid_pages=valid_pages)

        verdict = QualityVerdict.from_problems(
            metrics,
            tuple(problems),
            is_acceptable=all(p.verdict.is_acceptable for p in page_verdicts),
        )
        logger.info(
            f"Document verdict: {verdict.level.value} "
            f"({valid_pages}/{len(page_verdicts)} pages acceptable)"
        )
        return verdict
