"""PDF page rendering with PyMuPDF."""

import logging
from typing import Iterator, NamedTuple

import fitz  # PyMuPDF
from pydantic import Field
from pydantic.dataclasses import dataclass

from document_quality.standards import constants

logger = logging.getLogger(__name__)

__all__ = ['PyMuPDFPageRenderer', 'RenderedPage', 'DocumentError']


class DocumentError(ValueError):
    """Raised when a paginated document cannot be opened or rendered."""


class RenderedPage(NamedTuple):
    """A page rendered to an encoded PNG image."""

    page_number: int  # 1-based
    png_bytes: bytes


@dataclass
class PyMuPDFPageRenderer:
    """Renders PDF pages to PNG images, one page at a time."""

    scale: float = Field(default=constants.PAGE_RENDER_SCALE, gt=0.0)

    def _open(self, document_bytes: bytes) -> "fitz.Document":
        if not document_bytes:
            raise DocumentError("Document data is empty")
        try:
            doc = fitz.open(stream=document_bytes, filetype="pdf")
        except Exception as e:
            raise DocumentError(f"Failed to open PDF: {e}") from e

        if doc.page_count == 0:
            doc.close()
            raise DocumentError("PDF contains no pages")
        return doc

    def page_count(self, document_bytes: bytes) -> int:
        """
        Count the pages of a PDF without rendering them.

        Raises:
            DocumentError: If the PDF cannot be opened or has no pages
        """
        doc = self._open(document_bytes)
        try:
            return doc.page_count
        finally:
            doc.close()

    def render_pages(self, document_bytes: bytes) -> Iterator[RenderedPage]:
        """
        Render every page of a PDF, in order.

        Pages are rendered lazily: the pixmap of one page is released
        before the next page is rendered.

        Args:
            document_bytes: Raw PDF file contents

        Yields:
            RenderedPage for each page, 1-based

        Raises:
            DocumentError: If the PDF cannot be opened or a page fails to render
        """
        doc = self._open(document_bytes)
        matrix = fitz.Matrix(self.scale, self.scale)
        try:
            for index in range(doc.page_count):
                try:
                    page = doc.load_page(index)
                    pix = page.get_pixmap(matrix=matrix, alpha=False)
                    png_bytes = pix.tobytes("png")
                except Exception as e:
                    raise DocumentError(f"Failed to render page {index + 1}: {e}") from e

                logger.debug(
                    f"Rendered page {index + 1}/{doc.page_count} at {pix.width}x{pix.height} "
                    f"({len(png_bytes)} bytes)"
                )
                del pix, page
                yield RenderedPage(page_number=index + 1, png_bytes=png_bytes)
        finally:
            doc.close()
