"""Shared constants for document quality validation."""

# Resolution (image width in pixels)
MIN_RESOLUTION = 1000  # Absolute minimum width
OPTIMAL_RESOLUTION = 1500  # Ideal width for AI extraction

# Sharpness (Laplacian energy)
MIN_SHARPNESS = 50  # Minimum for legible text
OPTIMAL_SHARPNESS = 150  # No visible blur

# Contrast (luminance dynamic range, 0-1)
MIN_CONTRAST = 0.45
OPTIMAL_CONTRAST = 0.70  # Ideal for OCR

# Noise (normalized luminance standard deviation, 0-1)
MAX_NOISE = 0.50  # Maximum tolerable
OPTIMAL_NOISE = 0.30  # Clean

# File size (KB)
MIN_FILE_SIZE_KB = 80  # Smaller files are usually over-compressed
OPTIMAL_FILE_SIZE_KB = 200

# 3x3 Laplacian kernel, row-major
LAPLACIAN_KERNEL = (
    -1, -1, -1,
    -1, 8, -1,
    -1, -1, -1,
)

PAGE_RENDER_SCALE = 2.0  # Brings typical scans above MIN_RESOLUTION
BYTES_PER_KB = 1024
MAX_CHANNEL_VALUE = 255.0

PDF_CONTENT_TYPE = "application/pdf"
IMAGE_CONTENT_TYPE_PREFIX = "image/"

# Diagnostic messages
RESOLUTION_PROBLEM = "Resolution too low ({width}px). Minimum: {minimum}px"
SHARPNESS_PROBLEM = "Image is blurry (sharpness: {sharpness}). Take the photo without moving"
CONTRAST_PROBLEM = "Contrast too low. Use better lighting"
NOISE_PROBLEM = "Image has too much noise or pixelation"
FILE_SIZE_PROBLEM = "File is over-compressed ({size_kb}KB)"
PAGE_PROBLEM = "Page {page_number}: {problem}"
TOO_MANY_PAGES_PROBLEM = "Document has too many pages ({count}). Maximum: {maximum}"

IMAGE_LOAD_ERROR = "Error loading the image"
IMAGE_ANALYSIS_ERROR = "Error analyzing the image"
DOCUMENT_ANALYSIS_ERROR = "Error analyzing the PDF"
UNSUPPORTED_FILE_TYPE = "Unsupported file type"
ACCEPTABLE_QUALITY = "Acceptable quality"
