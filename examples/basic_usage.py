"""Basic usage example for the document quality gate."""

import logging
from pathlib import Path

from document_quality import QualityDispatcher, LegibilityReport

# Configure logging
logging.basicConfig(level=logging.INFO)


# Example: Validate a single file
def validate_single_file():
    """Validate one scanned document."""
    dispatcher = QualityDispatcher()

    file_path = Path("documentation/test documents/medical_leave.jpg")

    if not file_path.exists():
        print(f"File not found: {file_path}")
        print("Please provide a valid file path")
        return

    verdict = dispatcher.validate_file(file_path)

    print(f"\nVerdict for: {file_path}")
    print(f"Level: {verdict.level.value}")
    if verdict.metrics is not None:
        for name, value in verdict.metrics.to_dict().items():
            print(f"  {name}: {value}")
    for problem in verdict.problems:
        print(f"  - {problem}")


# Example: Batch validate a folder of uploads
def batch_validate():
    """Validate every image and PDF in a folder."""
    dispatcher = QualityDispatcher()

    upload_dir = Path("documentation/test documents")
    paths = []
    for ext in ["*.jpg", "*.png", "*.pdf"]:
        paths.extend(upload_dir.rglob(ext))

    if not paths:
        print("No test documents found")
        return

    print(f"Validating {len(paths)} files...\n")
    results = dispatcher.batch_validate(paths)

    print("Batch Validation Results:")
    print("-" * 60)
    for path, verdict in results:
        report = LegibilityReport.from_verdict(verdict)
        print(f"{path.name:30s} | Quality: {report.quality:3d} | {report.message}")


if __name__ == "__main__":
    print("=" * 60)
    print("Document Quality Gate - Basic Usage Example")
    print("=" * 60)

    validate_single_file()

    print("\n" + "=" * 60)
    print("\n")

    batch_validate()
