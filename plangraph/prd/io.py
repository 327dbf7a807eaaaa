"""
Read and write PRD documents as JSON files.
"""

from pathlib import Path

from plangraph.lib.documents import load_model, save_model
from plangraph.prd.models import Document


def load_document(path: Path) -> Document:
    """Load a PRD from a JSON file.

    Raises:
        DocumentError: If the file is missing, not JSON, or not a PRD
    """
    return load_model(path, Document)


def save_document(doc: Document, path: Path, indent: int = 2) -> None:
    """Write a PRD to a JSON file, omitting empty fields."""
    save_model(doc, path, indent=indent)
