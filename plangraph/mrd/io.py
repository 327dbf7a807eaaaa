"""
Read and write MRD documents as JSON files.
"""

from pathlib import Path

from plangraph.lib.documents import load_model, save_model
from plangraph.mrd.models import MarketDocument


def load_market_document(path: Path) -> MarketDocument:
    """Load an MRD from a JSON file.

    Raises:
        DocumentError: If the file is missing, not JSON, or not an MRD
    """
    return load_model(path, MarketDocument)


def save_market_document(doc: MarketDocument, path: Path, indent: int = 2) -> None:
    save_model(doc, path, indent=indent)
