from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .models import SplitResult

DEFAULT_DOCUMENT_ID = "document"


@dataclass
class SplitPaths:
    document_id: str
    chunk_dir: Path
    chunk_file: Path


class SplitStorage:
    """
    Stores split results as JSON under <data_dir>/<document_id>/chunks/.

    File names carry a UTC timestamp with microseconds, so sorting them by
    name orders the results of one document from oldest to newest.
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def chunk_dir(self, document_id: str) -> Path:
        return self.data_dir / document_id / "chunks"

    def build_paths(self, document_id: str) -> SplitPaths:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        chunk_dir = self.chunk_dir(document_id)
        chunk_dir.mkdir(parents=True, exist_ok=True)
        return SplitPaths(
            document_id=document_id,
            chunk_dir=chunk_dir,
            chunk_file=chunk_dir / f"{document_id}_{timestamp}.json",
        )

    def save(self, result: SplitResult) -> SplitPaths:
        paths = self.build_paths(result.document_id or DEFAULT_DOCUMENT_ID)
        result.save(str(paths.chunk_file))
        return paths

    def list_results(self, document_id: str) -> list[Path]:
        """Stored result files of a document, oldest first."""
        chunk_dir = self.chunk_dir(document_id)
        if not chunk_dir.is_dir():
            return []
        return sorted(chunk_dir.glob(f"{document_id}_*.json"))

    def load_latest(self, document_id: str) -> SplitResult:
        """
        Load the most recent result stored for a document.

        Raises:
            FileNotFoundError: If nothing was stored for the document.
        """
        files = self.list_results(document_id)
        if not files:
            raise FileNotFoundError(f"No stored results for document: {document_id}")
        return SplitResult.load(str(files[-1]))
