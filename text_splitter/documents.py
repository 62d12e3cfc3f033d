"""
DocumentMapper - wraps chunks into Documents with line-range metadata.

Each chunk is located again in its source text (searching forward from the
previous match, so repeated content is not matched twice) and the number
of line breaks between consecutive chunks gives its starting line. The
result is stored as metadata["loc"]["lines"] = {"from": ..., "to": ...},
1-indexed and inclusive.

Usage:
    from text_splitter import DocumentMapper, TextSplitter

    mapper = DocumentMapper(TextSplitter.character(separator="\\n", chunk_size=100, chunk_overlap=20))
    docs = mapper.create_documents([text], [{"source": "example.txt"}])
"""

import copy
from typing import Any, Optional, Sequence

from .logging_config import get_logger
from .models import ChunkHeaderOptions, Document
from .splitter import TextSplitter

logger = get_logger(__name__)


def _count_newlines(text: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    return text[start:end].count("\n")


class DocumentMapper:
    """
    Turns texts (or Documents) into chunk Documents.

    Args:
        splitter: The splitter producing the chunks.
        header_options: Optional chunk headers; see ChunkHeaderOptions.
    """

    def __init__(
        self,
        splitter: TextSplitter,
        header_options: Optional[ChunkHeaderOptions] = None,
    ):
        self.splitter = splitter
        self.header_options = header_options or ChunkHeaderOptions()

    def create_documents(
        self,
        texts: Sequence[str],
        metadatas: Optional[Sequence[dict[str, Any]]] = None,
    ) -> list[Document]:
        """
        Split each text and wrap every chunk into a Document.

        Args:
            texts: Source texts.
            metadatas: One metadata mapping per text (copied into every
                chunk of that text). Defaults to empty mappings.

        Returns:
            Documents in text order, then chunk order.
        """
        metadatas = list(metadatas) if metadatas else [{} for _ in texts]
        if len(metadatas) != len(texts):
            raise ValueError(
                f"Got {len(metadatas)} metadata entries for {len(texts)} texts"
            )

        documents: list[Document] = []
        for text, metadata in zip(texts, metadatas):
            documents.extend(self._documents_for_text(text, metadata))
        return documents

    def split_documents(self, documents: Sequence[Document]) -> list[Document]:
        """Split Documents, keeping each one's metadata on its chunks."""
        texts = [doc.page_content for doc in documents]
        metadatas = [doc.metadata for doc in documents]
        return self.create_documents(texts, metadatas)

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    def _documents_for_text(self, text: str, metadata: dict[str, Any]) -> list[Document]:
        options = self.header_options
        documents: list[Document] = []
        line_counter = 1
        prev_chunk: Optional[str] = None
        index_prev_chunk = -1

        for chunk in self.splitter.split_text(text):
            page_content = options.chunk_header

            search_start = index_prev_chunk + 1
            index_chunk = text.find(chunk, search_start)
            if index_chunk == -1:
                # Chunk was normalised by the segmenter; keep the previous position
                logger.debug("Chunk not found verbatim in source; line numbers are approximate")
                index_chunk = min(search_start, len(text))

            if prev_chunk is None:
                line_counter += _count_newlines(text, 0, index_chunk)
            else:
                index_end_prev_chunk = index_prev_chunk + len(prev_chunk)
                if index_end_prev_chunk < index_chunk:
                    line_counter += _count_newlines(text, index_end_prev_chunk, index_chunk)
                elif index_end_prev_chunk > index_chunk:
                    line_counter -= _count_newlines(text, index_chunk, index_end_prev_chunk)
                if options.append_chunk_overlap_header:
                    page_content += options.chunk_overlap_header

            newlines_count = _count_newlines(chunk)

            chunk_metadata = copy.deepcopy(metadata)
            loc = chunk_metadata.get("loc")
            loc = dict(loc) if isinstance(loc, dict) else {}
            loc["lines"] = {"from": line_counter, "to": line_counter + newlines_count}
            chunk_metadata["loc"] = loc

            documents.append(Document(page_content=page_content + chunk, metadata=chunk_metadata))

            line_counter += newlines_count
            prev_chunk = chunk
            index_prev_chunk = index_chunk

        return documents
