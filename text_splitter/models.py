"""
Data Models for the Text Splitter

Defines:
1. SplitterConfig - Chunk size, overlap, separator handling, length measure
2. Document - A chunk (or source text) with metadata
3. ChunkHeaderOptions - Headers prepended to chunks by the DocumentMapper
4. SplitStats / OversizeDiagnostic - Observations about a splitting call
5. SplitResult - Complete splitting output with statistics
6. SplitRequest - API request body

Design Principles:
- Pydantic v2 for validation and serialization
- SplitterConfig is frozen: validated once, never mutated
- Save/load pattern for persisted results

Usage:
    config = SplitterConfig(chunk_size=500, chunk_overlap=50)
    result = splitter.split_with_stats(text)
    result.save("chunks.json")
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidOverlapError

LengthFunction = Callable[[str], int]


class SplitterConfig(BaseModel):
    """
    Configuration shared by every splitting strategy.

    chunk_size and chunk_overlap are interpreted in the units of
    length_function (characters by default, tokens when a token counter
    is plugged in).
    """
    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(
        1000,
        description="Maximum size of a chunk, measured with length_function",
        gt=0,
    )
    chunk_overlap: int = Field(
        200,
        description="Target overlap between consecutive chunks",
        ge=0,
    )
    keep_separator: bool = Field(
        False,
        description="Keep separators attached to the fragment they introduce",
    )
    length_function: LengthFunction = Field(
        default=len,
        description="Size measure applied to text fragments",
        exclude=True,
    )

    def model_post_init(self, __context: Any) -> None:
        if self.chunk_overlap >= self.chunk_size:
            raise InvalidOverlapError(self.chunk_size, self.chunk_overlap)


class Document(BaseModel):
    """A piece of text with arbitrary metadata and an optional identifier."""
    page_content: str = Field(
        "",
        description="The text content",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Source metadata, plus loc.lines for split chunks",
    )
    id: Optional[str] = Field(
        None,
        description="Optional identifier, ideally unique across a collection",
    )


class ChunkHeaderOptions(BaseModel):
    """Headers prepended to chunk content when building documents."""
    chunk_header: str = ""
    chunk_overlap_header: str = "(cont'd) "
    append_chunk_overlap_header: bool = False


class OversizeDiagnostic(BaseModel):
    """A chunk that could not be brought below chunk_size."""
    chunk_index: int
    length: int
    chunk_size: int


class SplitStats(BaseModel):
    """Statistics about a splitting call."""
    total_chunks: int = 0
    total_length: int = 0
    avg_chunk_length: float = 0.0
    min_chunk_length: int = 0
    max_chunk_length: int = 0
    oversized_chunks: int = 0


class SplitResult(BaseModel):
    """
    Complete result of splitting one text.

    Holds the chunks in source order along with the configuration values
    that produced them and the oversize diagnostics of the call.
    """
    document_id: str = Field(
        "",
        description="Identifier of the split text (file stem for files)",
    )
    strategy: str = Field(
        ...,
        description="Name of the segmentation strategy",
    )
    chunk_size: int
    chunk_overlap: int
    chunks: list[str] = Field(
        default_factory=list,
        description="Chunks in source order",
    )
    stats: SplitStats = Field(default_factory=SplitStats)
    diagnostics: list[OversizeDiagnostic] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When splitting was performed",
    )

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def save(self, path: str) -> None:
        """Save the result to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "SplitResult":
        """Load a result from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


class SplitRequest(BaseModel):
    """Request body of the /split endpoint. Unset fields use service defaults."""
    text: str
    document_id: str = ""
    strategy: Optional[str] = None
    chunk_size: Optional[int] = None
    chunk_overlap: Optional[int] = None
    keep_separator: Optional[bool] = None
    separator: Optional[str] = None
    language: Optional[str] = None
    encoding_name: Optional[str] = None
