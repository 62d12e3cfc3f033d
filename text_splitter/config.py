from dataclasses import dataclass
import os
from typing import Optional


@dataclass
class SplitterServiceConfig:
    data_dir: str = "data/text_splitter"
    strategy: str = "recursive"
    chunk_size: int = 1000
    chunk_overlap: int = 200
    language: Optional[str] = None
    encoding_name: Optional[str] = None

    @classmethod
    def from_env(cls) -> "SplitterServiceConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        return cls(
            data_dir=os.environ.get("TEXT_SPLITTER_DATA_DIR", cls.data_dir),
            strategy=os.environ.get("TEXT_SPLITTER_STRATEGY", cls.strategy),
            chunk_size=_int("TEXT_SPLITTER_CHUNK_SIZE", cls.chunk_size),
            chunk_overlap=_int("TEXT_SPLITTER_CHUNK_OVERLAP", cls.chunk_overlap),
            language=os.environ.get("TEXT_SPLITTER_LANGUAGE") or None,
            encoding_name=os.environ.get("TEXT_SPLITTER_ENCODING") or None,
        )
