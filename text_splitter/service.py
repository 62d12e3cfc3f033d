from pathlib import Path
from typing import Any, Callable, Optional

from .config import SplitterServiceConfig
from .exceptions import ConfigurationError, UnknownStrategyError
from .logging_config import get_logger
from .models import SplitRequest, SplitResult
from .splitter import TextSplitter
from .storage import SplitStorage

logger = get_logger(__name__)


def _character(options: dict[str, Any]) -> TextSplitter:
    return TextSplitter.character(**options)


def _recursive(options: dict[str, Any]) -> TextSplitter:
    options.pop("separator", None)
    return TextSplitter.recursive(**options)


def _language(options: dict[str, Any]) -> TextSplitter:
    options.pop("separator", None)
    language = options.pop("language", None)
    if not language:
        raise ConfigurationError("The 'language' strategy requires a language")
    return TextSplitter.from_language(language, **options)


def _token(options: dict[str, Any]) -> TextSplitter:
    options.pop("separator", None)
    options.pop("keep_separator", None)
    return TextSplitter.token(**options)


def _sentence(options: dict[str, Any]) -> TextSplitter:
    return TextSplitter.sentence(
        max_length=options["chunk_size"],
        overlap=options["chunk_overlap"],
    )


def _paragraph(options: dict[str, Any]) -> TextSplitter:
    return TextSplitter.paragraph(
        max_length=options["chunk_size"],
        overlap=options["chunk_overlap"],
    )


STRATEGY_REGISTRY: dict[str, Callable[[dict[str, Any]], TextSplitter]] = {
    "character": _character,
    "recursive": _recursive,
    "language": _language,
    "token": _token,
    "sentence": _sentence,
    "paragraph": _paragraph,
}


def build_splitter(
    strategy: str,
    chunk_size: int,
    chunk_overlap: int,
    keep_separator: Optional[bool] = None,
    separator: Optional[str] = None,
    language: Optional[str] = None,
    encoding_name: Optional[str] = None,
) -> TextSplitter:
    """
    Build a TextSplitter for a strategy name.

    Options left as None fall back to the factory defaults of the strategy.

    Raises:
        UnknownStrategyError: If the strategy is not registered.
        ConfigurationError: If the options are invalid for the strategy.
    """
    builder = STRATEGY_REGISTRY.get(strategy)
    if builder is None:
        raise UnknownStrategyError(strategy, sorted(STRATEGY_REGISTRY))

    options: dict[str, Any] = {
        "chunk_size": chunk_size,
        "chunk_overlap": chunk_overlap,
        "keep_separator": keep_separator,
        "separator": separator,
    }
    if strategy == "language":
        options["language"] = language
    if strategy == "token":
        options["encoding_name"] = encoding_name
    options = {k: v for k, v in options.items() if v is not None}
    return builder(options)


class SplitterService:
    def __init__(self, config: SplitterServiceConfig | None = None):
        self.config = config or SplitterServiceConfig()
        self.storage = SplitStorage(self.config.data_dir)

    def split(self, request: SplitRequest) -> SplitResult:
        splitter = build_splitter(
            strategy=request.strategy or self.config.strategy,
            chunk_size=(
                request.chunk_size
                if request.chunk_size is not None
                else self.config.chunk_size
            ),
            chunk_overlap=(
                request.chunk_overlap
                if request.chunk_overlap is not None
                else self.config.chunk_overlap
            ),
            keep_separator=request.keep_separator,
            separator=request.separator,
            language=request.language or self.config.language,
            encoding_name=request.encoding_name or self.config.encoding_name,
        )
        result = splitter.split_with_stats(request.text, document_id=request.document_id)
        logger.info(
            f"Split document {request.document_id or '<inline>'} with "
            f"{result.strategy}: {result.total_chunks} chunks"
        )
        return result

    def split_file(self, path: str, **overrides: Any) -> SplitResult:
        text = Path(path).read_text(encoding="utf-8")
        request = SplitRequest(text=text, document_id=self._make_document_id(path), **overrides)
        return self.split(request)

    def split_and_save(self, path: str, **overrides: Any) -> tuple[SplitResult, str]:
        result = self.split_file(path, **overrides)
        paths = self.storage.save(result)
        return result, str(paths.chunk_file)

    def load_latest(self, document_id: str) -> SplitResult:
        return self.storage.load_latest(document_id)

    def _make_document_id(self, source_file: str) -> str:
        """Generate a document ID from the source file path."""
        # Normalize Windows backslashes for cross-platform compatibility
        normalized = source_file.replace("\\", "/")
        return Path(normalized).stem
