"""
Command line interface for the text splitter.

    text-splitter split notes.md --strategy language --language markdown --chunk-size 500
    text-splitter split README.txt --output chunks.json
    text-splitter serve --port 8000
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import SplitterServiceConfig
from .exceptions import ConfigurationError, SplitterError, format_error_chain
from .logging_config import get_logger, setup_logging
from .service import STRATEGY_REGISTRY, SplitterService

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-splitter",
        description="Split text into size-bounded, overlapping chunks.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command", required=True)

    split = subparsers.add_parser("split", help="Split a UTF-8 text file")
    split.add_argument("path", help="Text file to split")
    split.add_argument("--strategy", choices=sorted(STRATEGY_REGISTRY), default=None)
    split.add_argument("--chunk-size", type=int, default=None)
    split.add_argument("--chunk-overlap", type=int, default=None)
    split.add_argument("--separator", default=None, help="Separator for the character strategy")
    split.add_argument("--language", default=None, help="Separator table for the language strategy")
    split.add_argument("--encoding", dest="encoding_name", default=None, help="tiktoken encoding")
    split.add_argument(
        "--output",
        default=None,
        help="Write the result JSON here (default: print to stdout)",
    )
    split.add_argument(
        "--save",
        action="store_true",
        help="Store the result under the service data directory",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def _run_split(args: argparse.Namespace, service: SplitterService) -> int:
    if not Path(args.path).exists():
        logger.error(f"File not found: {args.path}")
        return 1

    overrides = {
        "strategy": args.strategy,
        "chunk_size": args.chunk_size,
        "chunk_overlap": args.chunk_overlap,
        "separator": args.separator,
        "language": args.language,
        "encoding_name": args.encoding_name,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if args.save:
        result, output_path = service.split_and_save(args.path, **overrides)
        logger.info(f"Saved {result.total_chunks} chunks to {output_path}")
    else:
        result = service.split_file(args.path, **overrides)

    for diagnostic in result.diagnostics:
        logger.warning(
            f"Chunk {diagnostic.chunk_index} has size {diagnostic.length} "
            f"(limit {diagnostic.chunk_size})"
        )

    if args.output:
        result.save(args.output)
        logger.info(f"Saved JSON: {args.output}")
    elif not args.save:
        print(result.to_json())
    return 0


def _run_serve(args: argparse.Namespace, config: SplitterServiceConfig) -> int:
    import uvicorn

    from .app import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logging(level=log_level)

    config = SplitterServiceConfig.from_env()
    try:
        if args.command == "serve":
            return _run_serve(args, config)
        return _run_split(args, SplitterService(config))
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 2
    except SplitterError as e:
        logger.error(format_error_chain(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
