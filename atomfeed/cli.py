"""Command line validation of JSON-encoded Atom documents."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .codec import AtomJSONCodec
from .config import Config
from .errors import DocumentInvalid
from .logging_config import create_execution_logger, setup_structured_logging


def cmd_validate(args: argparse.Namespace, config: Config) -> int:
    logger = create_execution_logger("cli")
    logger.log_execution_start(path=args.path, document_kind=args.kind)

    try:
        text = Path(args.path).read_bytes()
    except OSError as e:
        logger.error(f"Cannot read {args.path}: {e}", path=args.path, error=str(e))
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        logger.log_execution_end(success=False)
        return 2

    codec = AtomJSONCodec(config.get_codec_config(), execution_id=logger.execution_id)
    try:
        if args.kind == "entry":
            value = codec.decode_entry(text)
            summary = f"valid entry {value.id}"
        else:
            value = codec.decode_feed(text)
            summary = f"valid feed {value.id} ({len(value.entries)} entries)"
    except DocumentInvalid as e:
        print(f"invalid document: {e}", file=sys.stderr)
        logger.log_execution_end(success=False)
        return 1
    except ValueError as e:
        print(f"invalid {args.kind}: {type(e).__name__}: {e}", file=sys.stderr)
        logger.log_execution_end(success=False)
        return 1

    if args.normalize:
        if args.kind == "entry":
            print(codec.encode_entry(value))
        else:
            print(codec.encode_feed(value))
    else:
        print(summary)

    logger.log_execution_end(success=True)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomfeed",
        description="Validate JSON-encoded Atom feeds and entries.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate a document")
    validate_parser.add_argument("path", help="Path to a JSON document")
    validate_parser.add_argument(
        "--kind",
        choices=("feed", "entry"),
        default="feed",
        help="Top-level element of the document (default: feed)",
    )
    validate_parser.add_argument(
        "--normalize",
        action="store_true",
        help="Print the canonical encoding instead of a summary",
    )
    validate_parser.set_defaults(handler=cmd_validate)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config()
    setup_structured_logging(config.log_level)
    return args.handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
