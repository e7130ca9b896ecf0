"""Command line entry point for the CoreNLP client"""

import argparse
import asyncio
import sys
from typing import List, Optional

from google.protobuf import text_format

from .annotators import BUNDLES
from .core.config import Settings
from .core.exceptions import CoreNLPClientError
from .core.logger import setup_logging
from .protocol.document import Document
from .services import create_client


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corenlp-client",
        description="Annotate text with Stanford CoreNLP and print the document",
    )
    parser.add_argument("input", help="Input text file, or '-' for stdin")
    parser.add_argument("--backend", choices=["cmd", "http"], default="http")

    group = parser.add_mutually_exclusive_group()
    group.add_argument("--annotators", help="Comma separated annotators, e.g. tokenize,ssplit,pos")
    group.add_argument("--bundle", choices=sorted(BUNDLES), help="Predefined annotator pipeline")

    parser.add_argument("--url", help="CoreNLP server URL (http backend)")
    parser.add_argument("--classpath", help="Java classpath (cmd backend)")
    parser.add_argument("--timeout", type=float, help="Timeout in seconds")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def _annotators(args: argparse.Namespace) -> Optional[List[str]]:
    if args.bundle:
        return list(BUNDLES[args.bundle])
    if args.annotators:
        return [name.strip() for name in args.annotators.split(",")]
    return None


async def _annotate(args: argparse.Namespace, text: bytes) -> Document:
    options = {}
    if args.timeout is not None:
        options["timeout"] = args.timeout
    if args.backend == "http":
        options["url"] = args.url
    else:
        options["classpath"] = args.classpath

    client = create_client(args.backend, _annotators(args), settings=Settings(), **options)
    doc = Document()
    await client.run_text(text, doc)
    return doc


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(log_level=args.log_level, stream=sys.stderr)

    try:
        if args.input == "-":
            text = sys.stdin.buffer.read()
        else:
            with open(args.input, "rb") as f:
                text = f.read()
        doc = asyncio.run(_annotate(args, text))
    except (CoreNLPClientError, OSError) as e:
        logger.error(str(e))
        return 1

    sys.stdout.write(text_format.MessageToString(doc, as_utf8=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
