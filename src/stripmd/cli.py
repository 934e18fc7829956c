"""``stripmd`` command: strip markdown from files or stdin.

Usage:
    stripmd README.md CHANGELOG.md
    cat notes.md | stripmd
    stripmd --trace notes.md
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import structlog

from stripmd.config import _DEFAULTS, LOG_LEVELS, configure_logging, get_config
from stripmd.events import Event
from stripmd.reducer import strip_markdown, strip_markdown_file

log = structlog.get_logger()

STDIN = "-"
_DEFAULT_LEVEL = _DEFAULTS["log_level"]


def _trace(event: Event) -> None:
    log.debug("markdown_event", md_event=repr(event))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripmd",
        description="Convert markdown to plain text.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="markdown files to strip; '-' or nothing reads stdin",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, type=str.upper, default=None,
        help="log level for messages on stderr",
    )
    parser.add_argument(
        "--trace", action="store_true", default=None,
        help="log every markdown event at DEBUG level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # config warnings must reach stderr, not the text on stdout
    configure_logging(args.log_level or _DEFAULT_LEVEL)
    cfg = get_config()

    trace = cfg["trace_events"] if args.trace is None else args.trace
    level = "DEBUG" if trace else (args.log_level or cfg["log_level"])
    configure_logging(level)
    on_event = _trace if trace else None

    status = 0
    for name in args.files or [STDIN]:
        if name == STDIN:
            text = strip_markdown(sys.stdin.read(), on_event)
        else:
            try:
                text = strip_markdown_file(name, on_event)
            except OSError as exc:
                log.error("strip_file_failed", path=name, error=str(exc))
                status = 1
                continue
        log.info("strip_completed", source=name, chars=len(text))
        sys.stdout.write(text)

    sys.stdout.flush()
    return status


if __name__ == "__main__":
    sys.exit(main())
