"""Command-line front door for autopick.

Collects candidates from a file and/or ``--item`` options, runs one
interactive selection, and maps the outcome onto the exit status.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import is_valid_prompt, load_prompt, load_theme_name
from .selector import select_from_list
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def read_candidates(path: Path) -> list[str]:
    """Return one candidate per non-blank line of ``path``, trimmed."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        text = path.read_bytes().decode("utf-8", errors="replace")
    return [line.strip() for line in text.splitlines() if line.strip()]


def _prompt_arg(value: str) -> str:
    """argparse type for prompt markers."""
    if not is_valid_prompt(value):
        raise argparse.ArgumentTypeError("prompt must be non-empty printable text")
    return value


def _configure_logging(log_file: Path | None) -> None:
    # Anything written to stderr would land inside the raw-mode prompt line.
    if log_file is None:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(log_file),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one selection.

    The chosen candidate is echoed by the selector itself. Cancelling exits
    with status 1.
    """
    parser = argparse.ArgumentParser(
        description="Pick one line from a list with an interactive fuzzy prompt."
    )
    parser.add_argument("path", nargs="?", default=None, help="File with one candidate per line.")
    parser.add_argument(
        "--item",
        action="append",
        default=[],
        metavar="TEXT",
        help="Add a candidate (repeatable).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--prompt", type=_prompt_arg, default=None, help="Prompt marker shown before the query.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    args = parser.parse_args(argv)

    _configure_logging(args.log_file)

    candidates: list[str] = []
    if args.path is not None:
        path = Path(args.path)
        if not path.is_file():
            raise SystemExit(f"File not found: {path}")
        candidates.extend(read_candidates(path))
    candidates.extend(item.strip() for item in args.item if item.strip())
    if not candidates:
        raise SystemExit("No candidates to select from.")

    theme_name = args.theme if args.theme is not None else load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color)
    prompt = args.prompt if args.prompt is not None else load_prompt()
    logger.debug("selecting from %d candidates", len(candidates))

    if select_from_list(candidates, theme=theme, prompt=prompt) is None:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
