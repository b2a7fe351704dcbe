"""gtrans command line entry point."""

import argparse
import sys
from dataclasses import dataclass, field
from typing import TextIO

from gtrans.core.config import Settings, settings as default_settings
from gtrans.core.exceptions import GtransError, InputFailureError
from gtrans.core.logging import get_module_logger
from gtrans.modules.language import resolve_target_language
from gtrans.modules.output import select_output_strategy

logger = get_module_logger()

USAGE_MESSAGE = """\
gtrans translates input text specified by argument or STDIN using Google Translate.
Source language will be automatically detected.

    export GOOGLE_TRANSLATE_API_KEY=<Your Google Translate API Key>

    [optional]
    export GOOGLE_TRANSLATE_LANG=<default target language (e.g. en, ja, ...)>
    export GOOGLE_TRANSLATE_SECOND_LANG=<second language (e.g. en, ja, ...)>

If you set both GOOGLE_TRANSLATE_LANG and GOOGLE_TRANSLATE_SECOND_LANG,
gtrans automatically switches target language.

Example:
    $ gtrans "Golang is awesome"
    Golangは素晴らしいです
    $ gtrans "Golangは素晴らしいです"
    Golang is great
    $ gtrans "Golangは素晴らしいです" | gtrans | gtrans | gtrans ...
"""


@dataclass
class TranslateOptions:
    """Options given on the command line."""

    target: str = ""
    open_browser: bool = False
    words: list[str] = field(default_factory=list)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtrans",
        usage="%(prog)s [flags] [input text]",
        description=USAGE_MESSAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-to",
        "--to",
        dest="target",
        default="",
        metavar="LANG",
        help="target language",
    )
    parser.add_argument(
        "-open",
        "--open",
        dest="open_browser",
        action="store_true",
        help="open Google Translate in browser instead of writing translated result to STDOUT",
    )
    # Flags are only read before the first word, so later words may start with "-"
    parser.add_argument(
        "words", nargs=argparse.REMAINDER, help="input text (default: read STDIN)"
    )
    return parser


def parse_options(argv: list[str] | None = None) -> TranslateOptions:
    """Parse command line arguments. Exits with status 2 on usage errors."""
    args = build_parser().parse_args(argv)
    return TranslateOptions(
        target=args.target,
        open_browser=args.open_browser,
        words=args.words,
    )


def read_input(words: list[str], stdin: TextIO) -> str:
    """Join the positional words, or read all of ``stdin`` when there are none."""
    text = " ".join(words)
    if text:
        return text

    try:
        return stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("stdin_read_failed", error=str(e), error_type=type(e).__name__)
        raise InputFailureError(f"cannot read input: {e}") from e


def translate(
    options: TranslateOptions, stdin: TextIO, stdout: TextIO, settings: Settings
) -> None:
    """Resolve the target language, read the input and deliver the result."""
    target = resolve_target_language(options.target, settings)
    text = read_input(options.words, stdin)
    strategy = select_output_strategy(options.open_browser, settings, stdout)
    strategy.deliver(text, target)


def run(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    settings: Settings | None = None,
) -> int:
    """Run gtrans and return the process exit status."""
    options = parse_options(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    settings = settings if settings is not None else default_settings

    try:
        translate(options, stdin, stdout, settings)
    except GtransError as e:
        logger.debug("gtrans_failed", error=str(e), error_type=type(e).__name__)
        print(e, file=stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run())
