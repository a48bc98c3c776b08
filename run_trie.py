"""This module provides the command line entry point for querying a trie
seeded from the configured word file.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Callable, Optional

from src.prefix_trie.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    load_config_file,
)
from src.prefix_trie.logger import log, setup_logging
from src.prefix_trie.trie import Trie
from src.prefix_trie.word_loader import load_words

CONFIG_PATH = Path(__file__).parent / "config.txt"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the tool."""
    parser = argparse.ArgumentParser(
        description="Query a prefix trie seeded from a word file.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--insert",
        action="append",
        default=[],
        metavar="WORD",
        help="Word to insert before answering queries (repeatable).",
    )
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="WORD",
        help="Word to remove before answering queries (repeatable).",
    )
    parser.add_argument(
        "--contains",
        action="append",
        default=[],
        metavar="WORD",
        help="Print whether the trie holds WORD (repeatable).",
    )
    parser.add_argument(
        "--starts_with",
        action="append",
        default=[],
        metavar="PREFIX",
        help="Print every word beginning with PREFIX (repeatable). "
        "An empty prefix lists all the words.",
    )
    return parser


def timed(
    operation: Callable[[str], Any],
    argument: str,
    log_details: bool,
) -> Any:
    """Run a trie operation and log it with its execution time.

    Args:
        operation (Callable): The bound trie method to run.
        argument (str): The word or prefix passed to the operation.
        log_details (bool): Whether the call is logged.

    Returns:
        Any: Whatever the operation returned.

    """
    start = time.perf_counter()
    result = operation(argument)
    execution_time_ms = (time.perf_counter() - start) * 1000
    if log_details:
        log(operation.__name__, argument, result, execution_time_ms)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Run the tool.

    Returns:
        int: The process exit code.

    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config_file(Path(args.config_path))
    except (
        FileNotFoundError,
        ConfigNotFoundError,
        ConfigBoolParsingError,
    ) as e:
        print(f"[TRIE] {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_file)
    log_details = config.log_operations

    trie = load_words(
        config.words_path,
        Trie(clear_siblings_on_remove=config.clear_siblings_on_remove),
    )

    for word in args.insert:
        timed(trie.insert, word, log_details)

    for word in args.remove:
        removed = timed(trie.remove, word, log_details)
        print(f"remove {word!r}: {'REMOVED' if removed else 'NOT FOUND'}")

    for word in args.contains:
        found = timed(trie.contains, word, log_details)
        print(f"contains {word!r}: {'EXISTS' if found else 'NOT FOUND'}")

    for prefix in args.starts_with:
        for word in timed(trie.starts_with, prefix, log_details):
            print(word)

    return 0


if __name__ == "__main__":
    sys.exit(main())
