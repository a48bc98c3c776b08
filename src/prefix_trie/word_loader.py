"""Seed tries from newline-delimited word files."""

import logging
from pathlib import Path
from typing import Optional

from src.prefix_trie.trie import Trie


def load_words(data_path: Path, trie: Optional[Trie] = None) -> Trie:
    """Insert all the lines of the data file into a trie structure.

    Lines are stripped and blank lines are skipped.

    Args:
        data_path (Path): The path of the word file.
        trie (Trie | None): The trie to fill. A new one is created
            when not given.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If an error occurs while reading the file.

    Returns:
        Trie: The trie holding the file's words.

    """
    if trie is None:
        trie = Trie()

    count = 0
    try:
        with data_path.open("r", encoding="utf-8") as file:
            for line in file:
                word = line.strip()
                if word:
                    trie.insert(word)
                    count += 1

    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {data_path}") from e

    except Exception as e:
        raise Exception(f"An error occurred: {e!s}") from e

    logging.info("Loaded %d words from %s", count, data_path)
    return trie


def trie_search(data_path: Path, query_string: str) -> bool:
    """Check whether `query_string` is one of the words of the data file.

    Args:
        data_path (Path): The path of the word file.
        query_string (str): The word to search for.

    Returns:
        bool: True if the file holds the exact word, False otherwise.

    """
    return load_words(data_path).contains(query_string)


def prefix_search(data_path: Path, prefix: str) -> list[str]:
    """Return the words of the data file that begin with `prefix`.

    Args:
        data_path (Path): The path of the word file.
        prefix (str): The prefix to match.

    Returns:
        list[str]: The matching words in trie order.

    """
    return load_words(data_path).starts_with(prefix)
