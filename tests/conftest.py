import logging

import pytest

from src.prefix_trie.trie import Trie
from tests.trie_constants import NAMES


@pytest.fixture
def names_trie() -> Trie:
    """A trie holding the sample names, inserted in order."""
    trie = Trie()
    for name in NAMES:
        trie.insert(name)
    return trie


@pytest.fixture
def restore_root_logger():
    """Put back the root logger's handlers and level after a test
    that reconfigures logging.
    """
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
