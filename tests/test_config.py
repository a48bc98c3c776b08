from pathlib import Path

import pytest

from src.prefix_trie.config import (
    DEFAULT_LOG_FILE,
    ConfigBoolParsingError,
    ConfigNotFoundError,
    TrieConfig,
    load_config_file,
    parse_bool,
)

# Test data for valid configurations
VALID_CONFIG = """
# Trie configuration
wordspath = {words_path}
log_operations = true
clear_siblings_on_remove = no
log_file = {log_file}
"""

MINIMAL_CONFIG = """
wordspath = {words_path}
log_operations = false
"""

MISSING_KEY_CONFIG = """
wordspath = {words_path}
clear_siblings_on_remove = yes
"""

INVALID_BOOL_CONFIG = """
wordspath = {words_path}
log_operations = maybe
"""


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("John\nJane Doe\n", encoding="utf-8")
    return path


def write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.txt"
    config_path.write_text(content, encoding="utf-8")
    return config_path


# Test parse_bool function
@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("True", True),
        ("1", True),
        ("yes", True),
        (" YES ", True),
        ("false", False),
        ("FALSE", False),
        ("0", False),
        ("no", False),
    ],
)
def test_parse_bool_valid(value, expected):
    """Test valid boolean values."""
    assert parse_bool("test_key", value) == expected


@pytest.mark.parametrize("value", ["maybe", "2", "yess", "tru", ""])
def test_parse_bool_invalid(value):
    """Test invalid boolean values."""
    with pytest.raises(ConfigBoolParsingError) as excinfo:
        parse_bool("test_key", value)
    assert "Invalid boolean value for key 'test_key'" in str(excinfo.value)


# Test TrieConfig class
def test_trie_config_defaults(words_file):
    config = TrieConfig(words_path=words_file, log_operations=True)

    assert config.words_path == words_file
    assert config.log_operations is True
    assert config.clear_siblings_on_remove is False
    assert config.log_file == DEFAULT_LOG_FILE


def test_trie_config_repr(words_file):
    """Test the string representation of TrieConfig."""
    config = TrieConfig(
        words_path=words_file,
        log_operations=False,
        clear_siblings_on_remove=True,
    )

    repr_str = repr(config)
    assert "Trie configuration settings" in repr_str
    assert str(words_file) in repr_str
    assert "Log operations: NO" in repr_str
    assert "Clear siblings on remove: YES" in repr_str


# Test load_config_file function
def test_load_valid_config(tmp_path, words_file):
    log_file = tmp_path / "logs" / "trie.log"
    config_path = write_config(
        tmp_path,
        VALID_CONFIG.format(words_path=words_file, log_file=log_file),
    )

    config = load_config_file(config_path)

    assert config.words_path == words_file
    assert config.log_operations is True
    assert config.clear_siblings_on_remove is False
    assert config.log_file == log_file


def test_load_minimal_config_uses_defaults(tmp_path, words_file):
    config_path = write_config(
        tmp_path,
        MINIMAL_CONFIG.format(words_path=words_file),
    )

    config = load_config_file(config_path)

    assert config.log_operations is False
    assert config.clear_siblings_on_remove is False
    assert config.log_file == DEFAULT_LOG_FILE


def test_load_config_missing_file():
    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(Path("/non/existent/path"))
    assert "Missing required configuration file" in str(excinfo.value)


def test_load_config_missing_key(tmp_path, words_file):
    config_path = write_config(
        tmp_path,
        MISSING_KEY_CONFIG.format(words_path=words_file),
    )

    with pytest.raises(ConfigNotFoundError) as excinfo:
        load_config_file(config_path)
    assert (
        "Missing required configuration: "
        "'log_operations'" in str(excinfo.value)
    )


def test_load_config_missing_words_path(tmp_path):
    config_path = write_config(tmp_path, "log_operations = true\n")

    with pytest.raises(ConfigNotFoundError) as excinfo:
        load_config_file(config_path)
    assert "'wordspath'" in str(excinfo.value)


def test_load_config_invalid_bool(tmp_path, words_file):
    config_path = write_config(
        tmp_path,
        INVALID_BOOL_CONFIG.format(words_path=words_file),
    )

    with pytest.raises(ConfigBoolParsingError) as excinfo:
        load_config_file(config_path)
    assert (
        "Invalid boolean value for key "
        "'log_operations'" in str(excinfo.value)
    )


def test_load_config_case_insensitivity(tmp_path, words_file):
    """Test that keys are case-insensitive."""
    config_content = f"""
    WORDSPATH = {words_file}
    LOG_OPERATIONS = 0
    CLEAR_SIBLINGS_ON_REMOVE = 1
    """
    config = load_config_file(write_config(tmp_path, config_content))

    assert config.words_path == words_file
    assert config.log_operations is False
    assert config.clear_siblings_on_remove is True


def test_load_config_missing_words_file(tmp_path):
    non_existent = tmp_path / "non_existent.txt"
    config_path = write_config(
        tmp_path,
        MINIMAL_CONFIG.format(words_path=non_existent),
    )

    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(config_path)
    assert (
        f"The required file {non_existent} "
        "doesn't exist" in str(excinfo.value)
    )


def test_load_config_invalid_line_format(tmp_path, words_file):
    """Test that malformed lines and comments are ignored."""
    config_content = f"""
    # A comment
    wordspath = {words_file}
    invalid_line_without_equals
    log_operations = yes
    another_invalid line
    """
    config = load_config_file(write_config(tmp_path, config_content))

    assert config.words_path == words_file
    assert config.log_operations is True
