"""Configuration parser for the trie command line tool."""

from pathlib import Path
from typing import Optional, cast

DEFAULT_LOG_FILE = Path(__file__).parent.parent.parent / "logs/trie.log"


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings
    is not provided.
    """


class TrieConfig:
    """A class to save the trie tool's configuration settings."""

    def __init__(
        self,
        words_path: Path,
        log_operations: bool,
        clear_siblings_on_remove: bool = False,
        log_file: Path = DEFAULT_LOG_FILE,
    ) -> None:
        """Initialize the trie configuration.

        Args:
            words_path (Path): The path to the newline-delimited
            file whose words seed the trie.
            log_operations (bool): Whether every operation is logged
            along with its execution time.
            clear_siblings_on_remove (bool): Whether removal uses the
            legacy behaviour of clearing all siblings of a removed leaf.
            log_file (Path): The file the logs are written to.

        """
        self.words_path = words_path
        self.log_operations = log_operations
        self.clear_siblings_on_remove = clear_siblings_on_remove
        self.log_file = log_file

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        clear_siblings = "YES" if self.clear_siblings_on_remove else "NO"
        return f"""
                Trie configuration settings:
                Words path: {self.words_path}
                Log operations: {"YES" if self.log_operations else "NO"}
                Clear siblings on remove: {clear_siblings}
                Log file: {self.log_file}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def load_config_file(config_file_path: Path) -> TrieConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        FileNotFoundError: If the config file or the words file
        does not exist.

    Returns:
        TrieConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    words_path: Optional[Path] = None
    log_operations: Optional[bool] = None
    clear_siblings_on_remove = False
    log_file = DEFAULT_LOG_FILE

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "wordspath":
                words_path = Path(value)
            elif key == "log_operations":
                log_operations = parse_bool("log_operations", value)
            elif key == "clear_siblings_on_remove":
                clear_siblings_on_remove = parse_bool(
                    "clear_siblings_on_remove",
                    value,
                )
            elif key == "log_file":
                log_file = Path(value)

    required = {
        "words_path": words_path,
        "log_operations": log_operations,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                "Please ensure the config file includes a valid line for "
                f"""'{"wordspath" if key == "words_path" else key.upper()}'.""",
            )

    if words_path is not None and not words_path.exists():
        raise FileNotFoundError(
            f"The required file {words_path} doesn't exist.",
        )

    return TrieConfig(
        cast("Path", words_path),
        cast("bool", log_operations),
        clear_siblings_on_remove,
        log_file,
    )
