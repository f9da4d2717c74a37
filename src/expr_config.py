import logging
import os
import tomllib
from dataclasses import dataclass

from expr_parser import DEFAULT_MAX_DEPTH

CONFIG_FILE = "exprparse.toml"


class ConfigError(Exception):
    pass


@dataclass
class Config:
    prompt: str = "Enter an expression (or type 'exit' to quit): "
    exit_word: str = "exit"
    indent: str = "  "
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"


# section -> {toml key: (Config field, expected type)}
_SCHEMA = {
    "shell": {
        "prompt": ("prompt", str),
        "exit_word": ("exit_word", str),
        "indent": ("indent", str),
    },
    "parser": {
        "max_depth": ("max_depth", int),
    },
    "logging": {
        "level": ("log_level", str),
    },
}


def load_config(path: str = CONFIG_FILE) -> Config:
    """Read ``path`` if it exists, falling back to defaults for anything unset."""
    config = Config()
    if not os.path.exists(path):
        return config

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    for section, keys in _SCHEMA.items():
        table = data.get(section, {})
        if not isinstance(table, dict):
            raise ConfigError(f"{path}: [{section}] must be a table")
        for key, (field, expected) in keys.items():
            if key not in table:
                continue
            value = table[key]
            # bool is an int subclass
            if not isinstance(value, expected) or isinstance(value, bool):
                raise ConfigError(
                    f"{path}: {section}.{key} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            setattr(config, field, value)

    if config.max_depth < 1:
        raise ConfigError(f"{path}: parser.max_depth must be at least 1")
    if not config.exit_word:
        raise ConfigError(f"{path}: shell.exit_word must not be empty")
    config.log_level = config.log_level.upper()
    if config.log_level not in logging.getLevelNamesMapping():
        raise ConfigError(f"{path}: unknown logging.level '{config.log_level}'")
    return config
