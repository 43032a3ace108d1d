"""Filesystem helpers for config loads and stores.

Every OSError is translated into ConfigFileAccessError here so the
dispatcher only reasons about domain errors.
"""

from __future__ import annotations

from pathlib import Path

from config_file.core.errors import ConfigFileAccessError, ConfigFileExistsError


def read_config_bytes(config_path: Path) -> bytes | None:
    """Read the full contents of a config file.

    Args:
        config_path: Config file path.

    Returns:
        File bytes, or None when the file does not exist.

    Raises:
        ConfigFileAccessError: For any read failure other than not-found.
    """
    try:
        return config_path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as error:
        raise ConfigFileAccessError(
            f"Couldn't read config file at {config_path}: {error.strerror or error}. "
            "Check file permissions and retry.",
            config_path,
            error,
        ) from error


def ensure_parent_dir(config_path: Path) -> None:
    """Create the parent directory chain of a config file.

    Raises:
        ConfigFileAccessError: If a directory cannot be created.
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise ConfigFileAccessError(
            f"Couldn't create config directory {config_path.parent}: "
            f"{error.strerror or error}.",
            config_path,
            error,
        ) from error


def write_config_bytes(config_path: Path, data: bytes, overwrite: bool) -> None:
    """Write encoded config bytes to disk.

    Args:
        config_path: Target config file path.
        data: Encoded file contents.
        overwrite: Truncate an existing file when true, otherwise create the
            file exclusively.

    Raises:
        ConfigFileExistsError: If overwrite is false and the file exists.
        ConfigFileAccessError: If the file cannot be opened or written.
    """
    mode = "wb" if overwrite else "xb"
    try:
        with open(config_path, mode) as output_file:
            output_file.write(data)
    except FileExistsError as error:
        if overwrite:
            raise ConfigFileAccessError(
                f"Couldn't write config file at {config_path}: {error.strerror or error}.",
                config_path,
                error,
            ) from error
        raise ConfigFileExistsError(config_path) from error
    except OSError as error:
        raise ConfigFileAccessError(
            f"Couldn't write config file at {config_path}: {error.strerror or error}. "
            "Check directory permissions and retry.",
            config_path,
            error,
        ) from error
