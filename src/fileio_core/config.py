"""
Configuration for fileio.

Values normally come from code; FileIOConfig.from_env() layers FILEIO_*
environment variables on top of the defaults.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class FileIOConfig:
    """Settings shared by the fileio services and SQL functions."""
    default_file_perm: int = 0o666       # writefile() without a perm argument
    default_dir_perm: int = 0o777        # mkdir() without a perm argument
    umask: Optional[int] = None          # None = use the process umask
    max_blob_size: Optional[int] = None  # None = ask the connection per call
    symlinks: Optional[bool] = None      # None = platform default

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 base: Optional["FileIOConfig"] = None) -> "FileIOConfig":
        """
        Build a config from FILEIO_* environment variables.

        FILEIO_UMASK is read as octal, FILEIO_MAX_BLOB_SIZE as decimal and
        FILEIO_SYMLINKS as a boolean. Unset variables keep the base values.
        """
        environ = os.environ if environ is None else environ
        config = base or cls()
        overrides = {}

        if environ.get("FILEIO_UMASK"):
            overrides["umask"] = parse_octal(environ["FILEIO_UMASK"])

        if environ.get("FILEIO_MAX_BLOB_SIZE"):
            try:
                overrides["max_blob_size"] = int(environ["FILEIO_MAX_BLOB_SIZE"])
            except ValueError:
                raise ValueError(
                    f"FILEIO_MAX_BLOB_SIZE must be an integer, got {environ['FILEIO_MAX_BLOB_SIZE']!r}"
                )

        if environ.get("FILEIO_SYMLINKS"):
            overrides["symlinks"] = parse_bool(environ["FILEIO_SYMLINKS"])

        return replace(config, **overrides)


def parse_octal(text: str) -> int:
    """Parse a permission value such as '022', '0o022' or '0022'."""
    value = text.strip().lower()
    if value.startswith("0o"):
        value = value[2:]
    try:
        return int(value, 8)
    except ValueError:
        raise ValueError(f"Not an octal permission value: {text!r}")


def parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean value: {text!r}")
