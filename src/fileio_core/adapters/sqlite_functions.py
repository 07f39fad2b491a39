"""
SQLite Function Adapter.

Registers the fileio operations as scalar SQL functions on a sqlite3
connection. A failed OperationResult is raised as FileIOError from inside
the callback, which sqlite3 reports to the running statement as
sqlite3.OperationalError.
"""

import logging
import sqlite3
from typing import Callable, Dict, Optional, Tuple

from ..config import FileIOConfig
from ..domain.models import OperationResult
from ..services.fileio_service import FileIOService
from .fs_factory import create_service

logger = logging.getLogger(__name__)

# name -> (number of SQL arguments, deterministic); -1 = variadic
FUNCTIONS: Dict[str, Tuple[int, bool]] = {
    "lsmode": (1, True),
    "mkdir": (-1, False),
    "readfile": (1, False),
    "symlink": (2, False),
    "writefile": (-1, False),
}


class SqliteFunctions:
    """Binds a FileIOService to one sqlite3 connection."""

    def __init__(self, conn: sqlite3.Connection, service: FileIOService):
        self.conn = conn
        self.service = service

    def max_blob_size(self) -> int:
        """The connection's current SQLITE_LIMIT_LENGTH."""
        return self.conn.getlimit(sqlite3.SQLITE_LIMIT_LENGTH)

    def _unwrap(self, name: str, result: OperationResult):
        if not result.success:
            logger.warning("%s(): %s", name, result.error)
        return result.unwrap()

    def readfile(self, *args):
        return self._unwrap("readfile", self.service.readfile(*args, max_size=self.max_blob_size()))

    def writefile(self, *args):
        return self._unwrap("writefile", self.service.writefile(*args))

    def mkdir(self, *args):
        return self._unwrap("mkdir", self.service.mkdir(*args))

    def symlink(self, *args):
        return self._unwrap("symlink", self.service.symlink(*args))

    def lsmode(self, *args):
        return self._unwrap("lsmode", self.service.lsmode(*args))

    def register(self):
        """Create every fileio function on the connection."""
        for name, (narg, deterministic) in FUNCTIONS.items():
            func: Callable = getattr(self, name)
            self.conn.create_function(name, narg, func, deterministic=deterministic)
        logger.debug("Registered fileio functions: %s", ", ".join(FUNCTIONS))


def register_functions(conn: sqlite3.Connection,
                       service: Optional[FileIOService] = None,
                       config: Optional[FileIOConfig] = None) -> SqliteFunctions:
    """
    Install readfile/writefile/mkdir/symlink/lsmode on a connection.

    Args:
        conn: Connection to register on
        service: Service to call; built from config over the local
                 filesystem if omitted
        config: Used only when service is omitted

    Returns:
        The SqliteFunctions binding
    """
    functions = SqliteFunctions(conn, service or create_service(config))
    functions.register()
    return functions
