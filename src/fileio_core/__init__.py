"""
fileio core - filesystem functions for SQLite.

Exposes readfile, writefile, mkdir, symlink and lsmode as scalar SQL
functions on a sqlite3 connection. The services are headless and can also
be called directly with any FSPort implementation.

    import sqlite3
    from fileio_core import register_functions

    conn = sqlite3.connect(":memory:")
    register_functions(conn)
    conn.execute("select writefile('out/hello.txt', 'hello')")
"""

__version__ = "0.1.0"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "register_functions":
        from .adapters.sqlite_functions import register_functions
        return register_functions
    elif name == "create_service":
        from .adapters.fs_factory import create_service
        return create_service
    elif name == "FileIOService":
        from .services.fileio_service import FileIOService
        return FileIOService
    elif name == "FileIOConfig":
        from .config import FileIOConfig
        return FileIOConfig
    elif name == "LocalFS":
        from .adapters.local_fs import LocalFS
        return LocalFS
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "register_functions",
    "create_service",
    "FileIOService",
    "FileIOConfig",
    "LocalFS",
]
