"""
Tests for the fileio-sql command-line runner.
"""

import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from fileio_app.__main__ import format_value, main


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestMain:

    def test_runs_statements_in_order(self, temp_dir, capsys):
        path = temp_dir / "sub" / "out.txt"
        code = main([
            f"select writefile('{path}', 'hello')",
            f"select readfile('{path}')",
            "select lsmode(33188)",
        ])

        out = capsys.readouterr().out.splitlines()
        assert code == 0
        assert out == ["5", "[5 bytes]", "-rw-r--r--"]
        assert path.read_text() == "hello"

    def test_raw_blobs(self, temp_dir, capsys):
        path = temp_dir / "raw.txt"
        path.write_text("contents")
        main(["--raw", f"select readfile('{path}')"])
        assert capsys.readouterr().out.strip() == "contents"

    def test_error_exit_code(self, temp_dir, capsys):
        (temp_dir / "file").write_text("x")
        code = main([f"select mkdir('{temp_dir / 'file'}')"])

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_persists_to_db(self, temp_dir, capsys):
        db = temp_dir / "files.db"
        data = temp_dir / "data.bin"
        data.write_bytes(b"abc")
        main(["--db", str(db),
              "create table blobs(content blob)",
              f"insert into blobs select readfile('{data}')",
              "select length(content) from blobs"])

        assert capsys.readouterr().out.strip() == "3"
        assert db.exists()


class TestFormatValue:

    def test_values(self):
        assert format_value(None) == "NULL"
        assert format_value(b"\x00\x01") == "[2 bytes]"
        assert format_value(12) == "12"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
