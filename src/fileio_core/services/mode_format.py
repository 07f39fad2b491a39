"""
Mode formatter - renders st_mode values the way `ls -l` does.
"""

from ..domain.enums import FileType

# (read, write, execute) bit masks within one triplet
_TRIPLET = ((0x4, "r"), (0x2, "w"), (0x1, "x"))


def format_mode(mode: int) -> str:
    """
    Convert a numeric file mode into a 10-character permission string.

    The first character is the file type (`l`, `-`, `d` or `?`), followed by
    the owner, group and other `rwx` triplets taken from bits 8..0.

    >>> format_mode(0o100754)
    '-rwxr-xr--'
    >>> format_mode(0o40777)
    'drwxrwxrwx'
    """
    chars = [FileType.from_mode(mode).symbol]
    for shift in (6, 3, 0):
        bits = mode >> shift
        chars.extend(symbol if bits & mask else "-" for mask, symbol in _TRIPLET)
    return "".join(chars)
