import pytest

from statement_splitter.store.formatting import format_bytes


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (10 * 1024, "10 KB"),
        (1024**2, "1 MB"),
        (int(2.5 * 1024**2), "2.5 MB"),
        (5 * 1024**3, "5 GB"),
        (2048 * 1024**3, "2048 GB"),
    ],
)
def test_format_bytes(size: int, expected: str) -> None:
    assert format_bytes(size) == expected
