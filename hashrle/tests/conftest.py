from pathlib import Path
import pytest

# Plain texts that exercise every escape: long runs (case A), '#' runs
# (case B), runs after digit runs (case C), and line terminators.
#
#   def test_something(tricky_texts):
#       for t in tricky_texts: ...
#
@pytest.fixture(scope="session")
def tricky_texts() -> list[str]:
    return [
        "",
        "a",
        "aaa",
        "a" * 10,
        "###",
        "#",
        "#" * 12 + "a" * 10,
        "###" + "a" * 10,
        "111aa",
        "111222333",
        "5" * 10 + "a",
        "1" * 12 + "###",
        "1#",
        "#1",
        "x" * 123 + "\n",
        "hello, world!\n\n",
        "line one\r\nline two\r\n",
        "99 bottles\n# comment ##\n",
        "0000000000",
    ]


# Factory for .txt files under tmp_path
#
#   def test_io(make_txt):
#       p = make_txt("aaa\n")
#
@pytest.fixture
def make_txt(tmp_path):
    def _make(text: str, name: str = "sample.txt") -> Path:
        p = tmp_path / name
        p.write_bytes(text.encode("utf-8"))
        return p
    return _make
