import pytest

from hashrle import ConfigurationError
from hashrle.formats.text_file import validate_path, read_text_file, write_text_file


@pytest.mark.parametrize("path", ["notes.csv", "notes", "notes.txt.bak", "NOTES.TXT"])
def test_bad_extension_rejected(path):
    with pytest.raises(ConfigurationError) as ei:
        validate_path(path)
    assert ".txt" in str(ei.value)

def test_other_extension_can_be_configured():
    assert validate_path("data.rle", extension=".rle").name == "data.rle"

def test_read_write_is_verbatim(tmp_path):
    p = tmp_path / "crlf.txt"
    write_text_file(p, "a\r\nb\n")
    assert p.read_bytes() == b"a\r\nb\n"
    assert read_text_file(p) == "a\r\nb\n"

def test_write_overwrites(make_txt):
    p = make_txt("old contents\n")
    write_text_file(p, "new")
    assert read_text_file(p) == "new"

def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        read_text_file(tmp_path / "missing.txt")

def test_extension_checked_before_io(tmp_path):
    with pytest.raises(ConfigurationError):
        write_text_file(tmp_path / "out.md", "x")
    assert not (tmp_path / "out.md").exists()
