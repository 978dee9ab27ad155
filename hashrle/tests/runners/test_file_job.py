import pytest

from hashrle import ConfigurationError, MalformedEncodingError
from hashrle.runners.file_job import CodecJobOptions, run_file_job


def test_options_validation():
    with pytest.raises(ConfigurationError):
        CodecJobOptions(mode="zip", path="a.txt")  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        CodecJobOptions(mode="encode", path="a.csv")

def test_encode_then_decode_in_place(make_txt):
    p = make_txt("aaaaaaaaaa\n###\n")
    r = run_file_job(CodecJobOptions(mode="encode", path=p))
    assert p.read_text() == "#10a1\n3##1\n"
    assert r.original_length == 15
    assert r.new_length == 11

    run_file_job(CodecJobOptions(mode="decode", path=p))
    assert p.read_text() == "aaaaaaaaaa\n###\n"

def test_malformed_decode_leaves_file_untouched(make_txt):
    p = make_txt("3a!\n")
    with pytest.raises(MalformedEncodingError):
        run_file_job(CodecJobOptions(mode="decode", path=p))
    assert p.read_text() == "3a!\n"

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_file_job(CodecJobOptions(mode="encode", path=tmp_path / "nope.txt"))
