from hashrle import Run, decompose, concatenate
from hashrle.tokenize.decomposer import iter_runs


def test_empty_input_has_no_runs():
    assert decompose("") == []

def test_single_character():
    assert decompose("a") == [Run("a", 1)]

def test_maximal_runs():
    assert decompose("aaabccd") == [Run("a", 3), Run("b", 1), Run("c", 2), Run("d", 1)]

def test_trailing_line_terminator_is_its_own_run():
    assert decompose("aaa\n") == [Run("a", 3), Run("\n", 1)]
    assert decompose("a\r\n") == [Run("a", 1), Run("\r", 1), Run("\n", 1)]

def test_iter_runs_is_lazy():
    it = iter_runs("aab")
    assert next(it) == Run("a", 2)
    assert next(it) == Run("b", 1)

def test_runs_are_maximal_and_reproduce_input(tricky_texts):
    for text in tricky_texts:
        runs = decompose(text)
        assert concatenate(runs) == text
        for left, right in zip(runs, runs[1:]):
            assert left.character != right.character
