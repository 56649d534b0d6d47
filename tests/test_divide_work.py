import pytest

from alabkit.divide_work import chunked, main, threaded_sum


def test_chunked_splits_with_short_tail():
    assert list(chunked([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]


def test_chunked_preserves_all_items():
    values = list(range(37))
    chunks = list(chunked(values, 8))
    assert [item for chunk in chunks for item in chunk] == values
    assert all(len(chunk) <= 8 for chunk in chunks)


def test_chunked_rejects_zero():
    with pytest.raises(ValueError):
        list(chunked([1, 2], 0))


def test_threaded_sum_of_range():
    assert threaded_sum(range(5000)) == 12497500


def test_threaded_sum_matches_builtin():
    values = [7, -3, 12, 0, 5, 99, 41]
    assert threaded_sum(values, 3) == sum(values)


def test_threaded_sum_empty():
    assert threaded_sum([]) == 0


def test_main_prints_sum(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Sum is 12497500\n"