import pytest

from alabkit.divide_work import threaded_sum
from alabkit.scope_threads import main, scoped_sum


def test_scoped_sum_of_range():
    assert scoped_sum(list(range(5000))) == 12497500


def test_scoped_sum_agrees_with_threaded_sum():
    values = [3, 14, 15, 92, 65, 35, 89, 79, 32, 38]
    assert scoped_sum(values, 4) == threaded_sum(values, 4) == sum(values)


def test_scoped_sum_empty():
    assert scoped_sum([]) == 0


def test_scoped_sum_rejects_zero_chunk():
    with pytest.raises(ValueError):
        scoped_sum([1, 2, 3], 0)


def test_main_prints_sum(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Sum: 12497500\n"