from alabkit.mutexes import collect_numbers, main


def test_collect_numbers_has_each_once():
    assert sorted(collect_numbers(10)) == list(range(10))


def test_collect_numbers_many_threads():
    result = collect_numbers(50)
    assert len(result) == 50
    assert set(result) == set(range(50))


def test_collect_numbers_none():
    assert collect_numbers(0) == []


def test_main_pretty_prints(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "["
    assert lines[-1] == "]"
    assert sorted(lines[1:-1]) == sorted(f"    {i}," for i in range(10))