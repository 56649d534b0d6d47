import pytest

from alabkit.deadlocks import PoisonError, SharedValue, main, poisoner


def test_lock_updates_value():
    shared = SharedValue(3)
    with shared.lock() as guard:
        guard.value += 1
    assert shared.into_inner() == 4
    assert not shared.poisoned


def test_poisoner_poisons_lock():
    shared = SharedValue(3)
    with pytest.raises(RuntimeError, match="The poisoner strikes"):
        poisoner(shared)
    assert shared.poisoned
    with pytest.raises(PoisonError) as info:
        shared.lock()
    assert info.value.into_inner() == 4


def test_into_inner_on_poisoned_raises():
    shared = SharedValue(["a"])
    with pytest.raises(ValueError):
        with shared.lock():
            raise ValueError("boom")
    with pytest.raises(PoisonError) as info:
        shared.into_inner()
    assert info.value.into_inner() == ["a"]


def test_try_lock_while_held_returns_none():
    shared = SharedValue(3)
    guard = shared.lock()
    assert shared.try_lock() is None
    guard.release()
    with shared.try_lock() as second:
        assert second.value == 3


def test_try_lock_on_poisoned_raises():
    shared = SharedValue(3)
    with pytest.raises(RuntimeError):
        poisoner(shared)
    with pytest.raises(PoisonError):
        shared.try_lock()
    # lock must have been released again
    with pytest.raises(PoisonError):
        shared.lock()


def test_main_recovers_data(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Trying to return from the thread" in out
    assert "Mutex was poisoned, recovering data..." in out
    assert out.strip().endswith("data recovered = 4")