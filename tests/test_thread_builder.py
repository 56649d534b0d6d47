import threading

from alabkit.thread_builder import main, my_thread, spawn_named


def test_spawn_named_uses_name():
    seen = []
    thread = spawn_named("worker", lambda: seen.append(threading.current_thread().name))
    thread.join()
    assert seen == ["worker"]
    assert thread.name == "worker"


def test_my_thread_in_named_thread(capsys):
    spawn_named("Named Thread", my_thread).join()
    assert capsys.readouterr().out == "Hello from a thread named Named Thread\n"


def test_my_thread_returns_message(capsys):
    message = my_thread()
    assert message == f"Hello from a thread named {threading.current_thread().name}"
    assert capsys.readouterr().out == message + "\n"


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello from a thread named Named Thread\n"