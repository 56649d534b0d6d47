import pytest

from alabkit.hello_world import main


def test_default_greeting(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "hello_world\n"


def test_workspace_greeting(capsys):
    assert main(["--workspace"]) == 0
    assert capsys.readouterr().out == "Hello, world!\n"


def test_unknown_option_rejected():
    with pytest.raises(SystemExit):
        main(["--nope"])