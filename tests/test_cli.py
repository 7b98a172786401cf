import pytest

from dsbasics.cli import greeting, main


def test_greeting_starts_with_hello_world():
    assert greeting().splitlines()[0] == "Hello, World!"
    assert len(greeting().splitlines()) == 2


def test_main_prints_greeting(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == greeting() + "\n"


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2