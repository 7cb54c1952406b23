import pytest

from rustdrill.drills.macros import favorite_snacks, make_sausage, my_macro


def test_my_macro_without_arguments(capsys):
    assert my_macro() == "Check out my macro!"
    assert capsys.readouterr().out == "Check out my macro!\n"


def test_my_macro_with_argument():
    line = my_macro(7777)
    assert line.startswith("Look at this other macro: ")
    assert line.endswith("7777")


def test_my_macro_too_many_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)


def test_make_sausage(capsys):
    assert make_sausage() == "sausage!"
    assert capsys.readouterr().out == "sausage!\n"


def test_favorite_snacks(capsys):
    line = favorite_snacks()
    assert line.startswith("favorite snacks: ")
    assert "Pear" in line and "Cucumber" in line
    assert capsys.readouterr().out == line + "\n"