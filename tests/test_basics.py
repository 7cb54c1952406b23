from rustdrill.drills.basics import (
    bigger,
    call_me,
    current_favorite_color,
    fizz_if_foo,
    is_a_color_word,
    is_even,
    sale_price,
    square,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert fizz_if_foo("fizz") == "foo"


def test_bar_for_fuzz():
    assert fizz_if_foo("fuzz") == "bar"


def test_default_to_baz():
    assert fizz_if_foo("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(2)


def test_is_false_when_odd():
    assert not is_even(3)


def test_call_me_rings(capsys):
    call_me(3)
    assert capsys.readouterr().out.splitlines() == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]


def test_call_me_zero(capsys):
    call_me(0)
    assert capsys.readouterr().out == ""


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_favorite_color():
    assert current_favorite_color() == "blue"
    assert is_a_color_word(current_favorite_color())


def test_color_words():
    assert is_a_color_word("green")
    assert is_a_color_word("red")
    assert not is_a_color_word("purple")