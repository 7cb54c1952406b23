"""Answers for the functions, if and strings drills."""


def call_me(num: int) -> None:
    """Ring num times."""
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def is_even(num: int) -> bool:
    """Whether num is even."""
    return num % 2 == 0


def square(num: int) -> int:
    """Square a number."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether attempt is one of the known colour words."""
    return attempt in ("green", "blue", "red")