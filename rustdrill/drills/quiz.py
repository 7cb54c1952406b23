"""Quiz answers covering variables, functions, strings, tests and macros."""


def calculate_apple_price(count: int) -> int:
    """Apples cost 2 each, or 1 each for orders of 40 or more."""
    if count < 40:
        return count * 2
    return count


def string_slice(arg: str) -> None:
    """Print a borrowed string."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned string."""
    print(arg)


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(value: object) -> str:
    """Greet the given value."""
    return f"Hello {value}"