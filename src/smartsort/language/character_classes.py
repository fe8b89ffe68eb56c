__all__ = ["is_digit", "is_sign", "is_decimal_point"]


def is_digit(char: str) -> bool:
    """Check whether char is a plain ASCII digit

    For internal use by the lexer only.
    """
    return "0" <= char <= "9" and len(char) == 1


def is_sign(char: str) -> bool:
    """Check whether char is the minus sign that may start a number

    For internal use by the lexer only.
    """
    return char == "-"


def is_decimal_point(char: str) -> bool:
    """Check whether char is the decimal point

    For internal use by the lexer only.
    """
    return char == "."
