"""
Number display helpers shared by the calculator and converter
"""


def format_number(value: float, precision: int) -> str:
    """
    Render a result for display and clipboard copy

    Integral values print without a decimal part. Fractional values are
    fixed to `precision` places with trailing zeros and point stripped.

    Args:
        value: Finite float to render
        precision: Decimal places kept for fractional values

    Returns:
        Display string, e.g. "14", "0.333333", "2.5"
    """
    if value.is_integer():
        text = str(int(value))
    else:
        text = f"{value:.{precision}f}".rstrip("0").rstrip(".")

    if text == "-0":
        return "0"
    return text


def format_exact(value: float) -> str:
    """Render a typed-in value as written: integral values without a decimal part, others in full"""
    if value.is_integer():
        return str(int(value))
    return repr(value)
