import math


def format_price_with_dot(value: float | int | str) -> str:
    """
    Format a price for display: whole units, thousands grouped with dots.

    The fractional part is truncated (not rounded), matching how prices are
    shown everywhere in the storefront. Calculations keep full precision;
    only presentation goes through this function.

    Examples:
        >>> format_price_with_dot(25000)
        '25.000'
        >>> format_price_with_dot(1999.99)
        '1.999'
        >>> format_price_with_dot("800")
        '800'
    """
    whole_units = math.floor(float(value))
    return f"{whole_units:,}".replace(",", ".")
