import math

from matplotlib.colors import is_color_like


def _check_float(value, property_name: str) -> float:
    """Transform a value to a float.

    Strings and booleans are not converted.

    Raises ValueError if the value is not a number convertible to float.
    """
    if isinstance(value, (bool, str)):
        value_type = type(value).__name__
        raise ValueError(
            f"{property_name} must be a number. Received {value!r} of type {value_type}"
        )
    try:
        return float(value)
    except (ValueError, TypeError) as e:
        value_type = type(value).__name__
        raise ValueError(
            f"{property_name} must be a float or convertible to float. Received {value} of type {value_type}"
        ) from e


def _check_positive_non_zero_float(value, property_name: str) -> float:
    """Transform a value to a float and check it is finite and positive.

    Raises ValueError if the value is not a float or convertible to float,
    or if the value is not finite or not positive.
    """
    value = _check_float(value, property_name)

    if not math.isfinite(value):
        raise ValueError(f"{property_name} must be finite. Received {value}")
    if not value > 0:
        raise ValueError(f"{property_name} must be greater than zero")

    return value


def _check_int_in_range(value, property_name: str, lower: int, upper: int) -> int:
    """Transform a value to an int and check lower <= value <= upper.

    Raises ValueError if the value is not integral or is out of range.
    """
    value = _check_float(value, property_name)

    if not value.is_integer():
        raise ValueError(f"{property_name} must be an integer. Received {value}")
    value = int(value)
    if value < lower or value > upper:
        raise ValueError(
            f"{property_name} must be between {lower} and {upper}. Received {value}"
        )

    return value


def _check_color(value, property_name: str):
    """Check that a value is a matplotlib color specification.

    Named colors, single letter codes, hex strings, and RGB or RGBA
    sequences with components between 0 and 1 are accepted. Sequences are
    returned as tuples.

    Raises ValueError if the value is not a valid color.
    """
    if not isinstance(value, str) and hasattr(value, "__iter__"):
        value = tuple(value)
    if not is_color_like(value):
        raise ValueError(
            f"{property_name} must be a color name, hex string, or RGB tuple with values between 0 and 1. Received {value!r}"
        )

    return value


def _check_str(value, property_name: str) -> str:
    """Check that a value is a string.

    Raises ValueError if the value is not a string.
    """
    if not isinstance(value, str):
        value_type = type(value).__name__
        raise ValueError(
            f"{property_name} must be a string. Received {value!r} of type {value_type}"
        )

    return value


def _check_str_choice(value, property_name: str, choices) -> str:
    """Check that a value is one of a set of case-insensitive string choices.

    Returns the upper case value.

    Raises ValueError if the value is not a string or not one of the choices.
    """
    value = _check_str(value, property_name).upper()

    if value not in choices:
        raise ValueError(
            f"{property_name} must be one of {', '.join(choices)}. Received {value!r}"
        )

    return value
