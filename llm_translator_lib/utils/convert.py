"""
Type coercion for values read from loosely typed settings sources.

Settings arrive as strings from environment variables and as arbitrary JSON
scalars from files; the type of the default value decides what the caller
gets back.
"""

from typing import Any

from llm_translator_lib.exceptions import ConfigurationError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def coerce_setting(value: Any, default: Any, key: str = "") -> Any:
    """
    Convert ``value`` to the type of ``default``.

    Parameters
    ----------
    value : Any
        Raw value from a settings source.  ``None`` yields ``default``.
    default : Any
        Default of the setting; its type is the target type.
    key : str
        Setting name, used in error messages only.

    Returns
    -------
    Any
        ``value`` converted to ``type(default)``.

    Raises
    ------
    ConfigurationError
        If the value cannot be represented as the target type.
    """
    if value is None:
        return default

    # bool must be checked before int, bool is a subclass of int
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        _v = str(value).strip().lower()
        if _v in _TRUE_VALUES:
            return True
        if _v in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Setting {key!r}: {value!r} is not a boolean")

    if isinstance(default, int):
        try:
            if isinstance(value, float) and value.is_integer():
                return int(value)
            return int(str(value).strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"Setting {key!r}: {value!r} is not an integer"
            ) from exc

    if isinstance(default, float):
        try:
            return float(str(value).strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"Setting {key!r}: {value!r} is not a number"
            ) from exc

    if isinstance(default, str):
        return str(value)

    return value
