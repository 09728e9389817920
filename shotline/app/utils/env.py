import os


def strtobool(val):
    """
    Convert a string (val) to a boolean value.
    If val is already a boolean return val.
    Else raise ValueError.
    """
    if isinstance(val, bool):
        return val
    if isinstance(val, int):
        return bool(val)
    elif val.lower() in ("y", "yes", "t", "true", "on", "1"):
        return True
    elif val.lower() in ("n", "no", "f", "false", "off", "0"):
        return False
    else:
        raise ValueError


def envtobool(key, default=False):
    """
    Convert an environment variable to a boolean value.
    If environment variable can't be converted raise ValueError.
    """
    try:
        return strtobool(os.getenv(key, default))
    except ValueError:
        raise ValueError(
            f"Environment variable {key} cannot be converted to a boolean value."
        )


def envtoint(key, default=0):
    """
    Convert an environment variable to an integer value.
    """
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(
            f"Environment variable {key} cannot be converted to an integer."
        )
