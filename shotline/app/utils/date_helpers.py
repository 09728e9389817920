from datetime import date, datetime, timezone

from shotline.app.services.exception import WrongDateFormatException


def get_utc_now_datetime():
    """
    Return current UTC time as a naive datetime, the way it is stored in the
    database.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_date_from_string(date_str):
    """
    Parse a date string and returns a date object.
    """
    return datetime.strptime(date_str, "%Y-%m-%d")


def get_datetime_from_string(date_str):
    """
    Parse a datetime string and returns a datetime object.
    """
    return datetime.strptime(date_str, "%Y-%m-%dT%H:%M:%S")


def get_date_from_any_string(date_str):
    """
    Parse a string formatted either as a date or as a datetime. It raises a
    WrongDateFormatException if none of them matches.
    """
    if date_str is None or isinstance(date_str, (date, datetime)):
        return date_str
    try:
        return get_datetime_from_string(date_str).date()
    except ValueError:
        try:
            return get_date_from_string(date_str).date()
        except ValueError:
            raise WrongDateFormatException()
