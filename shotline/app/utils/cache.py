from flask_caching import Cache

cache = Cache()


def memoize_function(timeout=120):
    """
    Memoize decorated function results for given amount of seconds.
    """
    return cache.memoize(timeout=timeout)


def clear():
    cache.clear()
