instances = {}

def singleton(cls):
    """Return the same instance of `cls` for every call. Constructor args only count on the first call."""
    def get_instance(*args, **kwargs):
        if cls not in instances:
            instances[cls] = cls(*args, **kwargs)
        return instances[cls]

    return get_instance
