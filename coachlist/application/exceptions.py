class CoachlistException(Exception):
    pass


class StoreUnavailable(CoachlistException):
    """
    Raised by waitlist stores when they cannot be reached, or when they reject
    a read or write (permissions, quotas, and so on).
    """
