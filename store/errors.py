class ForgeError(Exception):
    """Base class for every failure raised by the store."""


class NotFound(ForgeError, LookupError):
    pass


class Unauthorized(ForgeError, PermissionError):
    pass


class CapacityExceeded(ForgeError, OverflowError):
    pass
