class DepthError(Exception):
    """Base class for everything the depth core raises on purpose."""


class InvalidConfig(DepthError, ValueError):
    pass


class InvalidInput(DepthError, ValueError):
    pass


class DepthCancelled(DepthError, RuntimeError):
    pass
