class DesignPatternsException(Exception):
    """Base exception for the design pattern exercises"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidProxyState(DesignPatternsException):
    """Proxy could not be built or the invoked operation could not be resolved"""

    def __init__(self, message: str = "Invalid proxy state"):
        super().__init__(message)
