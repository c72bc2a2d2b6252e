"""
Exceptions for the event channel.
"""


class ObserverUnavailableError(Exception):
    """Raised when an observer is not available for delivery."""

    def __init__(self, message: str = "Observer is not available"):
        self.message = message
        super().__init__(self.message)
