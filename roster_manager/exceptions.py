# exceptions.py
class RosterError(Exception):
    """Base class for roster validation errors."""


class InvalidArgument(RosterError, ValueError):
    """A field constraint was violated on construction or mutation."""


class InvalidRole(RosterError, ValueError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"Unknown role: {text!r}")


class CancelAction(Exception):
    """User typed 'cancel' at a prompt."""
