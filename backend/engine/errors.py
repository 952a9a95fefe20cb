"""
Engine errors raised to the console and API layers.
"""


class InvalidPlay(ValueError):
    """Raised when input text is not one of the recognized plays."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f'Invalid selection {text!r}. Expected one of: "rock", "paper", or "scissors".'
        )


class InvalidConfiguration(ValueError):
    """Raised when a series is configured with a best_of that is not a positive odd integer."""
