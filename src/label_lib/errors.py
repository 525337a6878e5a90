"""
Error types shared by the decoders, grammars and dispatchers.
"""


class DecodeError(ValueError):
    """
    A label (or a substring isolated from one) could not be decoded.

    Attributes:
        label: The text that failed. For primitive decoders this is the
               captured substring; grammars re-raise with the full label.
        constraint: Which expectation was violated ("length", "numeric",
                    "range", "letter", "no-match"), or None.
    """

    def __init__(self, message: str, label: str = "", constraint: str | None = None):
        super().__init__(message)
        self.label = label
        self.constraint = constraint


class NoMatchError(DecodeError):
    """No registered grammar explains the label."""

    def __init__(self, label: str, detail: str | None = None):
        message = f"no match for {label}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, label=label, constraint="no-match")
