"""Exceptions raised by the console layer."""


class InputExhaustedError(EOFError):
    """Raised when input ends before a value that has no fallback could be read."""

    def __init__(self, message: str, prompt: str | None = None) -> None:
        super().__init__(message)
        self.prompt = prompt or ""
