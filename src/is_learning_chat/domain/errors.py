"""Domain errors."""


class GenerationError(Exception):
    """The model provider did not produce a usable reply."""
