"""Errors raised at the edges of the claims pipeline."""


class UnsupportedInputError(ValueError):
    """The input cannot be turned into FNOL text (wrong type, unsupported or unreadable file)."""
