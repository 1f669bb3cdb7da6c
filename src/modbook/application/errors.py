"""Errors raised by parsers, commands and the model."""


class ParseError(Exception):
    """Command text does not match the expected format. Raised before any model change."""


class CommandError(Exception):
    """A parsed command cannot be carried out against the current model."""


class PersonNotFoundError(LookupError):
    """The person is not in the address book."""


class DuplicatePersonError(ValueError):
    """The person is already in the address book."""
