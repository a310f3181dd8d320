"""Exceptions raised by the qualifier pipeline."""


class ConfigurationError(RuntimeError):
    """An input the whole run depends on is missing or unusable."""


class WorkbookReadError(ValueError):
    """A workbook could not be opened or read."""


class MalformedFilenameError(ValueError):
    """A meet filename does not carry course, sex and age-range tokens."""
