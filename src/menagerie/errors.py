"""
Menagerie Errors

Exception hierarchy for the package's ambient layers.
"""


class MenagerieError(Exception):
    """Base exception for menagerie"""
    pass


class ConfigurationError(MenagerieError, ValueError):
    """Raised when configuration values or files are invalid"""
    pass
