"""gtrans: translate text from the command line with Google Translate."""

__version__ = "0.1.0"
