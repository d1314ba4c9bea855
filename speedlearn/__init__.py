"""speedlearn: RSVP speed reading engine and reading performance scoring."""

__version__ = "0.1.0"
