"""Exception types raised by glance."""


class GlanceError(Exception):
    """Base class for errors that end an interactive session."""


class TerminalError(GlanceError):
    """The terminal could not be put into interactive mode."""


class DocumentError(GlanceError):
    """Content could not be loaded for viewing."""
