class MathFormatError(Exception):
    """Base class for failures outside the pure rewriting core."""
    pass


class ExportError(MathFormatError):
    """Writing the Word document failed."""
    pass


class ClipboardError(MathFormatError):
    """No usable system clipboard."""
    pass
