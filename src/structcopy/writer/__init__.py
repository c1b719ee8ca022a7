"""Copy engine and module-level convenience functions."""

from structcopy.writer.writer import ObjectWriter, clone, copy_to, get_writer

__all__ = [
    "ObjectWriter",
    "get_writer",
    "copy_to",
    "clone",
]
