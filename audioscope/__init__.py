"""Musical and acoustic descriptors for decoded mono audio."""

__version__ = "0.1.0"
