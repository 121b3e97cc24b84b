"""Template library assembler: build a version-consistent tree from several git repositories."""

__version__ = "0.1.0"
