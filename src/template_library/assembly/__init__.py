"""Destination tree assembly."""

from template_library.assembly.assembler import Assembler, destination_path
from template_library.assembly.filesystem import FileTree

__all__ = ["Assembler", "FileTree", "destination_path"]
