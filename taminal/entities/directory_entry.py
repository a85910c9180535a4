"""
Directory entry domain entity.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One entry (file or directory) found while reading a directory.
    """

    name: str
    path: str
    is_dir: bool

    @property
    def display_name(self) -> str:
        """Name as listed by ``ls``: directories carry a trailing separator."""
        return self.name + os.sep if self.is_dir else self.name

    def __str__(self) -> str:
        return self.display_name
