"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from no_return_assign.domain.constants import TREE_FILE_GLOB
from no_return_assign.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def glob_tree_files(self, path: str) -> list[str]:
        """Get all ESTree JSON files in path (recursive if directory), sorted."""
        path_obj = Path(path)
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.glob(TREE_FILE_GLOB) if p.is_file())
        return [str(path_obj)]
