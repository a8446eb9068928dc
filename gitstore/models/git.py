import logging
import pathlib
import re
import zlib
from os import PathLike

from gitstore.models.blob import Blob, decode_blob, encode_blob
from gitstore.models.errors import (
    decompression_failure,
    invalid_hash,
    not_found,
    write_failure,
)
from gitstore.models.objects import SHA_LENGTH, GitObject, create_hash
from gitstore.models.result import Failure, Result, Success, try_execute
from gitstore.models.tree import Tree, TreeEntry, decode_tree, encode_tree

__all__ = ["Git"]

logger = logging.getLogger(__name__)

SHA_PATTERN = re.compile(rf"[0-9a-fA-F]{{{SHA_LENGTH}}}")
EXECUTABLE_MODE = "100755"


class Git:
    """Loose object database rooted at ``<git_folder>/objects``.

    Objects live at ``objects/<sha[:2]>/<sha[2:]>`` as zlib-compressed
    ``<type> <len>\\0<payload>`` bytes. Nothing is cached between calls.
    """

    ignore_prefix = ".git"

    def __init__(self, git_folder: PathLike = ".git"):
        self.git_folder = pathlib.Path(git_folder)
        self.objects_folder = self.git_folder / "objects"

    def init_repo(self):
        for _dir in (self.objects_folder, self.git_folder / "refs"):
            _dir.mkdir(exist_ok=True, parents=True)
        head = self.git_folder / "HEAD"
        if not head.exists():
            with head.open("w") as f:
                f.write("ref: refs/heads/main\n")
        logger.debug("Initialized repository in %s", self.git_folder)

    def object_path(self, hash_: str) -> pathlib.Path:
        return self.objects_folder / hash_[:2] / hash_[2:]

    # Read path

    def get_blob(self, hash_: str) -> Result[Blob]:
        return (
            self._read_object(hash_)
            .and_then(decode_blob)
            .on_success(lambda blob: logger.debug("Blob %s parsed and validated", blob.sha))
            .on_failure(lambda error: logger.error("Error reading blob %s: %s", hash_, error))
        )

    def get_tree(self, hash_: str) -> Result[Tree]:
        return (
            self._read_object(hash_)
            .and_then(decode_tree)
            .on_success(
                lambda tree: logger.debug(
                    "Tree %s parsed with %d entries", tree.sha, len(tree.entries)
                )
            )
            .on_failure(lambda error: logger.error("Error reading tree %s: %s", hash_, error))
        )

    def _read_object(self, hash_: str) -> Result[bytes]:
        return (
            self._resolve_path(hash_)
            .on_success(lambda path: logger.debug("Path resolved: %s", path))
            .and_then(self._decompress_file)
        )

    def _resolve_path(self, hash_: str) -> Result[pathlib.Path]:
        if not SHA_PATTERN.fullmatch(hash_):
            return Failure(invalid_hash(hash_))
        path = self.object_path(hash_.lower())
        if not path.is_file():
            return Failure(not_found(path))
        return Success(path)

    def _decompress_file(self, path: pathlib.Path) -> Result[bytes]:
        def read():
            with path.open("rb") as f:
                data = self.decompress(f.read())
            logger.debug("Decompressed %s (%d bytes)", path, len(data))
            return data

        return try_execute(
            read,
            lambda exc: decompression_failure(str(exc)),
            exceptions=(OSError, zlib.error),
        )

    # Write path

    @staticmethod
    def compress(data: bytes, *, compressor=zlib.compress) -> bytes:
        return compressor(data)

    @staticmethod
    def decompress(data: bytes, *, decompressor=zlib.decompress) -> bytes:
        return decompressor(data)

    def store(self, data: bytes) -> Result[str]:
        """Persist already-serialized object bytes and return their hash.

        Storing the same bytes again rewrites the same file with the same
        content.
        """
        hash_value = create_hash(data)
        logger.debug("Generated sha: %s", hash_value)

        def save_file():
            path = self.object_path(hash_value)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as f:
                f.write(self.compress(data))
            logger.debug("Object written to %s", path)
            return hash_value

        return try_execute(save_file, lambda exc: write_failure(str(exc))).on_failure(
            lambda error: logger.error("Error writing object %s: %s", hash_value, error)
        )

    def generate_blob(self, path: PathLike) -> Result[Blob]:
        """Build a blob from a file on disk without writing it to the store."""
        path = pathlib.Path(path)
        if not path.is_file():
            return Failure(not_found(path))
        return (
            try_execute(path.read_bytes, lambda exc: not_found(f"{path} ({exc})"))
            .map(encode_blob)
            .and_then(decode_blob)
        )

    def hash_object(self, path: PathLike, *, write: bool = False) -> Result[str]:
        result = self.generate_blob(path)
        if write:
            result = result.and_then(lambda blob: self.store(encode_blob(blob.content)))
        else:
            result = result.map(lambda blob: blob.sha)
        return result

    def write_tree(self, working_directory: PathLike = ".") -> Result[str]:
        """Store ``working_directory`` recursively and return the root tree hash."""
        entries = []
        dir_path = pathlib.Path(working_directory)
        git_folder = self.git_folder.resolve()

        for entry in sorted(dir_path.iterdir()):
            if entry.name.startswith(self.ignore_prefix) or entry.resolve() == git_folder:
                continue

            if entry.is_file():
                mode = EXECUTABLE_MODE if entry.stat().st_mode & 0o111 else GitObject.BLOB.mode
                result = self.hash_object(entry, write=True)
            elif entry.is_dir():
                mode = GitObject.TREE.mode
                result = self.write_tree(entry)
            else:
                continue

            if not result.is_success:
                return result
            entries.append(TreeEntry(path=entry.name, mode=mode, sha=result.value))

        return self.store(encode_tree(entries))
