import binascii
import os
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Iterable, Iterator

from gitstore.models.errors import tree_parse_error
from gitstore.models.objects import (
    NULL_BYTE,
    RAW_SHA_LENGTH,
    GitObject,
    create_hash,
    make_header,
)
from gitstore.models.result import Failure, Result, Success

__all__ = ["EntryType", "TreeEntry", "Tree", "entry_type", "encode_tree", "decode_tree"]

SPACE = b" "
FILE_MODE_PREFIX = "100"


class EntryType(StrEnum):
    BLOB = auto()
    TREE = auto()
    UNKNOWN = auto()


def entry_type(mode: str) -> EntryType:
    if mode.startswith(FILE_MODE_PREFIX):
        return EntryType.BLOB
    if mode == GitObject.TREE.mode:
        return EntryType.TREE
    return EntryType.UNKNOWN


@dataclass(frozen=True, kw_only=True)
class TreeEntry:
    path: str
    mode: str
    sha: str
    type: EntryType | None = None

    def __post_init__(self):
        if self.type is None:
            object.__setattr__(self, "type", entry_type(self.mode))

    @property
    def raw_hash(self) -> bytes:
        raw = binascii.unhexlify(self.sha)
        if len(raw) != RAW_SHA_LENGTH:
            raise ValueError(
                f"Invalid entry hash {self.sha!r}: expected {RAW_SHA_LENGTH * 2} hex characters"
            )
        return raw


@dataclass(frozen=True, kw_only=True)
class Tree:
    entries: list[TreeEntry] = field(default_factory=list)
    sha: str


def encode_tree(entries: Iterable[TreeEntry]) -> bytes:
    """Serialize entries in the given order, without sorting or deduplicating.

    Paths are written with the filesystem encoding, so names that are not
    valid UTF-8 keep their original bytes.
    """
    payload = b"".join(
        f"{entry.mode} ".encode() + os.fsencode(entry.path) + NULL_BYTE + entry.raw_hash
        for entry in entries
    )
    return make_header(GitObject.TREE, len(payload)) + payload


def _iter_entries(data: bytes, index: int) -> Iterator[TreeEntry]:
    while index < len(data):
        space_index = data.find(SPACE, index)
        if space_index == -1:
            raise ValueError(f"missing space after mode at offset {index}")
        null_index = data.find(NULL_BYTE, space_index)
        if null_index == -1:
            raise ValueError(f"missing null byte after path at offset {space_index}")
        hash_end = null_index + 1 + RAW_SHA_LENGTH
        if hash_end > len(data):
            raise ValueError(
                f"truncated hash at offset {null_index + 1}: "
                f"expected {RAW_SHA_LENGTH} bytes, got {len(data) - null_index - 1}"
            )

        mode = data[index:space_index].decode()
        yield TreeEntry(
            path=os.fsdecode(data[space_index + 1 : null_index]),
            mode=mode,
            sha=binascii.hexlify(data[null_index + 1 : hash_end]).decode(),
        )
        index = hash_end


def decode_tree(data: bytes) -> Result[Tree]:
    """Parse serialized tree bytes into a ``Tree``.

    Unlike blobs, the header's type and length are not cross-checked; only the
    terminator has to be present. A single malformed entry fails the whole
    decode.
    """
    header_end = data.find(NULL_BYTE)
    if header_end == -1:
        return Failure(tree_parse_error("missing header terminator"))

    try:
        entries = list(_iter_entries(data, header_end + 1))
    except ValueError as exc:
        return Failure(tree_parse_error(str(exc)))
    return Success(Tree(entries=entries, sha=create_hash(data)))
