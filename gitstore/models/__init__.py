from gitstore.models.blob import Blob, decode_blob, encode_blob
from gitstore.models.errors import ErrorKind, GitError, GitObjectError
from gitstore.models.git import Git
from gitstore.models.objects import GitObject, create_hash
from gitstore.models.result import Failure, Result, Success
from gitstore.models.tree import EntryType, Tree, TreeEntry, decode_tree, encode_tree

__all__ = [
    "Blob",
    "EntryType",
    "ErrorKind",
    "Failure",
    "Git",
    "GitError",
    "GitObject",
    "GitObjectError",
    "Result",
    "Success",
    "Tree",
    "TreeEntry",
    "create_hash",
    "decode_blob",
    "decode_tree",
    "encode_blob",
    "encode_tree",
]
