from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = [
    "ErrorKind",
    "GitError",
    "GitObjectError",
    "invalid_hash",
    "not_found",
    "decompression_failure",
    "parse_blob_header_error",
    "tree_parse_error",
    "write_failure",
]


class ErrorKind(StrEnum):
    INVALID_HASH = auto()
    NOT_FOUND = auto()
    DECOMPRESSION_FAILURE = auto()
    BLOB_DECODE_FAILURE = auto()
    TREE_DECODE_FAILURE = auto()
    WRITE_FAILURE = auto()


@dataclass(frozen=True, kw_only=True)
class GitError:
    kind: ErrorKind
    message: str

    def __str__(self):
        return self.message


class GitObjectError(Exception):
    """Raised by ``Failure.unwrap`` so callers can opt into exceptions."""

    def __init__(self, error: GitError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


def invalid_hash(hash_: str) -> GitError:
    return GitError(
        kind=ErrorKind.INVALID_HASH,
        message=f"Not a valid object name {hash_!r}: expected 40 hex characters",
    )


def not_found(path) -> GitError:
    return GitError(kind=ErrorKind.NOT_FOUND, message=f"Not found: {path}")


def decompression_failure(reason: str) -> GitError:
    return GitError(
        kind=ErrorKind.DECOMPRESSION_FAILURE,
        message=f"Failed to decompress: {reason}",
    )


def parse_blob_header_error() -> GitError:
    return GitError(
        kind=ErrorKind.BLOB_DECODE_FAILURE,
        message="Failed to parse blob header or length mismatch.",
    )


def tree_parse_error(reason: str) -> GitError:
    return GitError(
        kind=ErrorKind.TREE_DECODE_FAILURE,
        message=f"Failed to parse tree: {reason}",
    )


def write_failure(reason: str) -> GitError:
    return GitError(
        kind=ErrorKind.WRITE_FAILURE,
        message=f"Error while writing object: {reason}",
    )
