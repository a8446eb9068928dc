import hashlib
from enum import StrEnum, auto

__all__ = ["GitObject", "NULL_BYTE", "SHA_LENGTH", "RAW_SHA_LENGTH", "create_hash", "make_header"]

NULL_BYTE = b"\x00"
SHA_LENGTH = 40
RAW_SHA_LENGTH = 20


class GitObject(StrEnum):
    BLOB = auto()
    TREE = auto()

    @property
    def mode(self):
        match self:
            case GitObject.BLOB:
                return "100644"
            case GitObject.TREE:
                return "040000"
            case _:
                raise ValueError(f"Invalid GitObject: {self}")


def create_hash(data: str | bytes, *, hasher=hashlib.sha1) -> str:
    if isinstance(data, str):
        data = data.encode()
    return hasher(data).hexdigest()


def make_header(git_object: GitObject, payload_length: int) -> bytes:
    return f"{git_object} {payload_length}".encode() + NULL_BYTE
