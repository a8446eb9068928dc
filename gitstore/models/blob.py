from dataclasses import dataclass

from gitstore.models.errors import parse_blob_header_error
from gitstore.models.objects import NULL_BYTE, GitObject, create_hash, make_header
from gitstore.models.result import Failure, Result, Success

__all__ = ["Blob", "encode_blob", "decode_blob"]


@dataclass(frozen=True, kw_only=True)
class Blob:
    content: bytes
    sha: str


def encode_blob(content: bytes) -> bytes:
    """Serialize raw file bytes as ``blob <len>\\0<content>``.

    ``len`` is the byte length, so multi-byte text must be encoded before it
    gets here.
    """
    return make_header(GitObject.BLOB, len(content)) + content


def decode_blob(data: bytes) -> Result[Blob]:
    """Parse serialized blob bytes, checking the header against the payload.

    The type tag and declared length are validated together; any mismatch is
    reported as a single header error.
    """
    header_end = data.find(NULL_BYTE)
    if header_end == -1:
        return Failure(parse_blob_header_error())

    parts = data[:header_end].split(b" ")
    if (
        len(parts) != 2
        or parts[0] != GitObject.BLOB.encode()
        or not parts[1].isdigit()
        or int(parts[1]) != len(data) - header_end - 1
    ):
        return Failure(parse_blob_header_error())

    return Success(Blob(content=data[header_end + 1 :], sha=create_hash(data)))
