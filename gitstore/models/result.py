"""Success/failure values threaded through the object store pipelines.

Every step returns a ``Result``; ``and_then`` chains the next step only on
success, so the first failure short-circuits the rest of the pipeline.
"""
from dataclasses import dataclass
from typing import Callable, Generic, TypeAlias, TypeVar

from gitstore.models.errors import GitError, GitObjectError

__all__ = ["Success", "Failure", "Result", "try_execute"]

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)

    def on_success(self, fn: Callable[[T], object]) -> "Success[T]":
        fn(self.value)
        return self

    def on_failure(self, fn: Callable[[GitError], object]) -> "Success[T]":
        return self

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: GitError

    @property
    def is_success(self) -> bool:
        return False

    def map(self, fn) -> "Failure":
        return self

    def and_then(self, fn) -> "Failure":
        return self

    def on_success(self, fn) -> "Failure":
        return self

    def on_failure(self, fn: Callable[[GitError], object]) -> "Failure":
        fn(self.error)
        return self

    def unwrap(self):
        raise GitObjectError(self.error)


Result: TypeAlias = Success[T] | Failure


def try_execute(
    fn: Callable[[], T],
    on_error: Callable[[Exception], GitError],
    *,
    exceptions: tuple[type[Exception], ...] = (OSError,),
) -> Result[T]:
    try:
        return Success(fn())
    except exceptions as exc:
        return Failure(on_error(exc))
