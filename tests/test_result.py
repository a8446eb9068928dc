import pytest

from gitstore.models import ErrorKind, Failure, GitObjectError, Success
from gitstore.models.errors import not_found
from gitstore.models.result import try_execute


class TestResult:
    def test_map_and_then_on_success(self):
        result = Success(2).map(lambda x: x * 3).and_then(lambda x: Success(x + 1))
        assert result == Success(7)

    def test_failure_short_circuits(self):
        calls = []
        failure = Failure(not_found("somewhere"))
        result = (
            failure.map(calls.append)
            .and_then(calls.append)
            .on_success(calls.append)
        )
        assert result is failure
        assert calls == []

    def test_and_then_can_fail(self):
        error = not_found("x")
        result = Success(1).and_then(lambda _: Failure(error)).map(lambda x: x + 1)
        assert result == Failure(error)

    def test_taps(self):
        seen = []
        Success("ok").on_success(seen.append).on_failure(seen.append)
        Failure(not_found("x")).on_success(seen.append).on_failure(
            lambda error: seen.append(error.kind)
        )
        assert seen == ["ok", ErrorKind.NOT_FOUND]

    def test_unwrap(self):
        assert Success(5).unwrap() == 5
        with pytest.raises(GitObjectError) as exc_info:
            Failure(not_found("x")).unwrap()
        assert exc_info.value.kind == ErrorKind.NOT_FOUND

    def test_is_success(self):
        assert Success(None).is_success
        assert not Failure(not_found("x")).is_success


class TestTryExecute:
    def test_returns_value(self):
        assert try_execute(lambda: 42, lambda exc: not_found(exc)) == Success(42)

    def test_wraps_listed_exceptions(self):
        def boom():
            raise FileNotFoundError("gone")

        result = try_execute(boom, lambda exc: not_found(str(exc)))
        assert not result.is_success
        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "gone" in result.error.message

    def test_other_exceptions_propagate(self):
        def boom():
            raise KeyError("bug")

        with pytest.raises(KeyError):
            try_execute(boom, lambda exc: not_found(str(exc)))
