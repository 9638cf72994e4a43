from __future__ import annotations

from core.domain.results import ErrorKind, Failure, Success


def test_success_exposes_value():
    result = Success([1, 2])

    assert result.ok is True
    assert result.unwrap_or([]) == [1, 2]


def test_failure_falls_back_to_default():
    result = Failure(ErrorKind.NETWORK_ERROR, "connection refused")

    assert result.ok is False
    assert result.unwrap_or([]) == []
    assert result.status_code is None
    assert str(result) == "network error: connection refused"


def test_error_kind_values():
    assert {kind.value for kind in ErrorKind} == {
        "config_missing",
        "network_error",
        "remote_error",
        "parse_error",
    }
