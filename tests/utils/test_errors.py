from domix_problem.models.failure import Failure
from domix_problem.utils.errors import FailureError, InvalidFailureError


def test_invalid_failure_error_names_field():
    error = InvalidFailureError("message")
    assert error.field_name == "message"
    assert "message" in str(error)
    assert isinstance(error, ValueError)


def test_invalid_failure_error_includes_detail():
    error = InvalidFailureError("kind", detail="unknown failure kind 'x'")
    assert str(error) == "invalid argument 'kind': unknown failure kind 'x'"


def test_failure_error_carries_failure():
    failure = Failure.conflict("version mismatch").with_code("STALE_VERSION")
    error = FailureError(failure)
    assert error.failure.code == "STALE_VERSION"
    assert str(error) == "version mismatch"
    assert error.__cause__ is None
