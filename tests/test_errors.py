import pytest

from checkchain.core.errors import (
    AppErrorException,
    ErrorCode,
    check_failed,
    check_rejected,
    invalid_json,
)


@pytest.mark.parametrize("code,status", [
    (ErrorCode.E2001_CHECK_FAILED, 400),
    (ErrorCode.E2002_CHECK_REJECTED, 400),
    (ErrorCode.E2021_INVALID_JSON, 400),
    (ErrorCode.E9012_CHECK_RAISED, 500),
])
def test_http_status(code, status):
    assert code.http_status == status


def test_internal_codes_are_not_client_safe():
    assert ErrorCode.E2001_CHECK_FAILED.is_client_safe
    assert not ErrorCode.E9010_CHECK_NOT_FOUND.is_client_safe


def test_check_failed_records_masked_reason():
    error = check_failed("age", "invalid value for age", check="number/int",
                         reason=ErrorCode.E9011_CHECK_MISBEHAVED).unwrap_err()

    assert error.code is ErrorCode.E2001_CHECK_FAILED
    assert error.metadata == {"field": "age", "check": "number/int", "reason": "E9011_CHECK_MISBEHAVED"}


def test_to_dict_keeps_operator_metadata_out():
    body = check_rejected("email", "already registered", check="db/unique").unwrap_err().to_dict()

    assert body["error"]["message"] == "already registered"
    assert body["error"]["category"] == "validation"
    assert "metadata" not in body["error"]


def test_app_error_exception_carries_status():
    with pytest.raises(AppErrorException) as exc_info:
        raise AppErrorException(invalid_json("Expecting value").unwrap_err())
    assert exc_info.value.status_code == 400
    assert str(exc_info.value) == "Invalid JSON: Expecting value"
