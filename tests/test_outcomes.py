import pytest

from checkchain.core.errors import AppError, ErrorCode
from checkchain.validation import Fail, Pass, Reject, normalize


def test_booleans_are_well_formed():
    assert normalize(True) == (Pass(), True)
    assert normalize(False) == (Fail(), True)


def test_errors_reject_with_their_message():
    assert normalize(ValueError("too short")) == (Reject("too short"), True)
    app_error = AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message="taken")
    assert normalize(app_error) == (Reject("taken"), True)


@pytest.mark.parametrize("raw", [None, 1, 0, "yes", [], {"ok": True}])
def test_anything_else_fails_malformed(raw):
    assert normalize(raw) == (Fail(), False)
