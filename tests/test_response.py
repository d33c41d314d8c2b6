# tests/test_response.py

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(detail="ok")

    assert response.success
    assert response.status_code == 200
    assert response.data == {}
    assert response.field_errors == {}
    assert str(response) == "Success: ok"


def test_fail_carries_error_code():
    response = Response.fail(detail="nope", error=ErrorCode.NOT_FOUND, status_code=404)

    assert not response.success
    assert response.status_code == 404
    assert str(response) == "Error: NOT_FOUND"


def test_invalid_exposes_field_errors():
    errors = {"name": "Name is required"}

    response = Response.invalid(errors)

    assert response.error == ErrorCode.VALIDATION_FAILED
    assert response.status_code == 422
    assert response.field_errors == errors

    errors["class"] = "Class is required"
    assert response.field_errors == {"name": "Name is required"}
