"""
Unit tests for the error taxonomy and its GraphQL rendering.
"""
import pytest
from graphql import GraphQLError

from userhub.api.graphql.errors import UserOperationError, format_error, unwrap
from userhub.domain.errors import DuplicateError, ValidationError
from userhub.domain.results import Err, Ok


class TestErrorTaxonomy:
    def test_validation_error_code(self):
        error = ValidationError("Invalid email format.")
        assert error.code == "VALIDATION_ERROR"
        assert error.message == "Invalid email format."

    def test_duplicate_error_message(self):
        error = DuplicateError("Email", "a@x.com")
        assert error.code == "DUPLICATE_ERROR"
        assert error.message == 'Email "a@x.com" already exists.'

    def test_errors_are_values(self):
        assert DuplicateError("Username", "a1") == DuplicateError("Username", "a1")
        assert ValidationError("x") != ValidationError("y")


class TestUnwrap:
    def test_ok_returns_value(self):
        assert unwrap(Ok(42)) == 42

    def test_err_raises_with_domain_error(self):
        error = ValidationError("User not found.")
        with pytest.raises(UserOperationError) as exc_info:
            unwrap(Err(error))
        assert exc_info.value.error is error
        assert str(exc_info.value) == "User not found."


class TestFormatError:
    def _graphql_error(self, original):
        return GraphQLError("boom", original_error=original)

    def test_validation_error_keeps_code(self):
        error = self._graphql_error(UserOperationError(ValidationError("Age must be 18 or older.")))
        assert format_error(error) == {
            "message": "Age must be 18 or older.",
            "code": "VALIDATION_ERROR",
        }

    def test_duplicate_error_keeps_code(self):
        error = self._graphql_error(UserOperationError(DuplicateError("Username", "a1")))
        assert format_error(error) == {
            "message": 'Username "a1" already exists.',
            "code": "DUPLICATE_ERROR",
        }

    def test_unexpected_error_is_hidden(self):
        error = self._graphql_error(RuntimeError("Error saving user: connection refused"))
        assert format_error(error) == {
            "message": "An unexpected error occurred.",
            "code": "INTERNAL_SERVER_ERROR",
        }

    def test_error_without_original_is_hidden(self):
        assert format_error(GraphQLError("Syntax Error"))["code"] == "INTERNAL_SERVER_ERROR"
