from shared.exceptions import AuthenticationError, AuthorizationError
from modules.auth.exceptions import (
    InvalidCredentialsError,
    NotActivatedError,
    NotVerifiedError,
    UnauthenticatedError,
)
from modules.auth.messages import trans


class TestAuthExceptions:
    def test_login_rejections_are_authorization_errors(self):
        for error in (InvalidCredentialsError(), NotActivatedError(), NotVerifiedError("a@b.co")):
            assert isinstance(error, AuthorizationError)

    def test_default_messages(self):
        assert InvalidCredentialsError().message == trans("invalid-credentials")
        assert NotActivatedError().message == trans("not-activated")
        assert NotVerifiedError("a@b.co").message == trans("verify-first")

    def test_codes(self):
        assert InvalidCredentialsError().code == "INVALID_CREDENTIALS"
        assert NotActivatedError().code == "NOT_ACTIVATED"
        assert NotVerifiedError("a@b.co").code == "NOT_VERIFIED"

    def test_not_verified_carries_email(self):
        error = NotVerifiedError("a@b.co")
        assert error.email == "a@b.co"
        assert error.to_dict()["details"] == {"email": "a@b.co"}

    def test_unauthenticated(self):
        error = UnauthenticatedError()
        assert isinstance(error, AuthenticationError)
        assert error.message == ""
        assert error.warning is False

    def test_unauthenticated_with_warning(self):
        error = UnauthenticatedError("disabled", warning=True)
        assert error.message == "disabled"
        assert error.warning is True
