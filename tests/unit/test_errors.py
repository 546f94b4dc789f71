from booker.domain.errors import ApplicationError, MalformedResponseError, TransportError


class TestErrorMessages:
    def test_application_error_default_message_is_operation_neutral(self):
        error = ApplicationError("Booking is locked")

        assert str(error) == "Request rejected: Booking is locked"
        assert error.reason == "Booking is locked"
        assert "token" not in str(error)

    def test_application_error_accepts_caller_message(self):
        error = ApplicationError("Bad credentials", message="Failed to create token: Bad credentials")

        assert str(error) == "Failed to create token: Bad credentials"
        assert error.code == "APPLICATION_ERROR"

    def test_malformed_response_default_message(self):
        error = MalformedResponseError("<html/>")

        assert str(error) == "Unexpected response body: <html/>"
        assert error.raw_body == "<html/>"
        assert error.code == "MALFORMED_RESPONSE"

    def test_transport_error_message(self):
        error = TransportError(503, "Service Unavailable")

        assert str(error) == "Request failed with status 503: Service Unavailable"
        assert error.code == "TRANSPORT_ERROR"
