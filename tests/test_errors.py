from ergani.errors import (
    APIError,
    AuthenticationError,
    ErganiError,
    api_error_from_response,
)


def test_message_field_is_used():
    body = '{"message": "Invalid credentials"}'
    err = api_error_from_response(401, body)
    assert err.status_code == 401
    assert err.message == "Invalid credentials"
    assert err.response == body


def test_msg_field_is_used():
    err = api_error_from_response(400, '{"msg": "Invalid data provided"}')
    assert err.status_code == 400
    assert err.message == "Invalid data provided"


def test_detail_field_is_used():
    err = api_error_from_response(400, '{"detail": "Invalid data provided"}')
    assert err.message == "Invalid data provided"


def test_message_takes_precedence_over_msg_and_detail():
    body = '{"detail": "d", "msg": "m", "message": "Invalid credentials"}'
    assert api_error_from_response(401, body).message == "Invalid credentials"


def test_empty_message_falls_back_to_msg():
    body = '{"message": "", "msg": "Invalid data provided"}'
    assert api_error_from_response(400, body).message == "Invalid data provided"


def test_field_names_match_case_insensitively():
    body = '{"Message": "Invalid credentials"}'
    assert api_error_from_response(401, body).message == "Invalid credentials"


def test_non_json_body_is_used_as_message():
    body = "Service Unavailable"
    err = api_error_from_response(503, body)
    assert err.message == body
    assert err.response == body


def test_json_without_known_fields_falls_back_to_body():
    body = '{"code": "E1"}'
    assert api_error_from_response(500, body).message == body


def test_non_string_field_falls_back_to_body():
    body = '{"message": 42, "msg": "Invalid data provided"}'
    assert api_error_from_response(400, body).message == body


def test_json_array_falls_back_to_body():
    body = '["Invalid data provided"]'
    assert api_error_from_response(400, body).message == body


def test_bytes_body_is_decoded():
    err = api_error_from_response(401, b'{"message": "Invalid credentials"}')
    assert err.message == "Invalid credentials"
    assert err.response == '{"message": "Invalid credentials"}'


def test_empty_body():
    err = api_error_from_response(500, b"")
    assert err.message == ""
    assert err.response == ""


def test_api_error_string():
    err = api_error_from_response(400, '{"msg": "Invalid data provided"}')
    assert str(err) == "API error (status 400): Invalid data provided"


def test_api_error_is_catchable_as_base_error():
    err = api_error_from_response(401, '{"message": "Invalid credentials"}')
    assert isinstance(err, ErganiError)
    assert isinstance(err, APIError)
    assert err.status_code == 401
    assert str(err) == "API error (status 401): Invalid credentials"


def test_authentication_error_string():
    err = AuthenticationError("authentication successful but no token was returned")
    assert err.message == "authentication successful but no token was returned"
    assert str(err) == (
        "authentication failed: authentication successful but no token was returned"
    )


def test_authentication_error_is_ergani_error():
    err = AuthenticationError("no token")
    assert isinstance(err, ErganiError)
    assert err.message == "no token"
    assert str(err) == "authentication failed: no token"