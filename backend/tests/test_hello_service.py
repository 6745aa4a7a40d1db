"""
Hello API — Hello Service Unit Tests
=====================================

What:  Tests for the per-method builders and the dispatch table, without HTTP.

What we test:
    ✅ Each builder's success envelope and status code
    ✅ Presence checks (missing / falsy fields → ValidationError)
    ✅ Builders reject a method they are not registered for (405)
    ✅ Unsupported methods are rejected by dispatch()
    ✅ Unexpected failures become ProcessingError with the builder's message
"""

import re
from unittest.mock import patch

import pytest

from hello_api.exceptions import MethodNotAllowedError, ProcessingError, ValidationError
from hello_api.services.hello_service import (
    ALLOWED_METHODS,
    FEATURES,
    HttpMethod,
    generate_message_id,
    utc_timestamp,
)

ISO_MS_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestHelpers:

    def test_utc_timestamp_format(self):
        assert ISO_MS_UTC.match(utc_timestamp())

    def test_generate_message_id_is_base36(self):
        message_id = generate_message_id()
        assert len(message_id) == 9
        assert re.fullmatch(r"[0-9a-z]+", message_id)

    def test_http_method_parse_is_case_insensitive(self):
        assert HttpMethod.parse("patch") is HttpMethod.PATCH
        assert HttpMethod.parse("HEAD") is None


class TestDispatch:

    @pytest.mark.parametrize(
        "method, body, query, status",
        [
            ("GET", None, None, 200),
            ("POST", {"name": "a", "message": "b"}, None, 201),
            ("PUT", {"id": "1", "name": "a", "message": "b"}, None, 200),
            ("DELETE", None, {"id": "1"}, 200),
            ("PATCH", {"id": "1"}, None, 200),
        ],
    )
    def test_dispatches_to_matching_builder(self, service, make_ctx, method, body, query, status):
        result = service.dispatch(make_ctx(method, body=body, query=query))
        assert result.status_code == status

    def test_unsupported_method_rejected(self, service, make_ctx):
        with pytest.raises(MethodNotAllowedError) as exc_info:
            service.dispatch(make_ctx("OPTIONS"))
        assert exc_info.value.allowed == ALLOWED_METHODS
        assert exc_info.value.status_code == 405

    @pytest.mark.parametrize(
        "builder, wrong_method",
        [
            ("get_hello", "POST"),
            ("create_message", "GET"),
            ("update_message", "PATCH"),
            ("delete_message", "GET"),
            ("patch_message", "PUT"),
        ],
    )
    def test_builder_rejects_other_methods(self, service, make_ctx, builder, wrong_method):
        with pytest.raises(MethodNotAllowedError) as exc_info:
            getattr(service, builder)(make_ctx(wrong_method, body={"id": "1"}))
        assert len(exc_info.value.allowed) == 1
        assert "Only" in exc_info.value.message


class TestGetHello:

    def test_metadata_envelope(self, service, make_ctx):
        ctx = make_ctx(
            "GET",
            url="/api/hello?lang=en",
            headers={"user-agent": "pytest", "host": "example.com"},
            query={"lang": "en"},
        )
        content = service.get_hello(ctx).content()

        assert content["message"] == "Hello from FastAPI Routes!"
        assert content["method"] == "GET"
        assert content["url"] == "/api/hello?lang=en"
        assert content["userAgent"] == "pytest"
        assert content["host"] == "example.com"
        assert content["query"] == {"lang": "en"}
        assert content["features"] == FEATURES
        assert ISO_MS_UTC.match(content["timestamp"])
        assert set(content["environment"]) == {"nodeVersion", "environment", "platform", "arch"}
        assert content["environment"]["environment"] == "test"

    def test_missing_headers_use_defaults(self, service, make_ctx):
        content = service.get_hello(make_ctx("GET")).content()
        assert content["userAgent"] == "Unknown"
        assert content["host"] == "localhost"

    def test_response_headers(self, service, make_ctx):
        headers = service.get_hello(make_ctx("GET")).headers
        assert headers["X-API-Version"] == "1.0.0"
        assert headers["Cache-Control"] == "public, max-age=300"
        assert headers["X-Response-Time"].isdigit()

    def test_unexpected_error_becomes_processing_error(self, service, make_ctx):
        with patch(
            "hello_api.services.hello_service.utc_timestamp",
            side_effect=OSError("clock unavailable"),
        ):
            with pytest.raises(ProcessingError, match="Failed to process request"):
                service.get_hello(make_ctx("GET"))


class TestCreateMessage:

    def test_success(self, service, make_ctx):
        result = service.create_message(make_ctx("POST", body={"name": "a", "message": "b"}))
        content = result.content()

        assert result.status_code == 201
        assert content["success"] is True
        assert content["message"] == "Message created successfully"
        assert content["data"]["name"] == "a"
        assert content["data"]["message"] == "b"
        assert content["data"]["id"]
        assert ISO_MS_UTC.match(content["data"]["createdAt"])

    @pytest.mark.parametrize(
        "body",
        [None, {}, {"message": "b"}, {"name": "a"}, {"name": "", "message": "b"}],
    )
    def test_missing_fields(self, service, make_ctx, body):
        with pytest.raises(ValidationError, match="Name and message are required"):
            service.create_message(make_ctx("POST", body=body))

    def test_empty_list_counts_as_present(self, service, make_ctx):
        result = service.create_message(make_ctx("POST", body={"name": [], "message": "b"}))
        assert result.status_code == 201
        assert result.content()["data"]["name"] == []

    def test_missing_fields_are_reported(self, service, make_ctx):
        with pytest.raises(ValidationError) as exc_info:
            service.create_message(make_ctx("POST", body={"message": "b"}))
        assert exc_info.value.missing == ["name"]

    def test_unexpected_error_becomes_processing_error(self, service, make_ctx):
        with patch(
            "hello_api.services.hello_service.generate_message_id",
            side_effect=RuntimeError("entropy pool empty"),
        ):
            with pytest.raises(ProcessingError, match="Failed to process request"):
                service.create_message(make_ctx("POST", body={"name": "a", "message": "b"}))


class TestUpdateMessage:

    def test_success(self, service, make_ctx):
        body = {"id": "123", "name": "Jane Doe", "message": "Updated message!"}
        result = service.update_message(make_ctx("PUT", body=body))
        content = result.content()

        assert result.status_code == 200
        assert content["data"]["id"] == "123"
        assert content["data"]["name"] == "Jane Doe"
        assert content["message"] == "Message updated successfully"
        assert "updatedAt" in content["data"]

    def test_missing_id(self, service, make_ctx):
        with pytest.raises(ValidationError, match="ID, name, and message are required"):
            service.update_message(make_ctx("PUT", body={"name": "a", "message": "b"}))

    def test_unexpected_error_message(self, service, make_ctx):
        with patch(
            "hello_api.services.hello_service.utc_timestamp",
            side_effect=OSError("clock unavailable"),
        ):
            with pytest.raises(ProcessingError, match="Failed to update message"):
                service.update_message(
                    make_ctx("PUT", body={"id": "1", "name": "a", "message": "b"})
                )


class TestDeleteMessage:

    def test_success(self, service, make_ctx):
        content = service.delete_message(make_ctx("DELETE", query={"id": "123"})).content()
        assert content["success"] is True
        assert content["message"] == "Message 123 deleted successfully"
        assert ISO_MS_UTC.match(content["deletedAt"])

    def test_repeated_id_is_comma_joined(self, service, make_ctx):
        content = service.delete_message(make_ctx("DELETE", query={"id": ["1", "2"]})).content()
        assert content["message"] == "Message 1,2 deleted successfully"

    def test_body_id_is_not_enough(self, service, make_ctx):
        with pytest.raises(ValidationError, match="ID is required"):
            service.delete_message(make_ctx("DELETE", body={"id": "123"}))


class TestPatchMessage:

    def test_extra_fields_echoed(self, service, make_ctx):
        body = {"id": "123", "message": "Patched message!", "tags": ["x"]}
        content = service.patch_message(make_ctx("PATCH", body=body)).content()

        assert content["data"]["id"] == "123"
        assert content["data"]["message"] == "Patched message!"
        assert content["data"]["tags"] == ["x"]
        assert content["message"] == "Message partially updated successfully"
        assert list(content["data"])[0] == "id"
        assert list(content["data"])[-1] == "updatedAt"

    def test_empty_object_id_counts_as_present(self, service, make_ctx):
        result = service.patch_message(make_ctx("PATCH", body={"id": {}}))
        assert result.status_code == 200
        assert result.content()["data"]["id"] == {}

    def test_client_updated_at_is_overridden(self, service, make_ctx):
        body = {"id": "1", "updatedAt": "yesterday"}
        content = service.patch_message(make_ctx("PATCH", body=body)).content()
        assert ISO_MS_UTC.match(content["data"]["updatedAt"])

    @pytest.mark.parametrize("body", [None, {"message": "x"}, {"id": 0}, {"id": None}])
    def test_missing_id(self, service, make_ctx, body):
        with pytest.raises(ValidationError, match="ID is required"):
            service.patch_message(make_ctx("PATCH", body=body))
