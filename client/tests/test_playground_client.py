"""Tests for PlaygroundClient."""

import httpx
import pytest

from api.models import Post, PostResponse, ValidateResponse
from api.result import Err, ErrorKind, Ok
from client.playground_client import PlaygroundClient, error_from_response


class TestPlaygroundClientInit:
    """Tests for PlaygroundClient initialization."""

    def test_default_init(self):
        """Test initialization with defaults from settings."""
        client = PlaygroundClient()
        assert client._base_url == "http://localhost:8787"
        assert client._timeout == 10.0

    def test_custom_base_url_and_timeout(self):
        """Test initialization with explicit values."""
        client = PlaygroundClient(base_url="http://example.com:9000", timeout=2.5)
        assert client._base_url == "http://example.com:9000"
        assert client._timeout == 2.5

    def test_explicit_zero_timeout_is_kept(self):
        """Test that a falsy explicit timeout is not replaced by the default."""
        client = PlaygroundClient(timeout=0)
        assert client._timeout == 0

    def test_explicit_empty_base_url_is_kept(self):
        """Test that an explicit empty base URL is not replaced by the default."""
        client = PlaygroundClient(base_url="")
        assert client._base_url == ""


class TestErrorFromResponse:
    """Tests for error_from_response."""

    def test_not_found(self):
        """Test that 404 maps to NOT_FOUND with the body message."""
        error = error_from_response(httpx.Response(404, json={"error": "not found"}))
        assert error.kind is ErrorKind.NOT_FOUND
        assert error.message == "not found"

    @pytest.mark.parametrize("status", [400, 422])
    def test_validation(self, status):
        """Test that 400 and 422 map to VALIDATION."""
        error = error_from_response(httpx.Response(status, json={"error": "bad age"}))
        assert error.kind is ErrorKind.VALIDATION
        assert error.message == "bad age"

    def test_unmapped_status(self):
        """Test that other statuses map to INTERNAL."""
        error = error_from_response(httpx.Response(503, json={"error": "down"}))
        assert error.kind is ErrorKind.INTERNAL
        assert error.message == "down"

    def test_non_json_body_uses_default_message(self):
        """Test fallback to the kind's default message for plain text bodies."""
        error = error_from_response(httpx.Response(404, text="<html>nope</html>"))
        assert error.message == "not found"

    def test_unexpected_shape_uses_default_message(self):
        """Test fallback when the body is JSON but not the error shape."""
        error = error_from_response(httpx.Response(400, json={"detail": []}))
        assert error.message == "validation error"


class TestPlaygroundClientMocked:
    """Tests against a mocked transport."""

    @pytest.mark.asyncio
    async def test_get_post_success(self, make_transport):
        """Test that a 200 body is parsed into PostResponse."""
        transport = make_transport(200, json={"post": {"id": "1", "title": "Hello World"}})
        async with PlaygroundClient(transport=transport) as client:
            result = await client.get_post("1")

        assert result == Ok(PostResponse(post=Post(id="1", title="Hello World")))

    @pytest.mark.asyncio
    async def test_get_post_not_found(self, make_transport):
        """Test that a 404 becomes Err(NOT_FOUND)."""
        transport = make_transport(404, json={"error": "not found"})
        async with PlaygroundClient(transport=transport) as client:
            result = await client.get_post("2")

        assert isinstance(result, Err)
        assert result.error.status == 404

    @pytest.mark.asyncio
    async def test_sends_query_params(self):
        """Test that arguments are sent as query parameters."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"age": 25, "email": "valid@example.com"})

        async with PlaygroundClient(transport=httpx.MockTransport(handler)) as client:
            await client.validate(25, "valid@example.com")

        assert seen[0].url.path == "/validate"
        assert seen[0].url.params["age"] == "25"
        assert seen[0].url.params["email"] == "valid@example.com"

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        """Test that connection failures are raised, not wrapped."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with PlaygroundClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.ConnectError):
                await client.get_post("1")


class TestPlaygroundClientEndToEnd:
    """Tests against the in-process server."""

    @pytest.mark.asyncio
    async def test_get_post(self, app_transport):
        """Test existing and missing posts."""
        async with PlaygroundClient(transport=app_transport) as client:
            found = await client.get_post("1")
            missing = await client.get_post("2")

        assert isinstance(found, Ok)
        assert found.value.post.title == "Hello World"
        assert isinstance(missing, Err)
        assert missing.error.kind is ErrorKind.NOT_FOUND
        assert missing.error.message == "not found"

    @pytest.mark.asyncio
    async def test_validate(self, app_transport):
        """Test valid and invalid validate requests."""
        async with PlaygroundClient(transport=app_transport) as client:
            valid = await client.validate(25, "valid@example.com")
            invalid = await client.validate(17, "test@example.com")

        assert valid == Ok(ValidateResponse(age=25, email="valid@example.com"))
        assert isinstance(invalid, Err)
        assert invalid.error.status == 400
        assert invalid.error.message == "age must be between 18 and 100"
