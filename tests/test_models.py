"""Tests for request, response, result and config models."""

import dataclasses

import pytest
from pydantic import ValidationError

from restcall import (
    AuthenticationError,
    ClientConfig,
    DataType,
    ErrorKind,
    JsonResponse,
    Method,
    NetworkError,
    ParseError,
    PlainTextResponse,
    ResponseKind,
    RestError,
    RestRequest,
    RestResult,
)


class TestRestRequest:
    """Tests for the RestRequest descriptor."""

    def test_defaults(self):
        """Test that only URL and data type are required."""
        request = RestRequest("https://api.example.com/items", DataType.JSON)
        assert request.base_url == "https://api.example.com/items"
        assert request.data_type == DataType.JSON
        assert request.method == Method.GET
        assert request.arguments == {}
        assert request.headers == {}
        assert request.post_data is None
        assert request.http_username is None
        assert request.http_password is None
        assert request.has_credentials is False

    def test_defaults_not_shared(self):
        """Test that each request owns its own mappings."""
        first = RestRequest("https://a.example.com", DataType.JSON)
        second = RestRequest("https://b.example.com", DataType.JSON)
        first.add_header("X-One", "1")
        first.add_argument("one", "1")

        assert second.headers == {}
        assert second.arguments == {}

    def test_add_and_remove_header(self):
        """Test header mutators."""
        request = RestRequest("https://api.example.com", DataType.JSON)
        request.add_header("Accept", "text/plain")
        request.add_header("Accept", "application/json")
        assert request.headers == {"Accept": "application/json"}

        request.remove_header("Accept")
        request.remove_header("Missing")
        assert request.headers == {}

    def test_add_and_remove_argument(self):
        """Test argument mutators keep keys unique."""
        request = RestRequest("https://api.example.com", DataType.JSON)
        request.add_argument("page", "1")
        request.add_argument("page", "2")
        request.add_argument("size", "10")
        assert request.arguments == {"page": "2", "size": "10"}

        request.remove_argument("page")
        request.remove_argument("missing")
        assert request.arguments == {"size": "10"}

    def test_get_constructor_copies_mappings(self):
        """Test that RestRequest.get does not alias the caller's dicts."""
        arguments = {"q": "python"}
        request = RestRequest.get("https://api.example.com", DataType.JSON, arguments=arguments)
        request.add_argument("page", "1")

        assert request.method == Method.GET
        assert arguments == {"q": "python"}

    def test_post_constructor(self):
        """Test RestRequest.post."""
        request = RestRequest.post(
            "https://api.example.com/items",
            DataType.JSON,
            post_data='{"name": "x"}',
            headers={"Content-Type": "application/json"},
        )
        assert request.method == Method.POST
        assert request.post_data == '{"name": "x"}'
        assert request.headers == {"Content-Type": "application/json"}

    def test_with_basic_auth(self):
        """Test RestRequest.with_basic_auth."""
        request = RestRequest.with_basic_auth(
            "https://api.example.com",
            DataType.XML,
            "alice",
            "s3cret",
            method=Method.POST,
            arguments={"a": "1"},
        )
        assert request.http_username == "alice"
        assert request.http_password == "s3cret"
        assert request.method == Method.POST
        assert request.arguments == {"a": "1"}
        assert request.has_credentials is True

    def test_setters_are_attributes(self):
        """Test that fields can be reassigned after construction."""
        request = RestRequest("https://api.example.com", DataType.JSON)
        request.method = Method.POST
        request.data_type = DataType.PLAIN_TEXT
        request.post_data = "a=1&b=2"
        assert request.method == Method.POST
        assert request.data_type == DataType.PLAIN_TEXT

    def test_no_validation_at_construction(self):
        """Test that bad values are accepted until dispatch."""
        request = RestRequest("", DataType.JSON, method="DELETE")
        assert request.base_url == ""


class TestResponseVariants:
    """Tests for response variant types."""

    def test_kind_fixed_per_variant(self):
        """Test that kind matches the variant and is not an init argument."""
        assert JsonResponse({"a": 1}).kind == ResponseKind.JSON
        assert PlainTextResponse("").kind == ResponseKind.PLAIN_TEXT
        with pytest.raises(TypeError):
            PlainTextResponse("x", ResponseKind.JSON)

    def test_frozen(self):
        """Test that variants are immutable."""
        response = PlainTextResponse("hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            response.content = "changed"


class TestRestResult:
    """Tests for RestResult."""

    def test_success(self):
        """Test a successful result."""
        response = JsonResponse([1, 2])
        result = RestResult.success(response, status_code=200, url="https://api.example.com")

        assert result.ok
        assert result.response is response
        assert result.error_kind is None
        assert result.unwrap() is response

    def test_failure(self):
        """Test a failed result."""
        result = RestResult.failure(ErrorKind.PARSE, "Invalid JSON")

        assert not result.ok
        assert result.response is None
        assert result.error_kind == ErrorKind.PARSE
        assert result.error_message == "Invalid JSON"

    def test_from_error_keeps_status(self):
        """Test building a failure from a raised error."""
        result = RestResult.from_error(AuthenticationError("HTTP 401", 401), url="https://x")

        assert result.error_kind == ErrorKind.AUTHENTICATION
        assert result.status_code == 401
        assert result.url == "https://x"

    @pytest.mark.parametrize(
        "kind,error_type",
        [
            (ErrorKind.NETWORK, NetworkError),
            (ErrorKind.PARSE, ParseError),
            (ErrorKind.AUTHENTICATION, AuthenticationError),
        ],
    )
    def test_unwrap_raises_matching_error(self, kind, error_type):
        """Test that unwrap raises the error class for the failure kind."""
        result = RestResult.failure(kind, "failed", status_code=403)

        with pytest.raises(error_type) as exc_info:
            result.unwrap()
        assert exc_info.value.kind == kind
        assert isinstance(exc_info.value, RestError)


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ClientConfig()
        assert config.timeout == 30.0
        assert config.connect_timeout == 10.0
        assert config.encode_query is True
        assert config.user_agent is None
        assert config.max_content_size == 50 * 1024 * 1024
        assert config.max_workers == 4
        assert config.allow_redirects is True

    def test_rejects_unknown_fields(self):
        """Test that unknown options are rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(retries=3)

    @pytest.mark.parametrize(
        "kwargs",
        [{"timeout": 0}, {"connect_timeout": -1}, {"max_workers": 0}, {"max_content_size": 0}],
    )
    def test_rejects_out_of_range(self, kwargs):
        """Test field bounds."""
        with pytest.raises(ValidationError):
            ClientConfig(**kwargs)
