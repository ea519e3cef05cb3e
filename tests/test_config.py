"""
Tests for Client Configuration and Lifecycle

Tests environment configuration, base URL validation, ownership of the
HTTP client, and the message notation builders.
"""

import httpx
import pytest

from chatwork import ChatworkClient, ClientConfig, DEFAULT_BASE_URL
from chatwork.utils import info, mention, quote, reply_tag

TEST_TOKEN = "test-token"


# Configuration Tests


def test_from_env_reads_all_variables():
    """Test that every supported environment variable is read."""
    config = ClientConfig.from_env(
        {
            "CHATWORK_API_TOKEN": " secret ",
            "CHATWORK_BASE_URL": "http://localhost:8080/v2",
            "CHATWORK_DEBUG": "true",
        }
    )

    assert config.token == "secret"
    assert config.base_url == "http://localhost:8080/v2"
    assert config.debug is True


def test_from_env_defaults():
    """Test the defaults when only the token is set."""
    config = ClientConfig.from_env({"CHATWORK_API_TOKEN": TEST_TOKEN})

    assert config.base_url == DEFAULT_BASE_URL
    assert config.debug is False


@pytest.mark.parametrize("environ", [{}, {"CHATWORK_API_TOKEN": "   "}])
def test_from_env_requires_token(environ):
    """Test that a missing or blank token is rejected."""
    with pytest.raises(ValueError, match="CHATWORK_API_TOKEN"):
        ClientConfig.from_env(environ)


@pytest.mark.parametrize("value", ["0", "false", "no", ""])
def test_from_env_debug_falsy_values(value):
    """Test values that leave debug logging off."""
    config = ClientConfig.from_env(
        {"CHATWORK_API_TOKEN": TEST_TOKEN, "CHATWORK_DEBUG": value}
    )

    assert config.debug is False


@pytest.mark.parametrize(
    "base_url", ["not a url", "/v2", "ftp://api.chatwork.com/v2", "https://"]
)
def test_invalid_base_url_is_rejected(base_url):
    """Test that the client refuses a base URL that is not absolute."""
    with pytest.raises(ValueError, match="Invalid base URL"):
        ChatworkClient(TEST_TOKEN, base_url=base_url)


def test_token_not_in_repr():
    """Test that the token does not leak through repr()."""
    config = ClientConfig(token="super-secret")

    assert "super-secret" not in repr(config)


def test_config_is_frozen():
    """Test that the configuration cannot be changed after construction."""
    config = ClientConfig(token=TEST_TOKEN)

    with pytest.raises(AttributeError):
        config.token = "other"


def test_client_from_env():
    """Test building a client from environment variables."""
    client = ChatworkClient.from_env(
        environ={
            "CHATWORK_API_TOKEN": TEST_TOKEN,
            "CHATWORK_BASE_URL": "https://example.com/api",
        }
    )

    assert client.config.token == TEST_TOKEN
    assert client.config.base_url == "https://example.com/api"
    assert client.rooms is not None
    assert client.my_tasks is not None


# Lifecycle Tests


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open():
    """Test that a caller-supplied HTTP client is not closed."""
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200))
    )

    async with ChatworkClient(TEST_TOKEN, http_client=http_client) as client:
        assert client.http_client is http_client

    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client():
    """Test that a client created internally is closed on exit."""
    async with ChatworkClient(TEST_TOKEN) as client:
        http_client = client.http_client
        assert not http_client.is_closed

    assert http_client.is_closed


@pytest.mark.asyncio
async def test_services_share_one_transport():
    """Test that all services send through the same pipeline."""
    async with ChatworkClient(TEST_TOKEN) as client:
        transports = {
            id(service._transport)
            for service in (
                client.rooms,
                client.messages,
                client.tasks,
                client.my_tasks,
                client.me,
                client.contacts,
                client.incoming_requests,
            )
        }

    assert transports == {id(client.transport)}


# Notation Tests


def test_mention():
    """Test mention tags for several accounts and for none."""
    assert mention([1, 2]) == "[To:1] [To:2] "
    assert mention([]) == ""


def test_reply_tag():
    """Test the reply tag format."""
    assert reply_tag(42, 5, "77") == "[rp aid=42 to=5-77]"


def test_quote():
    """Test the quote block format."""
    assert quote(42, 1384242850, "text") == (
        "[qt][qtmeta aid=42 time=1384242850]text[/qt]"
    )


def test_info():
    """Test the information block format."""
    assert info("Title", "Body") == "[info][title]Title[/title]Body[/info]"
