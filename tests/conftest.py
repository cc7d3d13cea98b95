"""Pytest fixtures for OAuth1 signer tests."""

import httpx
import pytest

from oauth1_signer.config import OAuth1Settings
from oauth1_signer.hook import OAuth1Hook
from oauth1_signer.nonce import FixedNonce

TIMESTAMP = "1327274290"
NONCE = "29443585e9f85f23306198f7eae8d870c46c53ad"

# Base string for the POST request built by ``post_request``
POST_BASE_STRING = (
    # Method and URL
    "POST&http%3A%2F%2Fwww.test.com%2Fpath"
    # Sorted parameters from query string and body
    "&a%3Db%26c%3Dd%26e%3Df%26oauth_consumer_key%3Dfoo"
    f"%26oauth_nonce%3D{NONCE}"
    "%26oauth_signature_method%3DHMAC-SHA1"
    f"%26oauth_timestamp%3D{TIMESTAMP}"
    "%26oauth_token%3Dcount%26oauth_version%3D1.0"
)

# HMAC-SHA1 of POST_BASE_STRING keyed with "bar&dracula"
POST_SIGNATURE = "ZuOyENiN+h038DW1+4zZsQbkycQ="


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep OAUTH1_* variables and stray .env files out of the tests."""
    for name in (
        "CONSUMER_KEY",
        "CONSUMER_SECRET",
        "TOKEN",
        "TOKEN_SECRET",
        "SIGNATURE_METHOD",
        "VERSION",
        "SIGNER_OVERRIDE",
        "CALLBACK",
        "VERIFIER",
        "REALM",
    ):
        monkeypatch.delenv(f"OAUTH1_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config() -> dict:
    """Return the raw option mapping used across the tests."""
    return {
        "consumer_key": "foo",
        "consumer_secret": "bar",
        "token": "count",
        "token_secret": "dracula",
    }


@pytest.fixture
def settings(config: dict) -> OAuth1Settings:
    """Return an OAuth1Settings object with test credentials.

    Returns:
        Settings configured with the foo/bar consumer and count/dracula token.
    """
    return OAuth1Settings(**config)


@pytest.fixture
def hook(settings: OAuth1Settings) -> OAuth1Hook:
    """Create an OAuth1Hook with a fixed nonce and clock."""
    return OAuth1Hook(settings, nonce=FixedNonce(NONCE), clock=lambda: TIMESTAMP)


@pytest.fixture
def post_request() -> httpx.Request:
    """Return a form-encoded POST request with query parameters."""
    return httpx.Request(
        "POST",
        "http://www.test.com/path?a=b&c=d",
        data={"e": "f"},
    )
