"""Parameter normalization for the OAuth1 signature base string."""

import urllib.parse
from collections.abc import Iterable, Mapping
from typing import Any

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Params = Mapping[str, Any] | Iterable[tuple[str, Any]]


def percent_encode(value: Any) -> str:
    """Percent-encode a value according to RFC 3986.

    Only ``A-Z a-z 0-9 - . _ ~`` are left as-is; every other byte of the
    UTF-8 encoding becomes ``%XX`` with uppercase hex digits.

    Args:
        value: The value to encode. Non-strings are converted with ``str()``.

    Returns:
        Percent-encoded string.
    """
    return urllib.parse.quote(str(value), safe="")


def stringify(value: Any) -> str:
    """Convert a scalar parameter value to the string that gets signed."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def is_form_encoded(content_type: str | None) -> bool:
    """Check whether body parameters take part in the signature.

    Args:
        content_type: The request's Content-Type header, or None if unset.

    Returns:
        True if the content type is unset or form-encoded, False otherwise.
    """
    if content_type is None:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == FORM_CONTENT_TYPE


def iter_pairs(params: Params | None) -> Iterable[tuple[str, str]]:
    """Flatten parameters into ``(key, string_value)`` pairs.

    List and tuple values yield one pair per element, all under the same key.
    """
    if not params:
        return
    items = params.items() if isinstance(params, Mapping) else params
    for key, value in items:
        if isinstance(value, (list, tuple)):
            for item in value:
                yield str(key), stringify(item)
        else:
            yield str(key), stringify(value)


def encode_pairs(params: Params | None) -> list[tuple[str, str]]:
    """Percent-encode and sort parameters by encoded key, then encoded value."""
    encoded = [(percent_encode(k), percent_encode(v)) for k, v in iter_pairs(params)]
    return sorted(encoded)


def normalize_parameters(
    query_params: Params | None,
    body_params: Params | None,
    content_type: str | None,
    oauth_params: Mapping[str, str],
) -> str:
    """Build the normalized parameter string.

    Args:
        query_params: Parameters from the URL query string.
        body_params: Form body parameters; ignored unless the body is form-encoded.
        content_type: The request's Content-Type, or None if unset.
        oauth_params: The oauth_* protocol parameters, without the signature.

    Returns:
        The sorted ``key=value`` pairs joined with ``&``.
    """
    pairs: list[tuple[str, Any]] = list(iter_pairs(query_params))
    if is_form_encoded(content_type):
        pairs.extend(iter_pairs(body_params))
    pairs.extend(oauth_params.items())

    # The signature itself is never part of what gets signed
    pairs = [(k, v) for k, v in pairs if k != "oauth_signature"]

    return "&".join(f"{k}={v}" for k, v in encode_pairs(pairs))
