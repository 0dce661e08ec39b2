"""
Generic utilities.
"""

import hashlib
import hmac
from typing import Dict, Optional

import sentry_sdk

from classroom_webhooks import logger


class RequestFailed(Exception):
    pass

def log_check_response(response, raise_for_status=True):
    """
    Logs HTTP request and response at debug level and checks if it succeeded.

    Arguments:
        response (requests.Response)
        raise_for_status (bool): if True, call raise_for_status on the response
            also.
    """
    msg = "Request: {0.method} {0.url}: {0.body!r}".format(response.request)
    logger.debug(msg)
    msg = "Response: {0.status_code} {0.reason!r} for {0.url}: {0.content!r}".format(response)
    logger.debug(msg)
    if raise_for_status:
        try:
            response.raise_for_status()
        except Exception as exc:
            req = response.request
            raise RequestFailed(f"HTTP request failed: {req.method} {req.url}. Response body: {response.content}") from exc


# Keyed-hash algorithms a signature header may name.
SIGNATURE_ALGORITHMS = {
    "sha1": hashlib.sha1,
    "sha224": hashlib.sha224,
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
}


def make_signature(secret: str, payload: bytes, algorithm: str = "sha256") -> str:
    """
    Compute a signature header value, like "sha256=0123abcd...".
    """
    mac = hmac.new(secret.encode(), msg=payload, digestmod=SIGNATURE_ALGORITHMS[algorithm])
    return f"{algorithm}={mac.hexdigest()}"


def is_valid_payload(secret: Optional[str], signature: Optional[str], payload: bytes) -> bool:
    """
    Ensure payload is valid according to signature.

    Make sure the payload hashes to the signature as calculated using
    the shared secret, and the algorithm named in the signature.

    Arguments:
        secret (str): The shared secret
        signature (str): Signature as calculated by the server, sent in
            the request, in the form "<algorithm>=<hexdigest>"
        payload (bytes): The raw request payload, before any parsing

    Returns:
        bool: Is the payload legit?  A missing or malformed signature, or an
            algorithm we don't know, is simply not legit.
    """
    if not secret or not signature or signature.count("=") != 1:
        return False
    algorithm, digest = signature.split("=")
    if algorithm not in SIGNATURE_ALGORITHMS:
        return False
    expected = make_signature(secret, payload, algorithm)
    return hmac.compare_digest(expected.encode(), f"{algorithm}={digest}".encode())


def sentry_extra_context(data_dict: Dict) -> None:
    """Apply the keys and values from data_dict to the Sentry extra context."""
    for key, value in data_dict.items():
        sentry_sdk.set_extra(key, value)
