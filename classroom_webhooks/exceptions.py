"""
Reasons a webhook delivery can be turned away.

Every subclass of WebhookRejected produces the same "Not Found" response, so
a caller can't tell a bad signature from an unknown organization.  The class
name and `reason` are only logged.
"""


class WebhookRejected(Exception):
    """A delivery we refuse to process."""

    def __init__(self, reason: str = ""):
        super().__init__(reason)
        self.reason = reason


class AuthenticationFailure(WebhookRejected):
    """The signature header is missing, malformed, or doesn't match the body."""


class ResolutionFailure(WebhookRejected):
    """The organization, sender, or repository in the payload is unknown to us."""


class UnsupportedEvent(WebhookRejected):
    """We have no handler for this event type."""


class MissingPriorStatus(WebhookRejected):
    """A released commit was never given a push status, so we can't date it."""


class InvalidRepoContext(Exception):
    """A repository record that isn't attached to any assignment."""
