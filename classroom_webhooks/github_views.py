"""
These are the views that process webhook events coming from GitHub.
"""

import logging

from flask import current_app as app
from flask import Blueprint, request

from classroom_webhooks.exceptions import (
    AuthenticationFailure, ResolutionFailure, WebhookRejected,
)
from classroom_webhooks.handlers import dispatch
from classroom_webhooks.resolver import resolve_organization, resolve_repo, resolve_sender
from classroom_webhooks.types import EventType, WebhookEvent
from classroom_webhooks.utils import is_valid_payload, sentry_extra_context

github_bp = Blueprint('github_views', __name__)
logger = logging.getLogger(__name__)


@github_bp.errorhandler(WebhookRejected)
def webhook_rejected(exc):
    """
    Every rejection looks the same from the outside.

    Only the log says whether it was the signature, an unknown record, or an
    event we don't handle.
    """
    logger.info(f"Rejecting delivery {request.headers.get('X-GitHub-Delivery')}: "
                f"{exc.__class__.__name__}: {exc.reason}")
    return "Not Found", 404


@github_bp.route('/hook-receiver', methods=('POST',))
def hook_receiver():
    """
    Process incoming GitHub webhook events.

    1.  Make sure the raw payload hashes to the signature.
    2.  Find the organization, the sender, and (except for pings) the
        assignment repo the event is about.
    3.  Hand the event to the handler for its type.

    Any failure in steps 1-3 gets the same 404.  Errors talking to GitHub
    are not caught, and come back as a 500.

    Returns:
        Tuple[str, int]: Message payload and HTTP status code
    """
    signature = request.headers.get("X-Hub-Signature-256") or request.headers.get("X-Hub-Signature")
    secret = app.config.get('WEBHOOK_SECRET')
    if not is_valid_payload(secret, signature, request.get_data()):
        raise AuthenticationFailure("Signature doesn't match")

    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise ResolutionFailure("Payload is not a JSON object")

    event_name = request.headers.get("X-GitHub-Event")
    event = WebhookEvent.from_payload(
        EventType.from_header(event_name),
        payload,
        delivery_id=request.headers.get("X-GitHub-Delivery"),
        event_name=event_name,
    )
    logger.info(f"Incoming GitHub event: {event}")
    sentry_extra_context({"event": payload})

    organization = resolve_organization(event.organization_id)
    resolve_sender(event.sender_id)
    repo_context = resolve_repo(event.repository_id, event.event_type)

    return dispatch(event, organization, repo_context), 200
