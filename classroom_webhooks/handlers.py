"""
What we do for each kind of GitHub event.

Every handler gets the event, the sender's organization, and the repo the
event is about (None for pings), and returns a short message for the response.
Handlers must be idempotent: GitHub redelivers events.
"""

import datetime
import logging
from typing import Callable, Dict, Optional

from classroom_webhooks import db
from classroom_webhooks.commit_status import (
    PUSH_CONTEXT, SUBMISSION_CONTEXT, commit_pushed_at, create_commit_status, get_tag_sha,
)
from classroom_webhooks.deadline import push_status
from classroom_webhooks.exceptions import ResolutionFailure, UnsupportedEvent
from classroom_webhooks.models import Organization
from classroom_webhooks.resolver import RepoContext, due_date
from classroom_webhooks.types import EventType, WebhookEvent

logger = logging.getLogger(__name__)

Handler = Callable[[WebhookEvent, Organization, Optional[RepoContext]], str]


def patchable_now() -> datetime.datetime:
    """Current time, in a way that freezegun can monkeypatch."""
    return datetime.datetime.now(datetime.timezone.utc)


def handle_ping(event: WebhookEvent, organization: Organization, repo_context: Optional[RepoContext]) -> str:
    """The webhook was just installed: remember that it works."""
    if organization.webhook_active:
        return "PONG"
    organization.webhook_active = True
    db.session.commit()
    logger.info(f"Webhook is now active for organization {organization.github_id}")
    return "PONG"


def handle_push(event: WebhookEvent, organization: Organization, repo_context: Optional[RepoContext]) -> str:
    """Mark each pushed commit as on time or late."""
    if not event.commits:
        return "No commits"
    assert repo_context is not None
    now = patchable_now()
    state = push_status(now, due_date(repo_context))
    for commit in event.commits:
        create_commit_status(
            repo_context.repo.github_repo_id, commit.id, state,
            context=PUSH_CONTEXT, description="",
        )
    return f"Marked {len(event.commits)} commits {state}"


def handle_release(event: WebhookEvent, organization: Organization, repo_context: Optional[RepoContext]) -> str:
    """A release is a submission: was its commit pushed on time?"""
    assert repo_context is not None
    if not event.release_tag:
        raise ResolutionFailure("Release event has no tag name")
    repo_id = repo_context.repo.github_repo_id
    sha = get_tag_sha(repo_id, event.release_tag)
    state = push_status(commit_pushed_at(repo_id, sha), due_date(repo_context))
    create_commit_status(repo_id, sha, state, context=SUBMISSION_CONTEXT)
    return f"Marked submission {event.release_tag} {state}"


HANDLERS: Dict[EventType, Handler] = {
    EventType.PING: handle_ping,
    EventType.PUSH: handle_push,
    EventType.RELEASE: handle_release,
}


def dispatch(event: WebhookEvent, organization: Organization, repo_context: Optional[RepoContext]) -> str:
    handler = HANDLERS.get(event.event_type)
    if handler is None:
        raise UnsupportedEvent(f"No handler for X-GitHub-Event {event.event_name!r}")
    return handler(event, organization, repo_context)
