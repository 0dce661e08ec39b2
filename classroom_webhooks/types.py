"""Types specific to classroom_webhooks."""

from __future__ import annotations

import dataclasses
import enum
from typing import Dict, List, Optional

from classroom_webhooks.exceptions import ResolutionFailure

# A webhook payload as described by a JSON object.
EventDict = Dict


class EventType(enum.Enum):
    """The GitHub event types we know how to handle."""
    PING = "ping"
    PUSH = "push"
    RELEASE = "release"
    # Anything else, including a missing X-GitHub-Event header.
    UNSUPPORTED = None

    @classmethod
    def from_header(cls, value: Optional[str]) -> EventType:
        """Map an X-GitHub-Event header value to an EventType, case-sensitively."""
        if value is None:
            return cls.UNSUPPORTED
        try:
            return cls(value)
        except ValueError:
            return cls.UNSUPPORTED


@dataclasses.dataclass(frozen=True)
class Commit:
    """One commit from a push event."""
    id: str
    timestamp: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class WebhookEvent:
    """
    The parts of a webhook delivery that we act on.

    Built from the headers and the parsed payload, never stored.
    """
    event_type: EventType
    organization_id: Optional[int]
    repository_id: Optional[int]
    sender_id: Optional[int]
    commits: List[Commit] = dataclasses.field(default_factory=list)
    release_tag: Optional[str] = None
    delivery_id: Optional[str] = None
    # The X-GitHub-Event header as sent, for logging.
    event_name: Optional[str] = None

    @classmethod
    def from_payload(
        cls,
        event_type: EventType,
        payload: EventDict,
        delivery_id: Optional[str] = None,
        event_name: Optional[str] = None,
    ) -> WebhookEvent:
        """
        Pick out the fields we need.

        Raises:
            ResolutionFailure: the commits or release aren't shaped like
                GitHub sends them.
        """
        return cls(
            event_type=event_type,
            organization_id=_nested_id(payload, "organization"),
            repository_id=_nested_id(payload, "repository"),
            sender_id=_nested_id(payload, "sender"),
            commits=_commits(payload.get("commits")),
            release_tag=_release_tag(payload.get("release")),
            delivery_id=delivery_id,
            event_name=event_type.value if event_name is None else event_name,
        )

    def __str__(self):
        return (
            f"{self.event_name or 'unsupported'} delivery {self.delivery_id}: "
            f"org={self.organization_id} repo={self.repository_id} sender={self.sender_id}"
        )


def _nested_id(payload: EventDict, key: str) -> Optional[int]:
    """Get payload[key]["id"], or None if any of it is missing."""
    obj = payload.get(key)
    if not isinstance(obj, dict):
        return None
    return obj.get("id")


def _commits(commits) -> List[Commit]:
    if not commits:
        return []
    if not isinstance(commits, list):
        raise ResolutionFailure("Push commits are not a list")
    result = []
    for commit in commits:
        if not isinstance(commit, dict) or not isinstance(commit.get("id"), str):
            raise ResolutionFailure(f"Push commit has no id: {commit!r}")
        result.append(Commit(id=commit["id"], timestamp=commit.get("timestamp")))
    return result


def _release_tag(release) -> Optional[str]:
    if release is None:
        return None
    if not isinstance(release, dict):
        raise ResolutionFailure("Release is not an object")
    tag_name = release.get("tag_name")
    if tag_name is not None and not isinstance(tag_name, str):
        raise ResolutionFailure("Release tag name is not a string")
    return tag_name
