"""
Find the database records a webhook delivery is about.
"""

from __future__ import annotations

import dataclasses
import datetime
from typing import Optional, Union

from classroom_webhooks import db
from classroom_webhooks.exceptions import InvalidRepoContext, ResolutionFailure
from classroom_webhooks.models import (
    Assignment, AssignmentRepo, GroupAssignment, GroupAssignmentRepo, Organization, User,
)
from classroom_webhooks.types import EventType


@dataclasses.dataclass(frozen=True)
class IndividualRepo:
    """A student's own repository for an assignment."""
    repo: AssignmentRepo

    @property
    def assignment(self) -> Assignment:
        if self.repo.assignment is None:
            raise InvalidRepoContext(f"Assignment repo {self.repo.github_repo_id} has no assignment")
        return self.repo.assignment


@dataclasses.dataclass(frozen=True)
class GroupRepo:
    """A group's shared repository for a group assignment."""
    repo: GroupAssignmentRepo

    @property
    def assignment(self) -> GroupAssignment:
        if self.repo.group_assignment is None:
            raise InvalidRepoContext(f"Group assignment repo {self.repo.github_repo_id} has no group assignment")
        return self.repo.group_assignment


RepoContext = Union[IndividualRepo, GroupRepo]


def due_date(repo_context: RepoContext) -> Optional[datetime.datetime]:
    """The due date of whichever kind of assignment owns the repo."""
    return repo_context.assignment.due_date


def resolve_organization(github_id: Optional[int]) -> Organization:
    org = db.session.scalar(db.select(Organization).filter_by(github_id=github_id))
    if org is None:
        raise ResolutionFailure(f"No organization with GitHub id {github_id!r}")
    return org


def resolve_sender(uid: Optional[int]) -> User:
    # Nothing uses the sender yet, but a delivery from a stranger is still
    # turned away.
    sender = db.session.scalar(db.select(User).filter_by(uid=uid))
    if sender is None:
        raise ResolutionFailure(f"No user with GitHub id {uid!r}")
    return sender


def resolve_repo(github_repo_id: Optional[int], event_type: EventType) -> Optional[RepoContext]:
    """
    Find the assignment repo or group assignment repo for a GitHub repo id.

    Individual repos are checked first.  Pings don't need a repo, and get
    None.  Anything else without a repo is rejected.
    """
    if event_type is EventType.PING:
        return None
    repo = db.session.scalar(db.select(AssignmentRepo).filter_by(github_repo_id=github_repo_id))
    if repo is not None:
        return IndividualRepo(repo)
    group_repo = db.session.scalar(db.select(GroupAssignmentRepo).filter_by(github_repo_id=github_repo_id))
    if group_repo is not None:
        return GroupRepo(group_repo)
    raise ResolutionFailure(f"No assignment repo with GitHub id {github_repo_id!r}")
