"""Tests of commit_status.py"""

import datetime

import pytest

from classroom_webhooks.commit_status import (
    PUSH_CONTEXT, SUBMISSION_CONTEXT, commit_pushed_at, create_commit_status, get_tag_sha,
)
from classroom_webhooks.exceptions import MissingPriorStatus
from classroom_webhooks.utils import RequestFailed

from .helpers import REPO_ID


def test_create_commit_status(fake_github):
    create_commit_status(REPO_ID, "abc123", "success", context=PUSH_CONTEXT)
    assert fake_github.statuses_posted() == [
        ("abc123", {"state": "success", "context": PUSH_CONTEXT, "description": ""}),
    ]
    statuses = fake_github.get_repo(REPO_ID).statuses["abc123"]
    assert [(s["context"], s["state"]) for s in statuses] == [(PUSH_CONTEXT, "success")]


def test_create_commit_status_description(fake_github):
    create_commit_status(REPO_ID, "abc123", "failure", context=SUBMISSION_CONTEXT, description="Late")
    assert fake_github.statuses_posted()[0][1]["description"] == "Late"


def test_create_commit_status_fails(fake_github):
    with pytest.raises(RequestFailed):
        create_commit_status(777, "abc123", "success", context=PUSH_CONTEXT)


def test_lightweight_tag(fake_github):
    fake_github.get_repo(REPO_ID).add_tag("v1", "deadbeef")
    assert get_tag_sha(REPO_ID, "v1") == "deadbeef"
    assert fake_github.requests_made() == [
        (f"/repositories/{REPO_ID}/git/ref/tags/v1", "GET"),
    ]


def test_annotated_tag(fake_github):
    fake_github.get_repo(REPO_ID).add_tag("v1", "deadbeef", annotated=True)
    assert get_tag_sha(REPO_ID, "v1") == "deadbeef"
    assert fake_github.requests_made() == [
        (f"/repositories/{REPO_ID}/git/ref/tags/v1", "GET"),
        (f"/repositories/{REPO_ID}/git/tags/tagdeadbeef", "GET"),
    ]


def test_tag_names_are_escaped(fake_github):
    repo = fake_github.get_repo(REPO_ID)
    repo.add_tag("v1", "c0ffee")
    repo.add_tag("v1#final", "deadbeef")
    repo.add_tag("100%", "f00d")
    repo.add_tag("release/v1", "beef")
    assert get_tag_sha(REPO_ID, "v1#final") == "deadbeef"
    assert get_tag_sha(REPO_ID, "100%") == "f00d"
    assert get_tag_sha(REPO_ID, "release/v1") == "beef"
    assert fake_github.requests_made() == [
        (f"/repositories/{REPO_ID}/git/ref/tags/v1%23final", "GET"),
        (f"/repositories/{REPO_ID}/git/ref/tags/100%25", "GET"),
        (f"/repositories/{REPO_ID}/git/ref/tags/release/v1", "GET"),
    ]


def test_missing_tag(fake_github):
    with pytest.raises(RequestFailed):
        get_tag_sha(REPO_ID, "v2")


def test_commit_pushed_at(fake_github):
    repo = fake_github.get_repo(REPO_ID)
    repo.add_status("deadbeef", PUSH_CONTEXT, "success", updated_at="2020-05-14T09:00:00Z")
    repo.add_status("deadbeef", "ci/build", "success", updated_at="2020-05-15T10:00:00Z")
    pushed_at = commit_pushed_at(REPO_ID, "deadbeef")
    assert pushed_at == datetime.datetime(2020, 5, 14, 9, 0, 0, tzinfo=datetime.timezone.utc)


def test_commit_pushed_at_latest_push_status(fake_github):
    repo = fake_github.get_repo(REPO_ID)
    repo.add_status("deadbeef", PUSH_CONTEXT, "success", updated_at="2020-05-14T09:00:00Z")
    repo.add_status("deadbeef", PUSH_CONTEXT, "failure", updated_at="2020-05-16T09:00:00Z")
    pushed_at = commit_pushed_at(REPO_ID, "deadbeef")
    assert pushed_at == datetime.datetime(2020, 5, 16, 9, 0, 0, tzinfo=datetime.timezone.utc)


def test_commit_never_pushed(fake_github):
    fake_github.get_repo(REPO_ID).add_status("deadbeef", "ci/build", "success")
    with pytest.raises(MissingPriorStatus):
        commit_pushed_at(REPO_ID, "deadbeef")
