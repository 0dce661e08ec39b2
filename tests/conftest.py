"""Automatically run by pytest to set up test infrastructure."""

import datetime
import json

import pytest
import requests_mock

import classroom_webhooks
from classroom_webhooks import db
from classroom_webhooks.models import (
    Assignment, AssignmentRepo, GroupAssignment, GroupAssignmentRepo, Organization, User,
)
from classroom_webhooks.utils import make_signature

from . import settings as test_settings
from .fake_github import FakeGitHub
from .helpers import GROUP_REPO_ID, ORG_ID, REPO_ID, SENDER_ID


@pytest.fixture
def requests_mocker():
    """Make requests_mock available as a fixture."""
    mocker = requests_mock.Mocker(real_http=False, case_sensitive=True)
    mocker.start()
    try:
        yield mocker
    finally:
        mocker.stop()


@pytest.fixture(autouse=True)
def settings_for_tests(mocker):
    for name, value in vars(test_settings).items():
        if name.isupper():
            mocker.patch(f"classroom_webhooks.settings.{name}", value)


@pytest.fixture
def fake_github(requests_mocker):
    the_fake_github = FakeGitHub()
    the_fake_github.install_mocks(requests_mocker)
    the_fake_github.make_repo(REPO_ID)
    the_fake_github.make_repo(GROUP_REPO_ID)
    return the_fake_github


@pytest.fixture
def app():
    """The Flask app, with an empty in-memory database."""
    the_app = classroom_webhooks.create_app(config="testing")
    with the_app.app_context():
        db.create_all()
        yield the_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class Classroom:
    """The records a typical delivery refers to."""

    def __init__(self):
        self.organization = Organization(github_id=ORG_ID, title="Intro to Python")
        self.sender = User(uid=SENDER_ID)
        self.assignment = Assignment(organization=self.organization, title="Homework 1")
        self.group_assignment = GroupAssignment(organization=self.organization, title="Project")
        self.repo = AssignmentRepo(github_repo_id=REPO_ID, assignment=self.assignment)
        self.group_repo = GroupAssignmentRepo(github_repo_id=GROUP_REPO_ID, group_assignment=self.group_assignment)
        db.session.add_all([
            self.organization, self.sender, self.assignment, self.group_assignment,
            self.repo, self.group_repo,
        ])
        db.session.commit()

    def set_due_date(self, due_date: datetime.datetime, group: bool = False) -> None:
        assignment = self.group_assignment if group else self.assignment
        assignment.due_date = due_date
        db.session.commit()


@pytest.fixture
def classroom(app):
    return Classroom()


@pytest.fixture
def post_event(client):
    """
    Post a webhook delivery, signed the way GitHub signs it.

    `secret` overrides the signing secret, and `signature` overrides the
    whole signature header.
    """
    def _post_event(event_type, payload, secret=None, signature=None, header="X-Hub-Signature-256"):
        body = json.dumps(payload).encode()
        if signature is None:
            secret = secret or client.application.config["WEBHOOK_SECRET"]
            algorithm = "sha256" if header == "X-Hub-Signature-256" else "sha1"
            signature = make_signature(secret, body, algorithm)
        headers = {"X-GitHub-Delivery": "72d3162e-cc78-11e3-81ab-4c9367dc0958"}
        if event_type is not None:
            headers["X-GitHub-Event"] = event_type
        if header is not None:
            headers[header] = signature
        return client.post(
            "/github/hook-receiver", data=body, headers=headers, content_type="application/json",
        )
    return _post_event
