"""
Reading references and writing commit statuses on GitHub.

Repositories are addressed by their numeric id, since that's what we store.
"""

import datetime
import logging
from typing import Dict
from urllib.parse import quote

import arrow

from classroom_webhooks.auth import get_github_session
from classroom_webhooks.exceptions import MissingPriorStatus
from classroom_webhooks.utils import log_check_response

logger = logging.getLogger(__name__)

# Every push gets a status in this context, dated when we saw the push.
PUSH_CONTEXT = "classroom/push"

# A release marks a submission, and gets a status in this context.
SUBMISSION_CONTEXT = "classroom/assignment-submission"


def _repo_url(repo_id: int, path: str) -> str:
    return f"/repositories/{repo_id}/{path}"


def create_commit_status(repo_id: int, sha: str, state: str, context: str, description: str = "") -> Dict:
    """
    Attach a status to a commit.

    Arguments:
        repo_id: the GitHub id of the repository
        sha: the commit to annotate
        state: "success" or "failure"
        context: the label that distinguishes this check from others on the
            same commit
        description: a short human-readable explanation

    GitHub keeps only the latest status per context, so setting the same
    status again is harmless.
    """
    url = _repo_url(repo_id, f"statuses/{sha}")
    payload = {
        "state": state,
        "context": context,
        "description": description,
    }
    logger.debug("Status: POST %s %s", url, payload)
    response = get_github_session().post(url, json=payload)
    log_check_response(response)
    data = response.json()
    logger.info(f"Set {context} status on {repo_id}@{sha} to {state!r}")
    return data


def get_tag_sha(repo_id: int, tag_name: str) -> str:
    """
    Get the commit sha a tag points to.

    Lightweight tags point straight at a commit.  Annotated tags point at a
    tag object, which points at the commit.
    """
    response = get_github_session().get(_repo_url(repo_id, f"git/ref/tags/{quote(tag_name, safe='/')}"))
    log_check_response(response)
    obj = response.json()["object"]
    while obj["type"] == "tag":
        response = get_github_session().get(_repo_url(repo_id, f"git/tags/{obj['sha']}"))
        log_check_response(response)
        obj = response.json()["object"]
    logger.debug("Tag %s in %s is commit %s", tag_name, repo_id, obj["sha"])
    return obj["sha"]


def commit_pushed_at(repo_id: int, sha: str) -> datetime.datetime:
    """
    When was this commit pushed?

    We don't record pushes ourselves: the push status we set when the commit
    arrived is the record.

    Raises:
        MissingPriorStatus: the commit has no push status.
    """
    response = get_github_session().get(_repo_url(repo_id, f"commits/{sha}/status"))
    log_check_response(response)
    statuses = [
        status
        for status in response.json()["statuses"]
        if status["context"] == PUSH_CONTEXT
    ]
    if not statuses:
        raise MissingPriorStatus(f"Commit {repo_id}@{sha} has no {PUSH_CONTEXT} status")
    return arrow.get(statuses[0]["updated_at"]).datetime
