"""Helpers for tests."""

ORG_ID = 1001
SENDER_ID = 2002
REPO_ID = 3003
GROUP_REPO_ID = 4004


def make_payload(repo_id=REPO_ID, org_id=ORG_ID, sender_id=SENDER_ID, **kwargs):
    """A minimal webhook payload, with extra top-level keys from kwargs."""
    payload = {
        "organization": {"id": org_id, "login": "an-org"},
        "sender": {"id": sender_id, "login": "a-student"},
        "repository": {"id": repo_id, "full_name": "an-org/a-repo"},
    }
    payload.update(kwargs)
    return payload
