"""Settings for how the webhook talks to GitHub."""

import os


# The token used to read references and write commit statuses on the
# classroom's repositories.
GITHUB_PERSONAL_TOKEN = os.environ.get("GITHUB_PERSONAL_TOKEN", None)
