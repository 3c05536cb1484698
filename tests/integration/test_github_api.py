"""Integration tests hitting the real GitHub API.

They need GITHUB_TOKEN (and optionally GITHUB_LOGIN) in the environment and
are skipped otherwise. Mark them as slow and integration for selective test
running.
"""

import os

import pytest

from github_v3 import GitHubClient
from github_v3.models import GitIgnoreTemplate, Repo, User

pytestmark = pytest.mark.skipif(
    not os.environ.get("GITHUB_TOKEN"), reason="GITHUB_TOKEN is not set"
)


@pytest.mark.integration
@pytest.mark.slow
class TestRealGitHubAPI:
    """Integration tests with real GitHub API."""

    async def test_get_user(self):
        """Test fetching a well-known public user."""
        async with GitHubClient() as client:
            user = await client.get_user("octocat")

            assert isinstance(user, User)
            assert user.login == "octocat"

    async def test_get_public_repo(self):
        """Test fetching a public repository by owner."""
        async with GitHubClient() as client:
            repo = await client.get_repo("Hello-World", owner="octocat")

            assert isinstance(repo, Repo)
            assert repo.full_name == "octocat/Hello-World"

    async def test_rate_limit_is_tracked(self):
        """Test the counters follow the response headers."""
        async with GitHubClient() as client:
            await client.list_gitignore_templates()

            assert client.calls_limit > 0
            assert 0 <= client.calls_remaining <= client.calls_limit

    async def test_gitignore_template(self):
        """Test reading a gitignore template."""
        async with GitHubClient() as client:
            template = await client.get_gitignore_template("Python")

            assert isinstance(template, GitIgnoreTemplate)
            assert "__pycache__" in template.source

    async def test_render_markdown(self):
        """Test rendering markdown."""
        async with GitHubClient() as client:
            html = await client.render_markdown("Hello **world**")

            assert "<strong>world</strong>" in html
