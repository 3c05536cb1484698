"""Pytest fixtures for github_v3 tests."""

import pytest

from github_v3 import GitHubClient

API = "https://api.github.com"


@pytest.fixture
async def client():
    """Client for octocat with a fixed token, open for the duration of a test."""
    async with GitHubClient(token="test-token", login="octocat") as github:
        yield github


@pytest.fixture
def sample_user_data():
    """Sample abbreviated user data for testing."""
    return {
        "id": 583231,
        "login": "octocat",
        "gravatar_id": "",
        "url": "https://api.github.com/users/octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "type": "User",
    }


@pytest.fixture
def sample_repo_data(sample_user_data):
    """Sample repository data for testing."""
    return {
        "id": 1296269,
        "owner": sample_user_data,
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "description": "This your first repo!",
        "private": False,
        "fork": False,
        "url": "https://api.github.com/repos/octocat/Hello-World",
        "html_url": "https://github.com/octocat/Hello-World",
        "clone_url": "https://github.com/octocat/Hello-World.git",
        "git_url": "git://github.com/octocat/Hello-World.git",
        "ssh_url": "git@github.com:octocat/Hello-World.git",
        "language": None,
        "forks_count": 9,
        "stargazers_count": 80,
        "watchers_count": 80,
        "size": 108,
        "default_branch": "master",
        "open_issues_count": 0,
        "has_issues": True,
        "has_wiki": True,
        "has_downloads": True,
        "pushed_at": "2011-01-26T19:06:43Z",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:14:43Z",
        "permissions": {"admin": False, "push": False, "pull": True},
    }


@pytest.fixture
def sample_issue_data(sample_user_data):
    """Sample issue data for testing."""
    return {
        "id": 1,
        "number": 1347,
        "url": "https://api.github.com/repos/octocat/Hello-World/issues/1347",
        "html_url": "https://github.com/octocat/Hello-World/issues/1347",
        "state": "open",
        "title": "Found a bug",
        "body": "I'm having a problem with this.",
        "user": sample_user_data,
        "labels": [
            {
                "url": "https://api.github.com/repos/octocat/Hello-World/labels/bug",
                "name": "bug",
                "color": "f29513",
            }
        ],
        "assignee": sample_user_data,
        "milestone": None,
        "comments": 0,
        "pull_request": {
            "html_url": None,
            "diff_url": None,
            "patch_url": None,
        },
        "closed_at": None,
        "created_at": "2011-04-22T13:33:48Z",
        "updated_at": "2011-04-22T13:33:48Z",
    }


@pytest.fixture
def sample_commit_data(sample_user_data):
    """Sample repository commit data for testing."""
    return {
        "sha": "7638417db6d59f3c431d3e1f261cc637155684cd",
        "url": "https://api.github.com/repos/octocat/Hello-World/commits/7638417db6d59f3c431d3e1f261cc637155684cd",
        "commit": {
            "url": "https://api.github.com/repos/octocat/Hello-World/git/commits/7638417db6d59f3c431d3e1f261cc637155684cd",
            "message": "Merge pull request #6",
            "author": {
                "name": "Monalisa Octocat",
                "email": "support@github.com",
                "date": "2011-04-14T16:00:49Z",
            },
            "committer": {
                "name": "Monalisa Octocat",
                "email": "support@github.com",
                "date": "2011-04-14T16:00:49Z",
            },
            "tree": {
                "url": "https://api.github.com/repos/octocat/Hello-World/tree/6dcb09b5b57875f334f61aebed695e2e4193db5e",
                "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
            },
            "comment_count": 0,
        },
        "author": sample_user_data,
        "committer": sample_user_data,
        "parents": [
            {
                "url": "https://api.github.com/repos/octocat/Hello-World/commits/553c2077f0edc3d5dc5d17262f6aa498e69d6f8e",
                "sha": "553c2077f0edc3d5dc5d17262f6aa498e69d6f8e",
            }
        ],
    }


@pytest.fixture
def sample_event_data(sample_user_data):
    """Sample WatchEvent data for testing."""
    return {
        "id": "22249084947",
        "type": "WatchEvent",
        "actor": sample_user_data,
        "repo": {
            "id": 1296269,
            "name": "octocat/Hello-World",
            "url": "https://api.github.com/repos/octocat/Hello-World",
        },
        "payload": {"action": "started"},
        "public": True,
        "created_at": "2022-06-09T12:47:28Z",
    }


@pytest.fixture
def sample_gist_data(sample_user_data):
    """Sample gist data for testing."""
    return {
        "id": "aa5a315d61ae9438b18d",
        "url": "https://api.github.com/gists/aa5a315d61ae9438b18d",
        "description": "description of gist",
        "public": True,
        "user": sample_user_data,
        "files": {
            "ring.erl": {
                "size": 932,
                "filename": "ring.erl",
                "raw_url": "https://gist.githubusercontent.com/raw/365370/8c4d2d43d178df44f4c03a7f2ac0ff512853564e/ring.erl",
                "content": "contents of gist",
            }
        },
        "comments": 0,
        "created_at": "2010-04-14T02:15:15Z",
        "updated_at": "2011-06-20T11:34:15Z",
    }


@pytest.fixture
def rate_limit_headers():
    """Rate-limit headers as GitHub sends them."""
    return {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "4987"}
