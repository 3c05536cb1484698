"""Unit tests for resource models and request payloads."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from github_v3.models import Branch, Commit, Event, Gist, Issue, MembershipStatus, Repo
from github_v3.payloads import GistFileContent, NewGist, NewPullComment, NewTree, NewTreeEntry


@pytest.mark.unit
class TestRepo:
    """Tests for the Repo model."""

    def test_parse(self, sample_repo_data):
        """Test a full repository parses."""
        repo = Repo.model_validate(sample_repo_data)

        assert repo.id == 1296269
        assert repo.owner.login == "octocat"
        assert repo.pushed_at == datetime(2011, 1, 26, 19, 6, 43, tzinfo=timezone.utc)
        assert repo.permissions == {"admin": False, "push": False, "pull": True}

    def test_nested_parent(self, sample_repo_data):
        """Test a fork embeds its parent repository."""
        fork = Repo.model_validate({**sample_repo_data, "fork": True, "parent": sample_repo_data})

        assert fork.parent.full_name == "octocat/Hello-World"
        assert fork.source is None

    def test_frozen(self, sample_repo_data):
        """Test fetched resources cannot be modified."""
        repo = Repo.model_validate(sample_repo_data)

        with pytest.raises(ValidationError):
            repo.name = "renamed"

    def test_unknown_fields_ignored(self):
        """Test new API fields do not break parsing."""
        repo = Repo.model_validate({"id": 1, "topics": ["a"], "visibility": "public"})

        assert repo.id == 1


@pytest.mark.unit
class TestOtherModels:
    """Tests for the remaining models."""

    def test_issue(self, sample_issue_data):
        """Test an issue with labels and assignee parses."""
        issue = Issue.model_validate(sample_issue_data)

        assert issue.number == 1347
        assert issue.labels[0].name == "bug"
        assert issue.assignee.login == "octocat"
        assert issue.milestone is None

    def test_commit(self, sample_commit_data):
        """Test a repository commit parses with its git details."""
        commit = Commit.model_validate(sample_commit_data)

        assert commit.commit.author.name == "Monalisa Octocat"
        assert commit.parents[0].sha == "553c2077f0edc3d5dc5d17262f6aa498e69d6f8e"
        assert commit.files == []

    def test_links_alias(self):
        """Test _links is exposed as links."""
        branch = Branch.model_validate(
            {"name": "master", "_links": {"html": "https://github.com/octocat/Hello-World/tree/master"}}
        )

        assert branch.links["html"].endswith("/tree/master")

    def test_event_payload_kept_raw(self, sample_event_data):
        """Test event payloads stay plain dictionaries."""
        event = Event.model_validate(sample_event_data)

        assert event.type == "WatchEvent"
        assert event.payload == {"action": "started"}
        assert event.repo.name == "octocat/Hello-World"

    def test_gist_files(self, sample_gist_data):
        """Test gist files are keyed by name."""
        gist = Gist.model_validate(sample_gist_data)

        assert gist.files["ring.erl"].size == 932

    def test_membership_status_values(self):
        """Test membership outcomes have stable string values."""
        assert MembershipStatus.MEMBER == "member"
        assert MembershipStatus.NON_MEMBER == "non_member"
        assert MembershipStatus.UNCONFIRMED == "unconfirmed"


@pytest.mark.unit
class TestPayloads:
    """Tests for request payload serialization."""

    def test_new_gist(self):
        """Test nested file contents serialize without empty fields."""
        gist = NewGist(description="demo", public=True, files={"a.txt": GistFileContent(content="hi")})

        assert gist.model_dump(exclude_none=True) == {
            "description": "demo",
            "public": True,
            "files": {"a.txt": {"content": "hi"}},
        }

    def test_tree_entry_defaults(self):
        """Test tree entries default to a regular file blob."""
        tree = NewTree(tree=[NewTreeEntry(path="README", content="hello")])

        assert tree.model_dump(exclude_none=True) == {
            "tree": [{"path": "README", "mode": "100644", "type": "blob", "content": "hello"}]
        }

    def test_pull_comment_requires_body(self):
        """Test a review comment cannot be built without a body."""
        with pytest.raises(ValidationError):
            NewPullComment()
