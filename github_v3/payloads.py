"""Request bodies for GitHub v3 write endpoints.

``None`` fields are left out of the encoded body, so partial updates only
send what the caller set.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class Payload(BaseModel):
    """Base class for request bodies."""

    model_config = {"populate_by_name": True}


class NewRepo(Payload):
    """Repository creation or edit settings."""

    name: str = Field(description="Repository name")
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None
    team_id: int | None = Field(None, description="Team granted access, organization repos only")
    auto_init: bool | None = None
    gitignore_template: str | None = None
    default_branch: str | None = Field(None, description="Only honoured on edit")


class GistFileContent(Payload):
    content: str | None = None
    filename: str | None = Field(None, description="New name when renaming a file on edit")


class NewGist(Payload):
    """Gist creation or edit body."""

    description: str | None = None
    public: bool | None = None
    files: dict[str, GistFileContent] = Field(default_factory=dict)


class Signature(Payload):
    name: str
    email: str
    date: datetime | None = None


class NewGitCommit(Payload):
    message: str
    tree: str = Field(description="SHA of the tree object")
    parents: list[str] = Field(default_factory=list)
    author: Signature | None = None
    committer: Signature | None = None


class NewTreeEntry(Payload):
    """Tree entry; give either ``sha`` or ``content``."""

    path: str
    mode: str = Field(default="100644", description="100644, 100755, 040000, 160000 or 120000")
    type: str = Field(default="blob", description="blob, tree or commit")
    sha: str | None = None
    content: str | None = None


class NewTree(Payload):
    tree: list[NewTreeEntry]
    base_tree: str | None = None


class NewTag(Payload):
    tag: str
    message: str
    object: str = Field(description="SHA of the tagged object")
    type: str = "commit"
    tagger: Signature | None = None


class IssueFields(Payload):
    """Issue creation or edit body."""

    title: str | None = None
    body: str | None = None
    assignee: str | None = None
    milestone: int | None = None
    labels: list[str] | None = None
    state: str | None = Field(None, description="open or closed, edit only")


class MilestoneFields(Payload):
    title: str | None = None
    state: str | None = None
    description: str | None = None
    due_on: datetime | None = None


class NewTeam(Payload):
    name: str
    permission: str | None = Field(None, description="pull, push or admin")
    repo_names: list[str] | None = Field(None, description="Repositories as 'owner/repo'")


class NewPullRequest(Payload):
    """Pull request body; ``issue`` turns an existing issue into a pull request."""

    base: str
    head: str
    title: str | None = None
    body: str | None = None
    issue: int | None = None


class NewPullComment(Payload):
    """Review comment, or a reply when ``in_reply_to`` is set."""

    body: str
    commit_id: str | None = None
    path: str | None = None
    position: int | None = None
    in_reply_to: int | None = None


class HookFields(Payload):
    name: str | None = None
    config: dict[str, Any] | None = None
    events: list[str] | None = None
    add_events: list[str] | None = None
    remove_events: list[str] | None = None
    active: bool | None = None
