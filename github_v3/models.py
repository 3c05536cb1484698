"""Pydantic models for GitHub v3 API resources.

Every model is a frozen snapshot of server state at fetch time. Fields are
optional because GitHub omits most of them from abbreviated representations
(e.g. the ``owner`` embedded in a repository or the ``user`` of a comment).
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class GitHubModel(BaseModel):
    """Base class for read-only API resources."""

    model_config = {"frozen": True, "populate_by_name": True}


# Users and organizations


class GitUser(GitHubModel):
    """Abbreviated user as embedded in other resources."""

    id: int | None = Field(None, description="User ID")
    login: str | None = Field(None, description="Username")
    avatar_url: str | None = Field(None, description="Avatar image URL")
    gravatar_id: str | None = Field(None, description="Gravatar ID")
    url: str | None = Field(None, description="API URL for the user")
    type: str | None = Field(None, description="User type (User, Organization, Bot)")


class Plan(GitHubModel):
    """Billing plan of a user or organization."""

    name: str | None = None
    space: int | None = None
    collaborators: int | None = None
    private_repos: int | None = None


class User(GitUser):
    """Full user profile."""

    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    plan: Plan | None = None


class Org(User):
    """Organization profile."""

    billing_email: str | None = Field(None, description="Billing address, visible to owners only")


class Team(GitHubModel):
    """Organization team."""

    id: int | None = None
    url: str | None = None
    name: str | None = None
    slug: str | None = None
    permission: str | None = Field(None, description="pull, push or admin")
    members_count: int | None = None
    repos_count: int | None = None


class Key(GitHubModel):
    """Public SSH key of a user or deploy key of a repository."""

    id: int | None = None
    key: str | None = None
    url: str | None = None
    title: str | None = None
    verified: bool | None = None


class MembershipStatus(str, Enum):
    """Outcome of an organization membership check."""

    MEMBER = "member"
    NON_MEMBER = "non_member"
    UNCONFIRMED = "unconfirmed"


# Repositories


class Repo(GitHubModel):
    """GitHub repository."""

    id: int | None = Field(None, description="Repository ID")
    owner: GitUser | None = Field(None, description="Owner of the repository")
    name: str | None = Field(None, description="Repository name")
    full_name: str | None = Field(None, description="Repository name in 'owner/repo' format")
    description: str | None = None
    private: bool | None = None
    fork: bool | None = None
    homepage: str | None = None
    language: str | None = None
    size: int | None = None
    forks: int | None = None
    forks_count: int | None = None
    watchers: int | None = None
    watchers_count: int | None = None
    stargazers_count: int | None = None
    open_issues: int | None = None
    open_issues_count: int | None = None
    master_branch: str | None = None
    default_branch: str | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None
    pushed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    permissions: dict[str, bool] | None = None
    organization: GitUser | None = None
    parent: "Repo | None" = Field(None, description="Repository this one was forked from")
    source: "Repo | None" = Field(None, description="Root of the fork network")

    url: str | None = None
    html_url: str | None = None
    clone_url: str | None = None
    git_url: str | None = None
    ssh_url: str | None = None
    svn_url: str | None = None
    mirror_url: str | None = None
    archive_url: str | None = None
    assignees_url: str | None = None
    blobs_url: str | None = None
    branches_url: str | None = None
    collaborators_url: str | None = None
    comments_url: str | None = None
    commits_url: str | None = None
    compare_url: str | None = None
    contents_url: str | None = None
    contributors_url: str | None = None
    downloads_url: str | None = None
    events_url: str | None = None
    forks_url: str | None = None
    git_commits_url: str | None = None
    git_refs_url: str | None = None
    git_tags_url: str | None = None
    hooks_url: str | None = None
    issue_comment_url: str | None = None
    issue_events_url: str | None = None
    issues_url: str | None = None
    keys_url: str | None = None
    labels_url: str | None = None
    languages_url: str | None = None
    merges_url: str | None = None
    milestones_url: str | None = None
    notifications_url: str | None = None
    pulls_url: str | None = None
    stargazers_url: str | None = None
    statuses_url: str | None = None
    subscribers_url: str | None = None
    subscription_url: str | None = None
    tags_url: str | None = None
    teams_url: str | None = None
    trees_url: str | None = None


class Contributor(GitUser):
    """Repository contributor with their commit count."""

    contributions: int | None = None


class ObjectRef(GitHubModel):
    """Pointer to a git object (commit, tree, tag or blob)."""

    sha: str | None = None
    url: str | None = None
    type: str | None = None


class CommitAuthor(GitHubModel):
    """Author or committer signature of a git commit."""

    name: str | None = None
    email: str | None = None
    date: datetime | None = None


class CommitDetail(GitHubModel):
    """The git-level part of a repository commit."""

    url: str | None = None
    message: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    tree: ObjectRef | None = None
    comment_count: int | None = None


class CommitStats(GitHubModel):
    additions: int | None = None
    deletions: int | None = None
    total: int | None = None


class CommitFile(GitHubModel):
    """File changed by a commit or a pull request."""

    sha: str | None = None
    filename: str | None = None
    status: str | None = Field(None, description="added, removed or modified")
    additions: int | None = None
    deletions: int | None = None
    changes: int | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None
    patch: str | None = None


class Commit(GitHubModel):
    """Repository commit, as returned by the commits and merges endpoints."""

    sha: str | None = None
    url: str | None = None
    html_url: str | None = None
    comments_url: str | None = None
    commit: CommitDetail | None = None
    author: GitUser | None = None
    committer: GitUser | None = None
    parents: list[ObjectRef] = Field(default_factory=list)
    stats: CommitStats | None = None
    files: list[CommitFile] = Field(default_factory=list)


class Branch(GitHubModel):
    """Repository branch. The single-branch endpoint also fills ``links``."""

    name: str | None = None
    commit: Commit | None = None
    links: dict[str, Any] | None = Field(None, alias="_links")


class Tag(GitHubModel):
    """Repository tag."""

    name: str | None = None
    commit: ObjectRef | None = None
    zipball_url: str | None = None
    tarball_url: str | None = None


class Content(GitHubModel):
    """File, directory entry, symlink or submodule in a repository."""

    type: str | None = None
    encoding: str | None = None
    size: int | None = None
    name: str | None = None
    path: str | None = None
    content: str | None = Field(None, description="Base64 encoded file content")
    sha: str | None = None
    url: str | None = None
    git_url: str | None = None
    html_url: str | None = None
    download_url: str | None = None
    links: dict[str, str] | None = Field(None, alias="_links")


class Status(GitHubModel):
    """Commit status."""

    id: int | None = None
    url: str | None = None
    state: str | None = Field(None, description="pending, success, error or failure")
    target_url: str | None = None
    description: str | None = None
    context: str | None = None
    creator: GitUser | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Hook(GitHubModel):
    """Repository webhook."""

    id: int | None = None
    url: str | None = None
    name: str | None = None
    events: list[str] = Field(default_factory=list)
    active: bool | None = None
    config: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Git data


class Blob(GitHubModel):
    content: str | None = None
    encoding: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None


class GitCommit(GitHubModel):
    """Raw git commit object."""

    sha: str | None = None
    url: str | None = None
    message: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    tree: ObjectRef | None = None
    parents: list[ObjectRef] = Field(default_factory=list)


class TreeEntry(GitHubModel):
    path: str | None = None
    mode: str | None = None
    type: str | None = None
    size: int | None = None
    sha: str | None = None
    url: str | None = None


class Tree(GitHubModel):
    """Git tree. ``truncated`` is set when a recursive listing was cut short."""

    sha: str | None = None
    url: str | None = None
    tree: list[TreeEntry] = Field(default_factory=list)
    truncated: bool | None = None


class GitTag(GitHubModel):
    """Annotated tag object."""

    tag: str | None = None
    sha: str | None = None
    url: str | None = None
    message: str | None = None
    tagger: CommitAuthor | None = None
    object: ObjectRef | None = None


class Reference(GitHubModel):
    ref: str | None = None
    url: str | None = None
    object: ObjectRef | None = None


class GitIgnoreTemplate(GitHubModel):
    name: str | None = None
    source: str | None = None


# Issues


class Label(GitHubModel):
    """Issue label."""

    url: str | None = None
    name: str | None = Field(None, description="Label name")
    color: str | None = Field(None, description="Label color (hex, no leading #)")


class Milestone(GitHubModel):
    """Issue milestone."""

    url: str | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    description: str | None = None
    creator: GitUser | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    created_at: datetime | None = None
    due_on: datetime | None = None


class IssuePullLinks(GitHubModel):
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None


class Issue(GitHubModel):
    """GitHub issue."""

    id: int | None = Field(None, description="Issue ID")
    number: int | None = Field(None, description="Issue number within the repository")
    url: str | None = None
    html_url: str | None = None
    state: str | None = Field(None, description="open or closed")
    title: str | None = None
    body: str | None = None
    user: GitUser | None = None
    labels: list[Label] = Field(default_factory=list)
    assignee: GitUser | None = None
    milestone: Milestone | None = None
    comments: int | None = None
    pull_request: IssuePullLinks | None = None
    repository: Repo | None = None
    closed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IssueEvent(GitHubModel):
    """Issue timeline event (closed, merged, referenced, ...)."""

    id: int | None = None
    url: str | None = None
    actor: GitUser | None = None
    event: str | None = None
    commit_id: str | None = None
    created_at: datetime | None = None
    issue: Issue | None = None


class Comment(GitHubModel):
    """Issue or gist comment."""

    id: int | None = None
    url: str | None = None
    html_url: str | None = None
    body: str | None = None
    user: GitUser | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Pull requests


class PullRef(GitHubModel):
    """Head or base of a pull request."""

    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    user: GitUser | None = None
    repo: Repo | None = None


class PullRequest(GitHubModel):
    """GitHub pull request."""

    id: int | None = None
    number: int | None = None
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    issue_url: str | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    user: GitUser | None = None
    head: PullRef | None = None
    base: PullRef | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    merged_by: GitUser | None = None
    merge_commit_sha: str | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None
    links: dict[str, Any] | None = Field(None, alias="_links")


class PullMerge(GitHubModel):
    """Result of a pull request merge attempt."""

    sha: str | None = None
    merged: bool | None = Field(None, description="False when GitHub refused the merge (405)")
    message: str | None = None


class PullComment(GitHubModel):
    """Review comment on a pull request diff."""

    id: int | None = None
    url: str | None = None
    body: str | None = None
    path: str | None = None
    position: int | None = None
    original_position: int | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    in_reply_to_id: int | None = None
    user: GitUser | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    links: dict[str, Any] | None = Field(None, alias="_links")


# Gists


class GistFile(GitHubModel):
    filename: str | None = None
    size: int | None = None
    raw_url: str | None = None
    type: str | None = None
    language: str | None = None
    content: str | None = Field(None, description="Only present when fetching a single gist")


class GistFork(GitHubModel):
    user: GitUser | None = None
    url: str | None = None
    created_at: datetime | None = None


class GistChangeStatus(GitHubModel):
    additions: int | None = None
    deletions: int | None = None
    total: int | None = None


class GistHistory(GitHubModel):
    url: str | None = None
    version: str | None = None
    user: GitUser | None = None
    change_status: GistChangeStatus | None = None
    committed_at: datetime | None = None


class Gist(GitHubModel):
    """GitHub gist."""

    id: str | None = Field(None, description="Gist ID")
    url: str | None = None
    html_url: str | None = None
    description: str | None = None
    public: bool | None = None
    user: GitUser | None = None
    owner: GitUser | None = None
    files: dict[str, GistFile] = Field(default_factory=dict)
    comments: int | None = None
    comments_url: str | None = None
    git_pull_url: str | None = None
    git_push_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    forks: list[GistFork] = Field(default_factory=list)
    history: list[GistHistory] = Field(default_factory=list)


# Activity


class EventRepo(GitHubModel):
    id: int | None = None
    name: str | None = None
    url: str | None = None


class Event(GitHubModel):
    """Public activity event. ``payload`` varies with ``type``."""

    id: str | None = Field(None, description="Event ID")
    type: str | None = Field(None, description="Event type (PushEvent, WatchEvent, ...)")
    public: bool | None = None
    payload: dict[str, Any] = Field(default_factory=dict)
    repo: EventRepo | None = None
    actor: GitUser | None = None
    org: GitUser | None = None
    created_at: datetime | None = None


class NotificationSubject(GitHubModel):
    title: str | None = None
    url: str | None = None
    latest_comment_url: str | None = None
    type: str | None = None


class Notification(GitHubModel):
    """Notification thread."""

    id: str | None = None
    url: str | None = None
    repository: Repo | None = None
    subject: NotificationSubject | None = None
    reason: str | None = None
    unread: bool | None = None
    updated_at: datetime | None = None
    last_read_at: datetime | None = None


class Subscription(GitHubModel):
    """Thread or repository subscription."""

    subscribed: bool | None = None
    ignored: bool | None = None
    reason: str | None = None
    url: str | None = None
    thread_url: str | None = None
    repository_url: str | None = None
    created_at: datetime | None = None


# Legacy search. Dates there are free-form strings, not ISO 8601.


class SearchIssue(GitHubModel):
    number: int | None = None
    position: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    user: str | None = None
    gravatar_id: str | None = None
    votes: int | None = None
    comments: int | None = None
    labels: list[str] = Field(default_factory=list)
    html_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class SearchRepo(GitHubModel):
    name: str | None = None
    owner: str | None = None
    username: str | None = None
    description: str | None = None
    homepage: str | None = None
    url: str | None = None
    language: str | None = None
    type: str | None = None
    private: bool | None = None
    fork: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_downloads: bool | None = None
    forks: int | None = None
    watchers: int | None = None
    followers: int | None = None
    open_issues: int | None = None
    size: int | None = None
    score: float | None = None
    created: str | None = None
    created_at: str | None = None
    pushed: str | None = None
    pushed_at: str | None = None


class SearchUser(GitHubModel):
    id: str | int | None = None
    login: str | None = None
    username: str | None = None
    name: str | None = None
    fullname: str | None = None
    email: str | None = None
    gravatar_id: str | None = None
    location: str | None = None
    language: str | None = None
    type: str | None = None
    repos: int | None = None
    public_repo_count: int | None = None
    followers: int | None = None
    followers_count: int | None = None
    score: float | None = None
    created: str | None = None
    created_at: str | None = None
