"""GitHub v3 API Client.

Async bindings for the GitHub v3 REST API: one method per endpoint, typed
pydantic results and rate-limit bookkeeping.
"""

from .client import GitHubClient
from .config import Settings, settings
from .exceptions import (
    ForbiddenError,
    GitHubAPIError,
    InvalidArgumentError,
    MergeConflictError,
    RateLimitError,
    ServiceUnavailableError,
    TransportError,
    UnexpectedStatusError,
    UnprocessableEntityError,
    ValidationError,
)
from .models import (
    Blob,
    Branch,
    Comment,
    Commit,
    CommitFile,
    Content,
    Contributor,
    Event,
    Gist,
    GitCommit,
    GitIgnoreTemplate,
    GitTag,
    GitUser,
    Hook,
    Issue,
    IssueEvent,
    Key,
    Label,
    MembershipStatus,
    Milestone,
    Notification,
    Org,
    PullComment,
    PullMerge,
    PullRequest,
    Reference,
    Repo,
    SearchIssue,
    SearchRepo,
    SearchUser,
    Status,
    Subscription,
    Tag,
    Team,
    Tree,
    User,
)
from .payloads import (
    GistFileContent,
    HookFields,
    IssueFields,
    MilestoneFields,
    NewGist,
    NewGitCommit,
    NewPullComment,
    NewPullRequest,
    NewRepo,
    NewTag,
    NewTeam,
    NewTree,
    NewTreeEntry,
    Signature,
)

__all__ = [
    # Client
    "GitHubClient",
    # Config
    "Settings",
    "settings",
    # Exceptions
    "GitHubAPIError",
    "InvalidArgumentError",
    "TransportError",
    "ValidationError",
    "UnexpectedStatusError",
    "ForbiddenError",
    "RateLimitError",
    "UnprocessableEntityError",
    "ServiceUnavailableError",
    "MergeConflictError",
    # Models
    "Blob",
    "Branch",
    "Comment",
    "Commit",
    "CommitFile",
    "Content",
    "Contributor",
    "Event",
    "Gist",
    "GitCommit",
    "GitIgnoreTemplate",
    "GitTag",
    "GitUser",
    "Hook",
    "Issue",
    "IssueEvent",
    "Key",
    "Label",
    "MembershipStatus",
    "Milestone",
    "Notification",
    "Org",
    "PullComment",
    "PullMerge",
    "PullRequest",
    "Reference",
    "Repo",
    "SearchIssue",
    "SearchRepo",
    "SearchUser",
    "Status",
    "Subscription",
    "Tag",
    "Team",
    "Tree",
    "User",
    # Request payloads
    "GistFileContent",
    "HookFields",
    "IssueFields",
    "MilestoneFields",
    "NewGist",
    "NewGitCommit",
    "NewPullComment",
    "NewPullRequest",
    "NewRepo",
    "NewTag",
    "NewTeam",
    "NewTree",
    "NewTreeEntry",
    "Signature",
]

__version__ = "1.0.0"
