"""Endpoint mixins, one per GitHub API resource area."""

from .activity import ActivityAPI
from .gists import GistsAPI
from .gitdata import GitDataAPI
from .gitignore import GitignoreAPI
from .issues import IssuesAPI
from .markdown import MarkdownAPI
from .orgs import OrgsAPI
from .pulls import PullsAPI
from .repos import ReposAPI
from .search import SearchAPI
from .users import UsersAPI

__all__ = [
    "ActivityAPI",
    "GistsAPI",
    "GitDataAPI",
    "GitignoreAPI",
    "IssuesAPI",
    "MarkdownAPI",
    "OrgsAPI",
    "PullsAPI",
    "ReposAPI",
    "SearchAPI",
    "UsersAPI",
]
