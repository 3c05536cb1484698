"""Repositories and everything scoped to a single repository."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import httpx

from ..base import BaseClient, server_message
from ..config import settings
from ..exceptions import InvalidArgumentError, MergeConflictError, TransportError
from ..models import (
    Branch,
    Commit,
    Content,
    Contributor,
    GitUser,
    Hook,
    Key,
    Repo,
    Status,
    Tag,
    Team,
)
from ..payloads import HookFields, NewRepo
from ..utils import iso_timestamp, quote_path, quote_segment, require

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSIONS = {
    "zipball": ".zip",
    "tarball": ".tar.gz",
}


def _file_part(value: str) -> str:
    """Flatten a name into one file name component."""
    return value.strip("/\\").replace("/", "-").replace("\\", "-")


class ReposAPI(BaseClient):
    # Repositories

    async def list_user_repos(
        self,
        *,
        type: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
    ) -> list[Repo]:
        """
        List repositories of the authenticated user.

        Args:
            type: all, owner, public, private or member
            sort: created, updated, pushed or full_name
            direction: asc or desc
        """
        params = {"type": type, "sort": sort, "direction": direction}
        return await self._fetch("GET", "/user/repos", list[Repo], params=params)

    async def get_repo(self, repo: str, *, owner: str | None = None) -> Repo:
        return await self._fetch("GET", self._repo_path(owner, repo), Repo)

    async def list_org_repos(self, org: str, type: str | None = None) -> list[Repo]:
        """List repositories of an organization; ``type`` is all, public, private, forks, sources or member."""
        require(org=org)
        return await self._fetch(
            "GET", f"/orgs/{quote_segment(org)}/repos", list[Repo], params={"type": type}
        )

    async def create_repo(self, new_repo: NewRepo) -> Repo:
        """Create a repository owned by the authenticated user."""
        require(name=new_repo.name)
        return await self._fetch("POST", "/user/repos", Repo, expected=201, body=new_repo)

    async def create_org_repo(self, org: str, new_repo: NewRepo) -> Repo:
        """Create a repository in an organization; the caller must be an owner or team member."""
        require(org=org, name=new_repo.name)
        return await self._fetch(
            "POST", f"/orgs/{quote_segment(org)}/repos", Repo, expected=201, body=new_repo
        )

    async def edit_repo(self, repo: str, changes: NewRepo, *, owner: str | None = None) -> Repo:
        """Edit a repository. ``changes.name`` renames it when it differs from ``repo``."""
        require(name=changes.name)
        return await self._fetch("PATCH", self._repo_path(owner, repo), Repo, body=changes)

    async def delete_repo(self, repo: str, *, owner: str | None = None) -> bool:
        """Delete a repository. Requires admin rights."""
        return await self._check("DELETE", self._repo_path(owner, repo), false_status=None)

    async def list_contributors(
        self, repo: str, *, owner: str | None = None, anon: bool = False
    ) -> list[Contributor]:
        """List contributors; ``anon`` also includes commits without a GitHub account."""
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/contributors"),
            list[Contributor],
            params={"anon": 1 if anon else None},
        )

    async def list_languages(self, repo: str, *, owner: str | None = None) -> dict[str, int]:
        """Return bytes of code per language."""
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/languages"), dict[str, int]
        )

    async def list_repo_teams(self, repo: str, *, owner: str | None = None) -> list[Team]:
        return await self._fetch("GET", self._repo_path(owner, repo, "/teams"), list[Team])

    async def list_tags(self, repo: str, *, owner: str | None = None) -> list[Tag]:
        return await self._fetch("GET", self._repo_path(owner, repo, "/tags"), list[Tag])

    async def list_branches(self, repo: str, *, owner: str | None = None) -> list[Branch]:
        return await self._fetch("GET", self._repo_path(owner, repo, "/branches"), list[Branch])

    async def get_branch(self, repo: str, branch: str, *, owner: str | None = None) -> Branch:
        require(branch=branch)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/branches/{quote_segment(branch)}"), Branch
        )

    # Contents

    async def get_contents(
        self,
        repo: str,
        path: str = "",
        *,
        owner: str | None = None,
        ref: str | None = None,
    ) -> list[Content]:
        """
        Get a file or directory.

        A directory yields its entries; a file, symlink or submodule yields a
        one-element list.
        """
        suffix = "/contents"
        if path.strip("/"):
            suffix = f"{suffix}/{quote_path(path)}"
        result = await self._fetch(
            "GET",
            self._repo_path(owner, repo, suffix),
            list[Content] | Content,
            params={"ref": ref},
        )
        if isinstance(result, Content):
            return [result]
        return result

    async def get_readme(
        self, repo: str, *, owner: str | None = None, ref: str | None = None
    ) -> Content:
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/readme"), Content, params={"ref": ref}
        )

    async def download_archive(
        self,
        repo: str,
        ref: str = "master",
        archive_format: str = "zipball",
        *,
        owner: str | None = None,
        directory: str | Path | None = None,
    ) -> Path:
        """
        Download a zipball or tarball of ``ref`` to local storage.

        The file is named ``{owner}-{repo}-{ref}.zip`` (or ``.tar.gz``) inside
        ``directory``, which defaults to settings.archive_dir. A partially
        written file is removed if the download fails.

        Returns:
            Path of the written archive
        """
        if archive_format not in ARCHIVE_EXTENSIONS:
            raise InvalidArgumentError(
                ["archive_format"],
                f"archive_format must be one of {', '.join(ARCHIVE_EXTENSIONS)}",
            )
        require(ref=ref)
        path = self._repo_path(owner, repo, f"/{archive_format}/{quote_path(ref)}")
        owner = self._owner(owner)

        target_dir = Path(directory or settings.archive_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        name = "-".join(_file_part(part) for part in (owner, repo, ref))
        target = target_dir / f"{name}{ARCHIVE_EXTENSIONS[archive_format]}"
        if target.resolve().parent != target_dir.resolve():
            raise InvalidArgumentError(["repo"], f"Archive name escapes {target_dir}: {target.name}")

        client = self._ensure_client()
        opened = False
        completed = False
        try:
            async with client.stream(
                "GET", self.build_url(path), follow_redirects=True
            ) as response:
                self.update_rate_limit(response)
                if response.status_code != 200:
                    await response.aread()
                    raise self.unexpected_status(response)
                with target.open("wb") as f:
                    opened = True
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
            completed = True
        except httpx.RequestError as e:
            raise TransportError(message=f"Request error occurred: {str(e)}") from e
        finally:
            if opened and not completed:
                target.unlink(missing_ok=True)

        logger.info(f"Downloaded {owner}/{repo}@{ref} to {target}")
        return target

    # Collaborators

    def _collaborator_path(self, owner: str | None, repo: str, user: str) -> str:
        require(user=user)
        return self._repo_path(owner, repo, f"/collaborators/{quote_segment(user)}")

    async def list_collaborators(self, repo: str, *, owner: str | None = None) -> list[GitUser]:
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/collaborators"), list[GitUser]
        )

    async def is_collaborator(self, repo: str, user: str, *, owner: str | None = None) -> bool:
        return await self._check("GET", self._collaborator_path(owner, repo, user))

    async def add_collaborator(self, repo: str, user: str, *, owner: str | None = None) -> bool:
        """Add a collaborator. Returns False if GitHub does not know the user (404)."""
        return await self._check("PUT", self._collaborator_path(owner, repo, user))

    async def remove_collaborator(self, repo: str, user: str, *, owner: str | None = None) -> bool:
        return await self._check(
            "DELETE", self._collaborator_path(owner, repo, user), false_status=None
        )

    # Forks

    async def list_forks(
        self, repo: str, *, owner: str | None = None, sort: str | None = None
    ) -> list[Repo]:
        """List forks; ``sort`` is newest, oldest or watchers."""
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/forks"), list[Repo], params={"sort": sort}
        )

    async def create_fork(
        self, repo: str, *, owner: str | None = None, organization: str | None = None
    ) -> Repo:
        """
        Fork a repository into the authenticated account, or into ``organization``.

        Forking is asynchronous on GitHub's side; the returned repository may
        not be ready for git operations yet.
        """
        body = {"organization": organization} if organization else None
        return await self._fetch(
            "POST", self._repo_path(owner, repo, "/forks"), Repo, expected=202, body=body
        )

    # Deploy keys

    async def list_deploy_keys(self, repo: str, *, owner: str | None = None) -> list[Key]:
        return await self._fetch("GET", self._repo_path(owner, repo, "/keys"), list[Key])

    async def get_deploy_key(self, repo: str, key_id: int, *, owner: str | None = None) -> Key:
        require(key_id=key_id)
        return await self._fetch("GET", self._repo_path(owner, repo, f"/keys/{key_id}"), Key)

    async def create_deploy_key(
        self, repo: str, key: str, title: str | None = None, *, owner: str | None = None
    ) -> Key:
        require(key=key)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/keys"),
            Key,
            expected=201,
            body={"key": key, "title": title},
        )

    async def edit_deploy_key(
        self,
        repo: str,
        key_id: int,
        *,
        key: str | None = None,
        title: str | None = None,
        owner: str | None = None,
    ) -> Key:
        require(key_id=key_id)
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/keys/{key_id}"),
            Key,
            body={"key": key, "title": title},
        )

    async def delete_deploy_key(self, repo: str, key_id: int, *, owner: str | None = None) -> bool:
        require(key_id=key_id)
        return await self._check(
            "DELETE", self._repo_path(owner, repo, f"/keys/{key_id}"), false_status=None
        )

    # Commits

    async def list_commits(
        self,
        repo: str,
        *,
        owner: str | None = None,
        sha: str | None = None,
        path: str | None = None,
        author: str | None = None,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> list[Commit]:
        """
        List commits.

        Args:
            sha: SHA or branch to start listing from
            path: Only commits touching this file path
            author: GitHub login or email address
            since: Only commits after this datetime
            until: Only commits before this datetime
        """
        params = {
            "sha": sha,
            "path": path,
            "author": author,
            "since": iso_timestamp(since),
            "until": iso_timestamp(until),
        }
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/commits"), list[Commit], params=params
        )

    async def get_commit(self, repo: str, sha: str, *, owner: str | None = None) -> Commit:
        require(sha=sha)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/commits/{quote_segment(sha)}"), Commit
        )

    async def merge(
        self,
        repo: str,
        base: str,
        head: str,
        commit_message: str | None = None,
        *,
        owner: str | None = None,
    ) -> Commit | None:
        """
        Merge ``head`` into the ``base`` branch.

        Returns:
            The merge commit, or None when ``base`` already contains ``head``

        Raises:
            MergeConflictError: On a conflict (409) or a missing base or head (404),
                carrying GitHub's message
        """
        require(base=base, head=head)
        response = await self._send(
            "POST",
            self._repo_path(owner, repo, "/merges"),
            body={"base": base, "head": head, "commit_message": commit_message},
        )
        if response.status_code == 201:
            return self.read_response(response, Commit)
        if response.status_code == 204:
            return None
        if response.status_code in (404, 409):
            raise MergeConflictError(
                message=server_message(response) or f"{response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        raise self.unexpected_status(response)

    # Statuses

    async def list_statuses(self, repo: str, sha: str, *, owner: str | None = None) -> list[Status]:
        """List statuses for a SHA, branch or tag, newest first."""
        require(sha=sha)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/statuses/{quote_segment(sha)}"), list[Status]
        )

    async def create_status(
        self,
        repo: str,
        sha: str,
        state: str,
        *,
        target_url: str | None = None,
        description: str | None = None,
        context: str | None = None,
        owner: str | None = None,
    ) -> Status:
        """Create a commit status; ``state`` is pending, success, error or failure."""
        require(sha=sha, state=state)
        body = {
            "state": state,
            "target_url": target_url,
            "description": description,
            "context": context,
        }
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, f"/statuses/{quote_segment(sha)}"),
            Status,
            expected=201,
            body=body,
        )

    # Hooks

    async def list_hooks(self, repo: str, *, owner: str | None = None) -> list[Hook]:
        return await self._fetch("GET", self._repo_path(owner, repo, "/hooks"), list[Hook])

    async def get_hook(self, repo: str, hook_id: int, *, owner: str | None = None) -> Hook:
        require(hook_id=hook_id)
        return await self._fetch("GET", self._repo_path(owner, repo, f"/hooks/{hook_id}"), Hook)

    async def create_hook(
        self,
        repo: str,
        name: str,
        config: dict[str, Any],
        *,
        events: list[str] | None = None,
        active: bool = True,
        owner: str | None = None,
    ) -> Hook:
        """
        Create a hook.

        Args:
            repo: Repository name
            name: Service name, "web" for a plain webhook
            config: Service settings, e.g. {"url": ..., "content_type": "json"}
            events: Events that trigger the hook (GitHub defaults to ["push"])
            active: Whether deliveries are sent
            owner: Repository owner (defaults to the authenticated login)
        """
        require(name=name)
        if not config:
            raise InvalidArgumentError(["config"])
        hook = HookFields(name=name, config=config, events=events, active=active)
        return await self._fetch(
            "POST", self._repo_path(owner, repo, "/hooks"), Hook, expected=201, body=hook
        )

    async def edit_hook(
        self, repo: str, hook_id: int, hook: HookFields, *, owner: str | None = None
    ) -> Hook:
        require(hook_id=hook_id, name=hook.name)
        if not hook.config:
            raise InvalidArgumentError(["config"])
        return await self._fetch(
            "PATCH", self._repo_path(owner, repo, f"/hooks/{hook_id}"), Hook, body=hook
        )

    async def test_hook(self, repo: str, hook_id: int, *, owner: str | None = None) -> bool:
        """Trigger the hook with the latest push to the repository."""
        require(hook_id=hook_id)
        return await self._check(
            "POST", self._repo_path(owner, repo, f"/hooks/{hook_id}/tests"), false_status=None
        )

    async def delete_hook(self, repo: str, hook_id: int, *, owner: str | None = None) -> bool:
        require(hook_id=hook_id)
        return await self._check(
            "DELETE", self._repo_path(owner, repo, f"/hooks/{hook_id}"), false_status=None
        )
