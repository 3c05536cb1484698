"""Organizations, members and teams."""

import logging

import httpx

from ..base import BaseClient
from ..exceptions import InvalidArgumentError, UnprocessableEntityError
from ..models import GitUser, MembershipStatus, Org, Repo, Team
from ..payloads import NewTeam
from ..utils import quote_segment, require

logger = logging.getLogger(__name__)


class OrgsAPI(BaseClient):
    def _org_path(self, org: str, suffix: str = "") -> str:
        require(org=org)
        return f"/orgs/{quote_segment(org)}{suffix}"

    def _team_path(self, team_id: int, suffix: str = "") -> str:
        require(team_id=team_id)
        return f"/teams/{team_id}{suffix}"

    def _redirect_path(self, response: httpx.Response) -> str:
        """API path of a redirect target; only the configured host is followed."""
        location = response.headers.get("Location")
        if not location:
            raise self.unexpected_status(response)
        if location.startswith(self.base_url):
            return location[len(self.base_url):]
        return httpx.URL(location).raw_path.decode()

    # Organizations

    async def list_user_orgs(self, page: int = 1) -> list[Org]:
        """List organizations of the authenticated user."""
        if page < 1:
            raise InvalidArgumentError(["page"], f"page must be at least 1, got {page}")
        return await self._fetch("GET", "/user/orgs", list[Org], params={"page": page})

    async def list_public_user_orgs(self, user: str, page: int = 1) -> list[Org]:
        """List public organization memberships of a user."""
        require(user=user)
        if page < 1:
            raise InvalidArgumentError(["page"], f"page must be at least 1, got {page}")
        return await self._fetch(
            "GET", f"/users/{quote_segment(user)}/orgs", list[Org], params={"page": page}
        )

    async def get_org(self, org: str) -> Org:
        return await self._fetch("GET", self._org_path(org), Org)

    async def edit_org(
        self,
        org: str,
        *,
        billing_email: str | None = None,
        company: str | None = None,
        email: str | None = None,
        location: str | None = None,
        name: str | None = None,
    ) -> Org:
        body = {
            "billing_email": billing_email,
            "company": company,
            "email": email,
            "location": location,
            "name": name,
        }
        return await self._fetch("PATCH", self._org_path(org), Org, body=body)

    # Members

    async def list_org_members(self, org: str) -> list[GitUser]:
        """
        List members of an organization.

        Callers outside the organization are redirected (302) by GitHub; they
        get the public member list instead.
        """
        response = await self._send("GET", self._org_path(org, "/members"))
        if response.status_code == 302:
            logger.debug(f"Not a member of {org}, listing public members instead")
            return await self.list_public_org_members(org)
        if response.status_code != 200:
            raise self.unexpected_status(response)
        return self.read_response(response, list[GitUser])

    async def check_org_membership(self, org: str, user: str | None = None) -> MembershipStatus:
        """
        Check whether a user belongs to an organization.

        A caller outside the organization is redirected to the public
        membership check. A public member is then reported as MEMBER, anyone
        else as UNCONFIRMED because private membership cannot be seen.

        Args:
            org: Organization login
            user: Username (defaults to the authenticated login)
        """
        user = user or self.login
        require(org=org, user=user)
        response = await self._send(
            "GET", self._org_path(org, f"/members/{quote_segment(user)}")
        )
        if response.status_code == 204:
            return MembershipStatus.MEMBER
        if response.status_code == 404:
            return MembershipStatus.NON_MEMBER
        if response.status_code != 302:
            raise self.unexpected_status(response)

        public = await self._send("GET", self._redirect_path(response))
        if public.status_code in (200, 204):
            return MembershipStatus.MEMBER
        if public.status_code == 404:
            return MembershipStatus.UNCONFIRMED
        raise self.unexpected_status(public)

    async def remove_org_member(self, org: str, user: str) -> bool:
        require(user=user)
        return await self._check(
            "DELETE", self._org_path(org, f"/members/{quote_segment(user)}"), false_status=None
        )

    async def list_public_org_members(self, org: str) -> list[GitUser]:
        return await self._fetch("GET", self._org_path(org, "/public_members"), list[GitUser])

    async def is_public_org_member(self, org: str, user: str | None = None) -> bool:
        user = user or self.login
        require(user=user)
        return await self._check(
            "GET", self._org_path(org, f"/public_members/{quote_segment(user)}")
        )

    async def publicize_membership(self, org: str, user: str | None = None) -> bool:
        user = user or self.login
        require(user=user)
        return await self._check(
            "PUT",
            self._org_path(org, f"/public_members/{quote_segment(user)}"),
            false_status=None,
        )

    async def conceal_membership(self, org: str, user: str | None = None) -> bool:
        user = user or self.login
        require(user=user)
        return await self._check(
            "DELETE",
            self._org_path(org, f"/public_members/{quote_segment(user)}"),
            false_status=None,
        )

    # Teams

    async def list_teams(self, org: str) -> list[Team]:
        return await self._fetch("GET", self._org_path(org, "/teams"), list[Team])

    async def get_team(self, team_id: int) -> Team:
        return await self._fetch("GET", self._team_path(team_id), Team)

    async def create_team(self, org: str, team: NewTeam) -> Team:
        require(name=team.name)
        return await self._fetch(
            "POST", self._org_path(org, "/teams"), Team, expected=201, body=team
        )

    async def edit_team(self, team_id: int, name: str, permission: str | None = None) -> Team:
        require(name=name)
        return await self._fetch(
            "PATCH",
            self._team_path(team_id),
            Team,
            body={"name": name, "permission": permission},
        )

    async def delete_team(self, team_id: int) -> bool:
        return await self._check("DELETE", self._team_path(team_id), false_status=None)

    async def list_team_members(self, team_id: int) -> list[GitUser]:
        return await self._fetch("GET", self._team_path(team_id, "/members"), list[GitUser])

    async def is_team_member(self, team_id: int, user: str) -> bool:
        require(user=user)
        return await self._check(
            "GET", self._team_path(team_id, f"/members/{quote_segment(user)}")
        )

    async def add_team_member(self, team_id: int, user: str) -> bool:
        """
        Add a user to a team.

        Raises:
            UnprocessableEntityError: When ``user`` is an organization
        """
        require(user=user)
        response = await self._send(
            "PUT", self._team_path(team_id, f"/members/{quote_segment(user)}")
        )
        if response.status_code == 422:
            raise UnprocessableEntityError(
                message="Cannot add an organization to a team.",
                status_code=422,
                status_line=f"422 {response.reason_phrase}",
            )
        if response.status_code != 204:
            raise self.unexpected_status(response)
        return True

    async def remove_team_member(self, team_id: int, user: str) -> bool:
        require(user=user)
        return await self._check(
            "DELETE",
            self._team_path(team_id, f"/members/{quote_segment(user)}"),
            false_status=None,
        )

    async def list_team_repos(self, team_id: int) -> list[Repo]:
        return await self._fetch("GET", self._team_path(team_id, "/repos"), list[Repo])

    def _team_repo_path(self, team_id: int, owner: str | None, repo: str) -> str:
        owner = self._owner(owner)
        require(owner=owner, repo=repo)
        return self._team_path(team_id, f"/repos/{quote_segment(owner)}/{quote_segment(repo)}")

    async def is_team_repo(self, team_id: int, repo: str, *, owner: str | None = None) -> bool:
        return await self._check("GET", self._team_repo_path(team_id, owner, repo))

    async def add_team_repo(self, team_id: int, repo: str, *, owner: str | None = None) -> bool:
        """
        Grant a team access to a repository.

        Raises:
            UnprocessableEntityError: When the repository is not owned by the team's organization
        """
        return await self._check(
            "PUT", self._team_repo_path(team_id, owner, repo), false_status=None
        )

    async def remove_team_repo(self, team_id: int, repo: str, *, owner: str | None = None) -> bool:
        return await self._check(
            "DELETE", self._team_repo_path(team_id, owner, repo), false_status=None
        )
