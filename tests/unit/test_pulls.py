"""Unit tests for pull requests and review comments."""

import json

import httpx
import pytest

from github_v3.exceptions import InvalidArgumentError, MergeConflictError, UnexpectedStatusError
from github_v3.models import PullMerge, PullRequest
from github_v3.payloads import NewPullComment, NewPullRequest

API = "https://api.github.com"
REPO = f"{API}/repos/octocat/Hello-World"

PULL = {
    "id": 1,
    "number": 1347,
    "state": "open",
    "title": "new-feature",
    "head": {"label": "octocat:new-topic", "ref": "new-topic", "sha": "6dcb09b5"},
    "base": {"label": "octocat:master", "ref": "master", "sha": "6dcb09b5"},
    "_links": {"self": {"href": f"{REPO}/pulls/1347"}},
}


@pytest.mark.unit
class TestPullRequests:
    """Tests for pull request endpoints."""

    async def test_list_pull_requests(self, client, respx_mock):
        """Test listing passes the state filter."""
        route = respx_mock.get(f"{REPO}/pulls").mock(return_value=httpx.Response(200, json=[PULL]))

        pulls = await client.list_pull_requests("Hello-World", state="closed")

        assert isinstance(pulls[0], PullRequest)
        assert pulls[0].head.ref == "new-topic"
        assert route.calls.last.request.url.params["state"] == "closed"

    async def test_create_from_title(self, client, respx_mock):
        """Test a pull request with a title is posted and expects 201."""
        route = respx_mock.post(f"{REPO}/pulls").mock(return_value=httpx.Response(201, json=PULL))

        pull = await client.create_pull_request(
            "Hello-World", NewPullRequest(base="master", head="octocat:new-topic", title="Amazing")
        )

        assert pull.number == 1347
        assert json.loads(route.calls.last.request.content) == {
            "base": "master",
            "head": "octocat:new-topic",
            "title": "Amazing",
        }

    async def test_create_from_issue(self, client, respx_mock):
        """Test an issue number replaces the title."""
        route = respx_mock.post(f"{REPO}/pulls").mock(return_value=httpx.Response(201, json=PULL))

        await client.create_pull_request(
            "Hello-World", NewPullRequest(base="master", head="new-topic", issue=5)
        )

        assert json.loads(route.calls.last.request.content)["issue"] == 5

    async def test_create_requires_title_or_issue(self, client, respx_mock):
        """Test a pull request without title or issue is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await client.create_pull_request(
                "Hello-World", NewPullRequest(base="master", head="new-topic")
            )

        assert exc_info.value.fields == ["title"]
        assert respx_mock.calls.call_count == 0

    async def test_edit_pull_request_expects_200(self, client, respx_mock):
        """Test editing succeeds on 200."""
        respx_mock.patch(f"{REPO}/pulls/1347").mock(
            return_value=httpx.Response(200, json={**PULL, "state": "closed"})
        )

        pull = await client.edit_pull_request("Hello-World", 1347, state="closed")

        assert pull.state == "closed"

    async def test_is_pull_merged(self, client, respx_mock):
        """Test the merged check is an existence check."""
        respx_mock.get(f"{REPO}/pulls/1347/merge").mock(return_value=httpx.Response(404))

        assert await client.is_pull_merged("Hello-World", 1347) is False


@pytest.mark.unit
class TestMerge:
    """Tests for the merge button."""

    async def test_merged(self, client, respx_mock):
        """Test a successful merge uses PUT with the commit message."""
        route = respx_mock.put(f"{REPO}/pulls/1347/merge").mock(
            return_value=httpx.Response(
                200, json={"sha": "6dcb09b5", "merged": True, "message": "Pull Request successfully merged"}
            )
        )

        result = await client.merge_pull_request("Hello-World", 1347, "Ship it")

        assert isinstance(result, PullMerge)
        assert result.merged is True
        assert json.loads(route.calls.last.request.content) == {"commit_message": "Ship it"}

    async def test_not_mergeable(self, client, respx_mock):
        """Test 405 is returned as an unmerged result."""
        respx_mock.put(f"{REPO}/pulls/1347/merge").mock(
            return_value=httpx.Response(
                405, json={"merged": False, "message": "Pull Request is not mergeable"}
            )
        )

        result = await client.merge_pull_request("Hello-World", 1347)

        assert result.merged is False
        assert result.message == "Pull Request is not mergeable"

    async def test_conflict(self, client, respx_mock):
        """Test 409 raises a merge conflict with the server message."""
        respx_mock.put(f"{REPO}/pulls/1347/merge").mock(
            return_value=httpx.Response(409, json={"message": "Head branch was modified"})
        )

        with pytest.raises(MergeConflictError) as exc_info:
            await client.merge_pull_request("Hello-World", 1347)

        assert str(exc_info.value) == "Head branch was modified"
        assert exc_info.value.status_code == 409

    async def test_other_status(self, client, respx_mock):
        """Test other statuses raise the generic error."""
        respx_mock.put(f"{REPO}/pulls/1347/merge").mock(return_value=httpx.Response(404))

        with pytest.raises(UnexpectedStatusError):
            await client.merge_pull_request("Hello-World", 1347)


@pytest.mark.unit
class TestReviewComments:
    """Tests for review comment endpoints."""

    async def test_create_comment(self, client, respx_mock):
        """Test a new review comment posts its position."""
        route = respx_mock.post(f"{REPO}/pulls/1/comments").mock(
            return_value=httpx.Response(201, json={"id": 10, "body": "Nice change", "position": 4})
        )

        comment = await client.create_pull_comment(
            "Hello-World",
            1,
            NewPullComment(body="Nice change", commit_id="6dcb09b5", path="file1.txt", position=4),
        )

        assert comment.position == 4
        assert json.loads(route.calls.last.request.content) == {
            "body": "Nice change",
            "commit_id": "6dcb09b5",
            "path": "file1.txt",
            "position": 4,
        }

    async def test_reply_only_needs_target(self, client, respx_mock):
        """Test a reply only needs in_reply_to."""
        respx_mock.post(f"{REPO}/pulls/1/comments").mock(
            return_value=httpx.Response(201, json={"id": 11, "body": "Agreed"})
        )

        comment = await client.create_pull_comment(
            "Hello-World", 1, NewPullComment(body="Agreed", in_reply_to=10)
        )

        assert comment.id == 11

    async def test_new_comment_requires_location(self, client, respx_mock):
        """Test a new comment without commit, path and position is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await client.create_pull_comment("Hello-World", 1, NewPullComment(body="Hm"))

        assert exc_info.value.fields == ["commit_id", "path", "position"]
        assert respx_mock.calls.call_count == 0

    async def test_delete_comment(self, client, respx_mock):
        """Test deleting a review comment expects 204."""
        respx_mock.delete(f"{REPO}/pulls/comments/10").mock(return_value=httpx.Response(204))

        assert await client.delete_pull_comment("Hello-World", 10) is True
