"""Unit tests for git data endpoints."""

import json

import httpx
import pytest

from github_v3.exceptions import InvalidArgumentError
from github_v3.models import Reference, Tree
from github_v3.payloads import NewGitCommit, NewTag, NewTree, NewTreeEntry

API = "https://api.github.com"
REPO = f"{API}/repos/octocat/Hello-World"
SHA = "827efc6d56897b048c772eb4087f854f46256132"


@pytest.mark.unit
class TestBlobs:
    """Tests for blob endpoints."""

    async def test_create_blob_keeps_sent_content(self, client, respx_mock):
        """Test the returned blob includes the content that was sent."""
        route = respx_mock.post(f"{REPO}/git/blobs").mock(
            return_value=httpx.Response(201, json={"sha": SHA, "url": f"{REPO}/git/blobs/{SHA}"})
        )

        blob = await client.create_blob("Hello-World", "Content of the blob")

        assert blob.sha == SHA
        assert blob.content == "Content of the blob"
        assert blob.encoding == "utf-8"
        assert json.loads(route.calls.last.request.content) == {
            "content": "Content of the blob",
            "encoding": "utf-8",
        }

    async def test_get_blob_requires_sha(self, client, respx_mock):
        """Test a blank SHA is rejected."""
        with pytest.raises(InvalidArgumentError):
            await client.get_blob("Hello-World", "")

        assert respx_mock.calls.call_count == 0


@pytest.mark.unit
class TestCommitsAndTrees:
    """Tests for git commit and tree endpoints."""

    async def test_create_git_commit(self, client, respx_mock):
        """Test creating a commit object expects 201."""
        route = respx_mock.post(f"{REPO}/git/commits").mock(
            return_value=httpx.Response(201, json={"sha": SHA, "message": "my commit"})
        )

        commit = await client.create_git_commit(
            "Hello-World", NewGitCommit(message="my commit", tree="abc", parents=["def"])
        )

        assert commit.sha == SHA
        assert json.loads(route.calls.last.request.content) == {
            "message": "my commit",
            "tree": "abc",
            "parents": ["def"],
        }

    async def test_get_recursive_tree(self, client, respx_mock):
        """Test the recursive flag is sent."""
        route = respx_mock.get(f"{REPO}/git/trees/{SHA}").mock(
            return_value=httpx.Response(
                200,
                json={
                    "sha": SHA,
                    "tree": [{"path": "lib/a.py", "mode": "100644", "type": "blob", "sha": "1"}],
                    "truncated": False,
                },
            )
        )

        tree = await client.get_recursive_tree("Hello-World", SHA)

        assert isinstance(tree, Tree)
        assert tree.tree[0].path == "lib/a.py"
        assert route.calls.last.request.url.params["recursive"] == "1"

    async def test_create_tree(self, client, respx_mock):
        """Test creating a tree posts its entries."""
        route = respx_mock.post(f"{REPO}/git/trees").mock(
            return_value=httpx.Response(201, json={"sha": SHA, "tree": []})
        )

        await client.create_tree(
            "Hello-World",
            NewTree(base_tree="base", tree=[NewTreeEntry(path="README", sha="1")]),
        )

        sent = json.loads(route.calls.last.request.content)
        assert sent["base_tree"] == "base"
        assert sent["tree"] == [{"path": "README", "mode": "100644", "type": "blob", "sha": "1"}]


@pytest.mark.unit
class TestTagsAndRefs:
    """Tests for tag objects and references."""

    async def test_create_tag_path(self, client, respx_mock):
        """Test tag objects are posted to git/tags."""
        route = respx_mock.post(f"{REPO}/git/tags").mock(
            return_value=httpx.Response(201, json={"tag": "v0.0.1", "sha": SHA})
        )

        tag = await client.create_tag(
            "Hello-World", NewTag(tag="v0.0.1", message="initial version", object=SHA)
        )

        assert tag.tag == "v0.0.1"
        assert route.called

    async def test_get_ref_accepts_full_name(self, client, respx_mock):
        """Test a leading refs/ is stripped from the path."""
        route = respx_mock.get(f"{REPO}/git/refs/heads/feature-a").mock(
            return_value=httpx.Response(
                200, json={"ref": "refs/heads/feature-a", "object": {"sha": SHA, "type": "commit"}}
            )
        )

        ref = await client.get_ref("Hello-World", "refs/heads/feature-a")

        assert isinstance(ref, Reference)
        assert ref.object.sha == SHA
        assert route.called

    async def test_list_refs_namespace(self, client, respx_mock):
        """Test listing references under a namespace."""
        route = respx_mock.get(f"{REPO}/git/refs/tags").mock(
            return_value=httpx.Response(200, json=[{"ref": "refs/tags/v1"}])
        )

        refs = await client.list_refs("Hello-World", "tags")

        assert refs[0].ref == "refs/tags/v1"
        assert route.called

    async def test_create_ref_requires_sha(self, client, respx_mock):
        """Test a reference needs a SHA."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await client.create_ref("Hello-World", "refs/heads/x", "")

        assert exc_info.value.fields == ["sha"]
        assert respx_mock.calls.call_count == 0

    async def test_update_ref(self, client, respx_mock):
        """Test updating sends sha and force."""
        route = respx_mock.patch(f"{REPO}/git/refs/heads/master").mock(
            return_value=httpx.Response(200, json={"ref": "refs/heads/master"})
        )

        await client.update_ref("Hello-World", "heads/master", SHA, force=True)

        assert json.loads(route.calls.last.request.content) == {"sha": SHA, "force": True}

    async def test_delete_ref(self, client, respx_mock):
        """Test deleting a reference expects 204."""
        respx_mock.delete(f"{REPO}/git/refs/tags/v1").mock(return_value=httpx.Response(204))

        assert await client.delete_ref("Hello-World", "tags/v1") is True
