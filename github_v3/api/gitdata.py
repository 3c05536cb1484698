"""Low-level git objects: blobs, commits, trees, tags and references."""

from ..base import BaseClient
from ..models import Blob, GitCommit, GitTag, Reference, Tree
from ..payloads import NewGitCommit, NewTag, NewTree
from ..utils import quote_path, quote_segment, require


def _ref_name(ref: str) -> str:
    """Accept both "heads/main" and "refs/heads/main"."""
    ref = ref.strip("/")
    if ref.startswith("refs/"):
        ref = ref[len("refs/"):]
    return ref


class GitDataAPI(BaseClient):
    async def get_blob(self, repo: str, sha: str, *, owner: str | None = None) -> Blob:
        require(sha=sha)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/git/blobs/{quote_segment(sha)}"), Blob
        )

    async def create_blob(
        self,
        repo: str,
        content: str,
        encoding: str = "utf-8",
        *,
        owner: str | None = None,
    ) -> Blob:
        """
        Create a blob.

        GitHub only answers with the new SHA and URL; the returned Blob also
        carries the content and encoding that were sent.

        Args:
            repo: Repository name
            content: Blob content
            encoding: "utf-8" or "base64"
            owner: Repository owner (defaults to the authenticated login)
        """
        require(encoding=encoding)
        blob = await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/git/blobs"),
            Blob,
            expected=201,
            body={"content": content, "encoding": encoding},
        )
        return blob.model_copy(update={"content": content, "encoding": encoding})

    async def get_git_commit(self, repo: str, sha: str, *, owner: str | None = None) -> GitCommit:
        require(sha=sha)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/git/commits/{quote_segment(sha)}"), GitCommit
        )

    async def create_git_commit(
        self, repo: str, commit: NewGitCommit, *, owner: str | None = None
    ) -> GitCommit:
        require(message=commit.message, tree=commit.tree)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/git/commits"),
            GitCommit,
            expected=201,
            body=commit,
        )

    async def get_tree(self, repo: str, sha: str, *, owner: str | None = None) -> Tree:
        require(sha=sha)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/git/trees/{quote_segment(sha)}"), Tree
        )

    async def get_recursive_tree(self, repo: str, sha: str, *, owner: str | None = None) -> Tree:
        """Get a tree with all its subtrees flattened into ``tree``."""
        require(sha=sha)
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, f"/git/trees/{quote_segment(sha)}"),
            Tree,
            params={"recursive": 1},
        )

    async def create_tree(self, repo: str, tree: NewTree, *, owner: str | None = None) -> Tree:
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/git/trees"),
            Tree,
            expected=201,
            body=tree,
        )

    async def get_tag(self, repo: str, sha: str, *, owner: str | None = None) -> GitTag:
        require(sha=sha)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/git/tags/{quote_segment(sha)}"), GitTag
        )

    async def create_tag(self, repo: str, tag: NewTag, *, owner: str | None = None) -> GitTag:
        """
        Create an annotated tag object.

        This only creates the tag object; call ``create_ref`` with
        "refs/tags/<tag>" to make it visible as a tag.
        """
        require(tag=tag.tag, object=tag.object)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/git/tags"),
            GitTag,
            expected=201,
            body=tag,
        )

    async def get_ref(self, repo: str, ref: str, *, owner: str | None = None) -> Reference:
        """Get a reference such as "heads/main" or "tags/v1.0"."""
        require(ref=ref)
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, f"/git/refs/{quote_path(_ref_name(ref))}"),
            Reference,
        )

    async def list_refs(
        self, repo: str, namespace: str | None = None, *, owner: str | None = None
    ) -> list[Reference]:
        """List all references, or only those under ``namespace`` (e.g. "tags")."""
        suffix = "/git/refs"
        if namespace:
            suffix = f"{suffix}/{quote_path(_ref_name(namespace))}"
        return await self._fetch("GET", self._repo_path(owner, repo, suffix), list[Reference])

    async def create_ref(
        self, repo: str, ref: str, sha: str, *, owner: str | None = None
    ) -> Reference:
        """
        Create a reference.

        Args:
            repo: Repository name
            ref: Fully qualified name, e.g. "refs/heads/feature"
            sha: SHA the reference points at
            owner: Repository owner (defaults to the authenticated login)
        """
        require(ref=ref, sha=sha)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/git/refs"),
            Reference,
            expected=201,
            body={"ref": ref, "sha": sha},
        )

    async def update_ref(
        self,
        repo: str,
        ref: str,
        sha: str,
        force: bool = False,
        *,
        owner: str | None = None,
    ) -> Reference:
        """Point a reference at a new SHA; ``force`` allows non fast-forward updates."""
        require(ref=ref, sha=sha)
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/git/refs/{quote_path(_ref_name(ref))}"),
            Reference,
            body={"sha": sha, "force": force},
        )

    async def delete_ref(self, repo: str, ref: str, *, owner: str | None = None) -> bool:
        require(ref=ref)
        return await self._check(
            "DELETE",
            self._repo_path(owner, repo, f"/git/refs/{quote_path(_ref_name(ref))}"),
            false_status=None,
        )
