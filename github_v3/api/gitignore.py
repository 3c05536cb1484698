"""Gitignore templates."""

from ..base import BaseClient
from ..models import GitIgnoreTemplate
from ..utils import quote_segment, require


class GitignoreAPI(BaseClient):
    async def list_gitignore_templates(self) -> list[str]:
        """List the names of the available .gitignore templates."""
        return await self._fetch("GET", "/gitignore/templates", list[str])

    async def get_gitignore_template(self, name: str) -> GitIgnoreTemplate:
        """Get a single .gitignore template, e.g. "Python"."""
        require(name=name)
        return await self._fetch(
            "GET", f"/gitignore/templates/{quote_segment(name)}", GitIgnoreTemplate
        )
