"""Markdown rendering."""

from ..base import BaseClient
from ..utils import require


class MarkdownAPI(BaseClient):
    async def render_markdown(
        self,
        text: str,
        mode: str = "markdown",
        context: str | None = None,
    ) -> str:
        """
        Render Markdown to HTML.

        Args:
            text: Markdown source
            mode: "markdown" or "gfm" (GitHub Flavored Markdown)
            context: Repository ("owner/repo") used to resolve references in gfm mode

        Returns:
            Rendered HTML
        """
        require(text=text)
        response = await self._send(
            "POST",
            "/markdown",
            body={"text": text, "mode": mode, "context": context},
        )
        if response.status_code != 200:
            raise self.unexpected_status(response)
        return response.text
