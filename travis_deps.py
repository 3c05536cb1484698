"""List deploy keys of the repositories a CI build depends on.

The configuration file is JSON:

    {
        "token": "<personal access token>",
        "login": "<login used as default owner, optional>",
        "deps": ["octocat/Hello-World", "octocat/Spoon-Knife"]
    }

Usage:
    python travis_deps.py deps.json
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from github_v3 import GitHubAPIError, GitHubClient, Key

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class DepsConfig(BaseModel):
    """Contents of the dependency configuration file."""

    token: str = Field(description="Access token used for every request")
    login: str = Field(default="", description="Login of the token's owner")
    deps: list[str] = Field(default_factory=list, description="Repositories as 'owner/repo'")


def load_config(path: str | Path) -> DepsConfig:
    return DepsConfig.model_validate_json(Path(path).read_text())


async def fetch_deploy_keys(conf: DepsConfig, client: GitHubClient) -> dict[str, list[Key]]:
    """
    Fetch deploy keys for every well-formed dependency.

    Malformed entries are logged and skipped. The first API error stops the
    run and propagates.
    """
    keys: dict[str, list[Key]] = {}
    for dep in conf.deps:
        logger.info(f"repo: {dep}")
        owner, _, repo = dep.partition("/")
        if not owner.strip() or not repo.strip():
            logger.warning(f"invalid repo: {dep}")
            continue
        keys[dep] = await client.list_deploy_keys(repo.strip(), owner=owner.strip())
        logger.info(f"{dep}: {len(keys[dep])} deploy key(s)")
    return keys


async def run(conf: DepsConfig) -> dict[str, list[Key]]:
    async with GitHubClient(token=conf.token, login=conf.login) as client:
        return await fetch_deploy_keys(conf, client)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="List deploy keys of CI dependency repositories"
    )
    parser.add_argument(
        "config",
        help="JSON file with 'token' and 'deps' (a list of 'owner/repo')",
    )
    args = parser.parse_args(argv)

    try:
        conf = load_config(args.config)
    except (OSError, PydanticValidationError) as e:
        logger.error(f"Failed to load config {args.config}: {e}")
        return 1

    try:
        asyncio.run(run(conf))
    except GitHubAPIError as e:
        logger.error(f"Listing deploy keys failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
