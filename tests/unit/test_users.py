"""Unit tests for users, emails, keys and followers."""

import json

import httpx
import pytest

from github_v3 import config
from github_v3.exceptions import InvalidArgumentError
from github_v3.models import User

API = "https://api.github.com"


@pytest.mark.unit
class TestUsers:
    """Tests for user profile endpoints."""

    async def test_get_authenticated_user(self, client, respx_mock, sample_user_data):
        """Test the authenticated user decodes."""
        respx_mock.get(f"{API}/user").mock(
            return_value=httpx.Response(200, json={**sample_user_data, "name": "monalisa octocat"})
        )

        user = await client.get_authenticated_user()

        assert isinstance(user, User)
        assert user.name == "monalisa octocat"

    async def test_update_authenticated_user(self, client, respx_mock, sample_user_data):
        """Test only provided profile fields are sent."""
        route = respx_mock.patch(f"{API}/user").mock(
            return_value=httpx.Response(200, json=sample_user_data)
        )

        await client.update_authenticated_user(location="San Francisco", hireable=False)

        assert json.loads(route.calls.last.request.content) == {
            "location": "San Francisco",
            "hireable": False,
        }


@pytest.mark.unit
class TestEmails:
    """Tests for email endpoints."""

    async def test_add_emails(self, client, respx_mock):
        """Test emails are sent as a JSON list labelled text/plain."""
        route = respx_mock.post(f"{API}/user/emails").mock(
            return_value=httpx.Response(201, json=["octocat@github.com", "support@github.com"])
        )

        emails = await client.add_emails("support@github.com")

        request = route.calls.last.request
        assert request.headers["Content-Type"] == "text/plain"
        assert json.loads(request.content) == ["support@github.com"]
        assert emails == ["octocat@github.com", "support@github.com"]

    async def test_add_emails_rejects_blank(self, client, respx_mock):
        """Test blank addresses are rejected before sending."""
        with pytest.raises(InvalidArgumentError):
            await client.add_emails("a@example.com", "")

        assert respx_mock.calls.call_count == 0

    async def test_delete_emails(self, client, respx_mock):
        """Test deleting emails expects 204."""
        respx_mock.delete(f"{API}/user/emails").mock(return_value=httpx.Response(204))

        assert await client.delete_emails("support@github.com") is True


@pytest.mark.unit
class TestKeys:
    """Tests for public key endpoints."""

    async def test_create_key_default_title(self, client, respx_mock, monkeypatch):
        """Test a missing title falls back to the configured default."""
        monkeypatch.setattr(config.settings, "default_key_title", "ci-box")
        route = respx_mock.post(f"{API}/user/keys").mock(
            return_value=httpx.Response(201, json={"id": 2, "key": "ssh-rsa AAA", "title": "ci-box"})
        )

        key = await client.create_key("ssh-rsa AAA")

        assert key.id == 2
        assert json.loads(route.calls.last.request.content) == {
            "key": "ssh-rsa AAA",
            "title": "ci-box",
        }

    async def test_update_key_rejects_non_positive_id(self, client, respx_mock):
        """Test key ids must be positive."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await client.update_key(0, title="x")

        assert exc_info.value.fields == ["key_id"]
        assert respx_mock.calls.call_count == 0

    async def test_delete_key_rejects_non_positive_id(self, client, respx_mock):
        """Test every key id goes through the same check."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            await client.delete_key(-3)

        assert exc_info.value.fields == ["key_id"]
        assert respx_mock.calls.call_count == 0

    async def test_list_user_keys(self, client, respx_mock):
        """Test another user's keys are listed."""
        respx_mock.get(f"{API}/users/hubot/keys").mock(
            return_value=httpx.Response(200, json=[{"id": 1, "key": "ssh-rsa BBB"}])
        )

        keys = await client.list_user_keys("hubot")

        assert keys[0].key == "ssh-rsa BBB"


@pytest.mark.unit
class TestFollowers:
    """Tests for follower endpoints."""

    async def test_is_following(self, client, respx_mock):
        """Test the follow check is an existence check."""
        respx_mock.get(f"{API}/user/following/hubot").mock(return_value=httpx.Response(404))

        assert await client.is_following("hubot") is False

    async def test_follow_and_unfollow(self, client, respx_mock):
        """Test follow toggles succeed on 204."""
        respx_mock.put(f"{API}/user/following/hubot").mock(return_value=httpx.Response(204))
        respx_mock.delete(f"{API}/user/following/hubot").mock(return_value=httpx.Response(204))

        assert await client.follow_user("hubot") is True
        assert await client.unfollow_user("hubot") is True

    async def test_list_followers(self, client, respx_mock, sample_user_data):
        """Test followers decode."""
        respx_mock.get(f"{API}/user/followers").mock(
            return_value=httpx.Response(200, json=[sample_user_data])
        )

        followers = await client.list_followers()

        assert followers[0].login == "octocat"
