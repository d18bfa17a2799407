"""
Unit tests for auth dependencies.

Tests the authorization dependencies for board endpoints:
- get_verified_email: identity attached by the middleware
- require_authenticated: verified identity required
- require_admin: admin role required
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from feature_board.api.dependencies.auth import (
    NO_ACCESS_MESSAGE,
    get_verified_email,
    require_admin,
    require_authenticated,
)
from feature_board.core.exceptions import AuthorizationError


# ===== Fixtures =====


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository"""
    repo = Mock()
    repo.is_admin = AsyncMock(return_value=False)
    return repo


def make_request(**state):
    """Minimal stand-in for a Starlette request carrying state."""
    return SimpleNamespace(state=SimpleNamespace(**state))


# ===== get_verified_email Tests =====


class TestGetVerifiedEmail:
    """Test reading the identity attached to the request"""

    def test_returns_email(self):
        request = make_request(verified_email="dev@example.com")

        assert get_verified_email(request) == "dev@example.com"

    def test_missing_state_is_none(self):
        """Requests that bypassed the middleware carry no identity"""
        assert get_verified_email(make_request()) is None


# ===== require_authenticated Tests =====


class TestRequireAuthenticated:
    """Test the authenticated capability"""

    @pytest.mark.asyncio
    async def test_verified_email_passes(self):
        assert await require_authenticated("dev@example.com") == "dev@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, ""])
    async def test_missing_identity_rejected(self, email):
        with pytest.raises(AuthorizationError) as exc_info:
            await require_authenticated(email)

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == NO_ACCESS_MESSAGE


# ===== require_admin Tests =====


class TestRequireAdmin:
    """Test the admin capability"""

    @pytest.mark.asyncio
    async def test_admin_passes(self, mock_user_repo):
        mock_user_repo.is_admin.return_value = True

        result = await require_admin("admin@example.com", mock_user_repo)

        assert result == "admin@example.com"
        mock_user_repo.is_admin.assert_called_once_with("admin@example.com")

    @pytest.mark.asyncio
    async def test_non_admin_rejected(self, mock_user_repo):
        """Unknown users and users without the admin role are both refused"""
        with pytest.raises(AuthorizationError) as exc_info:
            await require_admin("dev@example.com", mock_user_repo)

        assert exc_info.value.status_code == 403
        assert exc_info.value.context["email"] == "dev@example.com"
