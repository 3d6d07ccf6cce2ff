"""Profile updates through Firebase Authentication."""

from typing import Optional

from firebase_admin import auth

from onegoal.exceptions import NoAuthenticatedUserError, ProfileUpdateError
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    def update_user_profile(
        self,
        uid: Optional[str],
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ):
        """Update the display name and/or photo URL of the signed-in user.

        Args:
            uid: Authenticated user id, None when nobody is signed in
            display_name: New display name, left unchanged when None
            photo_url: New photo URL, left unchanged when None

        Raises:
            NoAuthenticatedUserError: If ``uid`` is None
            ProfileUpdateError: If Firebase Authentication rejects the update
        """
        if not uid:
            raise NoAuthenticatedUserError()

        changes = {}
        if display_name is not None:
            changes["display_name"] = display_name
        if photo_url is not None:
            changes["photo_url"] = photo_url
        if not changes:
            return

        with error_boundary("Failed to update user profile.", ProfileUpdateError):
            auth.update_user(uid, **changes)
        logger.info(f"Updated profile fields {sorted(changes)} of user {uid}")
