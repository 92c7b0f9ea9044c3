"""Administrative trigger for a shortcode stripping run.

The host application (an admin page, a web route) builds a TriggerRequest
from the current user and the submitted form, and renders the returned
TriggerResponse however it likes. No state is kept between requests.
"""

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass, field
from typing import Optional

from shortcode_stripper.config import get_settings
from shortcode_stripper.core.models import BatchResult
from shortcode_stripper.core.runner import BatchRunner

logger = logging.getLogger(__name__)

ACTION_NAME = "delete_old_shortcodes_action"
REQUIRED_CAPABILITY = "manage_options"
SUCCESS_NOTICE = (
    "Shortcodes have been removed successfully, preserving the inner content."
)
FAILURE_NOTICE = "Shortcodes were removed, but some documents could not be saved."


class AuthorizationError(Exception):
    """Raised when the caller may not trigger the action."""

    pass


class ActionTokens:
    """Issue and verify anti-CSRF tokens bound to an action and a user."""

    def __init__(self, secret: Optional[str] = None) -> None:
        """Initialize with a signing secret.

        Falls back to the configured secret, then to a random one. A random
        secret only validates tokens issued by this instance.
        """
        secret = secret or get_settings().secret or secrets.token_urlsafe(32)
        self._secret = secret.encode()

    def issue(self, user_id: str, action: str = ACTION_NAME) -> str:
        """Create the token to embed in the action's form."""
        message = f"{action}:{user_id}".encode()
        return hmac.new(self._secret, message, hashlib.sha256).hexdigest()

    def verify(
        self, token: Optional[str], user_id: str, action: str = ACTION_NAME
    ) -> bool:
        """Check a submitted token in constant time."""
        if not token:
            return False
        # Compare bytes; str arguments must be ASCII-only
        expected = self.issue(user_id, action).encode()
        return hmac.compare_digest(expected, token.encode("utf-8"))


@dataclass
class TriggerRequest:
    """A submitted request to run the stripping action.

    Attributes:
        user_id: Id of the requesting user
        capabilities: Capabilities granted to that user
        token: Anti-CSRF token submitted with the form
    """

    user_id: str
    capabilities: set[str] = field(default_factory=set)
    token: Optional[str] = None


@dataclass
class TriggerResponse:
    """Outcome of a completed run, for the UI layer to display."""

    done: bool
    result: BatchResult
    notice: str


class AdminTrigger:
    """Gate a batch run behind a capability check and a CSRF token."""

    def __init__(
        self,
        runner: BatchRunner,
        tokens: ActionTokens,
        capability: str = REQUIRED_CAPABILITY,
        action: str = ACTION_NAME,
    ) -> None:
        self.runner = runner
        self.tokens = tokens
        self.capability = capability
        self.action = action

    def authorize(self, request: TriggerRequest) -> None:
        """Refuse the request unless the user and token check out.

        Raises:
            AuthorizationError: If the capability or token is missing/invalid
        """
        if self.capability not in request.capabilities:
            logger.warning(
                "User %s lacks %s capability", request.user_id, self.capability
            )
            raise AuthorizationError("You are not allowed to do this.")

        if not self.tokens.verify(request.token, request.user_id, self.action):
            logger.warning("Invalid action token from user %s", request.user_id)
            raise AuthorizationError("You are not allowed to do this.")

    def handle(self, request: TriggerRequest) -> TriggerResponse:
        """Authorize the request, then run the batch synchronously.

        Raises:
            AuthorizationError: Before any document is read or written
        """
        self.authorize(request)

        logger.info("User %s triggered shortcode removal", request.user_id)
        result = self.runner.run()

        notice = SUCCESS_NOTICE if result.success else FAILURE_NOTICE
        return TriggerResponse(done=True, result=result, notice=notice)
