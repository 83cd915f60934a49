"""Bearer token verification for write requests."""

import logfire

from blog.config import AuthSettings
from blog.domain.value import UserId
from blog.util.jwt import (
    JWTError,
    TokenPayload,
    create_token,
    parse_bearer,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Verifies tokens issued by the auth service.

    ``create_token`` exists for tooling and tests; this API never logs
    anyone in.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Sign a token for ``user_id`` with the configured secret."""
        token = create_token(user_id, self.auth_settings)
        logfire.debug("JWT token created", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode and check a token.

        Raises:
            JWTError: If the token is invalid, expired or lacks ``user_id``
        """
        with logfire.span("jwt_service.verify_token"):
            payload = verify_token(token, self.auth_settings)
            logfire.debug("JWT token verified", user_id=payload.user_id)
            return payload

    def get_user_id_from_header(self, authorization: str | None) -> UserId | None:
        """Authenticated user behind an ``Authorization`` header, if any.

        Never raises: a missing, malformed or rejected token all mean the
        request is anonymous.

        Args:
            authorization: Raw header value

        Returns:
            User ID, or None for anonymous requests
        """
        token = parse_bearer(authorization)
        if token is None:
            return None

        try:
            return UserId(self.verify_token(token).user_id)
        except JWTError as e:
            logfire.info("Rejected bearer token", error=str(e))
            return None
