"""
Handles authentication with the Spotify Accounts service using the
client-credentials grant.
"""

import logging

from spotm4a.exceptions import AuthenticationError, HttpStatusError
from spotm4a.models.spotify import Credentials

from .http import HttpTransport, parse_payload

log = logging.getLogger(__name__)


class SpotifyAuthenticator:
    """
    Exchanges an application's client id and secret for a bearer token.

    The token is requested once per run and never refreshed.
    """

    def __init__(self, transport: HttpTransport, token_url: str):
        """
        Initializes the authenticator.

        Args:
            transport: The HTTP transport shared by the run.
            token_url: The Accounts service token endpoint.
        """
        self._transport = transport
        self.token_url = token_url

    async def request_token(self, client_id: str, client_secret: str) -> Credentials:
        """
        Performs the client-credentials grant.

        Args:
            client_id: The Spotify application's client id.
            client_secret: The Spotify application's client secret.

        Returns:
            The parsed credentials.

        Raises:
            AuthenticationError: If the token endpoint rejects the credentials.
        """
        log.debug("Requesting access token...")
        form = {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
        }
        try:
            payload = await self._transport.post_form(self.token_url, form)
        except HttpStatusError as e:
            if e.status in (400, 401):
                raise AuthenticationError(
                    e.status,
                    e.url,
                    "The client id or client secret was rejected.",
                ) from e
            raise

        credentials = parse_payload(Credentials, payload, "token endpoint")
        log.debug(
            f"Obtained {credentials.token_type} token, "
            f"expires in {credentials.expires_in}s"
        )
        return credentials
