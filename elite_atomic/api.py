import logging

import requests

from elite_atomic.errors import ApiRejected, ResponseMalformed, TransportError
from elite_atomic.schemas import TournamentRequest

logger = logging.getLogger(__name__)

LICHESS_URL = "https://lichess.org"
DEFAULT_TIMEOUT = 30


def tournament_url(tournament_id: str, base_url: str = LICHESS_URL) -> str:
    """Public page of an arena tournament."""
    return f"{base_url}/tournament/{tournament_id}"


class LichessClient:
    """
    Minimal client for the lichess tournament API.

    Sends each request exactly once; failures are raised, never retried.
    """

    def __init__(
        self,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        base_url: str = LICHESS_URL,
    ):
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else self._create_session()
        self._token = token

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(
            {
                "User-Agent": "elite-atomic",
                "Accept": "application/json",
            }
        )

        return session

    def _post(self, path: str, data: dict[str, str]) -> requests.Response:
        """
        POST a form-encoded body with bearer authorization.

        :raises TransportError: when no HTTP response was received
        """
        url = f"{self.base_url}{path}"
        logger.info("Posting to %s", url)

        try:
            return self.session.post(
                url,
                data=data,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

    def create_tournament(self, request: TournamentRequest) -> str:
        """
        Create an arena tournament.

        :param request: validated tournament payload
        :return: ID of the created tournament
        :raises ApiRejected: on a non-2xx status
        :raises ResponseMalformed: when a 2xx body has no string 'id'
        :raises TransportError: on connection failures or an unparseable body
        """
        response = self._post("/api/tournament", request.to_form())

        # requests treats any status below 400 as ok; only 2xx is a success here
        if not 200 <= response.status_code < 300:
            logger.warning("Tournament creation rejected with %d", response.status_code)
            raise ApiRejected(response.status_code, response.text, response.reason)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e

        tournament_id = data.get("id") if isinstance(data, dict) else None
        if not isinstance(tournament_id, str):
            raise ResponseMalformed("Could not retrieve ID after creating tournament.")

        logger.info("Created tournament %s", tournament_id)

        return tournament_id


def create_tournament(
    request: TournamentRequest,
    token: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Send `request` with a fresh client and return the new tournament ID."""
    return LichessClient(token, timeout=timeout).create_tournament(request)
