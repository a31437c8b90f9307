"""HTTP client for the go-librespot player API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from spotify_jukebox.errors import RemoteError, TransportError
from spotify_jukebox.playback import PlaybackStatus, status_from_mapping

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3678"
DEFAULT_TIMEOUT = 5.0


class JukeboxClient:
    """Synchronous wrapper around the daemon's REST endpoints.

    Every call is attempted exactly once. Connection failures raise
    TransportError naming the base URL; error statuses raise RemoteError.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "JukeboxClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _connect_error(self, exc: httpx.RequestError) -> TransportError:
        return TransportError(
            f"cannot connect to go-librespot at {self.base_url}: {exc}"
        )

    def fetch_status(self) -> PlaybackStatus:
        """Return a fresh playback snapshot."""
        try:
            response = self._http.get("/status")
        except httpx.RequestError as exc:
            raise self._connect_error(exc) from exc
        if response.status_code >= 400:
            raise RemoteError(response.status_code, response.text)
        if not response.content.strip():
            # No active session on the daemon.
            return PlaybackStatus()
        try:
            raw = response.json()
        except ValueError as exc:
            raise RemoteError(
                response.status_code, f"invalid status payload: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise RemoteError(response.status_code, "invalid status payload")
        return status_from_mapping(raw)

    def _post(self, path: str, payload: Optional[dict[str, Any]] = None) -> None:
        logger.debug("POST %s payload=%s", path, payload)
        try:
            if payload is None:
                response = self._http.post(path)
            else:
                response = self._http.post(path, json=payload)
        except httpx.RequestError as exc:
            raise self._connect_error(exc) from exc
        if response.status_code >= 400:
            raise RemoteError(response.status_code, response.text)

    def start_playback(self, uri: str) -> None:
        self._post("/player/play", {"uri": uri})

    def toggle_play_pause(self) -> None:
        self._post("/player/playpause")

    def skip_next(self) -> None:
        self._post("/player/next")

    def skip_previous(self) -> None:
        self._post("/player/prev")

    def set_volume(self, percent: int) -> None:
        self._post("/player/volume", {"volume": percent})

    def seek_to(self, milliseconds: int) -> None:
        self._post("/player/seek", {"position": milliseconds})

    def set_shuffle(self, enabled: bool) -> None:
        self._post("/player/shuffle_context", {"shuffle_context": enabled})

    def enqueue_track(self, uri: str) -> None:
        self._post("/player/add_to_queue", {"uri": uri})
