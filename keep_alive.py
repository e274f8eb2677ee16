"""Periodic self-ping so a hosted instance is not put to sleep."""

from __future__ import annotations

import logging
import threading
from typing import Optional

import requests

import config

logger = logging.getLogger(__name__)

LOCAL_HOSTS = ("localhost", "127.0.0.1")


def is_production(url: str) -> bool:
    return not any(host in url for host in LOCAL_HOSTS)


def ping(url: str, timeout: float = config.KEEP_ALIVE_TIMEOUT_SECONDS) -> bool:
    """GET ``url`` once. Failures are logged, never raised."""
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as e:
        logger.warning("Keep-alive ping failed: status %s | %s", e.response.status_code, url)
        return False
    except requests.ConnectionError:
        logger.warning("Keep-alive ping failed: server unavailable | %s", url)
        return False
    except requests.RequestException as e:
        logger.warning("Keep-alive ping failed: %s | %s", e, url)
        return False
    logger.info("Keep-alive ping ok: %s | %s", r.status_code, url)
    return True


class KeepAlive:
    """Pings ``url`` right away and then every ``interval`` seconds."""

    def __init__(
        self,
        url: str = config.APP_URL,
        interval: float = config.KEEP_ALIVE_INTERVAL_SECONDS,
        timeout: float = config.KEEP_ALIVE_TIMEOUT_SECONDS,
    ) -> None:
        self.url = url
        self.interval = interval
        self.timeout = timeout
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        """Start pinging in production; returns whether the thread started."""
        if not is_production(self.url):
            logger.info("Keep-alive disabled for local development (%s); set APP_URL to enable", self.url)
            return False
        if self.running:
            return True
        logger.info("Keep-alive active: ping every %ss -> %s", self.interval, self.url)
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="keep-alive", daemon=True)
        self._thread.start()
        return True

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.timeout + 1)
            self._thread = None
        logger.info("Keep-alive stopped")

    def _run(self) -> None:
        while True:
            ping(self.url, timeout=self.timeout)
            if self._stop.wait(self.interval):
                return
