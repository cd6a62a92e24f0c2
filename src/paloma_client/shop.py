"""Shop API client construction.

The factory treats the client as opaque; this module is the single
constructor it calls.
"""
import logging

import requests

logger = logging.getLogger(__name__)

REQUIRED_OPTIONS = ("base_url", "api_key", "channel", "locale")


class ShopClient:
    """Shop API client bound to one channel and locale."""

    def __init__(self, options):
        self.base_url = options["base_url"].rstrip("/")
        self.api_key = options["api_key"]
        self.channel = options["channel"]
        self.locale = options["locale"]
        self.session_store = options.get("session")
        self.logger = options.get("logger") or logger
        self.log_format_success = options.get("log_format_success")
        self.log_format_failure = options.get("log_format_failure")
        self.profiler = options.get("profiler")
        self.cache = options.get("cache")
        self.trace_id = options.get("trace_id")

        self.http = requests.Session()
        self.http.headers["x-api-key"] = self.api_key
        if self.trace_id:
            self.http.headers["x-paloma-trace-id"] = self.trace_id

    def url(self, path=""):
        """Absolute URL for a path below this client's channel and locale."""
        return f"{self.base_url}/{self.channel}/{self.locale}/{path.lstrip('/')}"

    def close(self):
        """Close the underlying HTTP session."""
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"<ShopClient {self.channel}/{self.locale} {self.base_url}>"


def create(options):
    """Create a ShopClient from an options dict.

    Expected keys: base_url, api_key, channel, locale, session, logger,
    log_format_success, log_format_failure, profiler, cache, trace_id.
    """
    missing = [k for k in REQUIRED_OPTIONS if not options.get(k)]
    if missing:
        raise ValueError(f"Missing client options: {', '.join(missing)}")
    return ShopClient(options)
