"""Lazy shop client factory - only creates clients when first accessed."""
import logging
import threading

from . import shop
from .warmup import WarmupPhase, WARMUP_CHANNEL, WARMUP_LOCALE

logger = logging.getLogger(__name__)


class DefaultClientNotConfiguredError(RuntimeError):
    """Raised when the default client is requested before its channel and locale are set."""


class ClientFactory:
    """Creates shop clients on demand and caches them per (channel, locale).

    One factory is meant to live for one request scope. Cache hits skip the
    lock; creation on a miss is guarded by it, so sharing a factory between
    threads keeps at most one client per pair.
    """

    def __init__(self, base_url, api_key, session=None, logger=None,
                 success_log_format=None, error_log_format=None,
                 profiler=None, cache=None, warmup=None, create_client=None):
        self._base_url = base_url
        self._api_key = api_key
        self._session = session
        self._shop_client_logger = logger
        self._success_log_format = success_log_format
        self._error_log_format = error_log_format
        self._profiler = profiler
        self._cache = cache
        self._warmup = warmup or WarmupPhase()
        self._create_client = create_client or shop.create

        self._default_channel = None
        self._default_locale = None
        self._trace_id = None
        self._clients = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config, **collaborators):
        """Build a factory from a FactoryConfig, applying its defaults."""
        factory = cls(
            config.base_url,
            config.api_key,
            success_log_format=config.success_log_format,
            error_log_format=config.error_log_format,
            **collaborators,
        )
        if config.default_channel:
            factory.set_default_channel(config.default_channel)
        if config.default_locale:
            factory.set_default_locale(config.default_locale)
        return factory

    def get_default_client(self):
        """Get the client for the default channel and locale.

        During a framework warm-up the defaults are usually not set yet, so a
        placeholder client is returned instead of failing.
        """
        if self._default_channel is None or self._default_locale is None:
            if self._warmup.is_active():
                logger.warning("Default client requested during warm-up, using placeholder client")
                return self._get_or_create(WARMUP_CHANNEL, WARMUP_LOCALE)

            logger.error(
                f"Default client requested without defaults "
                f"(channel={self._default_channel}, locale={self._default_locale})"
            )
            raise DefaultClientNotConfiguredError(
                "Attempt to get the default Paloma client without prior defining what the "
                "default channel and locale is. Forget to call "
                "ClientFactory.set_default_channel() or ClientFactory.set_default_locale()?"
            )

        return self._get_or_create(self._default_channel, self._default_locale)

    def get_client(self, channel, locale):
        """Get or create the client for the given channel and locale."""
        return self._get_or_create(channel, locale)

    def _get_or_create(self, channel, locale):
        key = (channel, locale)
        client = self._clients.get(key)
        if client is not None:
            return client

        with self._lock:
            if key not in self._clients:
                self._clients[key] = self._create_client({
                    "base_url": self._base_url,
                    "api_key": self._api_key,
                    "channel": channel,
                    "locale": locale,
                    "session": self._session,
                    "logger": self._shop_client_logger,
                    "log_format_success": self._success_log_format,
                    "log_format_failure": self._error_log_format,
                    "profiler": self._profiler,
                    "cache": self._cache,
                    "trace_id": self._trace_id,
                })
                logger.info(f"Created client for {channel}/{locale}")
            return self._clients[key]

    def set_default_channel(self, channel):
        self._default_channel = channel
        return self

    def set_default_locale(self, locale):
        self._default_locale = locale
        return self

    def set_paloma_trace_id(self, trace_id):
        """Set the trace id passed to clients created from now on."""
        self._trace_id = trace_id
        return self

    @property
    def base_url(self):
        return self._base_url

    @property
    def api_key(self):
        return self._api_key

    @property
    def default_channel(self):
        return self._default_channel

    @property
    def default_locale(self):
        return self._default_locale

    @property
    def shop_client_logger(self):
        return self._shop_client_logger

    @property
    def success_log_format(self):
        return self._success_log_format

    @property
    def error_log_format(self):
        return self._error_log_format

    @property
    def paloma_profiler(self):
        return self._profiler

    @property
    def shop_client_cache(self):
        return self._cache

    @property
    def paloma_trace_id(self):
        return self._trace_id
