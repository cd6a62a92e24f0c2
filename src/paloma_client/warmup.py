"""Framework warm-up phase tracking."""
import threading

# Placeholder pair used for clients requested during warm-up
WARMUP_CHANNEL = "symfony_cache_warmup_fake_channel"
WARMUP_LOCALE = "symfony_cache_warmup_fake_locale"


class WarmupPhase:
    """Marks whether the host framework is warming up.

    Use as a context manager around eager initialization code:

        with phase:
            build_template_extensions(factory)
    """

    def __init__(self, active=False):
        # Always active for every thread when set, otherwise per thread
        self._always = active
        self._local = threading.local()

    def _depth(self):
        return getattr(self._local, "depth", 0)

    def is_active(self):
        """True only for the thread currently inside the warm-up block."""
        return self._always or self._depth() > 0

    def __enter__(self):
        self._local.depth = self._depth() + 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self._local.depth = self._depth() - 1
        return False
