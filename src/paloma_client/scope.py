"""Per-request factory wiring."""
import logging
import uuid

from .config import load_config
from .clients import ClientFactory

logger = logging.getLogger(__name__)


def factory_for_request(config=None, trace_id=None, channel=None, locale=None, **collaborators):
    """Create a fresh ClientFactory for one request scope.

    Defaults come from the config, explicit channel/locale override them.
    A new trace id is generated when none is given.
    """
    if config is None:
        config = load_config()

    factory = ClientFactory.from_config(config, **collaborators)
    if channel:
        factory.set_default_channel(channel)
    if locale:
        factory.set_default_locale(locale)
    factory.set_paloma_trace_id(trace_id or uuid.uuid4().hex)

    logger.info(
        f"Request factory ready - trace {factory.paloma_trace_id} "
        f"({factory.default_channel}/{factory.default_locale})"
    )
    return factory
