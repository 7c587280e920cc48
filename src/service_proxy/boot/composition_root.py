from typing import Mapping, Optional

import httpx

from service_proxy.application.service_proxy import ApiEntry, ServiceProxy
from service_proxy.config.settings import Settings
from service_proxy.domain.interfaces.i_preprocessor import IRequestPreprocessor
from service_proxy.utils.logger import setup_logger

logger = setup_logger(__name__)


def build_proxy(
    apis: Optional[Mapping[str, ApiEntry]] = None,
    preprocessor: Optional[IRequestPreprocessor] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ServiceProxy:
    """Wire settings, the httpx executor and the proxy together."""
    settings = settings or Settings()

    proxy = ServiceProxy(
        scheme=settings.Server.SCHEME,
        host=settings.Server.HOST,
        preprocessor=preprocessor,
        apis=apis,
        timeout=settings.Server.TIMEOUT,
        transport=transport,
    )

    logger.info(
        f"Service proxy ready: {settings.Server.SCHEME}://{settings.Server.HOST} "
        f"({len(proxy.apis)} apis)"
    )
    return proxy
