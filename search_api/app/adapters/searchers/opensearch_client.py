import logging

from opensearchpy import OpenSearch
from search_api.app.platform.config import Settings, settings

logger = logging.getLogger(__name__)

def build_client(cfg: Settings = settings) -> OpenSearch:
    """
    설정값으로 OpenSearch 클라이언트를 만든다.
    클라이언트는 내부에 커넥션 풀을 가지며 요청 간 공유해도 안전하다.
    """
    kwargs = {
        "hosts": cfg.opensearch_hosts,
        "verify_certs": cfg.OPENSEARCH_VERIFY_CERTS,
        "timeout": cfg.OPENSEARCH_TIMEOUT,
    }
    if cfg.OPENSEARCH_USERNAME:
        kwargs["http_auth"] = (cfg.OPENSEARCH_USERNAME, cfg.OPENSEARCH_PASSWORD)

    logger.info("Connecting to OpenSearch at %s", ", ".join(cfg.opensearch_hosts))
    return OpenSearch(**kwargs)
