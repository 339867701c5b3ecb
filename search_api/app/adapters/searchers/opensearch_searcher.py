"""
컴파일된 검색 쿼리를 OpenSearch에 실행하는 SearchPort 구현체.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from opensearchpy import OpenSearch
from opensearchpy.exceptions import ConnectionError, SerializationError, TransportError

from search_api.app.domain.ports import SearchPort
from search_api.app.platform.exceptions import DecodeError, EngineError, EngineUnavailable

logger = logging.getLogger(__name__)

class OpenSearchSearcher(SearchPort):

    def __init__(self, client: OpenSearch, index_name: str, timeout: float | None = None) -> None:
        self.client = client
        self._index_name = index_name
        self.timeout = timeout

    @property
    def index_name(self) -> str:
        return self._index_name

    def search(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        OpenSearch에 검색을 수행하여 응답 원문(dict)을 반환한다.

        Args:
            body (Dict[str, Any]): 검색 쿼리 바디
        Returns:
            Dict[str, Any]: 검색 응답(hits, took, timed_out, _shards)
        Raises:
            EngineUnavailable: 연결 실패/타임아웃 (ConnectionTimeout 포함)
            EngineError: 엔진이 4xx/5xx로 응답
            DecodeError: 응답 본문 역직렬화 실패
        """
        params: Dict[str, Any] = {}
        if self.timeout:
            params["request_timeout"] = self.timeout

        try:
            return self.client.search(index=self._index_name, body=body, **params)
        except ConnectionError as e:
            logger.error("opensearch unreachable index=%s: %s", self._index_name, e)
            raise EngineUnavailable(str(e)) from e
        except SerializationError as e:
            raise DecodeError(str(e)) from e
        except TransportError as e:
            status = e.status_code if isinstance(e.status_code, int) else None
            logger.error("opensearch error index=%s status=%s info=%s", self._index_name, status, e.info)
            raise EngineError(str(e.error), status) from e
