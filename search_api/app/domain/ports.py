"""
도메인 포트(추상 인터페이스).

검색 서비스(유스케이스)는 아래 포트에만 의존합니다.
구체 구현은 adapters 레이어에서 제공하고, FastAPI DI로 주입합니다.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol


class SearchPort(Protocol):
    """
    검색 엔진 클라이언트.
    여러 요청이 동시에 공유하므로 구현체는 스레드 안전해야 한다.
    """

    @property
    def index_name(self) -> str:
        ...

    def search(self, body: Dict[str, Any]) -> bytes | str | Mapping[str, Any]:
        """
        Args:
            body: 컴파일된 검색 쿼리 바디
        Returns:
            엔진 응답 원문(또는 디코딩된 dict)
        Raises:
            EngineUnavailable: 연결 실패/타임아웃
            EngineError: 엔진이 쿼리 실행 실패를 보고
        """
        ...
