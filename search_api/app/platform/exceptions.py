class DomainError(Exception):
    """도메인/유즈케이스 공통 베이스 예외"""
    pass

class InvalidInput(DomainError):
    """요청 파라미터 오류(호출자 책임, 4xx)"""
    def __init__(self, message: str):
        super().__init__(message)

class LocaleError(DomainError):
    def __init__(self, locale: str, message: str):
        super().__init__(message)
        self.locale = locale

class UnsupportedLocale(LocaleError, InvalidInput):
    def __init__(self, locale: str):
        LocaleError.__init__(self, locale, f"unsupported locale: {locale!r}")

class MissingLocaleVariant(LocaleError):
    def __init__(self, doc_id: str, field: str, locale: str):
        super().__init__(locale, f"document {doc_id} has no {locale!r} variant for {field!r}")
        self.doc_id = doc_id
        self.field = field

class EngineUnavailable(DomainError):
    """검색 엔진 연결/타임아웃 실패. 재시도는 호출자 몫."""
    def __init__(self, reason: str):
        super().__init__(f"search engine unavailable: {reason}")

class EngineError(DomainError):
    def __init__(self, reason: str, status: int | None = None):
        super().__init__(f"search engine error ({status or 'n/a'}): {reason}")
        self.status = status

class DecodeError(DomainError):
    def __init__(self, reason: str):
        super().__init__(f"malformed search response: {reason}")
