"""로깅 설정."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """루트 로거를 표준 포맷으로 설정합니다. 여러 번 호출해도 안전합니다."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # httpx 요청 로그는 너무 많아서 WARNING 이상만 출력
    logging.getLogger("httpx").setLevel(logging.WARNING)
