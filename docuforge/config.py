from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # 원격 생성기 설정: OpenAI Chat Completions API
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 2500

    # 원격 호출 재시도/타임아웃 설정
    remote_timeout_seconds: float = 30.0
    remote_max_attempts: int = 3  # 최초 시도 포함
    remote_backoff_base: float = 0.5  # 초
    remote_backoff_cap: float = 4.0  # 초

    # 생성 모드: auto(키가 있으면 remote), offline, remote
    generation_mode: str = "auto"

    # 텍스트 분석용 spaCy 모델
    spacy_model: str = "en_core_web_sm"

    # 저장소 및 문서 메타데이터 설정
    data_dir: str = "data"
    reading_words_per_minute: int = 220

    log_level: str = "INFO"

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def remote_configured(self) -> bool:
        """API 키가 설정되어 있는지 여부."""
        return bool(self.openai_api_key.strip())


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
