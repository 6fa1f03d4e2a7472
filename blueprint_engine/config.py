from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(BLUEPRINT_ 접두어) 또는 .env 파일에서 설정값을 읽어옵니다.

    생성 로직(블루프린트 내용)은 설정값에 영향을 받지 않습니다.
    설정은 서버, 입력 제한, 출력 경로에만 사용됩니다.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLUEPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 서비스 정보
    app_name: str = "Blueprint Engine"
    app_version: str = "1.0.0"

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # 폼 입력 제한
    max_field_length: int = 4000  # 필드 하나의 최대 글자 수
    max_items_per_field: int = 50  # 토큰화 후 필드당 최대 항목 수

    # 스크립트 출력 디렉토리
    output_dir: str = "workspace/outputs"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
