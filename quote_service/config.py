from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일 또는 QUOTE_ 접두어)에서 설정값을 읽어옵니다.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QUOTE_",
    )

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["*"]  # 견적 위저드 프론트엔드 주소
    log_level: str = "INFO"

    # 저장소 설정: JSON 파일이 저장될 기본 폴더
    storage_path: str = "data"

    # 견적/청구 정책
    quote_valid_days: int = 30  # 견적서 유효 기간 (일)
    invoice_due_days: int = 14  # 청구서 지불 기한 (일)
    low_budget_threshold: int = 5000  # 예산 상한이 이 금액 미만이면 저예산 대안을 함께 제시

    # 제안서에 들어가는 연락처 및 부가 서비스 안내
    offer_domain_services: bool = True
    contact_email: str = "hello@example.com"
    contact_phone: str = ""


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
