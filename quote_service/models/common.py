"""
공통 데이터 모델 모듈입니다.
견적 위저드(프론트엔드)와 주고받는 모델들이 공통으로 사용하는 설정을 정의합니다.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WizardModel(BaseModel):
    """
    견적 위저드 입력용 기본 모델입니다.

    위저드는 camelCase 키(projectType, budgetRange 등)로 데이터를 보내고,
    서버 내부와 저장소는 snake_case 필드명을 사용합니다.
    두 형태 모두 입력으로 받으며, 출력은 항상 snake_case 입니다.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
