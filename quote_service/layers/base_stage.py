"""Base class for the pricing pipeline stages.

가격 계산 → 예산 비교 → 제안서 작성 단계가 공통으로 사용하는
기본 흐름(로깅, 소요 시간 측정)을 정의하는 추상 베이스 클래스입니다.

각 단계는 입력(평가 답변)만 읽고 정적인 가격표만 참조하는 순수 함수이므로,
하나의 인스턴스를 여러 요청에서 동시에 사용해도 안전합니다.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from quote_service.models import ProjectAssessment

OutputT = TypeVar('OutputT')    # 단계별 출력 타입 (PricingBreakdown 등)

logger = logging.getLogger(__name__)


class PipelineStage(ABC, Generic[OutputT]):
    """
    파이프라인 단계 추상 베이스 클래스.

    Template Method 패턴:
    1. 시작 로깅
    2. _do_run() 호출 (서브클래스 구현)
    3. 소요 시간 로깅

    Attributes:
        _stage_name: 로깅에 사용되는 단계 이름
    """

    _stage_name: str = "PipelineStage"

    def run(self, assessment: ProjectAssessment, **context) -> OutputT:
        """
        단계 실행 템플릿 메서드.

        Args:
            assessment: 고객의 평가 답변
            **context: 단계별 추가 정보 (예: assessment_id)

        Returns:
            단계 출력
        """
        project = assessment.project_name or assessment.project_type or "unnamed"
        logger.debug(f"[{self._stage_name}] 시작: {project}")
        start = time.perf_counter()

        result = self._do_run(assessment, **context)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"[{self._stage_name}] 완료: {elapsed_ms:.1f}ms")
        return result

    @abstractmethod
    def _do_run(self, assessment: ProjectAssessment, **context) -> OutputT:
        """실제 계산 로직 (서브클래스에서 구현)."""
