"""
파일 기반 저장소 서비스입니다.
데이터베이스 대신 파일 시스템(폴더와 파일)을 사용하여 데이터를 저장하고 관리합니다.

관리하는 데이터:
1. 평가 레코드 (assessments/)
2. 견적서 (quotes/)
3. 청구서 (invoices/)
"""

import logging
from pathlib import Path
from typing import Optional, TypeVar, Type

import aiofiles
from pydantic import BaseModel

from quote_service.config import get_settings
from quote_service.models import AssessmentRecord, Quote, Invoice
from quote_service.exceptions import StorageError

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=BaseModel)


class FileStorage:
    """JSON 파일 기반의 단순 저장소 클래스입니다."""

    def __init__(self, base_path: str = "data"):
        # 기본 저장 경로 설정 (기본값: data 폴더)
        self.base_path = Path(base_path)
        self.assessments_path = self.base_path / "assessments"
        self.quotes_path = self.base_path / "quotes"
        self.invoices_path = self.base_path / "invoices"

        # 필요한 폴더들이 없으면 만듭니다.
        self._ensure_directories()

    def _ensure_directories(self):
        """저장소 폴더 생성 함수"""
        for path in [self.assessments_path, self.quotes_path, self.invoices_path]:
            path.mkdir(parents=True, exist_ok=True)

    # ==================== 평가 레코드 ====================

    async def save_assessment(self, record: AssessmentRecord) -> str:
        """평가 레코드를 파일로 저장합니다."""
        file_path = self.assessments_path / f"{record.id}.json"
        await self._save_model(file_path, record)
        return record.id

    async def get_assessment(self, assessment_id: str) -> Optional[AssessmentRecord]:
        """ID로 평가 레코드를 불러옵니다."""
        file_path = self.assessments_path / f"{assessment_id}.json"
        return await self._load_model(file_path, AssessmentRecord)

    async def list_assessments(
        self,
        skip: int = 0,
        limit: int = 20,
        status: Optional[str] = None
    ) -> list[AssessmentRecord]:
        """
        평가 목록을 페이지 단위로 가져옵니다.
        최신 접수 순서대로 정렬됩니다.
        """
        records = await self._load_all(self.assessments_path, AssessmentRecord)
        if status is not None:
            records = [r for r in records if r.status.value == status]
        records.sort(key=lambda r: r.created_at, reverse=True)

        # 페이지네이션 (원하는 범위만 자르기)
        return records[skip:skip + limit]

    async def update_assessment(self, record: AssessmentRecord) -> bool:
        """기존 평가 레코드를 덮어씁니다. 없는 레코드면 False."""
        file_path = self.assessments_path / f"{record.id}.json"
        if not file_path.exists():
            return False
        await self._save_model(file_path, record)
        return True

    # ==================== 견적서 ====================

    async def save_quote(self, quote: Quote) -> str:
        """견적서를 저장합니다. (같은 번호면 덮어씀)"""
        file_path = self.quotes_path / f"{quote.quote_number}.json"
        await self._save_model(file_path, quote)
        return quote.quote_number

    async def get_quote(self, quote_number: str) -> Optional[Quote]:
        file_path = self.quotes_path / f"{quote_number}.json"
        return await self._load_model(file_path, Quote)

    async def list_quotes(
        self,
        assessment_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> list[Quote]:
        """견적서 목록 (최신순). assessment_id 가 있으면 해당 평가의 견적서만."""
        quotes = await self._load_all(self.quotes_path, Quote)
        if assessment_id is not None:
            quotes = [q for q in quotes if q.assessment_id == assessment_id]
        quotes.sort(key=lambda q: q.created_at, reverse=True)
        return quotes[skip:skip + limit]

    # ==================== 청구서 ====================

    async def save_invoice(self, invoice: Invoice) -> str:
        file_path = self.invoices_path / f"{invoice.invoice_number}.json"
        await self._save_model(file_path, invoice)
        return invoice.invoice_number

    async def get_invoice(self, invoice_number: str) -> Optional[Invoice]:
        file_path = self.invoices_path / f"{invoice_number}.json"
        return await self._load_model(file_path, Invoice)

    async def list_invoices(self, skip: int = 0, limit: int = 20) -> list[Invoice]:
        invoices = await self._load_all(self.invoices_path, Invoice)
        invoices.sort(key=lambda i: i.created_at, reverse=True)
        return invoices[skip:skip + limit]

    # ==================== 내부 도우미 함수들 ====================

    async def _save_model(self, file_path: Path, model: BaseModel):
        """데이터 모델을 JSON 파일로 저장하는 공통 함수"""
        try:
            async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
                await f.write(model.model_dump_json(indent=2))
        except OSError as e:
            logger.error(f"[FileStorage] 파일 저장 실패 {file_path}: {e}", exc_info=True)
            raise StorageError(
                f"파일 저장에 실패했습니다: {file_path.name}",
                details={"path": str(file_path), "error": str(e)},
            )

    async def _load_model(self, file_path: Path, model_class: Type[T]) -> Optional[T]:
        """JSON 파일을 읽어서 데이터 모델로 변환하는 공통 함수"""
        if not file_path.exists():
            return None

        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            return model_class.model_validate_json(content)
        except (OSError, ValueError) as e:
            # 손상된 파일은 목록에서 제외하고 계속 진행
            logger.error(f"[FileStorage] 파일 로딩 에러 {file_path}: {e}", exc_info=True)
            return None

    async def _load_all(self, directory: Path, model_class: Type[T]) -> list[T]:
        items = []
        for file_path in directory.glob("*.json"):
            item = await self._load_model(file_path, model_class)
            if item:
                items.append(item)
        return items


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_file_storage: Optional[FileStorage] = None


def get_file_storage() -> FileStorage:
    """FileStorage 인스턴스를 반환합니다."""
    global _file_storage
    if _file_storage is None:
        _file_storage = FileStorage(get_settings().storage_path)
    return _file_storage
