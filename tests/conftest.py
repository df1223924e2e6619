"""공유 pytest fixture 모음."""

import pytest

from quote_service.models import ProjectAssessment, AssessmentSubmission


SUBMISSION_PAYLOAD = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "company": "Corner Bakery",
    "projectName": "Bakery Website",
    "projectType": "website",
    "projectDescription": (
        "A small marketing website for a neighbourhood bakery with an online menu "
        "and a contact form."
    ),
    "targetAudience": "Local customers looking for fresh bread",
    "mainGoals": ["Show the daily menu", "Collect catering requests"],
    "platform": ["web"],
    "mustHaveFeatures": ["Online menu", "Contact form"],
    "preferredTimeline": "3-6-months",
    "budgetRange": "under-5k",
}


@pytest.fixture
def website_assessment():
    """가장 단순한 웹사이트 평가 (추가 기능 없음, 표준 일정)."""
    return ProjectAssessment(
        project_name="Bakery Website",
        project_type="website",
        platform=["web"],
        preferred_timeline="3-6-months",
        budget_range="under-5k",
    )


@pytest.fixture
def mobile_enterprise_assessment():
    """iOS + Android, 엔터프라이즈 데이터 복잡도의 모바일 앱 평가."""
    return ProjectAssessment(
        project_name="Field Service App",
        project_type="mobile-app",
        platform=["ios", "android"],
        data_storage="enterprise",
        budget_range="25k-50k",
    )


@pytest.fixture
def submission_payload():
    """API 제출용 camelCase 페이로드 (복사본)."""
    return dict(SUBMISSION_PAYLOAD)


@pytest.fixture
def sample_submission(submission_payload):
    """검증을 통과한 AssessmentSubmission fixture."""
    return AssessmentSubmission.model_validate(submission_payload)


@pytest.fixture
def temp_storage(tmp_path):
    """임시 디렉토리 기반 FileStorage fixture."""
    from quote_service.services.file_storage import FileStorage
    return FileStorage(base_path=str(tmp_path))


@pytest.fixture
def pipeline(temp_storage, monkeypatch):
    """임시 저장소를 쓰는 QuotePipeline. API 가 쓰는 싱글톤도 이것으로 교체합니다."""
    from quote_service.services import quote_pipeline as pipeline_module

    instance = pipeline_module.QuotePipeline(storage=temp_storage)
    monkeypatch.setattr(pipeline_module, "_quote_pipeline", instance)
    return instance


@pytest.fixture
async def client(pipeline):
    """httpx AsyncClient fixture (FastAPI 테스트용)."""
    from httpx import AsyncClient, ASGITransport
    from quote_service.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
