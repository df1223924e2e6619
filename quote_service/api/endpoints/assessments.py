"""
프로젝트 평가 API입니다.
견적 위저드의 가격 미리보기, 최종 제출, 예산 비교, 제안서 생성/다운로드 기능을 제공합니다.
"""

import html
from urllib.parse import quote as url_quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from quote_service.models import ProjectAssessment, AssessmentSubmission, ProposalDocument
from quote_service.services import get_quote_pipeline
from quote_service.utils import validate_record_id, safe_filename

router = APIRouter()


@router.post("/pricing")
async def preview_pricing(answers: ProjectAssessment) -> dict:
    """
    위저드 진행 중 실시간 가격 미리보기.
    일부 단계만 입력된 답변도 받으며, 아무것도 저장하지 않습니다.
    """
    pipeline = get_quote_pipeline()
    breakdown = pipeline.preview_pricing(answers)
    return breakdown.model_dump()


@router.post("", status_code=201)
async def submit_assessment(submission: AssessmentSubmission) -> dict:
    """
    평가 최종 제출.

    제출 시점의 가격 명세를 함께 저장하고, 첫 견적서를 자동으로 만듭니다.
    """
    pipeline = get_quote_pipeline()
    record, quote = await pipeline.submit_assessment(submission)

    return {
        "id": record.id,
        "status": record.status.value,
        "pricing_breakdown": record.pricing_breakdown.model_dump(),
        "quote_number": quote.quote_number if quote else None,
        "created_at": record.created_at.isoformat(),
    }


@router.get("/{assessment_id}")
async def get_assessment(assessment_id: str) -> dict:
    """ID로 평가 레코드 조회"""
    assessment_id = validate_record_id(assessment_id)
    record = await get_quote_pipeline().get_assessment(assessment_id)

    if not record:
        raise HTTPException(status_code=404, detail="평가를 찾을 수 없습니다")

    return record.model_dump()


@router.get("/{assessment_id}/budget-comparison")
async def get_budget_comparison(assessment_id: str) -> dict:
    """선택한 예산 구간과 견적 금액 비교 보고서"""
    assessment_id = validate_record_id(assessment_id)
    comparison = await get_quote_pipeline().compare_budget(assessment_id)

    if not comparison:
        raise HTTPException(status_code=404, detail="평가를 찾을 수 없습니다")

    return comparison.model_dump()


@router.get("/{assessment_id}/proposal")
async def get_proposal(assessment_id: str) -> dict:
    """
    제안서 생성.
    호출할 때마다 새 견적서가 저장되며, 견적 번호와 제안서를 함께 반환합니다.
    """
    assessment_id = validate_record_id(assessment_id)
    quote = await get_quote_pipeline().generate_quote(assessment_id)

    if not quote:
        raise HTTPException(status_code=404, detail="평가를 찾을 수 없습니다")

    return {
        "quote_number": quote.quote_number,
        "valid_until": quote.valid_until.isoformat(),
        "proposal": quote.proposal_data.model_dump(),
    }


@router.get("/{assessment_id}/export")
async def export_proposal(
    assessment_id: str,
    format: str = "markdown"
) -> Response:
    """
    제안서를 파일로 다운로드하는 API.
    가장 최근 견적서의 제안서를 사용하고, 견적서가 없으면 새로 만듭니다.

    지원하는 형식:
    - markdown: 마크다운 텍스트 파일 (.md)
    - json: 데이터 원본 파일 (.json)
    - html: 웹브라우저 보기용 파일 (.html)
    """
    if format not in ("markdown", "json", "html"):
        raise HTTPException(
            status_code=400,
            detail=f"지원하지 않는 형식입니다: {format}"
        )

    assessment_id = validate_record_id(assessment_id)
    pipeline = get_quote_pipeline()
    quotes = await pipeline.list_quotes(assessment_id=assessment_id, limit=1)
    quote = quotes[0] if quotes else await pipeline.generate_quote(assessment_id)

    if not quote:
        raise HTTPException(status_code=404, detail="평가를 찾을 수 없습니다")

    proposal = quote.proposal_data
    filename = safe_filename(proposal.title)

    if format == "markdown":
        return Response(
            content=proposal.to_markdown(),
            media_type="text/markdown",
            headers={"Content-Disposition": _attachment(f"{filename}.md")}
        )
    elif format == "json":
        return Response(
            content=proposal.to_json(),
            media_type="application/json",
            headers={"Content-Disposition": _attachment(f"{filename}.json")}
        )
    else:
        return Response(
            content=_render_html(proposal),
            media_type="text/html",
            headers={"Content-Disposition": _attachment(f"{filename}.html")}
        )


def _attachment(filename: str) -> str:
    # 헤더는 latin-1 만 허용하므로 파일명은 RFC 5987 형식으로 인코딩
    return f"attachment; filename*=UTF-8''{url_quote(filename)}"


def _render_html(proposal: ProposalDocument) -> str:
    """마크다운 제안서를 간단한 HTML 페이지로 감쌉니다."""
    title = html.escape(proposal.title)
    body = html.escape(proposal.to_markdown())
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        body {{ font-family: 'Inter', sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        pre {{ background: #f8f8f8; padding: 15px; border-radius: 5px; white-space: pre-wrap; }}
    </style>
</head>
<body>
<pre>{body}</pre>
</body>
</html>"""
