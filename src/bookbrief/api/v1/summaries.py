"""Summary API endpoints."""

from fastapi import APIRouter

from bookbrief.api.dependencies import GeneratorDep
from bookbrief.api.v1.schemas import BookInfoRequest, GenerationResponse

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.post("", response_model=GenerationResponse)
async def create_summary(
    request: BookInfoRequest,
    generator: GeneratorDep,
) -> GenerationResponse:
    """Generate a summary for the given book metadata.

    Failures are reported in the body (success=false) with a fallback summary.
    """
    result = await generator.generate(request.to_domain())
    return GenerationResponse.model_validate(result)
