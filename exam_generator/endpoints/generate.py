# Endpoint for full question generation and single-question regeneration
# exam_generator/endpoints/generate.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from exam_generator.models.question import ErrorResponse, GenerationRequest, GenerationResponse
from exam_generator.services import generation_service
from exam_generator.utils.errors import ExamGenerationError
from exam_generator.utils.logger import logger

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerationResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate(request: GenerationRequest):
    try:
        questions = await generation_service.generate_questions(request)
        return GenerationResponse(questions=questions)
    except ExamGenerationError as e:
        logger.error(f"Question generation failed with {type(e).__name__}: {e}")
        return JSONResponse(status_code=500, content={"error": e.user_message})
    except Exception as e:
        logger.exception(f"Unhandled error in generate endpoint: {e}")
        return JSONResponse(status_code=500, content={"error": ExamGenerationError.user_message})
