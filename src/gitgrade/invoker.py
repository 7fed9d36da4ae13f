"""Schema-constrained analysis through the Gemini API."""

from __future__ import annotations

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from .errors import ModelInvocationError, ResponseDecodeError
from .logging import get_logger
from .models import AnalysisResult, Level

logger = get_logger("invoker")

DEFAULT_MODEL = "gemini-2.5-flash"

ANALYSIS_FIELDS = (
    "score",
    "level",
    "summary",
    "strengths",
    "weaknesses",
    "roadmap",
    "consistencyScore",
    "documentationScore",
    "bestPracticesScore",
)


def _number(description: str) -> types.Schema:
    return types.Schema(type=types.Type.NUMBER, description=description)


def _string_list(description: str) -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(type=types.Type.STRING),
        description=description,
    )


ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "score": _number("Overall quality score from 0-100"),
        "level": types.Schema(
            type=types.Type.STRING,
            enum=[level.value for level in Level],
            description="Beginner, Intermediate, or Advanced",
        ),
        "summary": types.Schema(
            type=types.Type.STRING,
            description="A concise 2-3 sentence executive summary of the repo quality.",
        ),
        "strengths": _string_list("List of 3-4 key strengths identified."),
        "weaknesses": _string_list("List of 3-4 key areas needing improvement."),
        "roadmap": _string_list(
            "Ordered list of 3-5 actionable steps for the student to improve the project."
        ),
        "consistencyScore": _number("Sub-score for consistency 0-100"),
        "documentationScore": _number("Sub-score for documentation 0-100"),
        "bestPracticesScore": _number("Sub-score for best practices 0-100"),
    },
    required=list(ANALYSIS_FIELDS),
)


def decode_analysis(text: str) -> AnalysisResult:
    """Validate a JSON payload against the analysis schema.

    Either every field is present and well typed or ResponseDecodeError
    is raised; nothing is filled in or clamped.
    """
    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'payload'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ResponseDecodeError(problems) from exc


class AnalysisInvoker:
    """Send one prompt to the model and decode the structured answer.

    A single attempt is made per call. Pass ``client`` to reuse an
    existing ``genai.Client`` (or a stand-in with the same surface).
    """

    def __init__(
        self,
        client: genai.Client | None = None,
        *,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float | None = None,
    ) -> None:
        self._client = client if client is not None else genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature

    def _config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=ANALYSIS_SCHEMA,
            temperature=self.temperature,
        )

    async def invoke(self, prompt: str) -> AnalysisResult:
        logger.debug("requesting analysis from %s (%d prompt chars)", self.model, len(prompt))
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config(),
            )
        except genai_errors.APIError as exc:
            raise ModelInvocationError(str(exc)) from exc

        text = response.text
        if not text or not text.strip():
            raise ModelInvocationError()
        return decode_analysis(text)
