"""Google Gemini implementation of :class:`AnalysisClient`."""

import json
import os
import time
from typing import Any, Dict, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from domain.entities import AnalysisResult
from domain.errors import MalformedResponseError, TransportError
from infrastructure.config import DEFAULT_MODEL_NAME
from infrastructure.logging import get_logger
from tracing.langsmith_setup import trace_llm_operation, tracer

from .base import AnalysisClient
from .prompts import (
    RESPONSE_MIME_TYPE,
    RESPONSE_SCHEMA,
    SYSTEM_INSTRUCTION,
    build_user_message,
)

logger = get_logger(__name__)


class GeminiAnalysisClient(AnalysisClient):
    """Analyze contexts with Google Gemini under a fixed JSON response schema."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: float = 0.3,
        max_output_tokens: int = 8192,
    ):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("Gemini API key not provided")

        self.model_name = model_name or os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME)
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        self.safety_settings = {
            HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        }

        logger.info(f"Gemini analysis client initialized (model={self.model_name})")

    def _create_langchain_model(self) -> ChatGoogleGenerativeAI:
        """Create a LangChain Gemini model constrained to the analysis schema."""

        return ChatGoogleGenerativeAI(
            model=self.model_name,
            google_api_key=self.api_key,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            safety_settings=self.safety_settings,
            response_mime_type=RESPONSE_MIME_TYPE,
            response_schema=RESPONSE_SCHEMA,
        )

    def analyze(self, context: str) -> AnalysisResult:
        """Send ``context`` to Gemini and parse the structured answer."""
        start_time = time.time()

        with trace_llm_operation(
            name="gemini_analyze_context",
            model=self.model_name,
            temperature=self.temperature,
            context_length=len(context),
        ):
            messages = [
                SystemMessage(content=SYSTEM_INSTRUCTION),
                HumanMessage(content=build_user_message(context)),
            ]

            try:
                chain = self._create_langchain_model() | StrOutputParser()
                content = chain.invoke(messages)
            except Exception as e:
                logger.error(f"Gemini request failed: {e}", exc_info=True)
                raise TransportError() from e

            if not content or not content.strip():
                logger.error("Empty response from Gemini API")
                raise TransportError()

            result = self._parse_result(content)

            response_time = time.time() - start_time
            tracer.log_metrics(
                {
                    "response_time": response_time,
                    "content_length": len(content),
                    "reasoning_steps": len(result.reasoning),
                    "deliverable_type": result.deliverable_type,
                }
            )
            logger.info(
                f"Analysis completed in {response_time:.2f}s "
                f"(deliverable={result.deliverable_type!r})"
            )
            return result

    def _parse_result(self, content: str) -> AnalysisResult:
        """Parse the JSON body and read the four result fields."""
        try:
            payload: Dict[str, Any] = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Malformed Gemini response, invalid JSON: {e}")
            logger.debug(f"Raw response: {content[:500]}")
            raise MalformedResponseError() from e

        if not isinstance(payload, dict):
            logger.error(
                f"Malformed Gemini response, expected an object but got {type(payload).__name__}"
            )
            raise MalformedResponseError()

        try:
            return AnalysisResult.from_payload(payload)
        except KeyError as e:
            logger.error(f"Malformed Gemini response, missing field {e}")
            raise MalformedResponseError() from e
        except TypeError as e:
            logger.error(f"Malformed Gemini response, unusable field: {e}")
            raise MalformedResponseError() from e
