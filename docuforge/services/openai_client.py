"""OpenAI Chat Completions client for remote document generation.

httpx.AsyncClient로 OpenAI API를 호출하여 문서 본문을 생성합니다.

주요 기능:
- is_configured(): API 키 설정 여부
- generate(): 프로젝트 + 문서 종류 → 마크다운 본문
- test_connection(): GET /models 로 키/연결 확인

재시도 전략:
- 일시적 네트워크 오류(타임아웃, 연결 실패, 연결 끊김)만 재시도
- 최대 3회 시도 (remote_max_attempts)
- 지수 백오프 + 지터

┌──────┬──────────────────────────────┬──────────────┐
│ 시도 │ 대기 시간                     │ 최대         │
├──────┼──────────────────────────────┼──────────────┤
│ 1차  │ -                            │ -            │
│ 2차  │ 0.5초 + U(0, 0.5)            │ 4초          │
│ 3차  │ 1.0초 + U(0, 0.5)            │ 4초          │
└──────┴──────────────────────────────┴──────────────┘

HTTP 응답 자체(4xx/5xx)는 재시도하지 않고 RemoteAPIError로 변환합니다.
잘못된 base URL은 요청 전에 RemoteNetworkError로 변환합니다.
"""

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Optional

import httpx

from docuforge.config import Settings, get_settings
from docuforge.exceptions import (
    RemoteAPIError,
    RemoteDecodeError,
    RemoteNetworkError,
    RemoteNotConfiguredError,
    RemoteTransientError,
)
from docuforge.layers.layer4_composition import bullet_list
from docuforge.models import DocumentType, Project

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional document generator for software and business projects. "
    "Create detailed, well-structured documents in Markdown format."
)

TRANSIENT_ERRORS = (
    httpx.TimeoutException,
    httpx.ConnectError,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)

DOCUMENT_INSTRUCTIONS: dict[DocumentType, str] = {
    DocumentType.PROJECT_SUMMARY: """For this PROJECT SUMMARY, include:
- An executive summary
- Project vision and objectives
- Key stakeholders
- Target audience analysis
- Core feature highlights
- Technology overview
- Value proposition
- Format with clear headings and professional language""",
    DocumentType.TECHNICAL_REQUIREMENTS: """For this TECHNICAL REQUIREMENTS document, include:
- System architecture overview
- Detailed backend requirements
- Frontend/UI requirements
- API specifications if applicable
- Database schema and data flow
- Security requirements
- Performance requirements
- Compatibility requirements
- Technical dependencies and third-party integrations
- Development environment setup
- Use professional, technical language""",
    DocumentType.FUNCTIONAL_SPECS: """For this FUNCTIONAL SPECIFICATIONS document, include:
- Detailed description of each feature
- User flows for key functionality
- User roles and permissions
- Business rules and logic
- Input validation rules
- Error handling scenarios
- Integration points
- Acceptance criteria for each feature
- Use clear, specific language with examples where helpful""",
    DocumentType.TIMELINE: """For this PROJECT TIMELINE document, include:
- Project phases (Planning, Development, Testing, Deployment)
- Key milestones with estimated dates
- Dependencies between tasks
- Resource allocation recommendations
- Risk assessment and contingency plans
- Critical path analysis
- Progress tracking methodology
- Create a realistic timeline based on the project complexity""",
    DocumentType.NDA: """For this NON-DISCLOSURE AGREEMENT document, include:
- Professional legal language for an NDA
- Definition of confidential information specific to this project
- Obligations of receiving party
- Exclusions from confidential information
- Term and termination conditions
- Return of materials clause
- Governing law
- Remedies for breach
- Signature blocks
- Format as a formal legal document while keeping it in markdown""",
}

CLOSING_INSTRUCTIONS = """
Format the document professionally with proper markdown headings, bullet points, and sections.
Include a title, introduction, and conclusion.
Use clear, concise language appropriate for a business document."""


def build_prompt(project: Project, document_type: DocumentType) -> str:
    """프로젝트 정보와 문서 종류별 지시사항으로 사용자 프롬프트를 만듭니다."""
    return f"""Generate a professional {document_type.label} document in markdown format for the following project:

Project Name: {project.name}
Description: {project.description}
Goal: {project.goal}
Target Audience: {project.target_audience}
Launch Date: {project.formatted_launch_date}
Core Features:
{bullet_list(project.core_features)}

Tech Stack:
{bullet_list(project.tech_stack)}

Client Notes: {project.client_notes}

{DOCUMENT_INSTRUCTIONS[document_type]}
{CLOSING_INSTRUCTIONS}"""


class OpenAIDocumentClient:
    """
    OpenAI 기반 원격 문서 생성기.

    Attributes:
        settings: API 키/모델/재시도 설정
        _transport: 테스트용 httpx 전송 계층 (MockTransport 등)
        _sleep: 백오프 대기 함수 (테스트에서 교체 가능)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._sleep = sleep
        self._rng = rng or random.Random()

    def is_configured(self) -> bool:
        return self.settings.remote_configured

    async def generate(self, project: Project, document_type: DocumentType) -> str:
        """
        문서 본문을 원격으로 생성합니다.

        Raises:
            RemoteNotConfiguredError: API 키 없음
            RemoteNetworkError: 재시도 소진 또는 재시도 불가능한 네트워크 오류
            RemoteAPIError: 서버가 에러를 반환함
            RemoteDecodeError: 응답에 본문이 없음
        """
        if not self.is_configured():
            raise RemoteNotConfiguredError()

        payload = {
            "model": self.settings.openai_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(project, document_type)},
            ],
            "temperature": self.settings.openai_temperature,
            "max_tokens": self.settings.openai_max_tokens,
        }

        logger.info(f"[OpenAI] generate -> POST /chat/completions ({document_type.label})")
        response = await self._request("POST", "/chat/completions", json=payload)
        body = self._parse_body(response)

        content = self._extract_content(body)
        if content is not None:
            logger.info(f"[OpenAI] 생성 완료: {len(content)} chars")
            return content

        self._raise_for_error(response, body)
        raise RemoteDecodeError(details={"status_code": response.status_code})

    async def test_connection(self) -> None:
        """키와 네트워크 연결을 확인합니다. 실패하면 RemoteGenerationError 계열을 발생시킵니다."""
        if not self.is_configured():
            raise RemoteNotConfiguredError()

        logger.info("[OpenAI] testConnection -> GET /models")
        response = await self._request("GET", "/models")
        if response.status_code == 200:
            return
        self._raise_for_error(response, self._parse_body(response))

    # ==================== 재시도 ====================

    def backoff_delay(self, attempt: int) -> float:
        """attempt번째 시도가 실패한 뒤의 대기 시간 (attempt는 1부터)."""
        base = self.settings.remote_backoff_base
        cap = self.settings.remote_backoff_cap
        delay = min(cap, base * (2 ** (attempt - 1)))
        return min(cap, delay + self._rng.uniform(0, base))

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> httpx.Response:
        max_attempts = max(self.settings.remote_max_attempts, 1)
        last_error: Optional[RemoteTransientError] = None

        for attempt in range(1, max_attempts + 1):
            try:
                logger.debug(f"[OpenAI] 시도 {attempt}/{max_attempts} -> {method} {path}")
                return await self._send(method, path, json)
            except RemoteTransientError as e:
                last_error = e
                if attempt < max_attempts:
                    delay = self.backoff_delay(attempt)
                    logger.warning(
                        f"[OpenAI] 일시적 오류: {e.message}. {delay:.2f}초 후 재시도 "
                        f"(남은 시도: {max_attempts - attempt})"
                    )
                    await self._sleep(delay)

        logger.error(f"[OpenAI] 모든 시도 실패: {last_error}")
        raise RemoteNetworkError(
            f"Network error after {max_attempts} attempts: {last_error.message}",
            details={"attempts": max_attempts},
        )

    async def _send(self, method: str, path: str, json: Optional[dict]) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self.settings.openai_api_key}"}
        try:
            async with httpx.AsyncClient(
                base_url=self.settings.openai_base_url,
                timeout=self.settings.remote_timeout_seconds,
                transport=self._transport,
            ) as client:
                return await client.request(method, path, json=json, headers=headers)
        except TRANSIENT_ERRORS as e:
            raise RemoteTransientError(f"{type(e).__name__}: {e}")
        except httpx.HTTPError as e:
            logger.error(f"[OpenAI] 네트워크 오류 (재시도 안 함): {e}")
            raise RemoteNetworkError(f"{type(e).__name__}: {e}")
        except (httpx.InvalidURL, ValueError) as e:
            # 잘못된 OPENAI_BASE_URL (포트/스킴 등)
            logger.error(f"[OpenAI] 요청 URL 오류 (재시도 안 함): {e}")
            raise RemoteNetworkError(
                f"Invalid request URL: {type(e).__name__}: {e}",
                details={"base_url": self.settings.openai_base_url},
            )

    # ==================== 응답 해석 ====================

    @staticmethod
    def _parse_body(response: httpx.Response) -> Optional[dict]:
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    @staticmethod
    def _extract_content(body: Optional[dict]) -> Optional[str]:
        if not body:
            return None
        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None

    @staticmethod
    def _raise_for_error(response: httpx.Response, body: Optional[dict]) -> None:
        error = body.get("error") if body else None
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            raise RemoteAPIError(error["message"], details={"status_code": response.status_code})
        if not response.is_success:
            raise RemoteAPIError(
                f"Error code: {response.status_code}",
                details={"status_code": response.status_code},
            )


_openai_client: Optional[OpenAIDocumentClient] = None


def get_openai_client() -> OpenAIDocumentClient:
    """Get or create OpenAI client singleton."""
    global _openai_client
    if _openai_client is None:
        _openai_client = OpenAIDocumentClient()
    return _openai_client
