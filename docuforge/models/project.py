"""
프로젝트 및 생성 문서 데이터 모델입니다.
문서 생성 엔진의 입력(Project)과 출력(GeneratedDocument) 구조를 정의합니다.
"""

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from docuforge.utils.dates import format_medium_date
from docuforge.utils.text_metrics import (
    DEFAULT_WORDS_PER_MINUTE,
    count_words,
    extract_key_points,
    reading_time_minutes,
)


class DocumentType(str, Enum):
    """생성 가능한 문서 종류입니다. 값은 화면 표시용 이름입니다."""

    PROJECT_SUMMARY = "Project Summary"
    TECHNICAL_REQUIREMENTS = "Technical Requirements"
    FUNCTIONAL_SPECS = "Functional Specifications"
    TIMELINE = "Milestones & Timeline"
    NDA = "NDA Template"

    @property
    def label(self) -> str:
        return self.value

    @property
    def slug(self) -> str:
        """URL/CLI에서 사용하는 식별자 (예: project-summary)."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_slug(cls, slug: str) -> "DocumentType":
        normalized = slug.strip().lower().replace("_", "-")
        for member in cls:
            if member.slug == normalized:
                return member
        raise ValueError(f"Unknown document type: {slug}")


class GeneratedDocument(BaseModel):
    """
    생성된 문서 하나를 나타냅니다.
    단어 수/읽기 시간/핵심 포인트는 from_content()에서 본문으로부터 계산됩니다.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="문서 ID")
    type: DocumentType = Field(..., description="문서 종류")
    content: str = Field(..., description="마크다운 형식 본문")
    word_count: int = Field(0, ge=0)
    reading_time_minutes: int = Field(1, ge=1)
    key_points: list[str] = Field(default_factory=list, description="최대 5개 핵심 포인트")
    created_at: datetime = Field(default_factory=datetime.now)
    last_modified: datetime = Field(default_factory=datetime.now)
    artifact_path: Optional[str] = Field(default=None, description="렌더링된 파일 경로")

    @classmethod
    def from_content(
        cls,
        document_type: DocumentType,
        content: str,
        artifact_path: Optional[str] = None,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> "GeneratedDocument":
        """본문에서 메타데이터를 계산하여 문서를 생성합니다."""
        word_count = count_words(content)
        return cls(
            type=document_type,
            content=content,
            word_count=word_count,
            reading_time_minutes=reading_time_minutes(word_count, words_per_minute),
            key_points=extract_key_points(content),
            artifact_path=artifact_path,
        )

    def apply_content(
        self,
        content: str,
        artifact_path: Optional[str],
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> None:
        """기존 문서의 본문을 교체하고 메타데이터를 다시 계산합니다."""
        self.content = content
        self.artifact_path = artifact_path
        self.word_count = count_words(content)
        self.reading_time_minutes = reading_time_minutes(self.word_count, words_per_minute)
        self.key_points = extract_key_points(content)
        self.last_modified = datetime.now()


class Project(BaseModel):
    """
    문서 생성의 입력이 되는 프로젝트 정보입니다.
    core_features / tech_stack은 비어 있을 수 있습니다.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="프로젝트 고유 ID")
    name: str = Field(..., description="프로젝트 이름")
    description: str = Field("", description="프로젝트 설명")
    goal: str = Field("", description="프로젝트 목표")
    target_audience: str = Field("", description="대상 사용자 (자유 텍스트)")
    core_features: list[str] = Field(default_factory=list, description="핵심 기능 목록 (순서 유지)")
    tech_stack: list[str] = Field(default_factory=list, description="기술 스택 목록 (순서 유지)")
    launch_date: date = Field(..., description="출시 예정일")
    client_notes: str = Field("", description="고객 메모")
    created_at: datetime = Field(default_factory=datetime.now)
    documents: list[GeneratedDocument] = Field(default_factory=list, description="저장된 생성 문서")

    @property
    def formatted_launch_date(self) -> str:
        return format_medium_date(self.launch_date)

    def get_document(self, document_type: DocumentType) -> Optional[GeneratedDocument]:
        for document in self.documents:
            if document.type == document_type:
                return document
        return None


class ProjectCreate(BaseModel):
    """프로젝트 생성 요청 (API/CLI 입력)."""

    name: str = Field(..., min_length=1, description="프로젝트 이름")
    description: str = ""
    goal: str = ""
    target_audience: str = ""
    core_features: list[str] = Field(default_factory=list)
    tech_stack: list[str] = Field(default_factory=list)
    launch_date: date
    client_notes: str = ""

    def to_project(self) -> Project:
        return Project(**self.model_dump())
