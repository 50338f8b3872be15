"""공유 pytest fixture 모음."""

from datetime import date, datetime

import pytest
import spacy
from httpx import AsyncClient, ASGITransport

from docuforge.config import get_settings
from docuforge.layers.layer1_analysis import TextAnalyzer
from docuforge.layers.layer4_composition import DocumentComposer, get_document_composer
from docuforge.models import Project
from docuforge.services import ProjectStorage, get_project_storage
from docuforge.services import openai_client, project_storage

FIXED_NOW = datetime(2027, 1, 1, 9, 0, 0)

# 테스트 파이프라인에서 품사/표제어를 고정할 단어 (표면형 → 표제어)
TEST_VERBS = {
    "create": "create", "edit": "edit", "delete": "delete", "search": "search",
    "export": "export", "upload": "upload", "track": "track", "manage": "manage",
    "generate": "generate", "share": "share", "view": "view", "save": "save",
    "import": "import", "find": "find",
}
TEST_NOUNS = {
    "document": "document", "documents": "document", "report": "report",
    "reports": "report", "invoice": "invoice", "invoices": "invoice",
    "project": "project", "file": "file", "data": "data", "user": "user",
    "profile": "profile", "expense": "expense", "expenses": "expense",
    "dashboard": "dashboard", "team": "team", "teams": "team", "client": "client",
    "contract": "contract", "tool": "tool", "tools": "tool",
    "freelancer": "freelancer", "freelancers": "freelancer", "settings": "setting",
    "app": "app",
}
TEST_ADJECTIVES = {
    "secure": "secure", "fast": "fast", "simple": "simple", "innovative": "innovative",
    "easy": "easy", "intuitive": "intuitive", "slow": "slow", "difficult": "difficult",
}
TEST_ORGS = ("Acme", "Globex")


def build_test_pipeline():
    """
    모델 패키지 없이 동작하는 결정적 spaCy 파이프라인.

    blank("en") + attribute_ruler(품사/표제어) + entity_ruler(조직명)
    """
    nlp = spacy.blank("en")

    ruler = nlp.add_pipe("attribute_ruler")
    for words, pos in ((TEST_VERBS, "VERB"), (TEST_NOUNS, "NOUN"), (TEST_ADJECTIVES, "ADJ")):
        for word, lemma in words.items():
            ruler.add(patterns=[[{"LOWER": word}]], attrs={"POS": pos, "LEMMA": lemma})

    entity_ruler = nlp.add_pipe("entity_ruler")
    entity_ruler.add_patterns([{"label": "ORG", "pattern": name} for name in TEST_ORGS])
    return nlp


@pytest.fixture(scope="session")
def nlp():
    return build_test_pipeline()


@pytest.fixture
def analyzer(nlp):
    """테스트 파이프라인을 사용하는 TextAnalyzer."""
    return TextAnalyzer(nlp=nlp)


@pytest.fixture
def composer(analyzer):
    """현재 시각이 FIXED_NOW로 고정된 DocumentComposer."""
    return DocumentComposer(analyzer=analyzer, now=lambda: FIXED_NOW)


@pytest.fixture
def sample_project():
    """일반적인 프로젝트 fixture (출시일: FIXED_NOW + 100일)."""
    return Project(
        name="Invoice Tracker",
        description="Acme freelancers struggle with slow invoice tools. This secure app makes billing easy.",
        goal="Help freelancers create invoices and track expenses in one place.",
        target_audience="Freelancers and small agencies",
        core_features=["Create invoices", "Track expenses", "Export reports to PDF", "Search documents"],
        tech_stack=["SwiftUI", "Core Data", "PDFKit"],
        launch_date=date(2027, 4, 11),
        client_notes="Prefers a minimal look.",
    )


@pytest.fixture
def empty_project():
    """기능/스택/설명이 모두 비어 있는 프로젝트."""
    return Project(name="Blank", launch_date=date(2027, 1, 15))


@pytest.fixture
def temp_storage(tmp_path):
    """임시 디렉터리를 사용하는 ProjectStorage."""
    return ProjectStorage(str(tmp_path / "data"))


@pytest.fixture
def settings_env(tmp_path, monkeypatch):
    """
    원격 생성기 미설정 + 임시 data_dir 환경.
    설정 캐시와 서비스 싱글톤을 초기화합니다.
    """
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("GENERATION_MODE", "auto")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    monkeypatch.setattr(openai_client, "_openai_client", None)
    monkeypatch.setattr(project_storage, "_project_storage", None)
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
async def client(settings_env, temp_storage, composer):
    """저장소와 조립기를 테스트용으로 교체한 API 클라이언트."""
    from docuforge.main import app

    app.dependency_overrides[get_project_storage] = lambda: temp_storage
    app.dependency_overrides[get_document_composer] = lambda: composer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
