"""Pydantic 모델 및 문서 메타데이터 유틸리티 단위 테스트."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from docuforge.models import (
    DocumentType,
    GeneratedDocument,
    Project,
    ProjectCreate,
    ProjectPhase,
    SentimentResult,
)
from docuforge.utils import (
    count_words,
    extract_key_points,
    format_long_date,
    format_medium_date,
    reading_time_minutes,
)


class TestDocumentType:
    def test_labels(self):
        assert [t.label for t in DocumentType] == [
            "Project Summary",
            "Technical Requirements",
            "Functional Specifications",
            "Milestones & Timeline",
            "NDA Template",
        ]

    def test_slugs(self):
        assert [t.slug for t in DocumentType] == [
            "project-summary",
            "technical-requirements",
            "functional-specs",
            "timeline",
            "nda",
        ]

    def test_from_slug_normalizes(self):
        assert DocumentType.from_slug(" Project_Summary ") == DocumentType.PROJECT_SUMMARY
        assert DocumentType.from_slug("nda") == DocumentType.NDA

    def test_from_slug_unknown_raises(self):
        with pytest.raises(ValueError):
            DocumentType.from_slug("invoice")


class TestProject:
    def test_defaults(self):
        project = Project(name="Minimal", launch_date=date(2027, 1, 1))
        assert project.id
        assert project.core_features == []
        assert project.tech_stack == []
        assert project.documents == []

    def test_launch_date_required(self):
        with pytest.raises(ValidationError):
            Project(name="No date")

    def test_formatted_launch_date(self):
        project = Project(name="P", launch_date=date(2027, 3, 5))
        assert project.formatted_launch_date == "Mar 5, 2027"

    def test_get_document(self):
        document = GeneratedDocument.from_content(DocumentType.NDA, "body")
        project = Project(name="P", launch_date=date(2027, 1, 1), documents=[document])
        assert project.get_document(DocumentType.NDA) is document
        assert project.get_document(DocumentType.TIMELINE) is None

    def test_json_round_trip_keeps_documents(self):
        project = Project(
            name="P",
            launch_date=date(2027, 1, 1),
            documents=[GeneratedDocument.from_content(DocumentType.TIMELINE, "- one long bullet point")],
        )
        restored = Project.model_validate_json(project.model_dump_json())
        assert restored == project


class TestProjectCreate:
    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectCreate(name="", launch_date=date(2027, 1, 1))

    def test_to_project_copies_fields(self):
        request = ProjectCreate(
            name="P",
            description="d",
            core_features=["a", "b"],
            launch_date=date(2027, 1, 1),
        )
        project = request.to_project()
        assert project.name == "P"
        assert project.core_features == ["a", "b"]
        assert project.documents == []


class TestGeneratedDocument:
    def test_from_content_computes_metadata(self):
        content = "# Title\n- A sufficiently long bullet\n" + "word " * 300
        document = GeneratedDocument.from_content(DocumentType.PROJECT_SUMMARY, content)
        assert document.word_count == count_words(content)
        assert document.reading_time_minutes == 2
        assert document.key_points == ["A sufficiently long bullet"]

    def test_custom_words_per_minute(self):
        document = GeneratedDocument.from_content(DocumentType.NDA, "word " * 100, words_per_minute=50)
        assert document.reading_time_minutes == 2

    def test_apply_content_recomputes(self):
        document = GeneratedDocument.from_content(DocumentType.NDA, "short")
        document.apply_content("one two three four", "/tmp/a.docx")
        assert document.content == "one two three four"
        assert document.word_count == 4
        assert document.artifact_path == "/tmp/a.docx"


class TestSentimentTone:
    def test_threshold_is_exclusive(self):
        assert SentimentResult(score=0.3).tone.startswith("The project has a balanced approach")
        assert SentimentResult(score=-0.3).tone.startswith("The project has a balanced approach")

    def test_positive_and_critical(self):
        assert SentimentResult(score=0.31).tone.startswith("The project has a positive outlook")
        assert SentimentResult(score=-0.31).tone.startswith("The project addresses critical challenges")

    def test_score_bounds_validated(self):
        with pytest.raises(ValidationError):
            SentimentResult(score=1.5)


def test_project_phase_model():
    phase = ProjectPhase(
        name="Development",
        duration_days=10,
        start_date=datetime(2027, 1, 1),
        end_date=datetime(2027, 1, 11),
    )
    assert phase.deliverables == []


class TestTextMetrics:
    def test_count_words(self):
        assert count_words("a  b\nc\t d") == 4
        assert count_words("") == 0

    @pytest.mark.parametrize("words, expected", [(0, 1), (1, 1), (220, 1), (221, 2), (660, 3)])
    def test_reading_time(self, words, expected):
        assert reading_time_minutes(words) == expected

    def test_reading_time_invalid_rate_uses_default(self):
        assert reading_time_minutes(221, words_per_minute=0) == 2

    def test_key_points_from_bullets_and_numbers(self):
        content = "\n".join([
            "# Heading that is not a point",
            "- short",
            "- A sufficiently long bullet point",
            "* Another bullet with enough text",
            "1. Numbered item text here",
            "Plain paragraph line that is long enough",
        ])
        assert extract_key_points(content) == [
            "A sufficiently long bullet point",
            "Another bullet with enough text",
            "Numbered item text here",
        ]

    def test_key_points_limit(self):
        content = "\n".join(f"- Bullet point number {i}" for i in range(10))
        assert len(extract_key_points(content)) == 5

    def test_overlong_line_skipped(self):
        assert extract_key_points("- " + "x" * 200) == []


class TestDateFormats:
    def test_medium(self):
        assert format_medium_date(date(2027, 3, 5)) == "Mar 5, 2027"

    def test_long(self):
        assert format_long_date(datetime(2027, 12, 25, 10, 30)) == "December 25, 2027"
