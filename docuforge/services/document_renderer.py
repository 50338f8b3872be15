"""
문서 아티팩트 렌더러입니다.
조립된 마크다운 마이크로 포맷 텍스트를 Word(.docx) 파일로 저장합니다.

줄 단위 변환 규칙:
┌────────────────┬──────────────────────────────┐
│ 줄 형태         │ docx 표현                     │
├────────────────┼──────────────────────────────┤
│ "# 제목"        │ Title (heading level 0)      │
│ "## 섹션"       │ Heading 1                    │
│ "### 하위 섹션" │ Heading 2                    │
│ "- 항목"        │ List Bullet                  │
│ "  들여쓰기"    │ 왼쪽 들여쓰기 문단             │
│ "---"          │ 아래 테두리 문단 (구분선)       │
│ 그 외           │ Normal 문단                   │
└────────────────┴──────────────────────────────┘

"**굵게**" 표기는 굵은 글씨 run으로 변환합니다. 빈 줄은 건너뜁니다.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt
from docx.text.paragraph import Paragraph

from docuforge.config import get_settings
from docuforge.exceptions import RenderError

logger = logging.getLogger(__name__)

BOLD_PATTERN = re.compile(r"(\*\*[^*]+\*\*)")
UNSAFE_CHARS = {" ": "_", "/": "-", ":": "-", "\\": "-"}
INDENT_PREFIX = "  "


def safe_file_name(name: str) -> str:
    """공백은 '_'로, 경로 구분 문자는 '-'로 바꿉니다."""
    for char, replacement in UNSAFE_CHARS.items():
        name = name.replace(char, replacement)
    return name or "document"


def add_rich_text(paragraph: Paragraph, text: str) -> None:
    """'**굵게**' 구간을 굵은 run으로 나눠 추가합니다."""
    for part in BOLD_PATTERN.split(text):
        if not part:
            continue
        if BOLD_PATTERN.fullmatch(part):
            paragraph.add_run(part[2:-2]).bold = True
        else:
            paragraph.add_run(part)


def add_horizontal_rule(paragraph: Paragraph) -> None:
    """문단 아래쪽 테두리로 구분선을 그립니다."""
    border = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "999999")
    border.append(bottom)
    paragraph._p.get_or_add_pPr().append(border)


class DocumentRenderer:
    """마크다운 마이크로 포맷 → .docx 렌더러."""

    def __init__(self, output_dir: Optional[str] = None, now: Optional[Callable[[], datetime]] = None):
        self.output_dir = Path(output_dir or Path(get_settings().data_dir) / "artifacts")
        self.now = now or datetime.now

    def render(self, text: str, name: str) -> Path:
        """
        텍스트를 .docx 파일로 저장하고 경로를 반환합니다.

        파일명: {안전한 이름}_{YYYYMMDD_HHMMSS}.docx

        Raises:
            RenderError: 문서 생성 또는 파일 저장 실패
        """
        file_path = self.output_dir / f"{safe_file_name(name)}_{self.now():%Y%m%d_%H%M%S}.docx"

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            document = self.build_document(text, title=name)
            document.save(str(file_path))
        except (OSError, ValueError) as e:
            logger.error(f"[Renderer] 렌더링 실패 {file_path}: {e}", exc_info=True)
            raise RenderError(
                f"문서 렌더링에 실패했습니다: {file_path.name}",
                details={"path": str(file_path), "error": str(e)},
            )

        logger.info(f"[Renderer] 저장 완료: {file_path}")
        return file_path

    def build_document(self, text: str, title: str = ""):
        document = Document()
        document.core_properties.author = "DocuForge"
        document.core_properties.title = title

        normal = document.styles["Normal"]
        normal.font.name = "Calibri"
        normal.font.size = Pt(11)

        for line in text.splitlines():
            self._add_line(document, line)

        return document

    @staticmethod
    def _add_line(document, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            return

        if stripped == "---":
            add_horizontal_rule(document.add_paragraph())
        elif line.startswith("# "):
            document.add_heading(line[2:].strip(), level=0)
        elif line.startswith("## "):
            document.add_heading(line[3:].strip(), level=1)
        elif line.startswith("### "):
            document.add_heading(line[4:].strip(), level=2)
        elif line.startswith("- "):
            add_rich_text(document.add_paragraph(style="List Bullet"), line[2:])
        elif line.startswith(INDENT_PREFIX):
            paragraph = document.add_paragraph()
            paragraph.paragraph_format.left_indent = Inches(0.4)
            add_rich_text(paragraph, stripped)
        else:
            add_rich_text(document.add_paragraph(), line)
