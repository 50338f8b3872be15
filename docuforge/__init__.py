"""DocuForge - 프로젝트 설명으로부터 문서 세트를 생성하는 엔진."""

__version__ = "1.0.0"
