"""Tests for audit prompt template loading."""

from pathlib import Path

import pytest

from compliance_audit.analysis.exceptions import PromptTemplateError
from compliance_audit.analysis.prompt_loader import REQUIRED_PLACEHOLDERS, load_prompt_template

_MINIMAL = "{file_summary} {categories} {regulation_context} {document_context}"


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        for placeholder in REQUIRED_PLACEHOLDERS:
            assert placeholder in template
        assert "South African regulatory compliance auditor" in template

    def test_default_template_formats(self) -> None:
        rendered = load_prompt_template().format(
            file_summary="S", categories="C", regulation_context="R", document_context="D"
        )
        assert '"totalFindings": <number>' in rendered
        assert "CATEGORIES TO CHECK: C" in rendered

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text(_MINIMAL)
        assert load_prompt_template(custom) == _MINIMAL

    def test_missing_placeholder_raises_error(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Audit {document_context}")
        with pytest.raises(PromptTemplateError, match="missing placeholders"):
            load_prompt_template(custom)

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(PromptTemplateError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))
