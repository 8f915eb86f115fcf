"""
Demo entry points — Tests

The generation call is patched at src.shared.extraction.generate_content,
so each demo runs its full parse/validate/render path offline.
"""

import json
import logging
from unittest.mock import patch

import pytest

from src import config
from src.demos import (
    run_demo_1_recipe,
    run_demo_2_chain_of_thought,
    run_demo_3_ui_gen,
    run_demo_4_moderation,
)
from src.prompts import MODERATION_PROMPT, MODERATION_SYSTEM_PROMPT
from src.shared.gemini_client import APIError

GENERATE = "src.shared.extraction.generate_content"

CV_FORM_TEXT = "Here is your form:\n" + json.dumps({
    "type": "cv-form",
    "elements": [
        {"type": "section-header", "label": "Skills"},
        {"type": "bullet-list-item", "value": "Go"},
        {"type": "bullet-list-item", "value": "Rust"},
        {"type": "submit-button", "label": "Send"},
    ],
})

ALL_DEMOS = [
    run_demo_1_recipe,
    run_demo_2_chain_of_thought,
    run_demo_3_ui_gen,
    run_demo_4_moderation,
]


@pytest.mark.parametrize("demo", ALL_DEMOS)
def test_missing_api_key_exits_before_request(demo, monkeypatch, tmp_path):
    monkeypatch.setattr(config, "GOOGLE_API_KEY", None)
    with patch(GENERATE) as mock_gen:
        with pytest.raises(SystemExit) as exc_info:
            demo.main(["--output", str(tmp_path / "x.html")] if demo is run_demo_3_ui_gen else [])
    assert exc_info.value.code == 1
    mock_gen.assert_not_called()


@pytest.mark.parametrize("demo", ALL_DEMOS)
def test_transport_failure_is_graceful(demo, tmp_path, caplog):
    argv = ["--output", str(tmp_path / "x.html")] if demo is run_demo_3_ui_gen else []
    with patch(GENERATE, side_effect=APIError(500, "internal")):
        with caplog.at_level(logging.INFO):
            assert demo.main(argv) == 0
    assert "TransportFailure" in caplog.text
    assert "Failed to" in caplog.text


class TestRecipeDemo:
    def test_parsed_recipe_logged(self, caplog):
        text = '{"name": "Scrambled eggs", "timeToCook": "5 minutes", "ingredients": ["eggs", "milk"]}'
        with patch(GENERATE, return_value=text):
            with caplog.at_level(logging.INFO):
                assert run_demo_1_recipe.main([]) == 0
        assert "Parsed recipe" in caplog.text
        assert "Scrambled eggs" in caplog.text

    def test_prompt_override(self):
        with patch(GENERATE, return_value=None) as mock_gen:
            run_demo_1_recipe.main(["--prompt", "custom", "--model", "gemini-x"])
        args, kwargs = mock_gen.call_args
        assert args[0] == "custom"
        assert kwargs["model"] == "gemini-x"


class TestGuideDemo:
    def test_steps_logged(self, caplog):
        text = '{"steps": [{"explanation": "Підготовка", "output": "Фізична форма"}]}'
        with patch(GENERATE, return_value=text):
            with caplog.at_level(logging.INFO):
                assert run_demo_2_chain_of_thought.main([]) == 0
        assert "1 steps" in caplog.text
        assert "Підготовка" in caplog.text

    def test_schema_violation_lists_fields(self, caplog):
        with patch(GENERATE, return_value='{"steps": [{"explanation": "x"}]}'):
            with caplog.at_level(logging.INFO):
                assert run_demo_2_chain_of_thought.main([]) == 0
        assert "SchemaViolation" in caplog.text
        assert "steps.0.output" in caplog.text
        assert "Failed to parse Everest climbing guide." in caplog.text


class TestUiGenDemo:
    def test_writes_html_document(self, tmp_path, caplog):
        output = tmp_path / "out" / "cv.html"
        with patch(GENERATE, return_value=CV_FORM_TEXT):
            with caplog.at_level(logging.INFO):
                assert run_demo_3_ui_gen.main(["--output", str(output)]) == 0

        document = output.read_text(encoding="utf-8")
        assert document.startswith("<!DOCTYPE html>")
        assert "<ul>\n    <li>Go</li>\n    <li>Rust</li>\n  </ul>" in document
        assert "Raw model output before JSON extraction" in caplog.text
        assert f"HTML saved to {output}" in caplog.text

    def test_unwritable_output_is_graceful(self, tmp_path, caplog):
        # An existing directory cannot be written as a file
        with patch(GENERATE, return_value=CV_FORM_TEXT):
            with caplog.at_level(logging.INFO):
                assert run_demo_3_ui_gen.main(["--output", str(tmp_path)]) == 0
        assert f"Failed to save HTML to {tmp_path}" in caplog.text
        assert "HTML saved to" not in caplog.text

    def test_no_file_on_failure(self, tmp_path):
        output = tmp_path / "cv.html"
        with patch(GENERATE, return_value="Sorry, I can't build forms."):
            assert run_demo_3_ui_gen.main(["--output", str(output)]) == 0
        assert not output.exists()


class TestModerationDemo:
    def test_verdict_logged(self, caplog):
        text = (
            'Sure! {"is_violating":false,"category":null,'
            '"explanation_if_violating":null} Hope that helps.'
        )
        with patch(GENERATE, return_value=text) as mock_gen:
            with caplog.at_level(logging.INFO):
                assert run_demo_4_moderation.main([]) == 0
        assert '"is_violating":false' in caplog.text
        args, kwargs = mock_gen.call_args
        assert args[0] == MODERATION_PROMPT
        assert kwargs["system_instruction"] == MODERATION_SYSTEM_PROMPT

    def test_malformed_json_reports_payload(self, caplog):
        with patch(GENERATE, return_value='{"is_violating": tru}'):
            with caplog.at_level(logging.INFO):
                assert run_demo_4_moderation.main([]) == 0
        assert "MalformedJson" in caplog.text
        assert '{"is_violating": tru}' in caplog.text
        assert "Failed to perform compliance check." in caplog.text

    def test_deeply_nested_answer_is_graceful(self, caplog):
        text = '{"is_violating": ' + "[" * 100000 + "]" * 100000 + "}"
        with patch(GENERATE, return_value=text):
            with caplog.at_level(logging.INFO):
                assert run_demo_4_moderation.main([]) == 0
        assert "MalformedJson" in caplog.text
        assert "Failed to perform compliance check." in caplog.text


def test_log_file_flag_writes_log(tmp_path, monkeypatch):
    from src.shared import files

    monkeypatch.setattr(files, "LOGS_DIR", tmp_path)
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    try:
        with patch(GENERATE, return_value=None):
            assert run_demo_1_recipe.main(["--log-file"]) == 0
        logs = list(tmp_path.glob("recipe_*.log"))
        assert len(logs) == 1
    finally:
        for handler in root.handlers[:]:
            if handler not in handlers_before:
                root.removeHandler(handler)
                handler.close()
