import pytest

from llm.prompts.loader import PromptManager, template_fields


class TestPromptManager:
    """Tests for PromptManager."""

    def test_renders_spending_insights_prompt(self):
        rendered = PromptManager().render_prompt(
            "spending_insights", {"spending_data": "2024-05-01: Lunch (Food) - USD 12.50"}
        )

        assert "Do not include currency symbols" in rendered["system_prompt"]
        assert "Lunch (Food) - USD 12.50" in rendered["user_prompt"]
        assert rendered["parameters"]["model"] == "gpt-4o-mini"
        assert rendered["version"] == "1.0"

    def test_braces_in_values_are_left_alone(self):
        rendered = PromptManager().render_prompt(
            "spending_insights", {"spending_data": "Gift {for mom}"}
        )

        assert "Gift {for mom}" in rendered["user_prompt"]

    def test_missing_variable(self):
        with pytest.raises(ValueError):
            PromptManager().render_prompt("spending_insights", {})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PromptManager(tmp_path).load_prompt("nope")

    def test_missing_required_keys(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("system_prompt: hi\n")

        with pytest.raises(ValueError):
            PromptManager(tmp_path).load_prompt("bad")

    def test_prompt_is_cached(self, tmp_path):
        prompt_file = tmp_path / "p.yaml"
        prompt_file.write_text("system_prompt: a\nuser_prompt_template: '{x}'\n")
        manager = PromptManager(tmp_path)

        first = manager.load_prompt("p")
        prompt_file.unlink()

        assert manager.load_prompt("p") is first

    def test_template_fields(self):
        assert template_fields("{a} and {b} but not {{c}}") == {"a", "b"}
