"""Tests for rich rendering of recommendations, rules and form views."""

import pytest
from composer_core.form import change_memory_size, focus_memory_size, render_view, submit
from composer_core.models.form import FormState
from composer_core.models.hardware import CPUModel, ServerModel
from composer_core.selection.rules import match_rule
from composer_core.validation.memory import validate_memory_size
from composer_tools import report
from rich.console import Console


@pytest.fixture
def recorded(monkeypatch):
    """Swap the module console for one that records output."""
    console = Console(record=True, width=120, color_system=None)
    monkeypatch.setattr(report, "console", console)
    return console


class TestRecommendations:
    def test_lists_models_in_order(self, recorded):
        models = [ServerModel.MAINFRAME, ServerModel.RACK_SERVER, ServerModel.TOWER_SERVER]
        report.render_recommendations(CPUModel.POWER, 4096, False, models)
        text = recorded.export_text()
        assert "Server Model Options" in text
        assert text.index("Mainframe") < text.index("4U Rack Server") < text.index("Tower Server")
        assert "4,096 MB" in text
        assert "Matched rule" not in text

    def test_explain(self, recorded):
        rule = match_rule(CPUModel.ARM, 524288, True)
        report.render_recommendations(CPUModel.ARM, 524288, True, rule.models, rule=rule)
        text = recorded.export_text()
        assert "High Density Server" in text
        assert "Matched rule 1" in text


class TestRules:
    def test_table_contains_every_rule(self, recorded):
        report.render_rules()
        text = recorded.export_text()
        for code in ("1", "2", "3a", "3b", "5"):
            assert code in text
        assert "No Options" in text
        assert "first match wins" in text


class TestMemoryValidation:
    def test_valid(self, recorded):
        report.render_memory_validation(validate_memory_size("524,288"))
        assert "524,288 MB" in recorded.export_text()

    def test_invalid(self, recorded):
        report.render_memory_validation(validate_memory_size("4097"))
        text = recorded.export_text()
        assert "NOT_MULTIPLE" in text
        assert "Memory size must be a multiple of 1024 MB" in text


class TestFormView:
    def test_helper_text_when_clean(self, recorded):
        report.render_form_view(render_view(FormState()))
        assert "Memory size range: 4096 MB to 8388608 MB" in recorded.export_text()

    def test_error_and_banner(self, recorded):
        state = submit(change_memory_size(FormState(), "4097"))
        report.render_form_view(render_view(state))
        text = recorded.export_text()
        assert "Memory size must be a multiple of 1024 MB" in text
        assert "Please fix the error above before submitting" in text
        assert "Server Model Options" not in text

    def test_focus_removes_error(self, recorded):
        state = focus_memory_size(submit(change_memory_size(FormState(), "4097")))
        report.render_form_view(render_view(state))
        text = recorded.export_text()
        assert "Please fix the error above" not in text
        assert "multiple of 1024" not in text

    def test_results(self, recorded):
        state = submit(change_memory_size(FormState(), "4096"))
        report.render_form_view(render_view(state))
        text = recorded.export_text()
        assert "Mainframe" in text
        assert "Tower Server" in text
