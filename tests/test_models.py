"""Tests for model manager."""

from unittest.mock import patch

from tradewatch.llm.models import MODEL_MAP, ModelClass, ModelManager, friendly


@patch("tradewatch.llm.models.settings")
def test_default_models(mock_settings) -> None:
    mock_settings.small_model = "haiku"
    mock_settings.large_model = "sonnet"
    ModelManager._instance = None
    mm = ModelManager.get()
    assert mm.get_model(ModelClass.SMALL) == MODEL_MAP["haiku"]
    assert mm.get_model(ModelClass.LARGE) == MODEL_MAP["sonnet"]
    ModelManager._instance = None


@patch("tradewatch.llm.models.settings")
def test_full_model_id_is_accepted(mock_settings) -> None:
    mock_settings.small_model = "claude-3-5-haiku-latest"
    mock_settings.large_model = "opus"
    ModelManager._instance = None
    mm = ModelManager.get()
    assert mm.get_model(ModelClass.SMALL) == "claude-3-5-haiku-latest"
    assert mm.get_model(ModelClass.LARGE) == MODEL_MAP["opus"]
    ModelManager._instance = None


@patch("tradewatch.llm.models.settings")
def test_unknown_name_falls_back(mock_settings) -> None:
    mock_settings.small_model = "gpt-4"
    mock_settings.large_model = ""
    ModelManager._instance = None
    mm = ModelManager.get()
    assert mm.get_model(ModelClass.SMALL) == MODEL_MAP["haiku"]
    assert mm.get_model(ModelClass.LARGE) == MODEL_MAP["sonnet"]
    ModelManager._instance = None


def test_friendly() -> None:
    assert friendly(MODEL_MAP["sonnet"]) == "sonnet"
    assert friendly("custom-model") == "custom-model"
