from apitree.config.settings import LogConfig, MermaidConfig, Settings


def test_defaults_from_environment(monkeypatch):
    monkeypatch.delenv("APITREE_MERMAID_DIRECTION", raising=False)
    monkeypatch.setenv("APITREE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APITREE_LOG_JSON", "true")
    settings = Settings()

    assert settings.get_mermaid_config() == MermaidConfig()
    log_config = settings.get_log_config()
    assert log_config.level == "DEBUG"
    assert log_config.format_json is True
    assert log_config.log_dir is None


def test_environment_direction(monkeypatch):
    monkeypatch.setenv("APITREE_MERMAID_DIRECTION", "TB")

    assert Settings().get_mermaid_config().direction == "TB"


def test_explicit_config_wins(monkeypatch):
    monkeypatch.setenv("APITREE_MERMAID_DIRECTION", "TB")
    settings = Settings(mermaid=MermaidConfig(direction="RL"))

    assert settings.get_mermaid_config().direction == "RL"


def test_from_yaml(tmp_path):
    path = tmp_path / "apitree.yaml"
    path.write_text(
        "mermaid:\n"
        "  direction: TD\n"
        "  stroke: '#000'\n"
        "  unknown: 1\n"
        "logging:\n"
        "  level: WARNING\n"
        "  format_json: true\n",
        encoding="utf-8",
    )

    settings = Settings.from_yaml(str(path))

    assert settings.get_mermaid_config() == MermaidConfig(direction="TD", stroke="#000")
    assert settings.get_log_config() == LogConfig(level="WARNING", format_json=True)


def test_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    settings = Settings.from_yaml(str(path))

    assert settings.get_mermaid_config() == MermaidConfig()
    assert settings.get_log_config() == LogConfig()
