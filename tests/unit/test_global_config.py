"""Tests for loading and saving ~/.burner/config.json."""

import json

from burner.global_config import get_config_path, load_config, save_config
from burner.models import BurnerConfig


def test_first_load_writes_defaults(fake_home):
    config = load_config()

    assert config.auto_clean_days == 30
    assert config.editor == "code"
    assert config.home_path == fake_home / ".burner" / "projects"
    assert config.templates_path == fake_home / ".burner" / "templates"

    saved = json.loads(get_config_path().read_text(encoding="utf-8"))
    assert set(saved) == {"burnerHome", "burnerTemplates", "autoCleanDays", "editor"}


def test_round_trip(fake_home, tmp_path):
    save_config(
        BurnerConfig(
            burner_home=str(tmp_path / "h"),
            burner_templates=str(tmp_path / "t"),
            auto_clean_days=0,
            editor="vim",
        )
    )

    config = load_config()

    assert config.home_path == tmp_path / "h"
    assert config.auto_clean_days == 0
    assert config.editor == "vim"


def test_partial_file_keeps_other_defaults(fake_home):
    get_config_path().write_text(json.dumps({"editor": "nano"}), encoding="utf-8")

    config = load_config()

    assert config.editor == "nano"
    assert config.auto_clean_days == 30


def test_corrupt_file_falls_back_to_defaults(fake_home):
    get_config_path().write_text("{not json", encoding="utf-8")

    assert load_config() == BurnerConfig()


def test_tilde_is_expanded(fake_home):
    config = BurnerConfig(burnerHome="~/experiments")

    assert config.home_path == fake_home / "experiments"
