"""Pydantic models for Burner."""

from pathlib import Path

from pydantic import BaseModel, Field


def _burner_dir() -> Path:
    return Path.home() / ".burner"


class BurnerConfig(BaseModel):
    """User configuration, persisted to ~/.burner/config.json.

    Field aliases are the keys used in the JSON file.
    """

    burner_home: str = Field(
        default_factory=lambda: str(_burner_dir() / "projects"),
        alias="burnerHome",
        description="Directory where burner projects are stored",
    )
    burner_templates: str = Field(
        default_factory=lambda: str(_burner_dir() / "templates"),
        alias="burnerTemplates",
        description="Directory where template scripts are stored",
    )
    auto_clean_days: int = Field(
        default=30,
        alias="autoCleanDays",
        description="Age in days after which projects are burned; 0 disables",
    )
    editor: str = Field(default="code", description="Command used to open projects")

    model_config = {"populate_by_name": True}

    @property
    def home_path(self) -> Path:
        return Path(self.burner_home).expanduser()

    @property
    def templates_path(self) -> Path:
        return Path(self.burner_templates).expanduser()
