from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# (destination, compiler, partial method) per client-side runtime
PROFILES: dict[str, tuple[str, str, str]] = {
    "handlebars": ("Handlebars.templates", "Handlebars.compile", "Handlebars.registerPartial"),
    "ember": ("Ember.TEMPLATES", "Ember.Handlebars.compile", "Ember.Handlebars.registerPartial"),
}


class CompilerConfig(BaseModel):
    """Where and how compiled templates are registered on the client side."""
    model_config = ConfigDict(validate_assignment=True)

    template_destination: str = Field(
        default="Handlebars.templates",
        description="Target object where rendered templates are stored on the client",
    )
    template_compiler: str = Field(
        default="Handlebars.compile",
        description="JavaScript function that compiles the HTML string into a template",
    )
    template_partial_method: str = Field(
        default="Handlebars.registerPartial",
        description="JavaScript function used to register partials",
    )
    templates_root: str = Field(default="", description="Path prefix applied to every registered name")
    closures: bool = Field(default=False, description="Wrap each statement in a self-invoking function")
    file_extensions: tuple[str, ...] = Field(
        default=(".hamlbars", ".haml"),
        description="Source extensions run through the Haml preprocessor",
    )

    def render_templates_for(self, whom: str = "handlebars") -> None:
        """Preconfigure the registry identifiers for 'handlebars' or 'ember'.

        Unknown names leave the configuration untouched.
        """
        profile = PROFILES.get(whom)
        if profile is None:
            logger.debug("Ignoring unknown template profile %r", whom)
            return
        self.template_destination, self.template_compiler, self.template_partial_method = profile


class ConfigFile(CompilerConfig):
    """YAML representation: the compiler settings plus an optional profile."""
    profile: Literal["handlebars", "ember"] | None = None

    def to_compiler_config(self) -> CompilerConfig:
        config = CompilerConfig()
        if self.profile:
            config.render_templates_for(self.profile)
        overrides = self.model_dump(exclude={"profile"}, exclude_unset=True)
        for key, value in overrides.items():
            setattr(config, key, value)
        return config


_default_config: CompilerConfig | None = None


def get_config() -> CompilerConfig:
    """Return the process-wide configuration, creating the defaults on first use."""
    global _default_config
    if _default_config is None:
        _default_config = CompilerConfig()
    return _default_config


def reset_config() -> CompilerConfig:
    """Replace the process-wide configuration with a fresh default one."""
    global _default_config
    _default_config = CompilerConfig()
    return _default_config


def load_config(path: str | Path) -> CompilerConfig:
    """Load YAML config from 'path' and validate into a CompilerConfig."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    try:
        return ConfigFile.model_validate(data).to_compiler_config()
    except ValidationError as e:
        # Re-raise with a cleaner message for CLI users
        raise ValueError(str(e))
