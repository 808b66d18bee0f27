import logging
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from ent_auto_generator.constants import DefaultConfig
from ent_auto_generator.domain.models import GenerationContext
from ent_auto_generator.domain.naming import is_valid_go_identifier
from ent_auto_generator.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


# --- Pydantic Models for Configuration Schema ---
class GeneratorConfig(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    schema_path: str = Field(
        default=DefaultConfig.SCHEMA_PATH,
        min_length=1,
        description="Path of the DMMF JSON dump describing the data model.",
    )
    output_dir: str = Field(
        default=DefaultConfig.OUTPUT_DIR,
        min_length=1,
        description="Directory the ent schema files are written to.",
    )
    package_name: str = Field(
        default=DefaultConfig.PACKAGE_NAME,
        min_length=1,
        description="Go package name declared by every generated file.",
    )
    file_extension: str = Field(
        default=DefaultConfig.FILE_EXTENSION,
        description="Extension of generated files, including the leading dot.",
    )
    type_mappings: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra source type -> ent field builder mappings.",
    )
    workers: int = Field(
        default=DefaultConfig.WORKERS,
        ge=1,
        description="Number of threads used to write generated files.",
    )
    run_go_generate: bool = Field(
        default=DefaultConfig.RUN_GO_GENERATE,
        description="Run `go generate` on the ent directory after writing schemas.",
    )
    go_generate_target: str = Field(
        default=DefaultConfig.GO_GENERATE_TARGET,
        min_length=1,
        description="Package path passed to `go generate`.",
    )

    @field_validator("package_name")
    @classmethod
    def check_go_package_name(cls, v: str) -> str:
        """Validate package_name is a usable Go identifier."""
        if not is_valid_go_identifier(v):
            raise ValueError(f"'{v}' is not a valid Go package name or is a reserved keyword.")
        return v

    @field_validator("file_extension")
    @classmethod
    def check_file_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"File extension must start with '.', got '{v}'")
        return v

    @field_validator("type_mappings")
    @classmethod
    def check_type_mappings(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Ensure every mapping target is an ent field builder name."""
        for source, target in v.items():
            if not source.strip():
                raise ValueError("Source type names in type_mappings cannot be empty.")
            if not is_valid_go_identifier(target):
                raise ValueError(f"Mapping target '{target}' for '{source}' is not a Go identifier.")
        return v

    model_config = ConfigDict(
        extra="forbid",
    )

    def to_generation_context(self) -> GenerationContext:
        """Rendering options derived from this configuration."""
        return GenerationContext(
            output_dir=Path(self.output_dir),
            package_name=self.package_name,
            file_extension=self.file_extension,
            type_mappings=dict(self.type_mappings),
        )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any], config_file: Optional[str] = None) -> GeneratorConfig:
    """
    Validates a raw configuration dictionary against GeneratorConfig.

    Raises:
        ConfigurationError: listing every failing location
    """
    try:
        validated_config = GeneratorConfig.model_validate(config_dict)
        logger.debug("Configuration dictionary parsed and validated successfully against schema.")
        return validated_config
    except ValidationError as e:
        problems = {}
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            problems[loc_str] = error.get("msg", "Unknown validation error")

        raise ConfigurationError(
            f"Configuration validation failed with {len(problems)} error(s).",
            config_file=config_file,
            context=problems,
        ) from e


def load_config(config_path: Optional[str], cli_args: Optional[Namespace] = None) -> GeneratorConfig:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if not config_file.is_file():
            raise ConfigurationError(f"Config file not found at {config_path}", config_file=config_path)
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML file: {e}", config_file=config_path) from e

        if yaml_config and isinstance(yaml_config, dict):
            raw_config.update(yaml_config)
            logger.debug(f"Loaded configuration from {config_path}")
        elif yaml_config:
            raise ConfigurationError(
                "Config file content must be a mapping of option names to values.",
                config_file=config_path,
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    if cli_args is not None:
        overridden_keys = set()
        for key, value in vars(cli_args).items():
            if value is not None and key in GeneratorConfig.model_fields:
                raw_config[key] = value
                overridden_keys.add(key)
        if overridden_keys:
            logger.debug(f"Overridden config keys from CLI arguments: {overridden_keys}")

    # 3. Validate
    logger.debug("Validating final configuration...")
    return validate_and_parse_config(raw_config, config_file=config_path)
