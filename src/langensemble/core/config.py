import os

import yaml
from pydantic import ValidationError

from langensemble.constants import SUPPORTED_CONFIG_VERSIONS
from langensemble.errors import ConfigurationError, ConfigValidationError
from langensemble.models.config import EnsembleConfig


class ConfigLoader:
    """
    Handles loading and validating ensemble configuration files.
    """

    @staticmethod
    def load(path: str) -> EnsembleConfig:
        """
        Loads an ensemble configuration from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If the file is missing.
            ConfigValidationError: If the YAML is malformed or a field is invalid.
        """
        if not os.path.exists(path):
            raise ConfigurationError(f"Ensemble config file '{path}' not found.")

        try:
            with open(path, encoding="utf-8") as f:
                raw_data = yaml.safe_load(f) or {}

            if not isinstance(raw_data, dict):
                raise ConfigValidationError(
                    f"Ensemble config in {path} must be a mapping, "
                    f"got {type(raw_data).__name__}."
                )

            # Enforce version checking immediately
            version = str(raw_data.get("version"))
            if version not in SUPPORTED_CONFIG_VERSIONS:
                raise ConfigValidationError(
                    f"Unsupported config version: '{version}'. "
                    f"Supported versions: {', '.join(SUPPORTED_CONFIG_VERSIONS)}."
                )

            return EnsembleConfig.model_validate({**raw_data, "version": version})

        except ValidationError as e:
            error_details = []
            for err in e.errors():
                loc = " -> ".join([str(x) for x in err["loc"]])
                error_details.append(f"  - Field '{loc}': {err['msg']}")

            formatted_errors = "\n".join(error_details)
            raise ConfigValidationError(
                f"Malformed ensemble config in {path}:\n{formatted_errors}"
            ) from None
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax in {path}:\n{e}") from None
