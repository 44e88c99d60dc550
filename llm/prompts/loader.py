"""Prompt loading and rendering from YAML files."""

import string
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Set
from logger import get_logger

logger = get_logger()

_REQUIRED_KEYS = ("system_prompt", "user_prompt_template")


def template_fields(template: str) -> Set[str]:
    """Names of the {placeholders} used in a str.format template."""
    return {
        field for _, field, _, _ in string.Formatter().parse(template) if field
    }


class PromptManager:
    """Loads prompt definitions stored next to this module.

    A prompt file holds a ``system_prompt``, a ``user_prompt_template`` with
    str.format placeholders, optional model ``parameters`` and a ``version``.
    """

    def __init__(self, prompts_dir: Optional[Path] = None):
        self.prompts_dir = prompts_dir or Path(__file__).parent
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_prompt(self, prompt_name: str) -> Dict[str, Any]:
        """Load (and cache) a prompt definition.

        Raises:
            FileNotFoundError: If the prompt file doesn't exist.
            ValueError: If required keys are missing.
            yaml.YAMLError: If the YAML is invalid.
        """
        if prompt_name in self._cache:
            return self._cache[prompt_name]

        prompt_file = self.prompts_dir / f"{prompt_name}.yaml"
        if not prompt_file.exists():
            raise FileNotFoundError(f"Prompt file not found: {prompt_file}")

        logger.debug(f"Loading prompt from {prompt_file}")
        with open(prompt_file, "r", encoding="utf-8") as f:
            prompt_config = yaml.safe_load(f) or {}

        missing = [key for key in _REQUIRED_KEYS if key not in prompt_config]
        if missing:
            raise ValueError(f"Prompt '{prompt_name}' is missing: {', '.join(missing)}")

        self._cache[prompt_name] = prompt_config
        return prompt_config

    def render_prompt(
        self, prompt_name: str, variables: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Load a prompt and fill in its user template.

        Returns:
            Dictionary with keys system_prompt, user_prompt, parameters, version.

        Raises:
            ValueError: If a template placeholder has no value.
        """
        prompt_config = self.load_prompt(prompt_name)
        template = prompt_config["user_prompt_template"]

        unfilled = template_fields(template) - set(variables)
        if unfilled:
            raise ValueError(
                f"Missing variables for prompt '{prompt_name}': {', '.join(sorted(unfilled))}"
            )

        return {
            "system_prompt": prompt_config["system_prompt"],
            "user_prompt": template.format(**variables),
            "parameters": prompt_config.get("parameters", {}),
            "version": prompt_config.get("version", "unknown"),
        }
