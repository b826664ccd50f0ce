"""
Configuration module for Gen-Form.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class GenFormConfig:
    """Configuration settings for Gen-Form."""

    # Code generation settings
    use_nextjs: bool = True  # Adds the next/link import
    default_component_name: str = "GeneratedForm"  # Used when the form title is blank
    submit_button_text: str = "Submit"
    indent: int = 2

    # Logging
    log_level: str = "INFO"

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_port: int = 8080
    max_sessions: int = 100

    @property
    def indent_unit(self) -> str:
        return " " * self.indent

    @classmethod
    def from_env(cls) -> "GenFormConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            use_nextjs=os.getenv("GEN_FORM_USE_NEXTJS", str(_defaults.use_nextjs).lower()).lower() == "true",
            default_component_name=os.getenv("GEN_FORM_DEFAULT_COMPONENT_NAME", _defaults.default_component_name),
            submit_button_text=os.getenv("GEN_FORM_SUBMIT_TEXT", _defaults.submit_button_text),
            indent=int(os.getenv("GEN_FORM_INDENT", str(_defaults.indent))),
            log_level=os.getenv("GEN_FORM_LOG_LEVEL", _defaults.log_level).upper(),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            max_sessions=int(os.getenv("GEN_FORM_MAX_SESSIONS", str(_defaults.max_sessions))),
        )


config = GenFormConfig.from_env()


def get_config() -> GenFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> GenFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
