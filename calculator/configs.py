"""
Configuration for the terminal and web calculators
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

CONTINUE_PROMPT = (
    'Calculate again? (Press Enter to continue, type "history" to view past calculations, '
    'type "clear" to clear history, or type q/quit/no to exit): '
)

@dataclass
class TerminalConfig:
    """Prompts and tokens used by the terminal loop"""
    banner: str = "=== Terminal Calculator ==="
    first_number_prompt: str = "Enter the first number: "
    second_number_prompt: str = "Enter the second number: "
    operator_prompt: str = "Enter the operation (+, -, *, /): "
    continue_prompt: str = CONTINUE_PROMPT
    quit_tokens: List[str] = field(default_factory=lambda: ["q", "quit", "no"])
    farewell: str = "Goodbye!"

@dataclass
class WebConfig:
    """Settings for the FastAPI form server"""
    title: str = "Web Calculator"
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

@dataclass
class CalculatorConfig:
    """Main configuration combining both front ends"""
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    web: WebConfig = field(default_factory=WebConfig)

    log_level: str = "WARNING"
    # None keeps every calculation for the life of the process
    max_history_size: Optional[int] = None

def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {value!r}")

def _apply_env_overrides(config: CalculatorConfig) -> CalculatorConfig:
    log_level = os.getenv("CALC_LOG_LEVEL")
    if log_level:
        config.log_level = log_level.upper()
        config.web.log_level = log_level.upper()

    host = os.getenv("CALC_WEB_HOST")
    if host:
        config.web.host = host

    port = os.getenv("CALC_WEB_PORT")
    if port:
        config.web.port = _env_int("CALC_WEB_PORT", port)

    max_history = os.getenv("CALC_MAX_HISTORY")
    if max_history:
        config.max_history_size = _env_int("CALC_MAX_HISTORY", max_history)

    return config

def load_config(config_path: Optional[str] = None) -> CalculatorConfig:
    """
    Load configuration from file or use defaults

    Without a path, CALC_CONFIG names the file. Environment variables (and
    a .env file) override file values.

    Args:
        config_path: Path to configuration file (JSON or YAML)

    Returns:
        CalculatorConfig object
    """
    load_dotenv()
    config = CalculatorConfig()
    config_path = config_path or os.getenv("CALC_CONFIG")

    if config_path:
        path = Path(config_path)
        if path.suffix == '.json':
            with open(path, 'r') as f:
                config_dict = json.load(f)
        elif path.suffix in ['.yml', '.yaml']:
            with open(path, 'r') as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        if 'terminal' in config_dict:
            config.terminal = TerminalConfig(**config_dict['terminal'])
        if 'web' in config_dict:
            config.web = WebConfig(**config_dict['web'])
        if 'log_level' in config_dict:
            config.log_level = str(config_dict['log_level']).upper()
        if 'max_history_size' in config_dict:
            config.max_history_size = config_dict['max_history_size']

    return _apply_env_overrides(config)
