"""
Config Subpackage

    - settings.py: Pydantic models and the YAML loader
    - defaults.yaml: Packaged default settings

Usage:
    from src.config import load_settings

    settings = load_settings()
    print(settings.frets)   # 24
"""

from src.config.settings import CompanionSettings, TuningSettings, load_settings
