"""Config settings – 12-factor env-based configuration."""
from mp_exports.config.settings.base import ExportSettings, Settings
from mp_exports.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
