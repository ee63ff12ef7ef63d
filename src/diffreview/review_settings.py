"""Settings for rendering diffs, stored as JSON."""

from dataclasses import dataclass, field
import json
import os
from typing import Dict

from highlight.highlight_language import LanguageResolver


DEFAULT_SETTINGS_PATH = os.path.expanduser("~/.diffreview/settings.json")


@dataclass
class ReviewSettings:
    """
    Diff rendering settings.
    """
    language_extensions: Dict[str, str] = field(default_factory=lambda: dict(LanguageResolver.DEFAULT_EXTENSIONS))
    default_language: str = LanguageResolver.DEFAULT_LANGUAGE
    style: str = "default"  # Pygments style name
    css_class: str = "highlight"

    @classmethod
    def create_default(cls) -> "ReviewSettings":
        """Create a new ReviewSettings object with default values."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "ReviewSettings":
        """
        Load settings from file.

        Missing or invalid values keep their defaults; unknown keys are ignored.

        Args:
            path: Path to the settings file

        Returns:
            ReviewSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            OSError: If the file cannot be read
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            return settings

        extensions = data.get("languageExtensions")
        if isinstance(extensions, dict):
            settings.language_extensions = {
                str(ext): language for ext, language in extensions.items() if isinstance(language, str) and language
            }

        default_language = data.get("defaultLanguage")
        if isinstance(default_language, str) and default_language:
            settings.default_language = default_language

        style = data.get("style")
        if isinstance(style, str) and style:
            settings.style = style

        css_class = data.get("cssClass")
        if isinstance(css_class, str) and css_class:
            settings.css_class = css_class

        return settings

    @classmethod
    def load_or_default(cls, path: str) -> "ReviewSettings":
        """
        Load settings from file if it exists.

        Args:
            path: Path to the settings file

        Returns:
            Loaded settings, or defaults if there is no file

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            OSError: If the file exists but cannot be read
        """
        if not os.path.exists(path):
            return cls.create_default()

        return cls.load(path)

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save settings file
        """
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        data = {
            "languageExtensions": self.language_extensions,
            "defaultLanguage": self.default_language,
            "style": self.style,
            "cssClass": self.css_class
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
