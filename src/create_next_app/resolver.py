"""Configuration resolver: merges flags, preferences, prompts and defaults.

Each toggle is settled in a fixed order. An explicit flag always wins. When a
flag is missing, CI runs take the stored preference or the built-in default
without asking; interactive runs ask, seeding the question with the same
value, and most answers are remembered for next time.
"""

from dataclasses import dataclass
from typing import Optional

import click

from create_next_app.flags import Flags, is_valid_import_alias

DEFAULT_IMPORT_ALIAS = "@/*"

DEFAULTS = {
    "typescript": True,
    "eslint": True,
    "tailwind": True,
    "app": True,
    "srcDir": False,
    "importAlias": DEFAULT_IMPORT_ALIAS,
    "customizeImportAlias": False,
}

INTERACTIVE = "interactive"
NON_INTERACTIVE = "noninteractive"


@dataclass(frozen=True)
class ProjectConfig:
    """Final toggle values. Fields stay None only when an example is used."""

    typescript: Optional[bool] = None
    eslint: Optional[bool] = None
    tailwind: Optional[bool] = None
    app_router: Optional[bool] = None
    src_dir: Optional[bool] = None
    import_alias: Optional[str] = None


def _highlight(text):
    return click.style(text, fg="blue")


def _validate_import_alias(value):
    if is_valid_import_alias(value):
        return None
    return "Import alias must follow the pattern <prefix>/*"


class ConfigurationResolver:
    """Resolves the toggle set for one run.

    Args:
        mode: INTERACTIVE or NON_INTERACTIVE.
        prompter: Object with ask_toggle(field, message, default) and
            ask_text(field, message, default, validate). Only used in
            interactive mode.
    """

    def __init__(self, mode, prompter=None):
        if mode == INTERACTIVE and prompter is None:
            raise ValueError("interactive resolution needs a prompter")
        self._mode = mode
        self._prompter = prompter

    @property
    def interactive(self):
        return self._mode == INTERACTIVE

    def resolve(self, flags: Flags, preferences: dict) -> tuple[ProjectConfig, dict]:
        """Return (config, updated_preferences). The input dict is not modified."""
        preferences = dict(preferences)
        if flags.example_name:
            return self._passthrough(flags), preferences

        def pref_or_default(key):
            value = preferences.get(key)
            return DEFAULTS[key] if value is None else value

        typescript = self._toggle(
            flags.typescript, "typescript", "TypeScript", pref_or_default, preferences,
        )
        eslint = self._toggle(
            flags.eslint, "eslint", "ESLint", pref_or_default, preferences,
        )
        tailwind = self._toggle(
            flags.tailwind, "tailwind", "Tailwind CSS", pref_or_default, preferences,
        )
        src_dir = self._toggle(
            flags.src_dir, "srcDir", "`src/` directory", pref_or_default, preferences,
        )
        # App Router answers are per run and never stored.
        app_router = self._toggle(
            flags.app, "app", "App Router", pref_or_default, None, suffix=" (recommended)",
        )
        import_alias = self._import_alias(flags.import_alias, pref_or_default, preferences)

        config = ProjectConfig(
            typescript=typescript,
            eslint=eslint,
            tailwind=tailwind,
            app_router=app_router,
            src_dir=src_dir,
            import_alias=import_alias,
        )
        return config, preferences

    @staticmethod
    def _passthrough(flags):
        return ProjectConfig(
            typescript=flags.typescript,
            eslint=flags.eslint,
            tailwind=flags.tailwind,
            app_router=flags.app,
            src_dir=flags.src_dir,
            import_alias=flags.import_alias or None,
        )

    def _toggle(self, flag_value, key, label, pref_or_default, preferences, suffix=""):
        if flag_value is not None:
            return flag_value
        if not self.interactive:
            return bool(pref_or_default(key))
        answer = bool(self._prompter.ask_toggle(
            key,
            f"Would you like to use {_highlight(label)}?{suffix}",
            bool(pref_or_default(key)),
        ))
        if preferences is not None:
            preferences[key] = answer
        return answer

    def _import_alias(self, flag_value, pref_or_default, preferences):
        if flag_value:
            return flag_value
        if not self.interactive:
            # Stored aliases only seed the question; CI always takes the default.
            return DEFAULT_IMPORT_ALIAS
        styled = _highlight("import alias")
        customize = self._prompter.ask_toggle(
            "customizeImportAlias",
            f"Would you like to customize the default {styled} ({DEFAULT_IMPORT_ALIAS})?",
            bool(pref_or_default("customizeImportAlias")),
        )
        preferences["customizeImportAlias"] = bool(customize)
        if not customize:
            return DEFAULT_IMPORT_ALIAS
        import_alias = self._prompter.ask_text(
            "importAlias",
            f"What {styled} would you like configured?",
            pref_or_default("importAlias"),
            validate=_validate_import_alias,
        )
        preferences["importAlias"] = import_alias
        return import_alias
