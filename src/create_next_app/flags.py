"""Flags dataclass: the parsed command line, passed explicitly to the resolver."""

import re
from dataclasses import dataclass
from typing import Optional, Union

IMPORT_ALIAS_PATTERN = re.compile(r".+/\*")

# Value recorded when -e/--example is given without an argument.
EXAMPLE_WITHOUT_VALUE = "\0example-without-value"


def is_valid_import_alias(value):
    return bool(IMPORT_ALIAS_PATTERN.fullmatch(value))


@dataclass(frozen=True)
class Flags:
    """Command-line choices. None means the option was not given."""

    project_directory: Optional[str] = None
    typescript: Optional[bool] = None
    eslint: Optional[bool] = None
    tailwind: Optional[bool] = None
    app: Optional[bool] = None
    src_dir: Optional[bool] = None
    import_alias: Optional[str] = None
    package_manager: Optional[str] = None
    example: Union[str, bool, None] = None
    example_path: Optional[str] = None
    reset_preferences: bool = False

    @classmethod
    def from_options(cls, *, typescript_flag=False, javascript_flag=False, example=None, **options):
        """Build Flags from click's parsed options.

        --ts and --js collapse into one tri-state typescript value, with --ts
        winning when both are given. A bare --example becomes True.
        """
        typescript = None
        if typescript_flag:
            typescript = True
        elif javascript_flag:
            typescript = False
        if example == EXAMPLE_WITHOUT_VALUE:
            example = True
        return cls(typescript=typescript, example=example, **options)

    @property
    def example_name(self) -> str:
        """The trimmed example identifier, or "" when none was given."""
        if isinstance(self.example, str):
            return self.example.strip()
        return ""
