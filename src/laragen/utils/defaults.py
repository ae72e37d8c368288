"""
Default profiles for Laragen output.
"""

from dataclasses import dataclass
from typing import Literal

from laragen.core.errors import UnknownProfileError


@dataclass(frozen=True)
class GenerationDefaults:
    """
    Output conventions shared by all generators.

    Profiles control indentation and the fixed framework names the
    generated classes refer to.
    """

    mode: Literal["legacy", "psr12"]

    # Layout
    indent: str = "\t"
    header: str = "<?php"
    placeholder: str = "// Your code goes here..."
    file_extension: str = ".php"

    # Migrations
    migration_class_suffix: str = "Table"
    default_on_delete: str = "cascade"

    # Models
    model_base_import: str = "Illuminate\\Database\\Eloquent\\Model;"
    model_base: str = "Model"
    authenticatable_base: str = "Authenticatable"


# Built-in profiles

DEFAULT_LEGACY = GenerationDefaults(mode="legacy", indent="\t")

DEFAULT_PSR12 = GenerationDefaults(mode="psr12", indent="    ")

PROFILES = {
    DEFAULT_LEGACY.mode: DEFAULT_LEGACY,
    DEFAULT_PSR12.mode: DEFAULT_PSR12,
}


def get_defaults(name: str) -> GenerationDefaults:
    """Look up a built-in profile by name."""
    try:
        return PROFILES[name]
    except KeyError:
        raise UnknownProfileError(
            f"Unknown defaults profile '{name}'",
            hints=[f"Available profiles: {', '.join(PROFILES)}"],
            details={"profile": name},
        ) from None
