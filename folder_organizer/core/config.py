"""
Organizer configuration.

CategoryConfig holds the static category tables and the lookups derived from
them. It is built once and passed by reference into the classifier,
normalizer and organizer; tests build their own with substitute tables.

OrganizerSettings holds the run options the command line reads from the
environment.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .categories import CATEGORY_ALIASES, CATEGORY_EXTENSIONS, OTHERS_CATEGORY
from .types import TransferMode


class CategoryConfig(BaseModel):
    """Extension and alias tables for classification and folder normalization."""

    category_extensions: Dict[str, FrozenSet[str]] = Field(
        description="Canonical category name -> file extensions (lowercase, no dot)",
    )
    category_aliases: Dict[str, FrozenSet[str]] = Field(
        default_factory=dict,
        description="Canonical category name -> alternative folder names",
    )
    others_category: str = Field(
        default=OTHERS_CATEGORY,
        description="Category for files with a missing or unknown extension",
    )

    model_config = ConfigDict(frozen=True)

    _extension_lookup: Dict[str, str] = PrivateAttr(default_factory=dict)
    _alias_lookup: Dict[str, str] = PrivateAttr(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize_tables(cls, data):
        if not isinstance(data, dict):
            return data

        data = dict(data)
        extensions = data.get("category_extensions")
        if extensions is not None:
            data["category_extensions"] = {
                category: frozenset(ext.lower().lstrip(".") for ext in exts)
                for category, exts in extensions.items()
            }
        aliases = data.get("category_aliases")
        if aliases is not None:
            data["category_aliases"] = {
                category: frozenset(alias.lower() for alias in names)
                for category, names in aliases.items()
            }
        return data

    @model_validator(mode="after")
    def _check_invariants(self) -> "CategoryConfig":
        canonical = set(self.category_extensions)
        if self.others_category in canonical:
            raise ValueError(
                f"'{self.others_category}' is reserved for unknown extensions"
            )

        seen_extensions: Dict[str, str] = {}
        for category, extensions in self.category_extensions.items():
            for ext in extensions:
                if not ext:
                    raise ValueError(f"Empty extension listed for '{category}'")
                if ext in seen_extensions and seen_extensions[ext] != category:
                    raise ValueError(
                        f"Extension '{ext}' maps to both '{seen_extensions[ext]}' "
                        f"and '{category}'"
                    )
                seen_extensions[ext] = category

        lowered_canonical = {name.lower(): name for name in canonical}
        seen_aliases: Dict[str, str] = {}
        for category, aliases in self.category_aliases.items():
            if category not in canonical:
                raise ValueError(f"Aliases given for unknown category '{category}'")
            for alias in aliases:
                owner = lowered_canonical.get(alias)
                if owner is not None and owner != category:
                    raise ValueError(
                        f"Alias '{alias}' collides with category name '{owner}'"
                    )
                if alias in seen_aliases and seen_aliases[alias] != category:
                    raise ValueError(
                        f"Alias '{alias}' maps to both '{seen_aliases[alias]}' "
                        f"and '{category}'"
                    )
                seen_aliases[alias] = category

        return self

    def model_post_init(self, __context) -> None:
        self._extension_lookup = {
            ext: category
            for category, extensions in self.category_extensions.items()
            for ext in extensions
        }
        self._alias_lookup = {
            alias: category
            for category, aliases in self.category_aliases.items()
            for alias in aliases
        }

    @property
    def canonical_names(self) -> FrozenSet[str]:
        """Official category folder names, derived from the extension table."""
        return frozenset(self.category_extensions)

    @property
    def extension_lookup(self) -> Mapping[str, str]:
        return self._extension_lookup

    @property
    def alias_lookup(self) -> Mapping[str, str]:
        return self._alias_lookup

    def is_canonical(self, name: str) -> bool:
        return name in self.category_extensions

    def resolve_alias(self, folder_name: str) -> Optional[str]:
        """Canonical category for an alias folder name (case-insensitive)."""
        return self._alias_lookup.get(folder_name.lower())

    def canonical_for_folder(self, folder_name: str) -> Optional[str]:
        """
        Category a folder stands for, if any.

        Args:
            folder_name: Name of a directory (final path component)

        Returns:
            The folder name itself when it is canonical, the alias target
            when it is a known alias, otherwise None
        """
        if self.is_canonical(folder_name):
            return folder_name
        return self.resolve_alias(folder_name)


@lru_cache(maxsize=None)
def default_config() -> CategoryConfig:
    """Process-wide configuration built from the compiled-in tables."""
    return CategoryConfig(
        category_extensions=CATEGORY_EXTENSIONS,
        category_aliases=CATEGORY_ALIASES,
    )


class OrganizerSettings(BaseSettings):
    """Run options loaded from FOLDER_ORGANIZER_* environment variables."""

    transfer_mode: TransferMode = TransferMode.ATOMIC
    verify_copies: bool = True  # checksum fallback copies before deleting
    auto_fallback: bool = False  # retry in fallback mode without asking

    model_config = SettingsConfigDict(
        env_prefix="FOLDER_ORGANIZER_",
        extra="ignore",
    )
