"""
Configuration schema for zimcheck.

CheckerConfig holds the tunable parts of the checks: which metadata keys
are mandatory, where a favicon may live, which entries are parsed for links
and how content is fingerprinted. Severities and labels are not
configurable.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseConfig(BaseModel):
    """
    Base configuration with common settings for all config schemas.

    Features:
    - Strict validation (extra fields forbidden to catch typos)
    - Re-validation on attribute assignment
    """

    model_config = ConfigDict(
        extra="forbid",           # Catch typos immediately
        validate_assignment=True, # Re-validate on attribute change
        frozen=False,
    )

    def model_dump_without_none(self, **kwargs) -> Dict[str, Any]:
        """Export dict without None values."""
        data = self.model_dump(**kwargs)
        return {k: v for k, v in data.items() if v is not None}


class CheckerConfig(BaseConfig):
    """Settings shared by all checks."""

    required_metadata: List[str] = Field(
        default_factory=lambda: ["Title", "Creator", "Publisher", "Date", "Description", "Language"],
        description="Metadata keys that must be present, reported in this order",
    )
    favicon_paths: List[str] = Field(
        default_factory=lambda: ["-/favicon", "-/favicon.png", "I/favicon", "I/favicon.png"],
        description="Conventional favicon entry paths checked when no illustration exists",
    )
    linkable_mimetypes: List[str] = Field(
        default_factory=lambda: ["text/html"],
        description="Mimetypes whose content is parsed for links",
    )
    link_attributes: List[str] = Field(
        default_factory=lambda: ["href", "src"],
        min_length=1,
        description="HTML attributes holding outbound references",
    )
    external_dependency_attributes: List[str] = Field(
        default_factory=lambda: ["src"],
        description="Attributes whose external targets are reported as external dependences",
    )
    ignored_schemes: List[str] = Field(
        default_factory=lambda: [
            "mailto", "tel", "sms", "data", "javascript", "about",
            "geo", "irc", "magnet", "news", "urn",
        ],
        description="URI schemes whose links are neither internal nor external",
    )
    fingerprint_algorithm: Literal["blake2b", "sha256", "sha1", "md5"] = Field(
        default="blake2b",
        description="hashlib algorithm used to detect byte-identical content",
    )

    @field_validator(
        "linkable_mimetypes", "link_attributes", "external_dependency_attributes", "ignored_schemes"
    )
    @classmethod
    def _normalize_lowercase(cls, values: List[str]) -> List[str]:
        return [value.strip().lower() for value in values if value.strip()]

    @field_validator("required_metadata", "favicon_paths")
    @classmethod
    def _reject_blank(cls, values: List[str]) -> List[str]:
        for value in values:
            if not value.strip():
                raise ValueError("blank entries are not allowed")
        return values

    def is_linkable(self, mimetype: str) -> bool:
        """Whether content of this mimetype is parsed for links."""
        return mimetype.split(";", 1)[0].strip().lower() in self.linkable_mimetypes
