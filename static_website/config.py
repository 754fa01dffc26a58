"""
Stack configuration for the static website.

Values are read from the project's configuration namespace, e.g.

    pulumi config set skuName Standard_GRS
    pulumi config set error404Document 404.html
"""

import os
from dataclasses import dataclass
from typing import Optional

import pulumi

from .errors import SiteConfigError

DEFAULT_SKU_NAME = "Standard_LRS"
DEFAULT_INDEX_DOCUMENT = "index.html"
DEFAULT_SITE_DIR = "app"


@dataclass(frozen=True)
class SiteSettings:
    sku_name: str = DEFAULT_SKU_NAME
    index_document: str = DEFAULT_INDEX_DOCUMENT
    error404_document: Optional[str] = None
    site_dir: str = DEFAULT_SITE_DIR
    location: Optional[str] = None

    @property
    def documents(self):
        """The site documents to upload, index document first."""
        if self.error404_document and self.error404_document != self.index_document:
            return [self.index_document, self.error404_document]
        return [self.index_document]

    def document_path(self, document: str) -> str:
        return os.path.join(self.site_dir, document)


def _get(config: pulumi.Config, key: str, default: Optional[str] = None) -> Optional[str]:
    value = config.get(key)
    if value is None:
        return default
    if not value.strip():
        raise SiteConfigError(config.full_key(key), "must not be empty")
    return value


def _document_name(config: pulumi.Config, key: str, default: Optional[str] = None) -> Optional[str]:
    value = _get(config, key, default)
    # Documents are served from the container root.
    if value is not None and (os.path.basename(value) != value or value in (".", "..")):
        raise SiteConfigError(config.full_key(key), f"value '{value}' must be a plain file name")
    return value


def load_settings(config: Optional[pulumi.Config] = None) -> SiteSettings:
    """
    Reads the site settings from the stack configuration, falling back to the
    defaults for any key that is not set.
    """
    if config is None:
        config = pulumi.Config()

    return SiteSettings(
        sku_name=_get(config, "skuName", DEFAULT_SKU_NAME),
        index_document=_document_name(config, "indexDocument", DEFAULT_INDEX_DOCUMENT),
        error404_document=_document_name(config, "error404Document"),
        site_dir=_get(config, "siteDir", DEFAULT_SITE_DIR),
        location=_get(config, "location"),
    )
