"""
A Pulumi program that hosts a static website on an Azure Storage account.
"""

from .config import SiteSettings, load_settings
from .errors import SiteAssetError, SiteConfigError
from .site import SiteStack, define_stack, export_outputs

__all__ = [
    "SiteAssetError",
    "SiteConfigError",
    "SiteSettings",
    "SiteStack",
    "define_stack",
    "export_outputs",
    "load_settings",
]
