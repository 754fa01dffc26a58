"""
Declares a resource group, a storage account with static website hosting and
the site documents uploaded into the website container.

    ResourceGroup -> StorageAccount -> StorageAccountStaticWebsite -> Blob

The stack exports the account's web endpoint and its primary access key, the
latter marked as a secret.
"""

import mimetypes
import os
from dataclasses import dataclass, field
from typing import List

import pulumi
from pulumi_azure_native import resources, storage

from .config import SiteSettings
from .errors import SiteAssetError

STATIC_ENDPOINT = "StaticEndpoint"
PRIMARY_STORAGE_KEY = "PrimaryStorageKey"


@dataclass
class SiteStack:
    resource_group: resources.ResourceGroup
    storage_account: storage.StorageAccount
    static_website: storage.StorageAccountStaticWebsite
    static_endpoint: pulumi.Output[str]
    primary_storage_key: pulumi.Output[str]
    blobs: List[storage.Blob] = field(default_factory=list)


def create_resource_group(settings: SiteSettings) -> resources.ResourceGroup:
    return resources.ResourceGroup("resourceGroup", location=settings.location)


def create_storage_account(resource_group: resources.ResourceGroup, settings: SiteSettings) -> storage.StorageAccount:
    return storage.StorageAccount(
        "sa",
        resource_group_name=resource_group.name,
        sku=storage.SkuArgs(
            name=settings.sku_name,
        ),
        kind=storage.Kind.STORAGE_V2)


def create_static_website(resource_group: resources.ResourceGroup,
                          storage_account: storage.StorageAccount,
                          settings: SiteSettings) -> storage.StorageAccountStaticWebsite:
    # Enabling static website hosting creates the $web container.
    return storage.StorageAccountStaticWebsite(
        "StaticWebsite",
        account_name=storage_account.name,
        resource_group_name=resource_group.name,
        index_document=settings.index_document,
        error404_document=settings.error404_document)


def content_type_for(document: str) -> str:
    content_type, _ = mimetypes.guess_type(document)
    return content_type or "application/octet-stream"


def upload_document(document: str,
                    resource_group: resources.ResourceGroup,
                    storage_account: storage.StorageAccount,
                    static_website: storage.StorageAccountStaticWebsite,
                    settings: SiteSettings) -> storage.Blob:
    """
    Uploads one site document into the website container.

    The container name is taken from the static website resource, so the blob
    is only created once website hosting is enabled on the account.
    """
    path = settings.document_path(document)
    if not os.path.isfile(path):
        raise SiteAssetError(path)

    content_type = content_type_for(document)
    pulumi.log.debug(f"Uploading {path} as {document} ({content_type})")
    return storage.Blob(
        document,
        resource_group_name=resource_group.name,
        account_name=storage_account.name,
        container_name=static_website.container_name,
        blob_name=document,
        source=pulumi.FileAsset(path),
        content_type=content_type)


def static_endpoint(storage_account: storage.StorageAccount) -> pulumi.Output[str]:
    return storage_account.primary_endpoints.apply(lambda endpoints: endpoints.web)


def _first_key_value(result) -> str:
    if not result.keys:
        raise pulumi.RunError("listStorageAccountKeys returned no access keys")
    return result.keys[0].value


def primary_storage_key(resource_group: resources.ResourceGroup,
                        storage_account: storage.StorageAccount) -> pulumi.Output[str]:
    """
    Looks up the account's access keys once the resource group and account
    names are known, and returns the first key as a secret.
    """
    account_keys = storage.list_storage_account_keys_output(
        resource_group_name=resource_group.name,
        account_name=storage_account.name)
    return pulumi.Output.secret(account_keys.apply(_first_key_value))


def define_stack(settings: SiteSettings) -> SiteStack:
    resource_group = create_resource_group(settings)
    storage_account = create_storage_account(resource_group, settings)
    static_website = create_static_website(resource_group, storage_account, settings)

    blobs = [
        upload_document(document, resource_group, storage_account, static_website, settings)
        for document in settings.documents
    ]

    pulumi.log.info(f"Declared static website with {len(blobs)} document(s) from {settings.site_dir}")
    return SiteStack(
        resource_group=resource_group,
        storage_account=storage_account,
        static_website=static_website,
        static_endpoint=static_endpoint(storage_account),
        primary_storage_key=primary_storage_key(resource_group, storage_account),
        blobs=blobs,
    )


def export_outputs(stack: SiteStack) -> None:
    pulumi.export(STATIC_ENDPOINT, stack.static_endpoint)
    pulumi.export(PRIMARY_STORAGE_KEY, stack.primary_storage_key)
