import pulumi


class SiteConfigError(pulumi.RunError):
    """
    Indicates a stack configuration value that cannot be used to declare the site.
    """

    key: str
    """
    The name of the offending configuration key.
    """

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Configuration '{key}' {reason}")


class SiteAssetError(pulumi.RunError):
    """
    Indicates a site document that is missing from the local site directory.
    """

    path: str
    """
    The local path that was expected to hold the document.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Site document '{path}' does not exist or is not a file")
