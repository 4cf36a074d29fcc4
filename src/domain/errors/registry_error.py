"""Invalidation registry errors.

Registration errors are programmer errors (two stores wired under the same
name) and are raised at startup instead of being returned as Results.
"""


class DuplicateAdapterError(ValueError):
    """Raised when a different adapter is registered under an existing name.

    Attributes:
        adapter_name: The conflicting adapter name.
    """

    def __init__(self, adapter_name: str) -> None:
        """Initialize with the conflicting adapter name.

        Args:
            adapter_name: Name already present in the registry.
        """
        super().__init__(f"Store adapter '{adapter_name}' is already registered")
        self.adapter_name = adapter_name
