from ._storage_order import StorageOrder

__all__ = [StorageOrder.__name__]
