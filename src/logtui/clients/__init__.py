from logtui.clients.catalog import CatalogClient

__all__ = ["CatalogClient"]
