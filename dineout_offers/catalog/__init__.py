from .catalog_builder import CardCollector, CatalogBuilder, build_catalogs

__all__ = ["CardCollector", "CatalogBuilder", "build_catalogs"]
