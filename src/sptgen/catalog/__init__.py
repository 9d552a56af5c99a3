"""Error catalog: the ordered kinds a scaffold is generated from."""

from sptgen.catalog._types import SENTINEL_ORDINAL, Catalog, CatalogConfig, ErrorKind
from sptgen.catalog.defaults import DEFAULT_KINDS, DEFAULT_SLOTS, default_catalog
from sptgen.catalog.load import load_catalog_file, parse_catalog_config
from sptgen.catalog.validate import ValidationResult, validate_catalog

__all__ = [
    "DEFAULT_KINDS",
    "DEFAULT_SLOTS",
    "SENTINEL_ORDINAL",
    "Catalog",
    "CatalogConfig",
    "ErrorKind",
    "ValidationResult",
    "default_catalog",
    "load_catalog_file",
    "parse_catalog_config",
    "validate_catalog",
]
