"""Exception hierarchy shared by the generator, the CLI and the tools."""

from __future__ import annotations

from sptgen.diagnostics import Diagnostic, ErrorCode, codes


class SptgenError(Exception):
    code: ErrorCode

    def __init__(self, message: str, *, diagnostics: list[Diagnostic] | None = None):
        super().__init__(message)
        self.message = message
        self.diagnostics = list(diagnostics or [])


class CatalogError(SptgenError):
    """The catalog, slot budget or schema violates a generation precondition."""

    code = codes.INVALID_CONFIG


class DuplicateNameError(CatalogError):
    code = codes.DUPLICATE_NAME


class InvalidNameError(CatalogError):
    code = codes.INVALID_NAME


class InvalidBudgetError(CatalogError):
    code = codes.INVALID_BUDGET


class InvalidConfigError(CatalogError):
    code = codes.INVALID_CONFIG


class HarvestError(SptgenError):
    """Tag harvesting failed; nothing was written."""

    code = codes.HARVEST_NETWORK


class HarvestNetworkError(HarvestError):
    code = codes.HARVEST_NETWORK


class HarvestNoMatchError(HarvestError):
    code = codes.HARVEST_NO_MATCH


_ERRORS_BY_CODE: dict[ErrorCode, type[CatalogError]] = {
    codes.DUPLICATE_NAME: DuplicateNameError,
    codes.INVALID_NAME: InvalidNameError,
    codes.INVALID_BUDGET: InvalidBudgetError,
    codes.INVALID_CONFIG: InvalidConfigError,
}


def catalog_error_for(diagnostic: Diagnostic) -> type[CatalogError]:
    """Map a blocking diagnostic to the CatalogError subclass that reports it."""
    return _ERRORS_BY_CODE.get(diagnostic.code, CatalogError)
