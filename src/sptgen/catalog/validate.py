"""Generation preconditions: identifier-safe unique names and a positive budget."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sptgen.catalog._types import Catalog
from sptgen.diagnostics import Diagnostic, codes
from sptgen.errors import catalog_error_for
from sptgen.schema import DEFAULT_SCHEMA, ScaffoldSchema

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_RESERVED_RE = re.compile(r"^_[A-Z]|__")
_SANITIZE_RE = re.compile(r"[^A-Za-z0-9_]+")

CPP_KEYWORDS = frozenset(
    {
        "alignas", "alignof", "and", "and_eq", "asm", "auto", "bitand", "bitor",
        "bool", "break", "case", "catch", "char", "char8_t", "char16_t", "char32_t",
        "class", "compl", "concept", "const", "consteval", "constexpr", "constinit",
        "const_cast", "continue", "co_await", "co_return", "co_yield", "decltype",
        "default", "delete", "do", "double", "dynamic_cast", "else", "enum",
        "explicit", "export", "extern", "false", "float", "for", "friend", "goto",
        "if", "inline", "int", "long", "mutable", "namespace", "new", "noexcept",
        "not", "not_eq", "nullptr", "operator", "or", "or_eq", "private",
        "protected", "public", "register", "reinterpret_cast", "requires", "return",
        "short", "signed", "sizeof", "static", "static_assert", "static_cast",
        "struct", "switch", "template", "this", "thread_local", "throw", "true",
        "try", "typedef", "typeid", "typename", "union", "unsigned", "using",
        "virtual", "void", "volatile", "wchar_t", "while", "xor", "xor_eq",
    }
)


def is_identifier(name: str) -> bool:
    """True if `name` can be used as a type or enumerator name in the target."""
    return (
        bool(_IDENTIFIER_RE.fullmatch(name))
        and name not in CPP_KEYWORDS
        and not _RESERVED_RE.search(name)
    )


def sanitize_name(name: str) -> str | None:
    """Best-effort identifier for a human-written kind name, or None."""
    candidate = _SANITIZE_RE.sub("_", name.strip()).strip("_")
    candidate = re.sub(r"_{2,}", "_", candidate)
    if not candidate:
        return None
    if candidate[0].isdigit():
        candidate = f"E{candidate}"
    if candidate in CPP_KEYWORDS:
        candidate = f"{candidate}_"
    return candidate if is_identifier(candidate) else None


@dataclass
class ValidationResult:
    catalog: Catalog
    slots: object
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return any(d.is_blocking for d in self.diagnostics)

    def raise_for_errors(self) -> None:
        """Raise the CatalogError for the first blocking diagnostic, if any."""
        for d in self.diagnostics:
            if d.is_blocking:
                raise catalog_error_for(d)(d.message, diagnostics=self.diagnostics)


def check_budget(slots: object) -> Diagnostic | None:
    # bool is an int subclass; True is not a slot count.
    if isinstance(slots, bool) or not isinstance(slots, int):
        return Diagnostic.error(
            codes.INVALID_BUDGET, f"slot budget must be an integer, got {slots!r}"
        )
    if slots < 1:
        return Diagnostic.error(
            codes.INVALID_BUDGET, f"slot budget must be at least 1, got {slots}"
        ).note("the budget is the number of warnings the scaffold can report")
    return None


def check_schema(schema: ScaffoldSchema) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for name in ScaffoldSchema.field_names():
        value = getattr(schema, name)
        if not is_identifier(value):
            diagnostics.append(
                Diagnostic.error(
                    codes.INVALID_CONFIG,
                    f"schema.{name} is not a valid identifier: {value!r}",
                )
            )
    return diagnostics


def check_name(name: str, schema: ScaffoldSchema = DEFAULT_SCHEMA) -> Diagnostic | None:
    """Check one kind name on its own. Duplicates are checked separately."""
    if not name:
        return Diagnostic.error(codes.INVALID_NAME, "kind name is empty")

    if not is_identifier(name):
        if name in CPP_KEYWORDS:
            reason = "is a C++ keyword"
        elif _IDENTIFIER_RE.fullmatch(name):
            reason = "is a reserved identifier"
        else:
            reason = "is not a valid identifier"
        diag = Diagnostic.error(codes.INVALID_NAME, f"kind name {name!r} {reason}")
        fixed = sanitize_name(name)
        if fixed is not None and fixed != name:
            diag.suggest(f"rename to `{fixed}`", fixed)
        return diag

    if not is_identifier(schema.ordinal_name(name)):
        return Diagnostic.error(
            codes.INVALID_NAME,
            f"kind name {name!r} yields a reserved ordinal name "
            f"{schema.ordinal_name(name)!r}",
        )

    if name in schema.declared_names():
        return Diagnostic.error(
            codes.INVALID_NAME,
            f"kind name {name!r} collides with a name the scaffold declares",
        ).note(f"reserved: {', '.join(sorted(schema.declared_names()))}")

    if name.startswith(schema.slot_macro_prefix):
        return Diagnostic.error(
            codes.INVALID_NAME,
            f"kind name {name!r} collides with the dispatch slot macros",
        ).note(f"names starting with {schema.slot_macro_prefix!r} are reserved")

    return None


def _ordinal_collisions(catalog: Catalog, schema: ScaffoldSchema) -> list[Diagnostic]:
    """Marker types and enumerators share a namespace; `Error_Foo` vs kind `Foo`."""
    enumerators = {schema.ordinal_name(n) for n in [schema.sentinel, *catalog.names]}
    return [
        Diagnostic.error(
            codes.INVALID_NAME,
            f"kind name {name!r} collides with a generated ordinal name",
        ).at(i)
        for i, name in enumerate(catalog.names)
        if name in enumerators
    ]


def validate_catalog(
    catalog: Catalog,
    slots: object,
    schema: ScaffoldSchema = DEFAULT_SCHEMA,
) -> ValidationResult:
    """Check every generation precondition and collect all violations."""
    diagnostics: list[Diagnostic] = check_schema(schema)

    budget_diag = check_budget(slots)
    if budget_diag is not None:
        diagnostics.append(budget_diag)

    first_seen: dict[str, int] = {}
    for i, name in enumerate(catalog.names):
        name_diag = check_name(name, schema)
        if name_diag is not None:
            diagnostics.append(name_diag.at(i))
        elif name in first_seen:
            diagnostics.append(
                Diagnostic.error(codes.DUPLICATE_NAME, f"duplicate kind name {name!r}")
                .at(i)
                .note(f"first defined at catalog entry {first_seen[name]}")
            )
        else:
            first_seen[name] = i

    diagnostics.extend(_ordinal_collisions(catalog, schema))

    if len(catalog) == 0:
        diagnostics.append(
            Diagnostic.warning(codes.EMPTY_CATALOG, "catalog has no error kinds")
            .note("the scaffold will only declare the sentinel kind")
        )

    return ValidationResult(catalog=catalog, slots=slots, diagnostics=diagnostics)
