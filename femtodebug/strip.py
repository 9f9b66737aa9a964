"""Removal of diagnostic statements before modules are compiled.

Binding the public names to no-ops stops a disabled build from writing
anything, but Python still evaluates the arguments of every call. This
module removes the statements themselves. :class:`StrippingFinder` is a
meta-path finder that loads selected modules through
:class:`StrippingLoader`, which parses the source, deletes every statement
calling a diagnostic entry point and compiles what is left. The stripped
code never reaches the bytecode cache.

An application installs the finder before importing its own modules::

    import femtodebug.strip

    femtodebug.strip.install("myapp")

    from myapp import main

:func:`install` only acts when diagnostics are disabled, so the same
bootstrap code serves both builds.

Recognised call forms::

    from femtodebug import debug, debugf as df
    import femtodebug as fd

    debug("x")             # removed
    df("%d", n)            # removed
    fd.debuglf(2, "%r", v) # removed
    assert debug("x")      # removed
    y = debug("x")         # kept: the value is used

    def apply(debug):
        debug("x")         # kept: the parameter shadows the import

"""

from __future__ import annotations

import ast
import collections.abc as cabc
import importlib.abc
import importlib.machinery
import logging
import sys
import typing as typ

from .build import BUILD

Iterable = cabc.Iterable
Final = typ.Final

logger = logging.getLogger(__name__)

PACKAGE: Final = "femtodebug"

ENTRY_POINTS: Final = frozenset({
    "debug",
    "debugf",
    "debugl",
    "debuglf",
    "debugp",
    "emit",
    "fdebug",
    "fdebugf",
    "fdebugl",
    "fdebuglf",
})

_BLOCK_FIELDS: Final = ("body", "orelse", "finalbody")


def _collect_bindings(tree: ast.AST) -> tuple[set[str], set[str]]:
    """Return the local names bound to entry points and to the package."""
    functions: set[str] = set()
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module == PACKAGE and not node.level:
            for alias in node.names:
                if alias.name == "*":
                    functions.update(ENTRY_POINTS)
                elif alias.name in ENTRY_POINTS:
                    functions.add(alias.asname or alias.name)
        elif isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name == PACKAGE:
                    modules.add(alias.asname or PACKAGE)
                elif alias.asname is None and alias.name.startswith(f"{PACKAGE}."):
                    # ``import femtodebug.strip`` binds ``femtodebug`` too.
                    modules.add(PACKAGE)
    return functions, modules


def _imports_entry_point(node: ast.ImportFrom, alias: ast.alias) -> bool:
    return node.module == PACKAGE and not node.level and (
        alias.name == "*" or alias.name in ENTRY_POINTS
    )


def _imports_package(alias: ast.alias) -> bool:
    return alias.name == PACKAGE or alias.name.startswith(f"{PACKAGE}.")


def _parameter_names(args: ast.arguments) -> set[str]:
    params = [*args.posonlyargs, *args.args, *args.kwonlyargs]
    params.extend(arg for arg in (args.vararg, args.kwarg) if arg is not None)
    return {param.arg for param in params}


def _bound_names(scope: ast.AST) -> set[str]:
    """Return the names ``scope`` binds locally, nested scopes excluded.

    Imports of femtodebug itself are left out so that a function importing
    an entry point keeps its diagnostics strippable.
    """
    names: set[str] = set()
    declared: set[str] = set()
    if isinstance(scope, (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda)):
        names |= _parameter_names(scope.args)
    pending = list(ast.iter_child_nodes(scope))
    while pending:
        node = pending.pop()
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            names.add(node.name)
            continue
        if isinstance(node, ast.Lambda):
            continue
        if isinstance(node, ast.Name) and not isinstance(node.ctx, ast.Load):
            names.add(node.id)
        elif isinstance(node, ast.ImportFrom):
            names.update(
                alias.asname or alias.name
                for alias in node.names
                if not _imports_entry_point(node, alias)
            )
        elif isinstance(node, ast.Import):
            names.update(
                alias.asname or alias.name.partition(".")[0]
                for alias in node.names
                if not _imports_package(alias)
            )
        elif isinstance(node, ast.ExceptHandler) and node.name:
            names.add(node.name)
        elif isinstance(node, (ast.MatchAs, ast.MatchStar)) and node.name:
            names.add(node.name)
        elif isinstance(node, ast.MatchMapping) and node.rest:
            names.add(node.rest)
        elif isinstance(node, (ast.Global, ast.Nonlocal)):
            declared.update(node.names)
        pending.extend(ast.iter_child_nodes(node))
    return names - declared


class DiagnosticStripper(ast.NodeTransformer):
    """Delete statements whose whole effect is a diagnostic call.

    Inside a function or class body that rebinds an entry-point or package
    name (parameter, assignment, ``def``, import, ``except ... as``, match
    capture), calls through that name are left alone.
    """

    def __init__(self, functions: Iterable[str], modules: Iterable[str]) -> None:
        self.functions = frozenset(functions)
        self.modules = frozenset(modules)
        self.removed = 0
        # (names shadowed in this body, names shadowed for nested functions)
        self._scopes: list[tuple[frozenset[str], frozenset[str]]] = [
            (frozenset(), frozenset())
        ]

    def _is_diagnostic_call(self, node: ast.expr | None) -> bool:
        if not isinstance(node, ast.Call):
            return False
        func = node.func
        shadowed = self._scopes[-1][0]
        if isinstance(func, ast.Name):
            return func.id in self.functions and func.id not in shadowed
        return (
            isinstance(func, ast.Attribute)
            and func.attr in ENTRY_POINTS
            and isinstance(func.value, ast.Name)
            and func.value.id in self.modules
            and func.value.id not in shadowed
        )

    def _visit_function(self, node: ast.AST) -> ast.AST:
        shadowed = self._scopes[-1][1] | _bound_names(node)
        self._scopes.append((shadowed, shadowed))
        try:
            return self.generic_visit(node)
        finally:
            self._scopes.pop()

    visit_FunctionDef = _visit_function  # noqa: N815
    visit_AsyncFunctionDef = _visit_function  # noqa: N815

    def visit_ClassDef(self, node: ast.ClassDef) -> ast.AST:  # noqa: N802
        # Class bodies do not enclose their methods.
        enclosing = self._scopes[-1][1]
        self._scopes.append((enclosing | _bound_names(node), enclosing))
        try:
            return self.generic_visit(node)
        finally:
            self._scopes.pop()

    def visit_Expr(self, node: ast.Expr) -> ast.Expr | None:  # noqa: N802
        if self._is_diagnostic_call(node.value):
            self.removed += 1
            return None
        return node

    def visit_Assert(self, node: ast.Assert) -> ast.Assert | None:  # noqa: N802
        if self._is_diagnostic_call(node.test):
            self.removed += 1
            return None
        return node

    def generic_visit(self, node: ast.AST) -> ast.AST:
        populated = [field for field in _BLOCK_FIELDS if _statements(node, field)]
        node = super().generic_visit(node)
        for field in populated:
            if not _statements(node, field):
                setattr(node, field, [ast.copy_location(ast.Pass(), node)])
        return node


def _statements(node: ast.AST, field: str) -> list[ast.stmt]:
    value = getattr(node, field, None)
    return value if isinstance(value, list) else []


def strip_diagnostics(tree: ast.Module) -> tuple[ast.Module, int]:
    """Remove diagnostic statements from ``tree`` in place.

    Parameters
    ----------
    tree : ast.Module
        Parsed module source.

    Returns
    -------
    tuple[ast.Module, int]
        The transformed tree and the number of statements removed. Blocks
        left empty are given a ``pass`` statement so the tree still
        compiles.

    """
    functions, modules = _collect_bindings(tree)
    if not functions and not modules:
        return tree, 0
    stripper = DiagnosticStripper(functions, modules)
    tree = ast.fix_missing_locations(stripper.visit(tree))
    return tree, stripper.removed


class StrippingLoader(importlib.machinery.SourceFileLoader):
    """Source loader that compiles modules with diagnostics removed.

    Bytecode is never read from or written to ``__pycache__``, so an
    unstripped cache entry cannot be picked up here and a stripped one
    cannot leak into a later, enabled run.
    """

    def get_code(self, fullname: str) -> typ.Any:
        path = self.get_filename(fullname)
        tree = ast.parse(self.get_data(path), filename=path)
        tree, removed = strip_diagnostics(tree)
        if removed:
            logger.debug("stripped %d diagnostic statement(s) from %s", removed, fullname)
        return compile(tree, path, "exec", dont_inherit=True)


class StrippingFinder(importlib.abc.MetaPathFinder):
    """Route source modules under the given package prefixes to the loader."""

    def __init__(self, prefixes: Iterable[str]) -> None:
        self.prefixes = tuple(prefixes)
        if not self.prefixes:
            msg = "at least one module prefix is required"
            raise ValueError(msg)

    def _matches(self, fullname: str) -> bool:
        return any(
            fullname == prefix or fullname.startswith(f"{prefix}.")
            for prefix in self.prefixes
        )

    def find_spec(
        self,
        fullname: str,
        path: typ.Sequence[str] | None,
        target: object = None,
    ) -> importlib.machinery.ModuleSpec | None:
        if not self._matches(fullname):
            return None
        spec = importlib.machinery.PathFinder.find_spec(fullname, path)
        if spec is None or not isinstance(
            spec.loader, importlib.machinery.SourceFileLoader
        ):
            return None
        spec.loader = StrippingLoader(fullname, typ.cast("str", spec.origin))
        return spec

    def __repr__(self) -> str:
        return f"StrippingFinder({list(self.prefixes)!r})"


def install(*prefixes: str, force: bool = False) -> StrippingFinder | None:
    """Install a :class:`StrippingFinder` for ``prefixes``.

    Parameters
    ----------
    *prefixes : str
        Dotted package or module names whose diagnostics should be removed.
    force : bool, default False
        Install even though diagnostics are enabled.

    Returns
    -------
    StrippingFinder or None
        The installed finder, or ``None`` when diagnostics are enabled and
        ``force`` is not set.

    Notes
    -----
    Modules already present in :data:`sys.modules` are not reloaded; call
    this before importing the packages it covers.

    """
    if BUILD.enabled and not force:
        return None
    finder = StrippingFinder(prefixes)
    sys.meta_path.insert(0, finder)
    logger.debug("installed %r", finder)
    return finder


def uninstall(finder: StrippingFinder) -> None:
    """Remove ``finder`` from :data:`sys.meta_path` if it is installed."""
    if finder in sys.meta_path:
        sys.meta_path.remove(finder)


__all__ = [
    "ENTRY_POINTS",
    "DiagnosticStripper",
    "StrippingFinder",
    "StrippingLoader",
    "install",
    "strip_diagnostics",
    "uninstall",
]
