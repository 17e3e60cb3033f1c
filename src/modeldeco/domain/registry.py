"""ModelRegistry — namespaces of declarations with type resolution.

The registry is the read side of decoration: it enumerates namespaces,
exports its structure as a plain tree, and resolves qualified type
names. A registry built by :meth:`ModelRegistry.from_ast` owns every
node it holds, so registries never alias each other's trees.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from modeldeco.domain.ast import Declaration, ModelAst, ModelFile
from modeldeco.domain.errors import IllegalModelError, TypeNotFoundError
from modeldeco.domain.types import PRIMITIVE_TYPES

logger = logging.getLogger(__name__)


def split_qualified_name(type_name: str) -> tuple[str, str]:
    """Split ``namespace.Name`` at the last dot.

    Examples:
        >>> split_qualified_name("ns1.Foo")
        ('ns1', 'Foo')
        >>> split_qualified_name("org.acme@1.0.0.Foo")
        ('org.acme@1.0.0', 'Foo')
        >>> split_qualified_name("Foo")
        ('', 'Foo')
    """
    namespace, _, name = type_name.rpartition(".")
    return namespace, name


class ModelRegistry:
    """Ordered set of model files keyed by namespace."""

    def __init__(self, model_files: Iterable[ModelFile] = ()) -> None:
        self._files: dict[str, ModelFile] = {}
        for model_file in model_files:
            self.add_model_file(model_file)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_model_file(self, model_file: ModelFile) -> None:
        """Register *model_file*, rejecting duplicate names at any level."""
        ns = model_file.namespace
        if ns in self._files:
            raise IllegalModelError(f'Namespace "{ns}" is already registered')
        seen_decls: set[str] = set()
        for decl in model_file.declarations:
            if decl.name in seen_decls:
                raise IllegalModelError(f'Duplicate declaration "{ns}.{decl.name}"')
            seen_decls.add(decl.name)
            seen_props: set[str] = set()
            for prop in decl.properties or []:
                if prop.name in seen_props:
                    raise IllegalModelError(
                        f'Duplicate property "{ns}.{decl.name}.{prop.name}"'
                    )
                seen_props.add(prop.name)
        self._files[ns] = model_file
        logger.debug("Registered namespace %s (%d declarations)", ns, len(model_file.declarations))

    @classmethod
    def from_ast(cls, ast: ModelAst | Mapping[str, Any]) -> ModelRegistry:
        """Build a registry owning a fresh copy of *ast*."""
        tree = ast.to_tree() if isinstance(ast, ModelAst) else dict(ast)
        return cls(ModelAst.from_tree(tree).models)

    def with_model_files(self, *extra: ModelFile) -> ModelRegistry:
        """Return an independent registry holding this model plus *extra*."""
        registry = ModelRegistry.from_ast(self.get_ast())
        for model_file in extra:
            registry.add_model_file(model_file)
        return registry

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def namespaces(self) -> list[str]:
        return list(self._files)

    def get_model_file(self, namespace: str) -> ModelFile | None:
        return self._files.get(namespace)

    def get_model_files(self) -> list[ModelFile]:
        return list(self._files.values())

    def get_ast(self) -> dict[str, Any]:
        """Export the whole registry as a fresh plain tree."""
        return ModelAst(models=self.get_model_files()).to_tree()

    def get_type(self, type_name: str) -> Declaration:
        """Return the declaration for fully-qualified *type_name*.

        Raises:
            TypeNotFoundError: namespace or declaration is unknown.
        """
        namespace, name = split_qualified_name(type_name)
        model_file = self._files.get(namespace)
        decl = model_file.get_declaration(name) if model_file is not None else None
        if decl is None:
            raise TypeNotFoundError(type_name)
        return decl

    def resolve_type(self, context: str, type_name: str) -> str:
        """Resolve *type_name* to a primitive or a declared type.

        *context* names the element being resolved for error messages.

        Raises:
            TypeNotFoundError: *type_name* does not resolve.
        """
        if type_name in PRIMITIVE_TYPES:
            return type_name
        try:
            self.get_type(type_name)
        except TypeNotFoundError as exc:
            raise TypeNotFoundError(type_name, context=context) from exc
        return type_name
