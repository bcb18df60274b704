"""Layer predicate matcher.

A layer query is an AND-combination of small pure predicates:

- ``has_name``      — the layer has a non-empty name (always applied)
- ``name_matches``  — exact name, or a case-sensitive "like" match
- ``kind_matches``  — a specific kind, the shape family, or the default kinds
- ``not_excluded``  — the layer is not in an exclusion collection (identity)

:func:`build_layer_predicate` assembles them; the ``find_*`` functions walk
the in-memory tree and filter with the result.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from datapop.domain.kinds import DEFAULT_QUERY_KINDS, SHAPE_KINDS, LayerKind
from datapop.domain.layers import Layer

LayerPredicate = Callable[[Layer], bool]


def like_pattern(name: str) -> re.Pattern[str]:
    """Compile a "like" pattern: ``*`` is any run, ``?`` any single character.

    The pattern may match anywhere in the name, so plain text behaves as
    a substring test and ``*`` matches any non-empty name.
    """
    parts: list[str] = []
    for char in name:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


def has_name(layer: Layer) -> bool:
    return bool(layer.name)


def name_matches(name: str, *, exact_match: bool) -> LayerPredicate:
    if exact_match:
        return lambda layer: layer.name == name
    pattern = like_pattern(name)
    return lambda layer: layer.name is not None and pattern.search(layer.name) is not None


def kind_matches(kind: LayerKind | None) -> LayerPredicate:
    if kind is None:
        return lambda layer: layer.kind in DEFAULT_QUERY_KINDS
    kind = LayerKind(kind)
    if kind is LayerKind.SHAPE:
        return lambda layer: layer.kind in SHAPE_KINDS
    return lambda layer: layer.kind is kind


def not_excluded(layers: Iterable[Layer]) -> LayerPredicate:
    excluded = {id(layer) for layer in layers}
    return lambda layer: id(layer) not in excluded


def all_of(*predicates: LayerPredicate) -> LayerPredicate:
    return lambda layer: all(predicate(layer) for predicate in predicates)


def build_layer_predicate(
    name: str | None,
    exact_match: bool,
    kind: LayerKind | None,
    layers_to_exclude: Iterable[Layer] | None = None,
) -> LayerPredicate:
    """Combine the name, kind and exclusion rules into one predicate."""
    predicates: list[LayerPredicate] = [has_name]
    if name:
        predicates.append(name_matches(name, exact_match=exact_match))
    predicates.append(kind_matches(kind))
    if layers_to_exclude is not None:
        predicates.append(not_excluded(layers_to_exclude))
    return all_of(*predicates)


def find_layers_in_layer(
    name: str | None,
    exact_match: bool,
    kind: LayerKind | None,
    root_layer: Layer,
    subtree_only: bool = True,
    layers_to_exclude: Iterable[Layer] | None = None,
) -> list[Layer]:
    """Find layers below *root_layer*.

    ``subtree_only`` searches every descendant; otherwise only the
    immediate children are considered. Candidate order is tree order.
    """
    predicate = build_layer_predicate(name, exact_match, kind, layers_to_exclude)
    candidates = root_layer.descendants() if subtree_only else list(root_layer.children)
    return [layer for layer in candidates if predicate(layer)]


def find_layer_in_layer(
    name: str | None,
    exact_match: bool,
    kind: LayerKind | None,
    root_layer: Layer,
    subtree_only: bool = True,
    layers_to_exclude: Iterable[Layer] | None = None,
) -> Layer | None:
    result = find_layers_in_layer(name, exact_match, kind, root_layer, subtree_only, layers_to_exclude)
    return result[0] if result else None


def find_layers_in_layers(
    name: str | None,
    exact_match: bool,
    kind: LayerKind | None,
    root_layers: Iterable[Layer],
    subtree_only: bool = True,
    layers_to_exclude: Iterable[Layer] | None = None,
) -> list[Layer]:
    """Search each root independently and concatenate the results in root order.

    Results are not de-duplicated across roots.
    """
    excluded = list(layers_to_exclude) if layers_to_exclude is not None else None
    layers: list[Layer] = []
    for root_layer in root_layers:
        layers.extend(find_layers_in_layer(name, exact_match, kind, root_layer, subtree_only, excluded))
    return layers


def find_layer_in_layers(
    name: str | None,
    exact_match: bool,
    kind: LayerKind | None,
    root_layers: Iterable[Layer],
    subtree_only: bool = True,
    layers_to_exclude: Iterable[Layer] | None = None,
) -> Layer | None:
    result = find_layers_in_layers(name, exact_match, kind, root_layers, subtree_only, layers_to_exclude)
    return result[0] if result else None
