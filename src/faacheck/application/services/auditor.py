"""Graph auditor.

GraphAuditor runs every layering rule over a module graph and produces
an AuditReport. Composition-based: rule steps, config and reporter are
passed in, nothing is read from process-wide state.
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import TYPE_CHECKING

from faacheck.application.classification import ModuleClassifier, classify_modules
from faacheck.application.validators import BoundaryEnforcer, EdgeValidator
from faacheck.domain.exceptions.audit import AuditError
from faacheck.domain.model.audit_report import AuditReport
from faacheck.domain.model.audit_stats import AuditStats
from faacheck.domain.model.configuration import AuditConfig
from faacheck.domain.model.enums import ViolationKind
from faacheck.domain.model.graph import DiGraph, detect_cycles
from faacheck.domain.model.module_graph import ModuleGraph
from faacheck.domain.model.violation import Violation

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from faacheck.domain.model.edge import Edge
    from faacheck.domain.model.module import Module, ModuleMetadata
    from faacheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

type _ResolvedEdge = tuple[Edge, Module, Module]

_SUGGESTIONS: Mapping[ViolationKind, str] = {
    ViolationKind.UPWARD_IMPORT: (
        "Move the needed code down a layer, or let the higher layer pass it in"
    ),
    ViolationKind.HORIZONTAL_IMPORT: (
        "Compose both slices from a higher layer, or move the shared part to entities/shared"
    ),
    ViolationKind.PRIVATE_BOUNDARY_BREACH: "Import through the slice's public surface",
    ViolationKind.MISSING_PUBLIC_SURFACE: (
        "Add a public entry file (index, __init__) to the slice and import through it"
    ),
}


class GraphAuditor:
    """Audits a module graph against the layering rules.

    Each edge is checked exactly once, in input order: EdgeValidator first,
    then BoundaryEnforcer for edges that go strictly downward. All
    violations are collected; only inconsistent input aborts the run.

    Example:
        auditor = GraphAuditor()
        report = auditor.audit(modules, edges)
        if not report.passed:
            for violation in report.violations:
                print(violation)
    """

    def __init__(
        self,
        config: AuditConfig | None = None,
        *,
        edge_validator: EdgeValidator | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize auditor with dependencies.

        Args:
            config: Audit configuration (default: AuditConfig())
            edge_validator: Layer direction rule step
            reporter: Optional reporter called with every report
        """
        self._config = config if config is not None else AuditConfig()
        self._edge_validator = edge_validator if edge_validator is not None else EdgeValidator()
        self._reporter = reporter

    @property
    def config(self) -> AuditConfig:
        """Audit configuration."""
        return self._config

    def audit(self, modules: Iterable[Module], edges: Sequence[Edge]) -> AuditReport:
        """Audit pre-classified modules and their edges.

        Args:
            modules: Classified modules (ids must be unique)
            edges: Import edges, in the order violations should be reported

        Returns:
            AuditReport with violations in input edge order

        Raises:
            AuditError: Edge references an unknown module id, or one id is
                given twice with different classifications
        """
        index = self._index_modules(modules)
        edge_list = tuple(edges)
        resolved = self._resolve_edges(index, edge_list)

        enforcer = BoundaryEnforcer.from_modules(index.values())
        check = partial(self._check_edge, enforcer)

        if self._config.max_workers > 1 and len(resolved) > 1:
            # map() yields in submission order, so the report order is unchanged
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
                results = list(pool.map(check, resolved))
        else:
            results = [check(item) for item in resolved]

        violations = tuple(v for v in results if v is not None)
        cycles = self._find_cycles(index, edge_list) if self._config.detect_cycles else ()

        report = AuditReport(
            violations=violations,
            stats=self._build_stats(len(index), len(edge_list), violations),
            cycles=cycles,
        )

        logger.info(
            "audit %s: %d module(s), %d edge(s), %d violation(s)",
            report.verdict.value,
            len(index),
            len(edge_list),
            report.violation_count,
        )

        if self._reporter is not None:
            self._reporter.report(report)

        return report

    def audit_entries(
        self,
        entries: Sequence[tuple[str, ModuleMetadata | None]],
        edges: Sequence[Edge],
    ) -> AuditReport:
        """Classify raw (path, metadata) entries, then audit.

        Raises:
            ClassificationError: Any path cannot be classified
            AuditError: Inconsistent input
        """
        return self.audit_graph(ModuleGraph(entries=tuple(entries), edges=tuple(edges)))

    def audit_graph(self, graph: ModuleGraph) -> AuditReport:
        """Audit a front-end graph, classifying its raw entries first.

        Slice groups are discovered from the full path set (raw entries and
        pre-classified ids). Each raw id is classified once.

        Raises:
            ClassificationError: Any path cannot be classified
            AuditError: Inconsistent input
        """
        modules: list[Module] = list(graph.modules)
        if graph.entries:
            paths = [module.id for module in graph.modules]
            paths.extend(path for path, _ in graph.entries)
            classifier = ModuleClassifier.for_paths(paths, self._config.layout)
            modules.extend(classify_modules(graph.entries, classifier).values())
        return self.audit(modules, graph.edges)

    def _index_modules(self, modules: Iterable[Module]) -> dict[str, Module]:
        """Map id → module, rejecting conflicting duplicates."""
        index: dict[str, Module] = {}
        for module in modules:
            existing = index.get(module.id)
            if existing is None:
                index[module.id] = module
            elif existing != module:
                raise AuditError(
                    module.id,
                    f"module listed twice with different classification ({existing} vs {module})",
                )
        return index

    def _resolve_edges(
        self,
        index: Mapping[str, Module],
        edges: tuple[Edge, ...],
    ) -> tuple[_ResolvedEdge, ...]:
        """Attach modules to every edge. Fails on the first unknown id."""
        resolved: list[_ResolvedEdge] = []
        for position, edge in enumerate(edges):
            for module_id in (edge.source, edge.target):
                if module_id not in index:
                    raise AuditError(
                        module_id,
                        f"edge #{position} ({edge}) references a module not in the module set",
                    )
            resolved.append((edge, index[edge.source], index[edge.target]))
        return tuple(resolved)

    def _check_edge(self, enforcer: BoundaryEnforcer, item: _ResolvedEdge) -> Violation | None:
        """Run rule steps on one edge. None = allowed."""
        edge, source, target = item

        result = self._edge_validator.validate(edge, source, target)
        if result.crosses_boundary:
            result = enforcer.check_boundary(source, target)

        kind = result.kind
        if kind is None:
            return None

        logger.debug("%s: %s", kind.value, result.reason)
        return Violation(
            kind=kind,
            source=edge.source,
            target=edge.target,
            message=result.reason,
            suggestion=_SUGGESTIONS[kind],
        )

    def _find_cycles(
        self,
        index: Mapping[str, Module],
        edges: tuple[Edge, ...],
    ) -> tuple[tuple[str, ...], ...]:
        """List import cycles among modules."""
        graph = DiGraph.from_edges(
            ((edge.source, edge.target) for edge in edges),
            extra_nodes=frozenset(index),
        )
        logger.debug(
            "cycle search over %d module(s), %d distinct edge(s)",
            len(graph.nodes),
            graph.edge_count,
        )
        cycles = detect_cycles(graph)
        for cycle in cycles:
            logger.warning("import cycle between %d module(s): %s", len(cycle), ", ".join(cycle))
        return cycles

    def _build_stats(
        self,
        module_count: int,
        edge_count: int,
        violations: tuple[Violation, ...],
    ) -> AuditStats:
        """Build audit statistics."""
        counts = Counter(v.kind for v in violations)
        return AuditStats(
            modules_audited=module_count,
            edges_audited=edge_count,
            by_kind={kind: counts[kind] for kind in ViolationKind if counts[kind]},
        )


def audit(
    modules: Iterable[Module],
    edges: Sequence[Edge],
    *,
    config: AuditConfig | None = None,
) -> AuditReport:
    """Audit a module graph with the given (or default) configuration.

    Convenience wrapper around GraphAuditor(config).audit().
    """
    return GraphAuditor(config).audit(modules, edges)
