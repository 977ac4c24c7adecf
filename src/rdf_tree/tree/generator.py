"""
RDF graph to canonical tree generator.

This module ties the tree components together:
    - ResultShapeClassifier: reads the result:this control triples
    - ListOrderer: orders explicit list items by an ordering predicate
    - TreeBuilder: breadth-first expansion of each root
    - Canonicalizer: deterministic sibling ordering

The main class (RdfTreeGenerator) is a facade over these components; the
module-level functions cover the common one-shot uses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from rdflib import Graph
from rdflib.term import Node
from tqdm import tqdm

from ..constants import ProcessingLimits, VocabularyDefaults
from ..converters.rdf_parser import RDFGraphParser
from ..core.name_resolver import NameResolver
from ..core.term_utils import term_label
from ..core.vocabulary import ResultVocabulary
from ..models import Classification, ResultShape, TreeGenerationResult, TreeNode
from .builder import CyclePolicy, TreeBuilder
from .canonicalizer import Canonicalizer
from .classifier import ResultShapeClassifier
from .comparator import TreeNodeComparator
from .list_orderer import ListOrderer

logger = logging.getLogger(__name__)

__all__ = [
    'GeneratorSettings',
    'RdfTreeGenerator',
    'generate_rdf_tree',
    'generate_from_content',
    'generate_from_file',
]


@dataclass
class GeneratorSettings:
    """
    Explicit configuration for one generator.

    Attributes:
        prefix: URI prefix of the result vocabulary.
        prioritised_namespaces: Namespaces preferred when predicate names tie.
        name_overrides: Predicate IRI to display name.
        cycle_policy: Which earlier nodes block a candidate child.
    """
    prefix: str = VocabularyDefaults.RESULT_ONTOLOGY_URI_PREFIX
    prioritised_namespaces: List[str] = field(default_factory=list)
    name_overrides: Dict[str, str] = field(default_factory=dict)
    cycle_policy: CyclePolicy = CyclePolicy.ANCESTORS

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "GeneratorSettings":
        """
        Build settings from a configuration dictionary.

        Reads the ``vocabulary``, ``names`` and ``traversal`` sections;
        missing sections keep their defaults.

        Raises:
            ValueError: If a section has the wrong shape or an unknown cycle policy
        """
        vocabulary = config.get('vocabulary') or {}
        names = config.get('names') or {}
        traversal = config.get('traversal') or {}
        for section_name, section in (('vocabulary', vocabulary), ('names', names), ('traversal', traversal)):
            if not isinstance(section, dict):
                raise ValueError(f"Configuration section '{section_name}' must be a JSON object")

        namespaces = names.get('prioritised_namespaces') or []
        overrides = names.get('overrides') or {}
        if not isinstance(namespaces, list):
            raise ValueError("names.prioritised_namespaces must be a list of namespace IRIs")
        if not isinstance(overrides, dict):
            raise ValueError("names.overrides must map predicate IRIs to names")

        policy_value = traversal.get('cycle_policy', CyclePolicy.ANCESTORS.value)
        try:
            cycle_policy = CyclePolicy(policy_value)
        except ValueError as exc:
            raise ValueError(f"Unsupported cycle policy: {policy_value}") from exc

        return cls(
            prefix=str(vocabulary.get('prefix') or VocabularyDefaults.RESULT_ONTOLOGY_URI_PREFIX),
            prioritised_namespaces=[str(ns) for ns in namespaces],
            name_overrides={str(k): str(v) for k, v in overrides.items()},
            cycle_policy=cycle_policy,
        )


class RdfTreeGenerator:
    """
    Converts an RDF result graph into a canonical tree.

    This class serves as a facade, delegating to:
    - ResultShapeClassifier: shape detection and linked-list resolution
    - ListOrderer: ordering of result:listItem resources
    - TreeBuilder: graph expansion
    - Canonicalizer: sibling ordering

    A generator holds no per-conversion state, so one instance can be
    reused for any number of graphs.
    """

    def __init__(
        self,
        vocabulary: Optional[ResultVocabulary] = None,
        cycle_policy: CyclePolicy = CyclePolicy.ANCESTORS,
    ):
        """
        Initialize the generator.

        Args:
            vocabulary: Result vocabulary; defaults to the standard prefix
            cycle_policy: Cycle rule applied while expanding the graph
        """
        self.vocabulary = vocabulary or ResultVocabulary()
        self.cycle_policy = CyclePolicy(cycle_policy)
        self._classifier = ResultShapeClassifier(self.vocabulary)

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "RdfTreeGenerator":
        return cls(
            vocabulary=ResultVocabulary(settings.prefix),
            cycle_policy=settings.cycle_policy,
        )

    def classify(self, graph: Graph) -> Classification:
        """Classify the result shape without building the tree."""
        return self._classifier.classify(graph)

    def follow_next_chain(self, graph: Graph, start: Node) -> List[Node]:
        """Resolve the items of a result:next linked list."""
        return self._classifier.follow_next_chain(graph, start)

    def generate_rdf_tree(
        self,
        graph: Graph,
        prioritised_namespaces: Optional[Iterable[str]] = None,
        name_overrides: Optional[Mapping[str, str]] = None,
    ) -> TreeGenerationResult:
        """
        Generate the canonical tree for a graph.

        Args:
            graph: Graph containing data and result:this control triples
            prioritised_namespaces: Namespaces preferred when predicate names tie
            name_overrides: Predicate IRI to display name

        Returns:
            TreeGenerationResult holding the tree and its name resolver

        Raises:
            RdfTreeError: If the control triples do not describe a usable result
        """
        name_resolver = NameResolver(graph, prioritised_namespaces, name_overrides)
        triple_count = len(graph)

        if triple_count == 0:
            logger.info("Graph is empty, generating an empty tree")
            return TreeGenerationResult(
                tree=TreeNode(),
                shape=ResultShape.UNKNOWN,
                name_resolver=name_resolver,
            )

        if triple_count > ProcessingLimits.LARGE_GRAPH_TRIPLES:
            logger.warning(
                f"Large graph detected ({triple_count} triples). "
                "Expansion has no internal cap and may take a while."
            )

        classification = self._classifier.classify(graph)
        builder = TreeBuilder(graph, self.vocabulary, self.cycle_policy)
        warnings: List[str] = []

        if classification.shape == ResultShape.ITEM:
            root_value = classification.first_root
            roots = [root_value]
            tree = builder.build(TreeNode(root_value), roots)
        elif classification.shape == ResultShape.LIST:
            roots = self.follow_next_chain(graph, classification.first_root)
            tree = self._build_list(builder, roots)
        else:
            self._check_ordering_values(graph, classification, warnings)
            roots = ListOrderer(graph).sort(
                classification.list_items,
                classification.ordering_predicate,
                classification.direction,
            )
            tree = self._build_list(builder, roots)

        Canonicalizer(TreeNodeComparator(name_resolver)).canonicalize(tree)

        result = TreeGenerationResult(
            tree=tree,
            shape=classification.shape,
            name_resolver=name_resolver,
            roots=list(roots),
            triple_count=triple_count,
            warnings=warnings,
        )
        logger.info(
            f"Generated {classification.shape} tree with {len(roots)} root(s) "
            f"and {result.node_count} node(s)"
        )
        return result

    @staticmethod
    def _build_list(builder: TreeBuilder, items: List[Node]) -> TreeNode:
        """Create the list root and expand each item under it."""
        list_root = TreeNode.list_root()
        for item in tqdm(
            items,
            desc="Building list items",
            unit="item",
            disable=len(items) < ProcessingLimits.PROGRESS_MIN_ITEMS,
        ):
            builder.build(list_root.add_list_item(item), items)
        return list_root

    @staticmethod
    def _check_ordering_values(
        graph: Graph,
        classification: Classification,
        warnings: List[str],
    ) -> None:
        """Track a warning when no list item has a value for the ordering predicate."""
        predicate = classification.ordering_predicate
        if predicate is None:
            logger.info("No result:orderByPredicate supplied; list items are ordered by identifier")
            return
        for item in classification.list_items:
            if next(iter(graph.objects(item, predicate)), None) is not None:
                return
        message = (
            f"No list item has a value for ordering predicate {term_label(predicate)}; "
            "list items are ordered by identifier"
        )
        warnings.append(message)
        logger.warning(message)


def generate_rdf_tree(
    graph: Graph,
    prioritised_namespaces: Optional[Iterable[str]] = None,
    name_overrides: Optional[Mapping[str, str]] = None,
    settings: Optional[GeneratorSettings] = None,
) -> TreeGenerationResult:
    """
    Generate the canonical tree for a graph with a one-off generator.

    Explicit ``prioritised_namespaces``/``name_overrides`` take precedence
    over the ones in ``settings``.
    """
    settings = settings or GeneratorSettings()
    generator = RdfTreeGenerator.from_settings(settings)
    return generator.generate_rdf_tree(
        graph,
        prioritised_namespaces if prioritised_namespaces is not None else settings.prioritised_namespaces,
        name_overrides if name_overrides is not None else settings.name_overrides,
    )


def generate_from_content(
    content: str,
    rdf_format: Optional[str] = None,
    settings: Optional[GeneratorSettings] = None,
    force_large_file: bool = False,
) -> TreeGenerationResult:
    """
    Parse RDF content and generate its canonical tree.

    Raises:
        ValueError: If content is empty or invalid, or the result graph is malformed
        MemoryError: If insufficient memory is available
    """
    graph, _, _ = RDFGraphParser.parse_content(
        content, rdf_format=rdf_format, force_large_file=force_large_file
    )
    return generate_rdf_tree(graph, settings=settings)


def generate_from_file(
    file_path: Union[str, Path],
    rdf_format: Optional[str] = None,
    settings: Optional[GeneratorSettings] = None,
    force_large_file: bool = False,
) -> TreeGenerationResult:
    """
    Parse an RDF file and generate its canonical tree.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is invalid or the result graph is malformed
        MemoryError: If insufficient memory is available
    """
    graph, _, _ = RDFGraphParser.parse_file(
        file_path, rdf_format=rdf_format, force_large_file=force_large_file
    )
    return generate_rdf_tree(graph, settings=settings)
