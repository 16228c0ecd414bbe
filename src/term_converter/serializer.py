"""
Quad Serializer Module

This module renders collections of quads as Turtle or TriG text.

Components:
- QuadWriter: single use writer collecting quads into an rdflib graph
- SerializationError / WriterClosedError: serialization failures
- to_string: serialize a collection of quads in one call

Turtle is produced when no quad carries a graph. As soon as one quad has a
graph the whole collection is written as TriG, with graph-less quads placed
in the default graph block. Graphs named by a variable or by an empty
label are written as their own blocks with the term kept as given, since
rdflib would otherwise rename them.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from rdflib import Dataset, Graph, Variable

from .config import ConverterConfig
from .constants import SerializationFormat
from .models import GraphTerm, ObjectTerm, PredicateTerm, Quad, SubjectTerm

logger = logging.getLogger(__name__)

Triple = Tuple[SubjectTerm, PredicateTerm, ObjectTerm]


class SerializationError(Exception):
    """Exception raised when quads cannot be serialized."""
    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(f"Serialization failed: {message}")


class WriterClosedError(SerializationError):
    """Exception raised when a finished writer is asked to accept more quads."""
    def __init__(self):
        super().__init__("writer has already been ended and cannot be reused")


class QuadWriter:
    """
    Collects quads and serializes them to Turtle or TriG.

    The writer is not reusable: after :meth:`end` it refuses further quads.
    """

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        """
        Initialize the writer.

        Args:
            config: Optional configuration providing prefixes and a base IRI
        """
        self.config: ConverterConfig = config or ConverterConfig()
        self._quads: List[Quad] = []
        self._ended: bool = False

    @property
    def ended(self) -> bool:
        return self._ended

    def add_quad(self, quad: Quad) -> None:
        """
        Add a single quad to the writer.

        Raises:
            WriterClosedError: If the writer has already been ended
        """
        if self._ended:
            raise WriterClosedError()
        self._quads.append(quad)

    def add_quads(self, quads: Iterable[Quad]) -> None:
        """
        Add a collection of quads to the writer.

        Raises:
            WriterClosedError: If the writer has already been ended
        """
        for quad in quads:
            self.add_quad(quad)

    def end(self) -> str:
        """
        Finish the writer and return the serialized text.

        Returns:
            Turtle or TriG text without leading or trailing whitespace

        Raises:
            WriterClosedError: If the writer has already been ended
            SerializationError: If rdflib fails to serialize the quads
        """
        if self._ended:
            raise WriterClosedError()
        self._ended = True

        has_graphs = any(not quad.in_default_graph for quad in self._quads)
        rdf_format = SerializationFormat.TRIG if has_graphs else SerializationFormat.TURTLE
        log_extra = {"quad_count": len(self._quads), "rdf_format": rdf_format}
        logger.debug(f"Serializing {len(self._quads)} quad(s) as {rdf_format}", extra=log_extra)

        try:
            graph, verbatim_graphs = self._build_graph(has_graphs)
            result = graph.serialize(format=rdf_format, base=self.config.base_iri)
            if isinstance(result, bytes):
                result = result.decode('utf-8')
            blocks = [result.strip()]
            blocks.extend(
                self._graph_block(graph_name, triples)
                for graph_name, triples in verbatim_graphs.items()
            )
        except Exception as e:
            logger.error(f"Failed to serialize quads as {rdf_format}: {e}", extra=log_extra)
            raise SerializationError(str(e)) from e
        finally:
            self._quads = []

        return "\n\n".join(block for block in blocks if block)

    def _build_graph(
        self,
        has_graphs: bool
    ) -> Tuple[Union[Graph, Dataset], Dict[GraphTerm, Dict[Triple, None]]]:
        """
        Load the collected quads into a graph or, with contexts, a dataset.

        Returns:
            The rdflib graph, and the triples of graphs rdflib cannot name
            keyed by graph term, both in insertion order
        """
        graph: Union[Graph, Dataset] = Dataset() if has_graphs else Graph()
        for prefix, namespace in self.config.prefixes.items():
            graph.bind(prefix, namespace)

        verbatim_graphs: Dict[GraphTerm, Dict[Triple, None]] = {}
        for quad in self._quads:
            if quad.graph is None:
                graph.add(quad.triple)
            elif self._is_verbatim_graph(quad.graph):
                verbatim_graphs.setdefault(quad.graph, {})[quad.triple] = None
            else:
                graph.add((quad.subject, quad.predicate, quad.object, quad.graph))
        return graph, verbatim_graphs

    @staticmethod
    def _is_verbatim_graph(graph_name: GraphTerm) -> bool:
        """
        Check whether rdflib would rename this graph.

        rdflib turns a Variable graph name into an IRI and replaces an empty
        name with a fresh blank node.
        """
        return isinstance(graph_name, Variable) or not str(graph_name)

    @staticmethod
    def _graph_block(graph_name: GraphTerm, triples: Iterable[Triple]) -> str:
        """Write one TriG graph block with the graph term and triples in N-Triples form."""
        lines = [f"{graph_name.n3()} {{"]
        for triple in triples:
            lines.append("    " + " ".join(term.n3() for term in triple) + " .")
        lines.append("}")
        return "\n".join(lines)


def to_string(quads: Iterable[Quad], config: Optional[ConverterConfig] = None) -> str:
    """
    Serialize quads to Turtle, or to TriG when any of them has a graph.

    Args:
        quads: The quads to serialize
        config: Optional configuration providing prefixes and a base IRI

    Returns:
        The serialized text, trimmed

    Raises:
        SerializationError: If the quads cannot be serialized
    """
    writer = QuadWriter(config)
    writer.add_quads(quads)
    return writer.end()
