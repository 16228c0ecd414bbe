"""
Term and quad value types.

Terms are rdflib nodes: ``URIRef`` for resources, ``BNode`` for blank nodes,
``Variable`` for variables and ``Literal`` for literals. ``TermKind`` names
the variant a term string classifies to, and ``Quad`` bundles the four
positions of a statement.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from rdflib import BNode, Literal, URIRef, Variable

# Position-restricted term unions
SubjectTerm = Union[URIRef, BNode, Variable]
PredicateTerm = Union[URIRef, Variable]
ObjectTerm = Union[URIRef, BNode, Variable, Literal]
GraphTerm = Union[URIRef, BNode, Variable]
Term = ObjectTerm


class TermKind(str, Enum):
    """Kind of RDF term a plain string denotes."""
    RESOURCE = "resource"
    BLANK_NODE = "blank_node"
    VARIABLE = "variable"
    LITERAL = "literal"

    @classmethod
    def of(cls, term: Term) -> "TermKind":
        """
        Get the kind of an already constructed term.

        Args:
            term: An rdflib node

        Returns:
            The matching TermKind

        Raises:
            TypeError: If the node is not one of the supported term types
        """
        if isinstance(term, Literal):
            return cls.LITERAL
        if isinstance(term, BNode):
            return cls.BLANK_NODE
        if isinstance(term, Variable):
            return cls.VARIABLE
        if isinstance(term, URIRef):
            return cls.RESOURCE
        raise TypeError(f"Unsupported term type: {type(term).__name__}")


@dataclass(frozen=True)
class Quad:
    """
    An RDF statement with an optional graph context.

    A quad without a graph belongs to the default graph.
    """
    subject: SubjectTerm
    predicate: PredicateTerm
    object: ObjectTerm
    graph: Optional[GraphTerm] = None

    @property
    def triple(self) -> Tuple[SubjectTerm, PredicateTerm, ObjectTerm]:
        """The (subject, predicate, object) part of the quad."""
        return (self.subject, self.predicate, self.object)

    @property
    def in_default_graph(self) -> bool:
        return self.graph is None
