"""
Term Converter Module

This module converts plain strings to RDF terms and RDF terms to quads.

Components:
- TermConverter: term classification, term construction and quad assembly
- get_quads / get_literal_quads: module level shortcuts

Term strings are classified by their lexical prefix:
- ``_:label`` is a blank node
- ``?name`` is a variable
- anything else is a resource IRI, used verbatim

No validation is performed on labels or IRIs. An empty blank node label or
a string that is not a well formed IRI is accepted as is; validating input
is the caller's concern.
"""

import logging
from typing import List, Optional, Sequence, Union

from rdflib import BNode, Literal, URIRef, Variable
from rdflib.term import Identifier

from .constants import TermPrefix
from .models import (
    GraphTerm,
    ObjectTerm,
    PredicateTerm,
    Quad,
    SubjectTerm,
    TermKind,
)

logger = logging.getLogger(__name__)

Contexts = Optional[Union[str, Sequence[str]]]


class TermConverter:
    """
    Converts strings to terms and terms to quads.

    The number of produced quads depends on the number of supplied contexts:
    one quad per context, or a single default graph quad when there is none.
    """

    @staticmethod
    def get_quads(
        subject: str,
        predicate: str,
        obj: str,
        contexts: Contexts = None
    ) -> List[Quad]:
        """
        Convert the supplied strings to a collection of quads.

        Args:
            subject: The quads' subject
            predicate: The quads' predicate
            obj: The quads' object, classified like the subject
            contexts: Optional context or contexts of the quads

        Returns:
            One quad per context, or a single quad without graph
        """
        object_term = TermConverter.to_object(obj)
        return TermConverter.to_quads(subject, predicate, object_term, contexts)

    @staticmethod
    def get_literal_quads(
        subject: str,
        predicate: str,
        obj: str,
        contexts: Contexts = None,
        datatype: Optional[str] = None,
        language: Optional[str] = None
    ) -> List[Quad]:
        """
        Convert the supplied strings to a collection of quads with a literal object.

        A language, when given, always wins over a datatype: the literal is
        never built with both.

        Args:
            subject: The quads' subject
            predicate: The quads' predicate
            obj: The literal lexical value
            contexts: Optional context or contexts of the quads
            datatype: Datatype IRI of the literal
            language: Language tag of the literal

        Returns:
            One quad per context, or a single quad without graph
        """
        if language:
            object_term = TermConverter.to_object_with_language(obj, language)
        else:
            object_term = TermConverter.to_object_with_datatype(obj, datatype)
        return TermConverter.to_quads(subject, predicate, object_term, contexts)

    @staticmethod
    def to_quads(
        subject: str,
        predicate: str,
        object_term: ObjectTerm,
        contexts: Contexts = None
    ) -> List[Quad]:
        """
        Convert subject, predicate and contexts to terms and assemble quads.

        Args:
            subject: The quads' subject
            predicate: The quads' predicate
            object_term: The quads' object, already converted to a term
            contexts: Optional context or contexts of the quads

        Returns:
            Quads sharing subject, predicate and object, in context order
        """
        subject_term = TermConverter.to_subject(subject)
        predicate_term = TermConverter.to_predicate(predicate)
        graph_terms = TermConverter.to_graphs(contexts)

        if graph_terms:
            logger.debug(f"Fanning out statement over {len(graph_terms)} graph(s)")
            return [
                Quad(subject_term, predicate_term, object_term, graph)
                for graph in graph_terms
            ]
        return [Quad(subject_term, predicate_term, object_term)]

    @staticmethod
    def classify(value: str) -> TermKind:
        """
        Decide the kind of term a string denotes from its prefix.

        Literals are never produced by classification, they are built
        explicitly with a language or a datatype.
        """
        if TermConverter.is_blank_node(value):
            return TermKind.BLANK_NODE
        if TermConverter.is_variable(value):
            return TermKind.VARIABLE
        return TermKind.RESOURCE

    @staticmethod
    def to_term(value: str) -> SubjectTerm:
        """
        Convert a string to a blank node, variable or resource term.

        Args:
            value: The string to convert

        Returns:
            BNode without the leading ``_:``, Variable without the leading
            ``?``, or a URIRef of the string itself
        """
        kind = TermConverter.classify(value)
        if kind is TermKind.BLANK_NODE:
            return BNode(value[len(TermPrefix.BLANK_NODE):])
        if kind is TermKind.VARIABLE:
            return TermConverter.to_variable(value)
        return URIRef(value)

    @staticmethod
    def to_subject(value: str) -> SubjectTerm:
        return TermConverter.to_term(value)

    @staticmethod
    def to_predicate(value: str) -> PredicateTerm:
        """
        Convert a predicate string to a variable or resource term.

        Predicates are never blank nodes: a ``_:`` string stays a resource.
        """
        if TermConverter.is_variable(value):
            return TermConverter.to_variable(value)
        return URIRef(value)

    @staticmethod
    def to_object(value: str) -> ObjectTerm:
        """
        Convert a non literal object string to a term.

        For literals use :meth:`to_object_with_language` or
        :meth:`to_object_with_datatype`.
        """
        # Same as subject
        return TermConverter.to_subject(value)

    @staticmethod
    def to_graph(value: str) -> GraphTerm:
        return TermConverter.to_term(value)

    @staticmethod
    def to_object_with_language(value: str, language: str) -> Literal:
        """
        Build a language tagged literal.

        Raises:
            ValueError: If rdflib rejects the language tag
        """
        return Literal(value, lang=language, normalize=False)

    @staticmethod
    def to_object_with_datatype(value: str, datatype: Optional[str]) -> Literal:
        """
        Build a typed literal.

        The lexical form is kept verbatim. Without a datatype a plain
        literal is built.
        """
        if not datatype:
            return Literal(value, normalize=False)
        return Literal(value, datatype=URIRef(datatype), normalize=False)

    @staticmethod
    def to_graphs(contexts: Contexts) -> List[GraphTerm]:
        """
        Convert the supplied context or contexts to graph terms.

        Args:
            contexts: None, a single context string or a sequence of them

        Returns:
            Graph terms in input order, empty when there is no context
        """
        if not contexts:
            return []
        if isinstance(contexts, str):
            contexts = [contexts]
        return [TermConverter.to_graph(context) for context in contexts]

    @staticmethod
    def to_variable(value: str) -> Variable:
        """Build a variable named after the string without its leading ``?``."""
        name = value[len(TermPrefix.VARIABLE):]
        # Deliberate: Variable() would turn "??x" into "x" and reject "?"
        return Identifier.__new__(Variable, name)

    @staticmethod
    def is_blank_node(value: str) -> bool:
        return value.startswith(TermPrefix.BLANK_NODE)

    @staticmethod
    def is_variable(value: str) -> bool:
        return value.startswith(TermPrefix.VARIABLE)


def get_quads(
    subject: str,
    predicate: str,
    obj: str,
    contexts: Contexts = None
) -> List[Quad]:
    """Convenience wrapper around :meth:`TermConverter.get_quads`."""
    return TermConverter.get_quads(subject, predicate, obj, contexts)


def get_literal_quads(
    subject: str,
    predicate: str,
    obj: str,
    contexts: Contexts = None,
    datatype: Optional[str] = None,
    language: Optional[str] = None
) -> List[Quad]:
    """Convenience wrapper around :meth:`TermConverter.get_literal_quads`."""
    return TermConverter.get_literal_quads(
        subject, predicate, obj, contexts, datatype, language
    )
