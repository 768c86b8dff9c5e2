"""XPath evaluation over lxml trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from lxml import etree

from metsmeta.mets.fields import NamespaceRegistry

QueryContext = Union[etree._Element, etree._ElementTree]


@dataclass(slots=True)
class QueryError(Exception):
    """An XPath expression could not be compiled or evaluated."""

    expression: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (expression={self.expression})"


def element_text(element: etree._Element) -> str:
    """Full text content of an element, descendants included."""

    return "".join(element.itertext())


class QueryExecutor:
    """Evaluate field-map expressions and shape raw lxml results.

    Stateless: one instance may be shared by any number of extractions.
    """

    def values(
        self,
        context: QueryContext,
        expression: str,
        namespaces: NamespaceRegistry,
        **variables: str,
    ) -> list[str]:
        result = self._evaluate(context, expression, namespaces, variables)
        if not isinstance(result, list):
            return [self._scalar_text(result)]

        values: list[str] = []
        for item in result:
            if isinstance(item, etree._Element):
                values.append(element_text(item))
            else:
                values.append(str(item))
        return values

    def nodes(
        self,
        context: QueryContext,
        expression: str,
        namespaces: NamespaceRegistry,
        **variables: str,
    ) -> list[etree._Element]:
        result = self._evaluate(context, expression, namespaces, variables)
        if not isinstance(result, list):
            return []
        return [item for item in result if isinstance(item, etree._Element)]

    def first_value(
        self,
        context: QueryContext,
        expression: str,
        namespaces: NamespaceRegistry,
        **variables: str,
    ) -> str | None:
        values = self.values(context, expression, namespaces, **variables)
        return values[0] if values else None

    def attribute(self, node: etree._Element, name: str) -> str | None:
        """Attribute value, or None when the attribute is missing."""

        return node.get(name)

    def _evaluate(
        self,
        context: QueryContext,
        expression: str,
        namespaces: NamespaceRegistry,
        variables: dict[str, str],
    ) -> object:
        try:
            return context.xpath(expression, namespaces=namespaces.nsmap(), **variables)
        except etree.XPathError as exc:
            raise QueryError(expression, f"XPath evaluation failed: {exc}") from exc

    def _scalar_text(self, value: object) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
