# src/widgetree/core/values/__init__.py
"""
Valores tipados de atributo.

Ponto de entrada para `AttrValue`, `PrimitiveValue` e a função de coerção
`coerce_attr_value`, usados pelo transformer para converter folhas
primitivas da configuração.
"""

from .attr_value import AttrValue, PrimitiveValue, coerce_attr_value

__all__ = ["AttrValue", "PrimitiveValue", "coerce_attr_value"]
