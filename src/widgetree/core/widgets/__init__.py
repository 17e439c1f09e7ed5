# src/widgetree/core/widgets/__init__.py
"""
# Widgets Core — Widgetree

Este pacote transforma a árvore genérica de configuração em uma árvore
tipada de widgets.

## Componentes

- **types**
  - `WidgetUse`: nó instanciado (nome, filhos, atributos)
  - `WidgetDefinition`: template nomeado

- **transform**
  - `parse_widget_use`, `parse_widget_use_children`, `parse_widget_definition`

- **registry**
  - `DefinitionRegistry`: unicidade e ordem das definições

- **loader**
  - `build_definitions`, `load_widget_definitions`

## Invariantes

- Folha primitiva → `label` com atributo `text`
- Filhos na ordem do documento
- Chaves de atributo minúsculas
"""

from .types import WidgetDefinition, WidgetUse
from .transform import (
    from_array_definition,
    from_hash_definition,
    parse_widget_definition,
    parse_widget_use,
    parse_widget_use_children,
)
from .registry import DefinitionRegistry
from .loader import build_definitions, load_widget_definitions

__all__ = [
    "WidgetDefinition",
    "WidgetUse",
    "from_array_definition",
    "from_hash_definition",
    "parse_widget_definition",
    "parse_widget_use",
    "parse_widget_use_children",
    "DefinitionRegistry",
    "build_definitions",
    "load_widget_definitions",
]
