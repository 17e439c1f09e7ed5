# src/widgetree/__init__.py
"""
Widgetree — transformação de configuração declarativa em árvores de widgets.

O pacote recebe a árvore genérica produzida por um parser de configuração
(hashes, arrays e primitivos) e constrói:
    - WidgetUse: nós instanciados, prontos para a camada de renderização
    - WidgetDefinition: templates nomeados, indexados no DefinitionRegistry

Arquitetura em alto nível:
    - core.config  → carregamento de arquivos, merge e opções
    - core.values  → valores tipados de atributo
    - core.widgets → despacho por forma, registry e loader de definições

Limites explícitos:
    - Não renderiza widgets
    - Não resolve nomes de widgets contra definições
    - Não avalia expressões de atributo
"""
from .core.config import TransformSettings, load_config
from .core.errors import ErrorPayload
from .core.exceptions import (
    AttrValueCoercionError,
    DuplicateDefinitionError,
    EmptyWidgetUseError,
    InvalidChildrenShapeError,
    MaxDepthExceededError,
    MissingAttributeError,
    MissingFieldError,
    NotAHashError,
    UnknownDefinitionError,
    WidgetTreeException,
)
from .core.values import AttrValue, PrimitiveValue, coerce_attr_value
from .core.widgets import (
    DefinitionRegistry,
    WidgetDefinition,
    WidgetUse,
    build_definitions,
    load_widget_definitions,
    parse_widget_definition,
    parse_widget_use,
    parse_widget_use_children,
)

__all__ = [
    "TransformSettings",
    "load_config",
    "ErrorPayload",
    "AttrValueCoercionError",
    "DuplicateDefinitionError",
    "EmptyWidgetUseError",
    "InvalidChildrenShapeError",
    "MaxDepthExceededError",
    "MissingAttributeError",
    "MissingFieldError",
    "NotAHashError",
    "UnknownDefinitionError",
    "WidgetTreeException",
    "AttrValue",
    "PrimitiveValue",
    "coerce_attr_value",
    "DefinitionRegistry",
    "WidgetDefinition",
    "WidgetUse",
    "build_definitions",
    "load_widget_definitions",
    "parse_widget_definition",
    "parse_widget_use",
    "parse_widget_use_children",
]
