
"""
Widgetree — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Widgetree.
Erros de construção da árvore de widgets são reportados ao usuário pela
camada de carregamento de configuração e, por isso, devem ser:

- explícitos
- serializáveis
- localizáveis (qual widget, qual atributo, qual definição)
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Widgetree.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
      (ex.: `widget`, `definition`, `key`, `value`)
    - hint: ação sugerida ao autor da configuração (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        # o chamador deve garantir que details seja serializável
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Construção de widgets
WIDGET_NOT_A_HASH = "WIDGET_NOT_A_HASH"
WIDGET_EMPTY_USE = "WIDGET_EMPTY_USE"
WIDGET_MISSING_FIELD = "WIDGET_MISSING_FIELD"
WIDGET_INVALID_CHILDREN_SHAPE = "WIDGET_INVALID_CHILDREN_SHAPE"
WIDGET_MISSING_ATTRIBUTE = "WIDGET_MISSING_ATTRIBUTE"
WIDGET_MAX_DEPTH_EXCEEDED = "WIDGET_MAX_DEPTH_EXCEEDED"

# Valores de atributo
ATTR_VALUE_COERCION_FAILED = "ATTR_VALUE_COERCION_FAILED"

# Registro de definições
REGISTRY_DUPLICATE_DEFINITION = "REGISTRY_DUPLICATE_DEFINITION"
REGISTRY_UNKNOWN_DEFINITION = "REGISTRY_UNKNOWN_DEFINITION"


def describe_value(value: Any, *, limit: int = 80) -> str:
    """
    Representação curta de um valor de configuração para mensagens de erro.

    Valores longos são truncados em `limit` caracteres para manter o
    diagnóstico legível.
    """
    text = repr(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text
