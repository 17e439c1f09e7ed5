
"""
Widgetree — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Widgetree.

Objetivo:
- Permitir que o transformer e o registry levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/KeyError genéricos na construção da árvore de widgets

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Toda exceção de construção identifica o widget e/ou a definição envolvida.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    ATTR_VALUE_COERCION_FAILED,
    REGISTRY_DUPLICATE_DEFINITION,
    REGISTRY_UNKNOWN_DEFINITION,
    WIDGET_EMPTY_USE,
    WIDGET_INVALID_CHILDREN_SHAPE,
    WIDGET_MAX_DEPTH_EXCEEDED,
    WIDGET_MISSING_ATTRIBUTE,
    WIDGET_MISSING_FIELD,
    WIDGET_NOT_A_HASH,
    ErrorPayload,
)


@dataclass(frozen=True)
class WidgetTreeException(Exception):
    """Base class para exceções internas do Widgetree.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    payload_type: ClassVar[str] = "WIDGETREE_ERROR"

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message

    def with_context(self, **extra: Any) -> "WidgetTreeException":
        """Nova instância com `extra` acrescentado aos details (não sobrescreve chaves existentes)."""
        details = dict(extra)
        details.update(self.details)
        return replace(self, details=details)

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.payload_type,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Construção de widgets
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NotAHashError(WidgetTreeException):
    """Esperava-se um hash (definição ou bloco `widgets`), mas outro valor foi fornecido."""

    payload_type: ClassVar[str] = WIDGET_NOT_A_HASH


@dataclass(frozen=True)
class EmptyWidgetUseError(WidgetTreeException):
    """Hash usado como widget-use não possui nenhuma entrada."""

    payload_type: ClassVar[str] = WIDGET_EMPTY_USE


@dataclass(frozen=True)
class MissingFieldError(WidgetTreeException):
    """Campo obrigatório (ex.: `structure`) ausente."""

    payload_type: ClassVar[str] = WIDGET_MISSING_FIELD


@dataclass(frozen=True)
class InvalidChildrenShapeError(WidgetTreeException):
    """Hash encontrado onde se esperava lista de filhos ou valor primitivo."""

    payload_type: ClassVar[str] = WIDGET_INVALID_CHILDREN_SHAPE


@dataclass(frozen=True)
class MissingAttributeError(WidgetTreeException):
    """Leitura de atributo inexistente em um WidgetUse já construído."""

    payload_type: ClassVar[str] = WIDGET_MISSING_ATTRIBUTE


@dataclass(frozen=True)
class MaxDepthExceededError(WidgetTreeException):
    """Aninhamento de widgets excede o limite configurado em TransformSettings."""

    payload_type: ClassVar[str] = WIDGET_MAX_DEPTH_EXCEEDED


# ---------------------------------------------------------------------------
# Valores de atributo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AttrValueCoercionError(WidgetTreeException):
    """Valor de configuração não pode ser convertido em AttrValue."""

    payload_type: ClassVar[str] = ATTR_VALUE_COERCION_FAILED


# ---------------------------------------------------------------------------
# Registro de definições
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DuplicateDefinitionError(WidgetTreeException):
    """Duas definições registradas com o mesmo nome."""

    payload_type: ClassVar[str] = REGISTRY_DUPLICATE_DEFINITION


@dataclass(frozen=True)
class UnknownDefinitionError(WidgetTreeException):
    """Definição solicitada não está registrada."""

    payload_type: ClassVar[str] = REGISTRY_UNKNOWN_DEFINITION
