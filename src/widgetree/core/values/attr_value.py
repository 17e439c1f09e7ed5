# src/widgetree/core/values/attr_value.py
"""
Valores tipados de atributo do Widgetree.

Este módulo define `PrimitiveValue` e `AttrValue`, as estruturas que
representam o valor de um atributo de widget após a coerção de uma folha
primitiva da árvore de configuração.

Política de coerção (v1):
    - bool             → PrimitiveValue(kind="boolean")
    - int / float      → PrimitiveValue(kind="number")
    - str `{{ nome }}` → AttrValue.var_ref (referência a variável)
    - demais str       → PrimitiveValue(kind="string")
    - hash, array, None → AttrValueCoercionError

Decisões arquiteturais:
    - `bool` é verificado antes de números (bool é subclasse de int)
    - O valor canônico é sempre guardado como string (`raw`), como no
      formato textual de origem
    - Referências a variáveis são apenas reconhecidas, nunca avaliadas

Limites explícitos:
    - Não avalia expressões nem substitui variáveis
    - Não conhece widgets ou definições
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import AttrValueCoercionError
from ..errors import describe_value


_VAR_REF_RE = re.compile(r"^\{\{\s*([A-Za-z_][A-Za-z0-9_\-]*)\s*\}\}$")

_TRUE_LITERALS = {"true"}
_FALSE_LITERALS = {"false"}


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer() and math.isfinite(value):
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class PrimitiveValue:
    """Valor primitivo concreto: `kind` ∈ {string, number, boolean} e sua forma textual canônica."""

    kind: str
    raw: str

    @classmethod
    def string(cls, value: str) -> "PrimitiveValue":
        return cls(kind="string", raw=value)

    @classmethod
    def number(cls, value: Any) -> "PrimitiveValue":
        return cls(kind="number", raw=_format_number(value))

    @classmethod
    def boolean(cls, value: bool) -> "PrimitiveValue":
        return cls(kind="boolean", raw="true" if value else "false")

    def as_str(self) -> str:
        return self.raw

    def as_f64(self) -> float:
        try:
            return float(self.raw)
        except ValueError:
            raise AttrValueCoercionError(
                message=f"'{self.raw}' não é um número",
                details={"value": self.raw, "kind": self.kind, "expected": "number"},
            ) from None

    def as_bool(self) -> bool:
        lowered = self.raw.lower()
        if lowered in _TRUE_LITERALS:
            return True
        if lowered in _FALSE_LITERALS:
            return False
        raise AttrValueCoercionError(
            message=f"'{self.raw}' não é um booleano",
            details={"value": self.raw, "kind": self.kind, "expected": "boolean"},
        )

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class AttrValue:
    """
    Valor de atributo de widget.

    Exatamente um dos campos está preenchido:
        - concrete: valor primitivo já conhecido
        - var_ref: nome de variável a ser resolvida pela camada de renderização
    """

    concrete: Optional[PrimitiveValue] = None
    var_ref: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.concrete is None) == (self.var_ref is None):
            raise ValueError("AttrValue requires exactly one of concrete / var_ref")

    @classmethod
    def concrete_string(cls, value: str) -> "AttrValue":
        return cls(concrete=PrimitiveValue.string(value))

    @property
    def is_var_ref(self) -> bool:
        return self.var_ref is not None

    def to_dict(self) -> dict:
        if self.var_ref is not None:
            return {"var_ref": self.var_ref}
        return {"kind": self.concrete.kind, "value": self.concrete.raw}


def coerce_attr_value(value: Any) -> AttrValue:
    """
    Converte uma folha primitiva de configuração em `AttrValue`.

    Args:
        value: valor produzido pelo parser de configuração.

    Returns:
        AttrValue: valor tipado correspondente.

    Raises:
        AttrValueCoercionError: se o valor não for primitivo (hash, array, None, ...).
    """
    if isinstance(value, bool):
        return AttrValue(concrete=PrimitiveValue.boolean(value))

    if isinstance(value, (int, float)):
        return AttrValue(concrete=PrimitiveValue.number(value))

    if isinstance(value, str):
        match = _VAR_REF_RE.match(value)
        if match:
            return AttrValue(var_ref=match.group(1))
        return AttrValue(concrete=PrimitiveValue.string(value))

    raise AttrValueCoercionError(
        message=f"Valor não primitivo não pode ser usado como atributo: {describe_value(value)}",
        details={"value": describe_value(value), "type": type(value).__name__},
        hint="Use string, número ou booleano.",
    )
