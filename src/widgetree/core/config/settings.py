# src/widgetree/core/config/settings.py
"""
Opções do transformer de widgets.

`TransformSettings` reúne os parâmetros que governam a construção da
árvore de widgets. Apenas `max_depth` é ajustável pela configuração
(seção `transform`); os nomes do widget de texto implícito são fixos.

`max_depth` é limitado por `max_depth_ceiling()`: cada nível de widget-use
consome alguns frames da pilha do interpretador, e o limite precisa ser
atingido antes do `RecursionError`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidSettingsError


DEFAULT_MAX_DEPTH = 128

# frames por nível de widget-use no pior caso (hash-style), com folga
# para a pilha de quem chama o transformer
FRAMES_PER_LEVEL = 6


def max_depth_ceiling() -> int:
    """Maior `max_depth` aceito sob o limite de recursão atual do interpretador."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL


def _check_max_depth(max_depth: Any) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise InvalidSettingsError(
            f"transform.max_depth deve ser inteiro positivo, recebido: {max_depth!r}"
        )
    ceiling = max_depth_ceiling()
    if max_depth > ceiling:
        raise InvalidSettingsError(
            f"transform.max_depth deve ser no máximo {ceiling}, recebido: {max_depth}"
        )


@dataclass(frozen=True)
class TransformSettings:
    """
    Parâmetros imutáveis do transformer.

    Campos:
        - max_depth: profundidade máxima de widget-uses aninhados
        - label_widget: nome do widget gerado para folhas primitivas
        - label_text_attr: atributo que recebe o valor da folha
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    label_widget: str = "label"
    label_text_attr: str = "text"

    def __post_init__(self) -> None:
        _check_max_depth(self.max_depth)

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "TransformSettings":
        """
        Lê a seção `transform` de uma configuração já carregada.

        Chaves desconhecidas são ignoradas. A ausência da seção resulta
        nas opções padrão.

        Raises:
            InvalidSettingsError: se a seção não for um dict ou `max_depth`
                não for um inteiro entre 1 e `max_depth_ceiling()`.
        """
        if not config:
            return cls()

        section = config.get("transform")
        if section is None:
            return cls()

        if not isinstance(section, dict):
            raise InvalidSettingsError(
                f"Seção 'transform' deve ser dict, recebido: {type(section).__name__}"
            )

        return cls(max_depth=section.get("max_depth", DEFAULT_MAX_DEPTH))
