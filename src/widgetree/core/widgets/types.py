# src/widgetree/core/widgets/types.py
"""
Tipos canônicos da árvore de widgets do Widgetree.

Este módulo define as estruturas imutáveis produzidas pelo transformer e
consumidas pelo registry de definições e pela camada de renderização.

Componentes principais:
    - WidgetUse        → nó instanciado (nome, filhos ordenados, atributos)
    - WidgetDefinition → template nomeado (estrutura + tamanho opcional)

Princípios fundamentais:
    - Tipos são imutáveis (frozen) e construídos uma única vez
    - Cada nó possui exclusivamente seus filhos (sem subárvores compartilhadas)
    - A ordem dos filhos é a ordem do documento

Invariantes:
    - Uma folha primitiva vira sempre `label` com um único atributo `text`
    - Chaves de atributo são minúsculas
    - WidgetDefinition sempre possui `structure`

Limites explícitos:
    - Não resolve nomes de widgets contra definições
    - Não renderiza nem avalia atributos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..config.settings import TransformSettings
from ..exceptions import MissingAttributeError
from ..values import AttrValue


_DEFAULT_SETTINGS = TransformSettings()


@dataclass(frozen=True)
class WidgetUse:
    """
    Nó instanciado da árvore de widgets.

    Campos:
        - name: widget primitivo ou nome de uma WidgetDefinition
        - children: filhos na ordem em que aparecem na configuração
        - attrs: atributos com chaves minúsculas (última escrita vence)

    Decisões arquiteturais:
        - Igualdade é estrutural: formas equivalentes da configuração
          (array-shorthand e hash com `children`) produzem nós iguais
        - A leitura de atributos ausentes é um erro tipado, nunca `None`
    """

    name: str
    children: List["WidgetUse"] = field(default_factory=list)
    attrs: Dict[str, AttrValue] = field(default_factory=dict)

    @classmethod
    def simple_text(
        cls,
        text: AttrValue,
        *,
        settings: Optional[TransformSettings] = None,
    ) -> "WidgetUse":
        """Widget de texto implícito gerado a partir de uma folha primitiva."""
        settings = settings or _DEFAULT_SETTINGS
        return cls(
            name=settings.label_widget,
            children=[],
            attrs={settings.label_text_attr: text},
        )

    def get_attr(self, key: str) -> AttrValue:
        """
        Retorna o valor do atributo `key`.

        Raises:
            MissingAttributeError: se o atributo não existir neste widget.
        """
        try:
            return self.attrs[key]
        except KeyError:
            raise MissingAttributeError(
                message=f"attribute '{key}' missing from widget use of '{self.name}'",
                details={"key": key, "widget": self.name},
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attrs": {k: v.to_dict() for k, v in self.attrs.items()},
            "children": [c.to_dict() for c in self.children],
        }


@dataclass(frozen=True)
class WidgetDefinition:
    """
    Template nomeado de widget.

    O `name` é definido por quem chama (a chave sob a qual a definição
    aparece na configuração) e não é derivado do conteúdo. `size` só existe
    quando `size_x` e `size_y` estão ambos presentes e são inteiros.
    """

    name: str
    structure: WidgetUse
    size: Optional[Tuple[int, int]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "structure": self.structure.to_dict(),
            "size": list(self.size) if self.size is not None else None,
        }
