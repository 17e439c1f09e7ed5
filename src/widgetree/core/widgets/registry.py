# src/widgetree/core/widgets/registry.py
"""
Registro de definições de widgets.

Este módulo define o `DefinitionRegistry`, responsável por armazenar as
`WidgetDefinition` construídas pelo transformer e garantir a unicidade de
seus nomes antes que a camada de renderização as consulte.

Decisões arquiteturais:
    - A ordem de registro é mantida separadamente da estrutura de armazenamento
    - Nome duplicado é erro fatal, detectado no momento do registro
    - O registry não resolve widget-uses contra definições

Invariantes:
    - Cada nome registrado é único
    - `list()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não constrói definições (ver `transform`)
    - Não conhece widgets primitivos embutidos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from ..exceptions import DuplicateDefinitionError, UnknownDefinitionError
from .types import WidgetDefinition


@dataclass
class DefinitionRegistry:
    """
    Registro canônico de WidgetDefinitions indexado por nome.

    Decisões arquiteturais:
        - A validação de unicidade ocorre no `add`
        - A estrutura interna não é exposta diretamente
    """

    _definitions: Dict[str, WidgetDefinition] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, definition: WidgetDefinition) -> None:
        name = definition.name
        if not isinstance(name, str) or not name.strip():
            raise ValueError("definition.name must be a non-empty string")

        if name in self._definitions:
            raise DuplicateDefinitionError(
                message=f"Duplicate widget definition: {name}",
                details={"definition": name},
            )

        self._definitions[name] = definition
        self._order.append(name)

    def get(self, name: str) -> WidgetDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownDefinitionError(
                message=f"Unknown widget definition: {name}",
                details={"definition": name, "known": list(self._order)},
            ) from None

    def list(self) -> List[WidgetDefinition]:
        return [self._definitions[n] for n in self._order]

    def names(self) -> List[str]:
        return list(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[WidgetDefinition]:
        return iter(self.list())
