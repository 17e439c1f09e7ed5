# src/widgetree/core/widgets/loader.py
"""
Carregamento de definições de widgets a partir de configuração.

Liga a camada de configuração (`core.config`) ao transformer: lê a seção
`widgets` de uma configuração resolvida, constrói cada `WidgetDefinition`
na ordem do documento e as registra em um `DefinitionRegistry`.

Formato esperado:

    transform:
      max_depth: 64
    widgets:
      bar:
        structure: { box: ["hello", "world"] }
        size_x: 200
        size_y: 30
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config.loader import load_config
from ..config.settings import TransformSettings
from ..exceptions import NotAHashError
from .registry import DefinitionRegistry
from .transform import parse_widget_definition

logger = logging.getLogger(__name__)

WIDGETS_KEY = "widgets"


def build_definitions(
    config: Dict[str, Any],
    *,
    settings: Optional[TransformSettings] = None,
) -> DefinitionRegistry:
    """
    Constrói o registry de definições a partir de uma configuração em memória.

    A seção `widgets` é opcional; quando presente, deve ser um hash.
    Quando `settings` não é informado, é lido da seção `transform`.

    Raises:
        NotAHashError: Se `widgets` não for um hash.
        InvalidSettingsError: Se a seção `transform` for inválida.
        WidgetTreeException: Primeiro erro de construção de definição (fail-fast).
        DuplicateDefinitionError: Se um nome aparecer mais de uma vez.
    """
    if settings is None:
        settings = TransformSettings.from_config(config)

    widgets = config.get(WIDGETS_KEY)
    registry = DefinitionRegistry()

    if widgets is None:
        return registry

    if not isinstance(widgets, dict):
        raise NotAHashError(
            message=f"'{WIDGETS_KEY}' must be a hash of widget definitions, got {type(widgets).__name__}",
            details={"field": WIDGETS_KEY, "type": type(widgets).__name__},
        )

    for name, definition_config in widgets.items():
        registry.add(parse_widget_definition(str(name), definition_config, settings=settings))

    logger.info("Loaded %d widget definitions", len(registry))
    return registry


def load_widget_definitions(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> DefinitionRegistry:
    """
    Carrega arquivo(s) de configuração e constrói o registry de definições.

    Args:
        defaults_path (str): Arquivo base (YAML/JSON), obrigatório.
        local_path (Optional[str]): Override local opcional.

    Returns:
        DefinitionRegistry: Definições na ordem do documento resolvido.
    """
    config = load_config(defaults_path=defaults_path, local_path=local_path)
    return build_definitions(config)
