# src/widgetree/core/widgets/transform.py
"""
Transformer canônico: árvore de configuração → árvore de widgets.

Este módulo decide, para cada nó da configuração, qual das formas
ambíguas do formato ele representa e constrói o `WidgetUse` ou
`WidgetDefinition` correspondente.

Despacho por forma (widget-use):
    - hash com 1ª entrada `nome: {hash}`  → instanciação hash-style
      (atributos + `children` explícito)
    - hash com 1ª entrada `nome: [..]` / `nome: primitivo`
                                           → instanciação array-style
      (filhos posicionais, sem atributos)
    - hash vazio                           → EmptyWidgetUseError
    - primitivo                            → widget de texto implícito
    - array                                → AttrValueCoercionError

Despacho por forma (filhos):
    - array     → cada elemento é um widget-use, na ordem do documento
    - primitivo → um único widget de texto implícito
    - hash      → InvalidChildrenShapeError

Política de erros:
    - Fail-fast: o primeiro erro interrompe a construção, sem árvore parcial
    - Exceção deliberada: falha de coerção de um atributo hash-style
      apenas omite aquele atributo (comportamento de compatibilidade)

Limites explícitos:
    - Não carrega arquivos (ver `core.config.loader`)
    - Não resolve nomes de widgets contra definições
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..config.settings import TransformSettings
from ..errors import describe_value
from ..exceptions import (
    AttrValueCoercionError,
    EmptyWidgetUseError,
    InvalidChildrenShapeError,
    MaxDepthExceededError,
    MissingFieldError,
    NotAHashError,
    WidgetTreeException,
)
from ..values import AttrValue, coerce_attr_value
from .types import WidgetDefinition, WidgetUse

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = TransformSettings()

CHILDREN_KEY = "children"
STRUCTURE_KEY = "structure"
SIZE_X_KEY = "size_x"
SIZE_Y_KEY = "size_y"


def parse_widget_definition(
    name: str,
    config: Any,
    *,
    settings: Optional[TransformSettings] = None,
) -> WidgetDefinition:
    """
    Constrói uma `WidgetDefinition` a partir do valor encontrado sob `name`.

    Regras:
        - `config` deve ser um hash
        - `structure` é obrigatório e segue o algoritmo de widget-use
        - `size` é extraído em best-effort a partir de `size_x` e `size_y`;
          tamanho ausente, parcial ou malformado resulta em `None`

    Args:
        name (str): Nome da definição (chave sob a qual ela aparece).
        config (Any): Valor de configuração da definição.
        settings (Optional[TransformSettings]): Opções do transformer.

    Returns:
        WidgetDefinition: Definição construída.

    Raises:
        NotAHashError: Se `config` não for um hash.
        MissingFieldError: Se `structure` estiver ausente.
        WidgetTreeException: Qualquer erro da construção de `structure`,
            acrescido de `details["definition"]`.
    """
    if not isinstance(config, dict):
        raise NotAHashError(
            message=f"widget definition '{name}' must be a hash, got {type(config).__name__}",
            details={"definition": name, "type": type(config).__name__, "value": describe_value(config)},
        )

    if STRUCTURE_KEY not in config:
        raise MissingFieldError(
            message=f"structure must be set in widget definition '{name}'",
            details={"definition": name, "field": STRUCTURE_KEY},
            hint=f"Adicione `{STRUCTURE_KEY}: {{ <widget>: ... }}` à definição.",
        )

    try:
        structure = parse_widget_use(config[STRUCTURE_KEY], settings=settings)
    except WidgetTreeException as e:
        raise e.with_context(definition=name) from e

    return WidgetDefinition(name=name, structure=structure, size=_parse_size(config))


def parse_widget_use(
    config: Any,
    *,
    settings: Optional[TransformSettings] = None,
    _depth: int = 0,
) -> WidgetUse:
    """
    Constrói um `WidgetUse` a partir de um valor arbitrário de configuração.

    Apenas a primeira entrada de um hash é considerada: o formato espera
    hashes de entrada única nesta posição. Entradas extras são ignoradas.

    Raises:
        EmptyWidgetUseError: Se o hash não tiver entradas.
        AttrValueCoercionError: Se um valor não-hash não puder ser promovido
            a widget de texto.
        InvalidChildrenShapeError: Se `children` (ou o valor posicional) for um hash.
        MaxDepthExceededError: Se o aninhamento exceder `settings.max_depth`.
    """
    settings = settings or _DEFAULT_SETTINGS

    if _depth >= settings.max_depth:
        raise MaxDepthExceededError(
            message=f"widget tree nesting exceeds max_depth={settings.max_depth}",
            details={"max_depth": settings.max_depth},
            hint="Reduza o aninhamento ou aumente `transform.max_depth`.",
        )

    if isinstance(config, dict):
        if not config:
            raise EmptyWidgetUseError(
                message="tried to parse empty hash as widget use",
                details={},
                hint="Um widget-use precisa de exatamente uma entrada `nome: config`.",
            )

        entries = iter(config.items())
        widget_name, widget_config = next(entries)
        widget_name = str(widget_name)

        if len(config) > 1:
            logger.debug(
                "Widget use '%s' has extra keys, ignored: %s",
                widget_name,
                [str(k) for k, _ in entries],
            )

        if isinstance(widget_config, dict):
            return from_hash_definition(widget_name, widget_config, settings=settings, _depth=_depth)

        return WidgetUse(
            name=widget_name,
            children=parse_widget_use_children(
                widget_config, settings=settings, _owner=widget_name, _depth=_depth + 1
            ),
            attrs={},
        )

    if isinstance(config, list):
        # array só é válido em posição de filhos
        raise AttrValueCoercionError(
            message=f"a list cannot be used as a widget use: {describe_value(config)}",
            details={"value": describe_value(config), "type": "list"},
            hint="Envolva a lista em um widget, ex.: `{ box: [...] }`.",
        )

    return WidgetUse.simple_text(coerce_attr_value(config), settings=settings)


def from_hash_definition(
    widget_name: str,
    widget_config: Dict[str, Any],
    *,
    settings: Optional[TransformSettings] = None,
    _depth: int = 0,
) -> WidgetUse:
    """
    Gera um WidgetUse a partir da forma hash-style.

    Ex.: `{ layout: { orientation: "v", children: ["hi", "ho"] } }`
    """
    settings = settings or _DEFAULT_SETTINGS

    if CHILDREN_KEY in widget_config:
        children = parse_widget_use_children(
            widget_config[CHILDREN_KEY], settings=settings, _owner=widget_name, _depth=_depth + 1
        )
    else:
        children = []

    return WidgetUse(
        name=widget_name,
        children=children,
        attrs=_extract_attrs(widget_name, widget_config),
    )


def from_array_definition(
    widget_name: str,
    children: List[Any],
    *,
    settings: Optional[TransformSettings] = None,
    _depth: int = 0,
) -> WidgetUse:
    """
    Gera um WidgetUse a partir da forma array-style.

    Ex.: `{ layout: ["hi", "ho"] }`
    """
    settings = settings or _DEFAULT_SETTINGS
    return WidgetUse(
        name=widget_name,
        children=[parse_widget_use(c, settings=settings, _depth=_depth + 1) for c in children],
        attrs={},
    )


def parse_widget_use_children(
    config: Any,
    *,
    settings: Optional[TransformSettings] = None,
    _owner: Optional[str] = None,
    _depth: int = 0,
) -> List[WidgetUse]:
    """
    Constrói a lista ordenada de filhos a partir do valor em posição de filhos.

    Raises:
        InvalidChildrenShapeError: Se o valor for um hash.
        AttrValueCoercionError: Se um primitivo não puder ser promovido a texto.
    """
    settings = settings or _DEFAULT_SETTINGS

    if isinstance(config, dict):
        details: Dict[str, Any] = {"value": describe_value(config)}
        if _owner is not None:
            details["widget"] = _owner
        raise InvalidChildrenShapeError(
            message=(
                "children of a widget must either be a list of widgets or a primitive value, "
                f"but got hash: {describe_value(config)}"
            ),
            details=details,
            hint="Use uma lista: `children: [ { widget: ... } ]`.",
        )

    if isinstance(config, list):
        return [parse_widget_use(c, settings=settings, _depth=_depth) for c in config]

    return [WidgetUse.simple_text(coerce_attr_value(config), settings=settings)]


def _extract_attrs(widget_name: str, widget_config: Dict[str, Any]) -> Dict[str, AttrValue]:
    attrs: Dict[str, AttrValue] = {}
    for key, value in widget_config.items():
        if key == CHILDREN_KEY:
            continue
        # Compatibilidade: atributo não coercível é omitido em silêncio, ao
        # contrário da promoção de folhas, onde a falha é fatal. Mudar isso
        # altera quais configs são aceitas; requer decisão de produto.
        try:
            attrs[str(key).lower()] = coerce_attr_value(value)
        except AttrValueCoercionError as e:
            logger.debug("Dropping attribute '%s' of widget '%s': %s", key, widget_name, e)
    return attrs


def _parse_size(definition: Dict[str, Any]) -> Optional[Tuple[int, int]]:
    x = _as_int(definition.get(SIZE_X_KEY))
    y = _as_int(definition.get(SIZE_Y_KEY))
    if x is None or y is None:
        return None
    return (x, y)


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
