# src/widgetree/core/config/merge.py
"""
Deep-merge de configuração de widgets.

Resolve a configuração efetiva a partir de um arquivo base de definições
e de um arquivo local de overrides.

Política de merge (v1):
    - chave em `replace_keys` → sobrescrita total, qualquer que seja o
      tipo (ex.: `structure`, cujo conteúdo é um widget-use e não um mapa
      de opções)
    - dict → merge recursivo por chave (preserva a ordem da base;
      chaves novas entram no fim, na ordem do override)
    - list → sobrescrita total (filhos de widget nunca são mesclados
      elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → ConfigTypeConflictError com o caminho da chave

Invariantes:
    - Nenhum input é mutado
    - A ordem das chaves é determinística (a ordem importa para o
      transformer: a primeira entrada de um hash nomeia o widget)
"""

from copy import deepcopy
from typing import AbstractSet, Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _type_family(value: Any) -> str:
    # int e float são intercambiáveis em overrides (ex.: size_x: 100 -> 100.0)
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__


def deep_merge(
    base: Dict[str, Any],
    override: Dict[str, Any],
    *,
    replace_keys: AbstractSet[str] = frozenset(),
    _path: Tuple[str, ...] = (),
) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre duas configurações.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: widgets.yaml).
        override (Dict[str, Any]): Overrides explícitos (ex.: widgets.local.yaml).
        replace_keys (AbstractSet[str]): Chaves cujo valor do override
            substitui o da base por inteiro, em qualquer nível.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se uma mesma chave tiver tipos incompatíveis.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        key_path = _path + (str(key),)

        if key not in result or key in replace_keys:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(
                base_value, override_value, replace_keys=replace_keys, _path=key_path
            )
            continue

        # list -> sobrescrita total
        if isinstance(override_value, list) and isinstance(base_value, list):
            result[key] = deepcopy(override_value)
            continue

        if _type_family(base_value) != _type_family(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{'.'.join(key_path)}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
