# src/widgetree/core/config/loader.py
"""
Loader canônico de configuração de widgets.

Este módulo é responsável por carregar e resolver a árvore genérica de
configuração (hashes, arrays e primitivos) a partir da qual o transformer
constrói definições e usos de widgets.

A configuração é resolvida a partir de:
    - um arquivo base de definições (obrigatório)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via deep-merge determinístico

Princípios fundamentais:
    - O resultado é exatamente a árvore produzida pelo parser
      (`dict` / `list` / escalares), sem interpretação de widgets
    - Erros de leitura e parse são tratados como falhas fatais
    - A ordem das chaves do documento é preservada

Limites explícitos:
    - Não interpreta `structure`, `children` ou atributos
    - Não constrói WidgetUse ou WidgetDefinition
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

logger = logging.getLogger(__name__)

# widget-uses são substituídos por inteiro: mesclar chaves criaria hashes
# de múltiplas entradas, onde só a primeira nomeia o widget
WIDGET_USE_KEYS = frozenset({"structure"})


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml) via `yaml.safe_load`
        - JSON (.json)

    Decisões arquiteturais:
        - O formato é determinado pela extensão do arquivo
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário

    Args:
        path (Path): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        ConfigParseError: Se o conteúdo não puder ser parseado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    raw = path.read_text(encoding="utf-8")

    try:
        if suffix == ".json":
            data = json.loads(raw) if raw.strip() else None
        else:
            data = yaml.safe_load(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"Falha ao parsear {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de widgets.

    Política de resolução:
        - O arquivo base é obrigatório
        - O arquivo local é opcional e ignorado quando não existe
        - Quando presente, o local sempre tem prioridade (via `deep_merge`)
        - `structure` do override substitui a da base por inteiro

    Args:
        defaults_path (str): Caminho para o arquivo base de definições.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Árvore de configuração resolvida.

    Raises:
        ConfigFileNotFoundError: Se o arquivo base não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        ConfigParseError: Se o conteúdo não puder ser parseado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file), replace_keys=WIDGET_USE_KEYS)
        else:
            logger.debug("Override local ausente, usando apenas %s", defaults_path)

    return effective
