# src/widgetree/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Widgetree.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento de arquivos de configuração de widgets, o merge de overrides
locais e a leitura das opções do transformer.

Erros de estrutura de widgets (hash vazio, `structure` ausente, filhos
inválidos) não pertencem a esta hierarquia: eles são exceções tipadas do
transformer, definidas em `widgetree.core.exceptions`.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa erro de construção de widget

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do transformer nem do registry
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados a arquivos e opções de configuração.

    Permite captura genérica de falhas de carregamento, distinguindo-as
    de falhas de construção da árvore de widgets.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O arquivo local de override é opcional e nunca levanta este erro
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class ConfigParseError(ConfigError):
    """Conteúdo YAML/JSON sintaticamente inválido."""


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).

    Listas ou valores escalares no root são inválidos: definições de
    widgets são sempre indexadas por nome.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"widgets": {"bar": {"structure": {...}}}}
        - override: {"widgets": {"bar": "oops"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """Seção `transform` malformada ou com valores fora do domínio permitido."""
