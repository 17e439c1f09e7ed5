# tests/conftest.py
"""
Fixtures compartilhados para testes do Widgetree.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML de definições de widgets (base + override local)
- árvores de configuração já parseadas (dict/list/escalares)
- construtores de AttrValue e widgets de texto implícitos

O objetivo destas fixtures é permitir testes do core (config, values,
widgets) sem depender de um parser real de configuração: os valores
fornecidos têm exatamente a forma produzida por `yaml.safe_load`.

Decisões arquiteturais:
    - YAML fornecido como string; a escrita em disco fica a cargo do teste (tmp_path)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Dados retornados são determinísticos e isolados

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def widgets_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML base de definições de widgets.

    Representa o conteúdo típico de um arquivo `widgets.yaml`, cobrindo as
    duas formas de instanciação (hash-style e array-style), uma folha
    primitiva em posição de filho e uma definição com tamanho fixo.

    Decisões arquiteturais:
        - A ordem das definições é relevante (o registry a preserva)
        - `greeting` possui tamanho completo; `clock` não possui tamanho

    Usado por:
        - Testes do loader de config
        - Testes de load_widget_definitions
        - Testes end-to-end

    Returns:
        str: Conteúdo YAML do arquivo base.
    """

    return """\
transform:
  max_depth: 32
widgets:
  greeting:
    structure:
      box:
        orientation: v
        children:
          - label:
              text: hello
          - "world"
    size_x: 200
    size_y: 30
  clock:
    structure:
      label:
        text: "{{ time }}"
"""


@pytest.fixture
def widgets_local_yaml() -> str:
    """
    Fixture que fornece um YAML de override local.

    Sobrescreve apenas `size_y` de `greeting` e acrescenta a definição
    `status`, escrita na forma array-style.

    Returns:
        str: Conteúdo YAML do override local.
    """

    return """\
widgets:
  greeting:
    size_y: 40
  status:
    structure:
      row: ["a", "b"]
"""


# =====================================================
# Widget tree fixtures
# =====================================================

@pytest.fixture
def complex_widget_config() -> dict:
    """Widget-use hash-style com atributo e dois filhos `child` (um vazio, um com texto)."""
    return {
        "widget_name": {
            "value": "test",
            "children": [
                {"child": {}},
                {"child": {"children": ["hi"]}},
            ],
        }
    }


@pytest.fixture
def text():
    """
    Fixture factory: `text("hi")` → AttrValue concreto do tipo string.

    Returns:
        Callable[[str], AttrValue]
    """
    from widgetree.core.values import AttrValue

    return AttrValue.concrete_string


@pytest.fixture
def label(text):
    """
    Fixture factory: `label("hi")` → widget de texto implícito esperado.

    Returns:
        Callable[[str], WidgetUse]
    """
    from widgetree.core.widgets.types import WidgetUse

    def _label(value: str):
        return WidgetUse(name="label", children=[], attrs={"text": text(value)})

    return _label
