# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Widgetree.

Garantem que o pacote pode ser importado e que o namespace público
expõe os pontos de entrada do transformer.

Limites explícitos:
    - Não testar lógica de transformação
    - Não acumular asserts funcionais
"""


def test_smoke():
    import widgetree

    for name in ("parse_widget_use", "parse_widget_definition", "load_widget_definitions"):
        assert hasattr(widgetree, name)
