# tests/core/widgets/test_parse_widget_definition.py
"""
Testes da construção de WidgetDefinition (`parse_widget_definition`).

Os testes asseguram que:
- `structure` é obrigatório e segue o algoritmo de widget-use
- o nome vem de quem chama, não do conteúdo
- `size` é extraído em best-effort e nunca parcialmente
- erros em `structure` carregam o nome da definição

Decisões arquiteturais:
    - Tamanho ausente, parcial ou malformado não é erro de validação
    - Definições que não são hash são rejeitadas explicitamente
"""

import pytest

try:
    from widgetree.core.exceptions import (
        EmptyWidgetUseError,
        MissingFieldError,
        NotAHashError,
    )
    from widgetree.core.widgets.transform import parse_widget_definition
    from widgetree.core.widgets.types import WidgetDefinition, WidgetUse
except Exception as e:  # noqa: BLE001
    parse_widget_definition = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que `parse_widget_definition` e `WidgetDefinition` estejam disponíveis.

    Invariantes:
        - Se os módulos existem, a função não produz efeitos colaterais
        - Não tenta fallback nem implementação alternativa
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing definition transformer. Implement:\n"
            "- src/widgetree/core/widgets/transform.py (parse_widget_definition)\n"
            "- src/widgetree/core/widgets/types.py (WidgetDefinition)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_parse_widget_definition():
    """
    Verifica a construção mínima de uma definição.

    Uma definição com apenas `structure` gera a estrutura correspondente,
    usa o nome fornecido por quem chama e não possui tamanho.
    """
    _require_imports()
    expected = WidgetDefinition(
        name="widget_name",
        structure=WidgetUse(name="foo", children=[], attrs={}),
        size=None,
    )
    assert parse_widget_definition("widget_name", {"structure": {"foo": {}}}) == expected


def test_definition_with_full_size():
    _require_imports()
    out = parse_widget_definition("bar", {"structure": {"foo": {}}, "size_x": 100, "size_y": 20})
    assert out.size == (100, 20)


def test_definition_size_from_integer_strings():
    _require_imports()
    out = parse_widget_definition("bar", {"structure": {"foo": {}}, "size_x": "100", "size_y": " 20 "})
    assert out.size == (100, 20)


@pytest.mark.parametrize(
    "size_keys",
    [
        {"size_x": 100},
        {"size_y": 20},
        {"size_x": 100, "size_y": "tall"},
        {"size_x": 1.5, "size_y": 20},
        {"size_x": True, "size_y": 20},
        {"size_x": [100], "size_y": 20},
    ],
)
def test_partial_or_malformed_size_is_none(size_keys):
    """
    Verifica que tamanho parcial ou malformado não aborta a definição.

    Invariantes:
        - `size` é `None` sempre que um dos lados estiver ausente ou inválido
        - A definição é construída normalmente
    """
    _require_imports()
    config = {"structure": {"foo": {}}}
    config.update(size_keys)
    out = parse_widget_definition("bar", config)
    assert out.size is None
    assert out.structure.name == "foo"


def test_missing_structure_raises():
    _require_imports()
    with pytest.raises(MissingFieldError) as exc:
        parse_widget_definition("bar", {"size_x": 10, "size_y": 10})
    assert exc.value.details == {"definition": "bar", "field": "structure"}


@pytest.mark.parametrize("config", ["text", 3, ["a"], None])
def test_non_hash_definition_raises(config):
    _require_imports()
    with pytest.raises(NotAHashError) as exc:
        parse_widget_definition("bar", config)
    assert exc.value.details["definition"] == "bar"


def test_structure_errors_carry_definition_name():
    _require_imports()
    with pytest.raises(EmptyWidgetUseError) as exc:
        parse_widget_definition("bar", {"structure": {}})
    assert exc.value.details["definition"] == "bar"
