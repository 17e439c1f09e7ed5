# tests/core/widgets/test_widget_use_get_attr.py
"""
Testes de leitura de atributos (`WidgetUse.get_attr`) e serialização.
"""

import json

import pytest

try:
    from widgetree.core.exceptions import MissingAttributeError
    from widgetree.core.widgets.transform import parse_widget_definition, parse_widget_use
except Exception as e:  # noqa: BLE001
    parse_widget_use = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing widgets modules. Import error: {_IMPORT_ERR}")


def test_get_attr_returns_value(text):
    _require_imports()
    widget = parse_widget_use({"button": {"onclick": "notify"}})
    assert widget.get_attr("onclick") == text("notify")


def test_get_attr_missing_names_key_and_widget():
    """
    Verifica que a ausência de atributo produz erro tipado com contexto.

    A mensagem e os details devem nomear tanto a chave quanto o widget,
    para que o renderer produza um diagnóstico útil.
    """
    _require_imports()
    widget = parse_widget_use({"button": {"onclick": "notify"}})
    with pytest.raises(MissingAttributeError) as exc:
        widget.get_attr("label")
    assert exc.value.details == {"key": "label", "widget": "button"}
    assert "label" in str(exc.value) and "button" in str(exc.value)


def test_get_attr_is_case_sensitive_on_lookup():
    _require_imports()
    widget = parse_widget_use({"button": {"OnClick": "notify"}})
    with pytest.raises(MissingAttributeError):
        widget.get_attr("OnClick")


def test_to_dict_is_json_serializable():
    _require_imports()
    definition = parse_widget_definition(
        "bar",
        {"structure": {"box": {"spacing": 4, "children": ["hi", {"label": {"text": "{{ t }}"}}]}}, "size_x": 1, "size_y": 2},
    )
    data = json.loads(json.dumps(definition.to_dict()))
    assert data["size"] == [1, 2]
    assert data["structure"]["attrs"] == {"spacing": {"kind": "number", "value": "4"}}
    assert data["structure"]["children"][0] == {
        "name": "label",
        "attrs": {"text": {"kind": "string", "value": "hi"}},
        "children": [],
    }
    assert data["structure"]["children"][1]["attrs"] == {"text": {"var_ref": "t"}}
