# tests/e2e/test_widget_config_e2e.py
"""
Teste end-to-end: arquivo YAML → DefinitionRegistry → árvore de widgets.

Cobre o caminho completo usado pela camada de renderização: carregamento
do arquivo base com override local, construção das definições e leitura
de atributos pelos nós da árvore resultante.
"""

from pathlib import Path

from widgetree import (
    AttrValue,
    WidgetUse,
    load_widget_definitions,
)


def test_widget_config_end_to_end(tmp_path: Path, widgets_defaults_yaml, widgets_local_yaml, label, text):
    defaults = tmp_path / "widgets.yaml"
    local = tmp_path / "widgets.local.yaml"
    defaults.write_text(widgets_defaults_yaml, encoding="utf-8")
    local.write_text(widgets_local_yaml, encoding="utf-8")

    registry = load_widget_definitions(defaults_path=str(defaults), local_path=str(local))

    greeting = registry.get("greeting")
    assert greeting.size == (200, 40)
    assert greeting.structure == WidgetUse(
        name="box",
        children=[
            WidgetUse(name="label", children=[], attrs={"text": text("hello")}),
            label("world"),
        ],
        attrs={"orientation": text("v")},
    )

    clock = registry.get("clock").structure
    assert clock.get_attr("text") == AttrValue(var_ref="time")

    status = registry.get("status")
    assert status.structure == WidgetUse(name="row", children=[label("a"), label("b")], attrs={})
    assert status.to_dict()["size"] is None
