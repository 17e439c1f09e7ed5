# src/widgetree/core/__init__.py
"""
Core do Widgetree.

Este pacote reúne as responsabilidades essenciais para transformar uma
árvore genérica de configuração em uma árvore tipada de widgets.

Subpacotes:
    - config  → carregamento, merge e opções do transformer
    - values  → coerção de folhas primitivas em AttrValue
    - widgets → tipos, transformer e registry de definições

Módulos:
    - errors     → payload canônico e catálogo de tipos de erro
    - exceptions → exceções tipadas do transformer e do registry
"""
