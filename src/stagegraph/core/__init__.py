# src/stagegraph/core/__init__.py
"""
Core do stagegraph.

Componentes principais:
    - config     → carregamento, merge, hashing e leitura tipada da configuração
    - graph      → modelo de grafo de tasks, builder, registry e validação
    - errors     → payload serializável e catálogo de códigos de erro
    - exceptions → exceções tipadas

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Grafos construídos são imutáveis
    - Nenhuma dependência do engine de execução

Limites explícitos:
    - Não executa tasks
    - Não persiste grafos
"""
