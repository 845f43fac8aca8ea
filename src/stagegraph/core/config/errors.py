# src/stagegraph/core/config/errors.py
"""
Exceções canônicas da camada de configuração do stagegraph.

Este módulo define a hierarquia de exceções levantadas durante o
carregamento, o merge e a interpretação da configuração que governa
a construção e a validação de grafos de tasks.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais de configuração são falhas fatais
    - Nenhuma exceção daqui representa erro de construção de grafo

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do builder nem do registry
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do stagegraph.

    Permite captura genérica de falhas de configuração sem confundi-las
    com erros de construção de grafo (`GraphException`).
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório: sem ele não existe
    configuração efetiva válida. Nenhum default é inferido.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos aceitos: YAML (.yaml, .yml) e JSON (.json).
    O formato nunca é inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    O conteúdo raiz da configuração não é um dicionário.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"graph": {"allow_empty_loop": true}}
        - override: {"graph": "strict"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidGraphSettingsError(ConfigError):
    """
    A seção `graph` da configuração contém valores inválidos.

    Exemplos:
        - `allow_empty_loop` que não é booleano
        - `max_depth` que não é inteiro positivo nem `null`
    """
