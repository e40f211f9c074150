# src/piperator/core/__init__.py
"""
Core do Piperator.

Componentes principais:
    - pipeline   → Result, contratos de Step, Pipeline, registry, RunContext, tracing
    - builder    → DSL de construção com dispatch para o contexto do chamador
    - config     → carregamento, merge e hashing de configuração
    - assembly   → montagem declarativa de Pipelines a partir de configuração
    - errors / exceptions → catálogo de erros e exceções tipadas

Princípios fundamentais:
    - Composição síncrona e em processo, sem efeitos colaterais próprios
    - Falhas de Step são valores; exceções de Step propagam intactas
    - Validação tardia: compor é permissivo, executar é estrito

Limites explícitos:
    - Não agenda nem paraleliza execução
    - Não define retry, timeout ou semântica distribuída
"""
