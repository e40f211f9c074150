# src/piperator/core/assembly/__init__.py
"""Montagem declarativa de Pipelines a partir de configuração + StepRegistry."""

from .assembler import assemble_pipeline

__all__ = ["assemble_pipeline"]
