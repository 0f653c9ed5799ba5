"""
Question Simplifier package.

A relay service that asks a language model for short titles and simpler
restatements of problems, plus the client-side timeline engine that keeps
each question and its chain of simplifications.
"""

from .core import create_fallback_title

__all__ = ["create_fallback_title"]
