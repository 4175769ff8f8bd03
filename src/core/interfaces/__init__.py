"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan clases concretas.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
