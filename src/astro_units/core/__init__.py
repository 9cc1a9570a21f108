"""
Core domain models, mathematical primitives, and contracts.

Содержит физические величины, sexagesimal-арифметику, движок
форматирования шаблонов и JSON Schema контракты.
"""
