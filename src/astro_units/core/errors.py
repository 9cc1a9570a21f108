"""
Исключения пакета astro_units.

Все ошибки локальные и синхронные: поднимаются в точке неверного
использования, без retry и без частичных результатов.
"""


class UnitsError(Exception):
    """Базовое исключение для всех ошибок пакета."""

    pass


class InvalidUnitError(UnitsError, ValueError):
    """
    Запрошена неизвестная единица измерения или именованное представление.

    Например: Distance.create(1, "furlong") или Angle.to("grad").
    """

    def __init__(self, unit: object, kind: str, allowed: list[str]):
        self.unit = unit
        self.kind = kind
        self.allowed = allowed
        super().__init__(
            f"{unit!r} is not a valid {kind} unit (expected one of: {', '.join(allowed)})"
        )


class NonFiniteQuantityError(UnitsError, ValueError):
    """
    Величина содержит NaN/Inf там, где требуется конечное значение.

    Поднимается при форматировании и разложении на компоненты:
    целочисленные компоненты не могут представить NaN/Inf.
    """

    pass
