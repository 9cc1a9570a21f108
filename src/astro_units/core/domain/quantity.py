"""
SexagesimalQuantity — базовая модель для Angle и Time

Immutable Pydantic модель с единственным хранимым значением `scalar`
(угловые секунды для Angle, секунды для Time). Все остальные
представления — чистые функции от scalar.

Арифметика (add/subtract/negate/multiply/divide) возвращает новый экземпляр.
Единственное изменяемое состояние — подсказка отображения active_format,
которую обновляет format() и использует str().
"""

from numbers import Real
from typing import ClassVar

from pydantic import BaseModel, Field, PrivateAttr

from astro_units.core.formatting import FormatEngine, RenderOptions, TemplateGrammar
from astro_units.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)
from astro_units.core.math.sexagesimal import (
    DEFAULT_ROUNDING_PLACE,
    Components,
    decompose,
    sign_of,
)


class SexagesimalQuantity(BaseModel):
    """
    Базовая sexagesimal величина.

    Подклассы задают GRAMMAR (буквы шаблона), FORMAT_DEFAULT и
    реализуют continuous_value() и _factor_of().
    """

    scalar: float = Field(..., description="Каноническое значение (asec для угла, sec для времени)")
    rounding_place: int = Field(
        default=DEFAULT_ROUNDING_PLACE,
        ge=0,
        description="Разряд округления при разложении на компоненты",
    )

    model_config = {"frozen": True}  # Immutable

    GRAMMAR: ClassVar[TemplateGrammar]
    FORMAT_DEFAULT: ClassVar[str]

    _active_format: str | None = PrivateAttr(default=None)

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    def _new(self, scalar: float) -> "SexagesimalQuantity":
        """Новый экземпляр того же типа с тем же rounding_place"""
        return type(self)(scalar=scalar, rounding_place=self.rounding_place)

    def with_rounding(self, place: int) -> "SexagesimalQuantity":
        """Копия с другим разрядом округления компонент"""
        return type(self)(scalar=self.scalar, rounding_place=place)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> str:
        """'+' или '-' (ноль положителен)"""
        return sign_of(self.scalar)

    @property
    def components(self) -> Components:
        """Разложение на (major, minor1, minor2, fraction) с rounding_place"""
        return decompose(self.scalar, self.rounding_place)

    @property
    def f(self) -> str:
        """Дробная часть секунд (цифры без точки, "" если ноль)"""
        return self.components.fraction

    def continuous_value(self, letter: str) -> float:
        """Continuous-представление для буквы шаблона (D, H, ...)"""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _factor_of(self, other: "Real | SexagesimalQuantity") -> float:
        """Безразмерный множитель из числа или величины того же типа"""
        raise NotImplementedError

    def _require_same_type(self, other: object) -> "SexagesimalQuantity":
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other

    def add(self, other: "SexagesimalQuantity") -> "SexagesimalQuantity":
        """Сумма двух величин (новый экземпляр)"""
        other = self._require_same_type(other)
        return self._new(self.scalar + other.scalar)

    def subtract(self, other: "SexagesimalQuantity") -> "SexagesimalQuantity":
        """Разность двух величин (новый экземпляр)"""
        other = self._require_same_type(other)
        return self._new(self.scalar - other.scalar)

    def negate(self) -> "SexagesimalQuantity":
        """Величина с противоположным знаком (новый экземпляр)"""
        return self._new(-self.scalar)

    def multiply(self, other: "Real | SexagesimalQuantity") -> "SexagesimalQuantity":
        """
        Умножение канонического значения на множитель.

        Множитель — число или величина того же типа, прочитанная в своей
        основной единице (градусы для угла, секунды для времени).
        """
        return self._new(self.scalar * self._factor_of(other))

    def divide(self, other: "Real | SexagesimalQuantity") -> "SexagesimalQuantity":
        """
        Деление канонического значения на множитель.

        Raises:
            ZeroDivisionError: Если множитель равен нулю
        """
        return self._new(self.scalar / self._factor_of(other))

    def is_close(
        self,
        other: "SexagesimalQuantity",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Сравнение scalar с учётом машинной точности"""
        other = self._require_same_type(other)
        return is_close(self.scalar, other.scalar, rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    @property
    def active_format(self) -> str:
        """Последний успешно применённый шаблон (или FORMAT_DEFAULT)"""
        return self._active_format or self.FORMAT_DEFAULT

    def format(self, template: str, options: RenderOptions | None = None) -> str:
        """
        Форматирование по шаблону.

        После успешного рендеринга шаблон сохраняется как active_format.

        Args:
            template: Шаблон, например FORMAT_DEFAULT
            options: Конфигурация рендеринга (pad_fraction и т.д.)

        Raises:
            NonFiniteQuantityError: Если scalar равен NaN/Inf
        """
        rendered = FormatEngine(self.GRAMMAR, options).render(template, self)
        self._active_format = template
        return rendered

    # -------------------------------------------------------------------------
    # Overrides
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.format(self.active_format)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.scalar == other.scalar

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.scalar))

    def __add__(self, other: "SexagesimalQuantity") -> "SexagesimalQuantity":
        return self.add(other)

    def __sub__(self, other: "SexagesimalQuantity") -> "SexagesimalQuantity":
        return self.subtract(other)

    def __neg__(self) -> "SexagesimalQuantity":
        return self.negate()
