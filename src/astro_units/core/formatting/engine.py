"""
Format Engine — рендеринг величин по шаблону

Шаблон токенизируется (см. tokens.py), после чего значения подставляются
одним проходом по сегментам:

    Angle.from_dms(12, 34, 56.789).format('+0d°0m\\'0s".3f')  →  '+012°34\\'56".789'
    Time.from_hms(1, 0, 0).format("0h:0m:0s.3f")               →  '01:00:00'

Правила:
- Разряд округления компонент = максимум N среди токенов Nf (default 9)
- Нулевая дробная часть удаляется вместе с непосредственно
  предшествующей литеральной точкой (нет хвостов ".000")
- При отсутствии токена '+' знак '-' ставится перед мажорной компонентой
- Шаблон без токенов возвращается как есть (после снятия экранирования)
"""

import logging
from dataclasses import dataclass
from typing import Final, Protocol

from astro_units.core.formatting.tokens import (
    MINOR_PAD_WIDTH,
    ComponentSlot,
    Segment,
    SegmentKind,
    TemplateGrammar,
    has_sign_token,
    max_fraction_places,
    tokenize,
)
from astro_units.core.math.numerical_safeguards import format_rounded, validate_finite
from astro_units.core.math.sexagesimal import (
    DEFAULT_ROUNDING_PLACE,
    SIGN_NEGATIVE,
    Components,
    decompose,
    sign_of,
)

logger = logging.getLogger(__name__)

DECIMAL_POINT: Final[str] = "."


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class RenderOptions:
    """
    Конфигурация рендеринга.

    pad_fraction: дополнять дробную часть нулями справа до N знаков
        вместо удаления нулевой дробной части
    default_rounding_place: разряд округления, если в шаблоне нет токенов Nf
    """

    pad_fraction: bool = False
    default_rounding_place: int = DEFAULT_ROUNDING_PLACE

    def __post_init__(self) -> None:
        if self.default_rounding_place < 0:
            raise ValueError(
                f"default_rounding_place must be non-negative, got {self.default_rounding_place}"
            )


DEFAULT_RENDER_OPTIONS: Final[RenderOptions] = RenderOptions()


# =============================================================================
# RENDERABLE PROTOCOL
# =============================================================================


class Renderable(Protocol):
    """Величина, которую можно отрендерить по шаблону."""

    @property
    def scalar(self) -> float: ...

    def continuous_value(self, letter: str) -> float: ...


# =============================================================================
# ENGINE
# =============================================================================


class FormatEngine:
    """
    Движок форматирования для одной грамматики (угол или время).

    Экземпляр не хранит состояния рендеринга и может разделяться
    между потоками.
    """

    def __init__(
        self,
        grammar: TemplateGrammar,
        options: RenderOptions | None = None,
    ):
        """
        Args:
            grammar: Грамматика шаблонов типа величины
            options: Конфигурация рендеринга (default: RenderOptions())
        """
        self.grammar = grammar
        self.options = options or DEFAULT_RENDER_OPTIONS

    def rounding_place(self, template: str) -> int:
        """Разряд округления компонент, определяемый шаблоном"""
        segments = tokenize(template, self.grammar)
        return max_fraction_places(segments, self.options.default_rounding_place)

    def render(self, template: str, quantity: Renderable) -> str:
        """
        Рендеринг величины по шаблону.

        Args:
            template: Шаблон форматирования
            quantity: Величина (scalar + continuous-представления)

        Returns:
            Отформатированная строка

        Raises:
            NonFiniteQuantityError: Если scalar равен NaN/Inf
        """
        scalar = quantity.scalar
        validate_finite(scalar, "scalar")

        segments = tokenize(template, self.grammar)
        place = max_fraction_places(segments, self.options.default_rounding_place)
        components = decompose(scalar, place)
        prefix_major = not has_sign_token(segments) and sign_of(scalar) == SIGN_NEGATIVE

        parts: list[str] = []
        last_kind: SegmentKind | None = None

        for segment in segments:
            kind = segment.kind

            if kind is SegmentKind.LITERAL:
                parts.append(segment.text)

            elif kind is SegmentKind.SIGN:
                parts.append(sign_of(scalar))

            elif kind is SegmentKind.CONTINUOUS:
                value = quantity.continuous_value(segment.unit)
                parts.append(format_rounded(value, segment.places))

            elif kind is SegmentKind.COMPONENT:
                parts.append(self._component(segment, components, prefix_major))

            elif kind is SegmentKind.FRACTION:
                digits = self._fraction(segment, components)
                if digits is None:
                    # Нулевая дробная часть: удаляем токен и точку перед ним
                    if last_kind is SegmentKind.LITERAL and parts[-1].endswith(DECIMAL_POINT):
                        parts[-1] = parts[-1][: -len(DECIMAL_POINT)]
                else:
                    parts.append(digits)

            last_kind = kind

        return "".join(parts)

    def _component(self, segment: Segment, components: Components, prefix_major: bool) -> str:
        if segment.slot is ComponentSlot.MAJOR:
            value, width = components.major, self.grammar.major_width
        elif segment.slot is ComponentSlot.MINOR1:
            value, width = components.minor1, MINOR_PAD_WIDTH
        else:
            value, width = components.minor2, MINOR_PAD_WIDTH

        text = f"{value:0{width}d}" if segment.padded else str(value)

        if prefix_major and segment.slot is ComponentSlot.MAJOR:
            return SIGN_NEGATIVE + text
        return text

    def _fraction(self, segment: Segment, components: Components) -> str | None:
        """Цифры дробной части; None если дробная часть должна быть скрыта"""
        digits = components.fraction[: segment.places]

        if self.options.pad_fraction:
            return digits.ljust(segment.places, "0")

        if not digits.strip("0"):
            return None
        return digits
