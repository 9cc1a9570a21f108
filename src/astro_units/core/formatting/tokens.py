"""
Template Tokens — грамматика и токенизатор шаблонов форматирования

Шаблон разбирается за один проход слева направо в последовательность
сегментов (literal | sign | continuous | component | fraction). Подстановка
значений выполняется отдельно, одним проходом по сегментам, поэтому
вставленное значение никогда не может быть принято за токен.

Токены (на примере грамматики угла `d m s f D R +`):
    +      знак: '+' или '-'
    0d     целая компонента с ведущими нулями
    d      целая компонента без ведущих нулей
    9D     continuous-значение, округлённое до 9 знаков (D без цифры → 0 знаков)
    3f     первые 3 цифры дробной части секунд
    asec.  continuous-значение в именованной единице (9 знаков, без хвостовых нулей)
    asec   то же, округлённое до целого (слова задаются grammar.words)
    \\d    литерал 'd' (экранирование зарезервированного символа)

Любой другой символ — литерал. Неизвестные буквы проходят без изменений.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Final

logger = logging.getLogger(__name__)

ESCAPE_CHAR: Final[str] = "\\"
PAD_DIGIT: Final[str] = "0"
DIGITS: Final[str] = "0123456789"

# Ширина минорных компонент с ведущими нулями
MINOR_PAD_WIDTH: Final[int] = 2

# Знаков для токена-слова с точкой ("asec.")
WORD_DECIMAL_PLACES: Final[int] = 9
WORD_DECIMAL_MARK: Final[str] = "."


# =============================================================================
# ENUMS
# =============================================================================


class SegmentKind(str, Enum):
    """Тип сегмента шаблона"""

    LITERAL = "literal"
    SIGN = "sign"
    CONTINUOUS = "continuous"
    COMPONENT = "component"
    FRACTION = "fraction"


class ComponentSlot(str, Enum):
    """Позиция целой компоненты в разложении"""

    MAJOR = "major"
    MINOR1 = "minor1"
    MINOR2 = "minor2"


# =============================================================================
# GRAMMAR
# =============================================================================


@dataclass(frozen=True)
class TemplateGrammar:
    """
    Набор зарезервированных символов шаблона для конкретного типа величины.

    Угол:  major='d', minor1='m', minor2='s', continuous='DR', major_width=3,
           words=('asec', 'amin', 'mas')
    Время: major='h', minor1='m', minor2='s', continuous='YWDHMS', major_width=2

    words — многобуквенные continuous-токены; распознаются раньше
    однобуквенных, самое длинное слово первым.
    """

    major: str
    minor1: str
    minor2: str
    continuous: str
    major_width: int
    fraction: str = "f"
    sign: str = "+"
    words: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        letters = (self.major, self.minor1, self.minor2, self.fraction, self.sign)
        if len(set(letters)) != len(letters) or set(letters) & set(self.continuous):
            raise ValueError(f"Template grammar letters must be distinct: {self}")
        if any(len(word) < 2 for word in self.words):
            raise ValueError(f"Template grammar words must have at least two letters: {self.words}")

    def match_word(self, template: str, start: int) -> str | None:
        """Слово из words, начинающееся в позиции start (самое длинное)"""
        for word in sorted(self.words, key=len, reverse=True):
            if template.startswith(word, start):
                return word
        return None

    @property
    def reserved(self) -> frozenset[str]:
        """Все символы, которые можно экранировать обратным слэшем"""
        return frozenset(
            self.major + self.minor1 + self.minor2 + self.fraction + self.sign + self.continuous
        )

    def slot_of(self, char: str) -> ComponentSlot | None:
        """Позиция компоненты для буквы, None если буква не компонента"""
        if char == self.major:
            return ComponentSlot.MAJOR
        if char == self.minor1:
            return ComponentSlot.MINOR1
        if char == self.minor2:
            return ComponentSlot.MINOR2
        return None

    def is_continuous(self, char: str) -> bool:
        return char in self.continuous


# =============================================================================
# SEGMENTS
# =============================================================================


@dataclass(frozen=True)
class Segment:
    """
    Один сегмент разобранного шаблона.

    Для LITERAL значим только text; для CONTINUOUS — unit и places;
    для COMPONENT — slot и padded; для FRACTION — places.
    """

    kind: SegmentKind
    text: str = ""
    unit: str = ""
    slot: ComponentSlot | None = None
    places: int = 0
    padded: bool = False


def _literal(text: str) -> Segment:
    return Segment(kind=SegmentKind.LITERAL, text=text)


# =============================================================================
# TOKENIZER
# =============================================================================


def _scan(template: str, grammar: TemplateGrammar) -> list[Segment]:
    segments: list[Segment] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            segments.append(_literal("".join(buffer)))
            buffer.clear()

    i = 0
    length = len(template)
    while i < length:
        char = template[i]
        following = template[i + 1] if i + 1 < length else ""

        # \X → литерал X для зарезервированных символов
        if char == ESCAPE_CHAR and following in grammar.reserved:
            buffer.append(following)
            i += 2
            continue

        word = grammar.match_word(template, i)
        if word is not None:
            flush()
            end = i + len(word)
            if template.startswith(WORD_DECIMAL_MARK, end):
                places, end = WORD_DECIMAL_PLACES, end + len(WORD_DECIMAL_MARK)
            else:
                places = 0
            segments.append(Segment(kind=SegmentKind.CONTINUOUS, unit=word, places=places))
            i = end
            continue

        if char == grammar.sign:
            flush()
            segments.append(Segment(kind=SegmentKind.SIGN))
            i += 1
            continue

        if char in DIGITS and following:
            places = int(char)

            if grammar.is_continuous(following):
                flush()
                segments.append(
                    Segment(kind=SegmentKind.CONTINUOUS, unit=following, places=places)
                )
                i += 2
                continue

            if following == grammar.fraction:
                flush()
                segments.append(Segment(kind=SegmentKind.FRACTION, places=places))
                i += 2
                continue

            slot = grammar.slot_of(following)
            if char == PAD_DIGIT and slot is not None:
                flush()
                segments.append(
                    Segment(kind=SegmentKind.COMPONENT, unit=following, slot=slot, padded=True)
                )
                i += 2
                continue

        if grammar.is_continuous(char):
            flush()
            segments.append(Segment(kind=SegmentKind.CONTINUOUS, unit=char, places=0))
            i += 1
            continue

        slot = grammar.slot_of(char)
        if slot is not None:
            flush()
            segments.append(Segment(kind=SegmentKind.COMPONENT, unit=char, slot=slot))
            i += 1
            continue

        buffer.append(char)
        i += 1

    flush()
    return segments


@lru_cache(maxsize=256)
def tokenize(template: str, grammar: TemplateGrammar) -> tuple[Segment, ...]:
    """
    Разбор шаблона в последовательность сегментов за один проход.

    Результат кэшируется по (template, grammar).

    Args:
        template: Шаблон, например '+0d°0m\\'0s".3f'
        grammar: Грамматика типа величины

    Returns:
        Кортеж сегментов; соседние литеральные символы объединены
    """
    segments = tuple(_scan(template, grammar))
    logger.debug("Tokenized template %r into %d segments", template, len(segments))
    return segments


def max_fraction_places(segments: tuple[Segment, ...], default: int) -> int:
    """
    Максимальное количество знаков среди fraction-токенов.

    Определяет разряд округления для разложения на компоненты.
    Если fraction-токенов нет — возвращается default.
    """
    places = [s.places for s in segments if s.kind is SegmentKind.FRACTION]
    return max(places) if places else default


def has_sign_token(segments: tuple[Segment, ...]) -> bool:
    return any(s.kind is SegmentKind.SIGN for s in segments)
