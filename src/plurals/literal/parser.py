"""
Literal Parser — Разбор числового литерала на структурные части

CLDR: UTS #35, Part 3 (Plural Operand Meanings)

Грамматика литерала (строка должна совпадать целиком):

    [sign] digits ['.' digits] [('e'|'E'|'c'|'C') [sign] digits]

- sign: необязательный '+' / '-' (отсутствует → "")
- integer digits: обязательная последовательность цифр 0-9
- fraction digits: цифры после '.' (отсутствуют → "")
- exponent: цифры после маркера e/E (scientific) или c/C (compact),
  с необязательным знаком (отсутствует → 0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Литерал никогда не проходит через float
2. Несовпадение с грамматикой → InvalidNumericLiteral сразу, до любой арифметики
3. Отсутствующие группы заменяются значениями по умолчанию сразу после match
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Маркеры экспоненты по умолчанию: scientific (e/E) и compact (c/C)
DEFAULT_EXPONENT_MARKERS: Final[str] = "eEcC"

# Максимальная |экспонента| по умолчанию: сдвиг цифр стоит O(|exponent|) памяти
DEFAULT_MAX_EXPONENT: Final[int] = 10_000


# =============================================================================
# DIGIT CONVERSION
# =============================================================================


def digits_to_int(digits: str) -> int:
    """
    Строка цифр (с необязательным знаком) → int без лимита длины.

    int(str) отклоняет строки длиннее sys.get_int_max_str_digits() (4300
    по умолчанию); конверсия через Decimal этого лимита не имеет.

    Examples:
        >>> digits_to_int("-0042")
        -42
        >>> digits_to_int("")
        0
    """
    if not digits:
        return 0
    return int(Decimal(digits))


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNumericLiteral(ValueError):
    """
    Литерал не соответствует грамматике числового литерала.

    Ошибка фатальна только для одного запроса форматирования:
    глобальное состояние не изменяется, повтор разбора бессмысленен.
    """

    def __init__(self, literal: object, reason: str):
        self.literal = literal
        self.reason = reason
        super().__init__(f"Invalid numeric literal {literal!r}: {reason}")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LiteralParts:
    """Структурные части литерала (после подстановки значений по умолчанию)."""

    sign: str
    integer_digits: str
    fraction_digits: str
    exponent: int


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LiteralParserConfig:
    """Конфигурация парсера литералов.

    Параметры грамматики и ограничения на входные данные.
    """

    # Символы, допустимые в качестве маркера экспоненты
    exponent_markers: str = DEFAULT_EXPONENT_MARKERS

    # Максимальная длина литерала (None — без ограничения)
    max_literal_length: int | None = None

    # Максимальное абсолютное значение экспоненты
    max_exponent: int = DEFAULT_MAX_EXPONENT


# =============================================================================
# PARSER
# =============================================================================


class LiteralParser:
    """Парсер числовых литералов.

    Компилирует грамматику один раз при создании; дальше используется
    только для чтения, поэтому экземпляр безопасно разделять между потоками.
    """

    def __init__(self, config: LiteralParserConfig | None = None):
        """Инициализация парсера.

        Args:
            config: конфигурация парсера (опционально, используется default)

        Raises:
            ValueError: если конфигурация некорректна
        """
        self.config = config or LiteralParserConfig()

        markers = self.config.exponent_markers
        if not markers:
            raise ValueError("exponent_markers must not be empty")
        if any(ch.isdigit() or ch in "+-." for ch in markers):
            raise ValueError(f"exponent_markers contain reserved characters: {markers!r}")

        if self.config.max_literal_length is not None and self.config.max_literal_length <= 0:
            raise ValueError(
                f"max_literal_length must be positive, got {self.config.max_literal_length}"
            )
        if self.config.max_exponent < 0:
            raise ValueError(f"max_exponent must be non-negative, got {self.config.max_exponent}")

        self._pattern = re.compile(
            r"(?P<sign>[+-])?"
            r"(?P<int>[0-9]+)"
            r"(?:\.(?P<frac>[0-9]+))?"
            rf"(?:[{re.escape(markers)}](?P<exp>[+-]?[0-9]+))?"
        )

    def parse(self, literal: str) -> LiteralParts:
        """Разбор литерала на части.

        Args:
            literal: числовой литерал (например, '1.50', '-3.40', '1.2c6')

        Returns:
            LiteralParts с подставленными значениями по умолчанию

        Raises:
            InvalidNumericLiteral: если литерал не соответствует грамматике
        """
        if not isinstance(literal, str):
            raise self._reject(literal, f"expected str, got {type(literal).__name__}")

        max_length = self.config.max_literal_length
        if max_length is not None and len(literal) > max_length:
            raise self._reject(literal, f"length {len(literal)} exceeds {max_length}")

        match = self._pattern.fullmatch(literal)
        if match is None:
            raise self._reject(literal, "does not match numeric literal grammar")

        exponent = digits_to_int(match.group("exp") or "0")
        if abs(exponent) > self.config.max_exponent:
            raise self._reject(
                literal, f"exponent magnitude exceeds {self.config.max_exponent}"
            )

        return LiteralParts(
            sign=match.group("sign") or "",
            integer_digits=match.group("int"),
            fraction_digits=match.group("frac") or "",
            exponent=exponent,
        )

    @staticmethod
    def _reject(literal: object, reason: str) -> InvalidNumericLiteral:
        logger.debug("Rejected numeric literal %r: %s", literal, reason)
        return InvalidNumericLiteral(literal, reason)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Парсер с конфигурацией по умолчанию
_DEFAULT_PARSER = LiteralParser()


def parse_literal(literal: str, config: LiteralParserConfig | None = None) -> LiteralParts:
    """
    Разбор литерала парсером по умолчанию (или с заданной конфигурацией).

    Args:
        literal: числовой литерал
        config: конфигурация парсера (опционально)

    Returns:
        LiteralParts

    Raises:
        InvalidNumericLiteral: если литерал не соответствует грамматике

    Examples:
        >>> parse_literal("-3.40")
        LiteralParts(sign='-', integer_digits='3', fraction_digits='40', exponent=0)
        >>> parse_literal("1.2c6")
        LiteralParts(sign='', integer_digits='1', fraction_digits='2', exponent=6)
    """
    parser = _DEFAULT_PARSER if config is None else LiteralParser(config)
    return parser.parse(literal)
