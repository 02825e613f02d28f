"""
Operand Calculator — CLDR plural operands из числового литерала

CLDR: UTS #35, Part 3 (Plural Operand Meanings)

Семь чистых функций, каждая принимает литерал (str / int) или ExactDecimal
и возвращает один операнд:

    n — абсолютное значение (целое или дробное)
    i — цифры целой части
    f — видимые дробные цифры, с хвостовыми нулями
    t — видимые дробные цифры, без хвостовых нулей
    v — количество видимых дробных цифр, с хвостовыми нулями
    w — количество видимых дробных цифр, без хвостовых нулей
    e — экспонента (scientific / compact)

ПОРЯДОК ПРЕОБРАЗОВАНИЙ ФИКСИРОВАН:
1. n считается БЕЗ apply_exponent: abs → strip → to_value
2. i/f/t/v/w считаются ПОСЛЕ apply_exponent
3. e — исходная экспонента, нормализация её не затрагивает

Изменение порядка меняет выбор plural-категории для литералов с экспонентой.
"""

from decimal import Decimal
from typing import NamedTuple, Union

from src.plurals.domain.exact_decimal import ExactDecimal

# Допустимый вход калькулятора
Numeric = Union[str, int, ExactDecimal]


# =============================================================================
# RESULT
# =============================================================================


class PluralOperands(NamedTuple):
    """Упорядоченный набор операндов (n, i, f, t, v, w, e)."""

    n: int | float
    i: int
    f: int
    t: int
    v: int
    w: int
    e: int

    def to_dict(self) -> dict[str, int | float]:
        """Операнды как dict для plural-селектора."""
        return dict(self._asdict())


# =============================================================================
# INPUT NORMALIZATION
# =============================================================================


def _wrap(num: Numeric) -> ExactDecimal:
    """
    Приведение входа к ExactDecimal.

    float не принимается: двоичное представление уже потеряло набранные цифры.

    Raises:
        InvalidNumericLiteral: если строка не соответствует грамматике
        TypeError: если тип входа не поддерживается
    """
    if isinstance(num, ExactDecimal):
        return num
    if isinstance(num, str):
        return ExactDecimal.from_string(num)
    if isinstance(num, int) and not isinstance(num, bool):
        # str(int) ограничен sys.get_int_max_str_digits(); Decimal этого лимита не имеет
        return ExactDecimal.from_string(str(Decimal(num)))

    raise TypeError(
        f"Expected numeric literal as str, int or ExactDecimal, got {type(num).__name__}"
    )


# =============================================================================
# OPERANDS
# =============================================================================


def operand_n(num: Numeric) -> int | float:
    """
    Абсолютное значение числа (целая и дробная части).

    Экспонента НЕ переносится в цифры до strip/to_value.

    Examples:
        >>> operand_n("-3.40")
        3.4
        >>> operand_n("1.0")
        1
    """
    return _wrap(num).abs().strip().to_value()


def operand_i(num: Numeric) -> int:
    """Цифры целой части n."""
    return _wrap(num).apply_exponent().integer_value()


def operand_f(num: Numeric) -> int:
    """Видимые дробные цифры n, с хвостовыми нулями."""
    return _wrap(num).apply_exponent().fraction_value()


def operand_t(num: Numeric) -> int:
    """Видимые дробные цифры n, без хвостовых нулей."""
    return _wrap(num).apply_exponent().strip().fraction_value()


def operand_v(num: Numeric) -> int:
    """Количество видимых дробных цифр n, с хвостовыми нулями."""
    return len(_wrap(num).apply_exponent().fraction_digits)


def operand_w(num: Numeric) -> int:
    """
    Количество видимых дробных цифр n, без хвостовых нулей.

    Считается длина строки после strip и удаления ведущих нулей,
    а не её числовое значение (в отличие от t).
    """
    return len(_wrap(num).apply_exponent().strip().leading_zero_stripped_fraction())


def operand_e(num: Numeric) -> int:
    """Экспонента десятичного числа (scientific или compact)."""
    return _wrap(num).exponent


# =============================================================================
# ALL OPERANDS
# =============================================================================


def calculate_operands(num: Numeric) -> PluralOperands:
    """
    Все семь операндов за один разбор литерала.

    Args:
        num: литерал (str / int) или уже разобранный ExactDecimal

    Returns:
        PluralOperands(n, i, f, t, v, w, e)

    Raises:
        InvalidNumericLiteral: если литерал не соответствует грамматике
        TypeError: если тип входа не поддерживается

    Examples:
        >>> calculate_operands("1.50")
        PluralOperands(n=1.5, i=1, f=50, t=5, v=2, w=1, e=0)
        >>> calculate_operands("0")
        PluralOperands(n=0, i=0, f=0, t=0, v=0, w=0, e=0)
    """
    value = _wrap(num)

    return PluralOperands(
        n=operand_n(value),
        i=operand_i(value),
        f=operand_f(value),
        t=operand_t(value),
        v=operand_v(value),
        w=operand_w(value),
        e=operand_e(value),
    )
