"""
ExactDecimal — Десятичное число ровно в том виде, в каком оно записано

CLDR: UTS #35, Part 3 (Plural Operand Meanings)

Immutable Pydantic модель: знак, цифры целой части, цифры дробной части
и экспонента хранятся как строки/целые, без двоичного округления.
Это позволяет различать "1.0" и "1.00" при выборе plural-категории.

Все преобразования (apply_exponent, abs, strip) возвращают новый экземпляр.
Экспонента хранится отдельно и переносится в цифры только через apply_exponent().
"""

from typing import Literal

from pydantic import BaseModel, Field

from src.plurals.literal.parser import LiteralParserConfig, digits_to_int, parse_literal

# Только ASCII-цифры: str.isdigit() пропускает, например, арабско-индийские цифры
DIGITS_PATTERN = r"^[0-9]*$"


# =============================================================================
# EXACT DECIMAL MODEL
# =============================================================================


class ExactDecimal(BaseModel):
    """
    Десятичное значение, сохраняющее все набранные цифры.

    Immutable модель (frozen=True). Создаётся парсером литерала,
    далее преобразуется цепочкой чистых методов.
    """

    sign: Literal["", "+", "-"] = Field("", description="Знак ('' — неотрицательное)")
    integer_digits: str = Field(..., pattern=DIGITS_PATTERN, description="Цифры целой части")
    fraction_digits: str = Field(
        "", pattern=DIGITS_PATTERN, description="Цифры дробной части (могут быть пустыми)"
    )
    exponent: int = Field(0, description="Десятичная экспонента (0 — маркера не было)")

    model_config = {"frozen": True}

    @classmethod
    def from_string(
        cls, literal: str, config: LiteralParserConfig | None = None
    ) -> "ExactDecimal":
        """
        Разбор литерала в ExactDecimal.

        Args:
            literal: числовой литерал (например, '1.50', '1.2c6')
            config: конфигурация парсера (опционально)

        Returns:
            Новый ExactDecimal

        Raises:
            InvalidNumericLiteral: если литерал не соответствует грамматике
        """
        parts = parse_literal(literal, config)
        return cls(
            sign=parts.sign,
            integer_digits=parts.integer_digits,
            fraction_digits=parts.fraction_digits,
            exponent=parts.exponent,
        )

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def apply_exponent(self) -> "ExactDecimal":
        """
        Перенос экспоненты в цифры (результат имеет exponent == 0).

        exponent > 0: запятая сдвигается вправо, недостающие цифры
        дополняются '0'. Если после сдвига от непустой дроби ничего
        не осталось, дробь становится "0".

        exponent < 0: запятая сдвигается влево, дробь дополняется
        нулями слева; пустая целая часть становится "0".

        Returns:
            Новый ExactDecimal с exponent == 0

        Examples:
            >>> str(ExactDecimal.from_string("1.2c6").apply_exponent())
            '1200000.0'
            >>> str(ExactDecimal.from_string("5e-3").apply_exponent())
            '0.005'
        """
        if self.exponent == 0:
            return self

        if self.exponent > 0:
            new_int, new_frac = self._shift_right(self.exponent)
        else:
            new_int, new_frac = self._shift_left(-self.exponent)

        return self.model_copy(
            update={"integer_digits": new_int, "fraction_digits": new_frac, "exponent": 0}
        )

    def abs(self) -> "ExactDecimal":
        """Те же цифры без знака."""
        return self.model_copy(update={"sign": ""})

    def strip(self) -> "ExactDecimal":
        """Дробная часть без хвостовых нулей (знак, целая часть и экспонента не меняются)."""
        return self.model_copy(update={"fraction_digits": self.fraction_digits.rstrip("0")})

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """
        Каноническая строка: sign + integer [. fraction] [e exponent].

        Маркер экспоненты всегда 'e', даже если литерал был в compact-нотации.
        """
        result = f"{self.sign}{self.integer_digits}"
        if self.fraction_digits:
            result += f".{self.fraction_digits}"
        if self.exponent != 0:
            result += f"e{self.exponent}"
        return result

    def __str__(self) -> str:
        return self.to_canonical_string()

    def to_value(self) -> int | float:
        """
        Числовое значение для внешнего потребителя.

        - Есть дробная часть → float из канонической строки
        - Нет дробной части, exponent >= 0 → integer_value() * 10**exponent
          (Python int — произвольной точности, переполнения нет)
        - Нет дробной части, exponent < 0 → float из канонической строки

        Returns:
            int или float (со знаком)
        """
        text = self.to_canonical_string()

        if "." in text or self.exponent < 0:
            return float(text)

        value = self.integer_value() * 10**self.exponent
        return -value if self.sign == "-" else value

    def leading_zero_stripped_fraction(self) -> str:
        """Дробная часть без ведущих нулей ("050" → "50", "000" → "")."""
        return self.fraction_digits.lstrip("0")

    def integer_value(self) -> int:
        """Цифры целой части как int (пустая строка → 0)."""
        return digits_to_int(self.integer_digits)

    def fraction_value(self) -> int:
        """Дробная часть без ведущих нулей как int (пустая строка → 0)."""
        return digits_to_int(self.leading_zero_stripped_fraction())

    # -------------------------------------------------------------------------
    # Сдвиги запятой
    # -------------------------------------------------------------------------

    def _shift_right(self, n: int) -> tuple[str, str]:
        frac = self.fraction_digits
        new_int = self.integer_digits + frac[:n] + "0" * max(n - len(frac), 0)
        new_frac = frac[n:]

        if not new_frac and frac:
            new_frac = "0"

        return new_int, new_frac

    def _shift_left(self, n: int) -> tuple[str, str]:
        """Переносит в дробь намеренно последние, а не первые n цифр целой части."""
        digits = self.integer_digits
        split = len(digits) - n

        if split <= 0:
            # Запятая уходит левее первой цифры: дополняем дробь нулями
            return "0", "0" * -split + digits + self.fraction_digits

        return digits[:split], digits[split:] + self.fraction_digits
