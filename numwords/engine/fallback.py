"""
Fallback Handler — строки для нечисловых и бесконечных значений

Перехватывает NumericInput со special флагом до разложения на группы.
Ни одно такое значение не приводит к исключению: результатом всегда
является строка на языке pack (или переопределение вызывающего кода).

Правила:
- NAN → options.fallback_on_error или messages.not_a_number
- INVALID → options.fallback_on_error или messages.invalid
- INFINITY / NEGATIVE_INFINITY → собственные сообщения (не переопределяются)
"""

import logging

from numwords.core.domain.language_pack import LanguagePack
from numwords.core.domain.numeric_input import NumericInput, SpecialValue
from numwords.core.domain.options import RenderOptions


logger = logging.getLogger("numwords")


class FallbackHandler:
    """Отображение special значений в строки сообщений."""

    # Значения, для которых действует fallback_on_error
    OVERRIDABLE = frozenset({SpecialValue.NAN, SpecialValue.INVALID})

    def resolve(
        self, value: NumericInput, options: RenderOptions, pack: LanguagePack
    ) -> str | None:
        """
        Сообщение для special значения.

        Args:
            value: Нормализованный вход
            options: Параметры вызова (fallback_on_error)
            pack: Language pack (messages)

        Returns:
            Строка сообщения или None для конечного числа
        """
        if value.special is None:
            return None

        logger.debug("Fallback for %s input (locale=%s)", value.special.value, pack.code)

        if value.special in self.OVERRIDABLE and options.fallback_on_error is not None:
            return options.fallback_on_error

        messages = pack.messages
        if value.special == SpecialValue.NAN:
            return messages.not_a_number
        if value.special == SpecialValue.INVALID:
            return messages.invalid
        if value.special == SpecialValue.INFINITY:
            return messages.infinity
        return messages.negative_infinity
