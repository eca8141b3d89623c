"""
Errors — Типизированные ошибки geoenvelope

Все ошибки локальные и синхронные: повторять вычисление бессмысленно,
поэтому вызывающий код обрабатывает их на своей границе.
"""


class EnvelopeError(Exception):
    """Базовая ошибка пакета."""


class InvalidArgument(EnvelopeError, ValueError):
    """
    Невалидный параметр операции.

    Например: отрицательный, NaN/Inf или нечисловой radius в expand_by.
    """


class InvalidInput(EnvelopeError, ValueError):
    """
    Невалидная геометрия на входе.

    Нечисловая или нефинитная координата, позиция неверной длины
    или неподдерживаемый тип входа. Значения никогда не приводятся молча.
    """


class EmptyEnvelopeError(EnvelopeError):
    """Метрика запрошена у пустого Envelope (нет протяжённости)."""
