"""Calculator — разбор и вычисление бинарных уравнений Arabic/Roman.

Цепочка:
- Equation.parse: токенизация + накопление ошибок разбора
- Equation.evaluate: арифметика + проверка Roman результата
- evaluate / calculate: внешняя граница (результат или исключение)
"""

from .equation import Equation
from .evaluate import CalculatorConfig, EvaluationResult, calculate, evaluate

__all__ = [
    "Equation",
    "CalculatorConfig",
    "EvaluationResult",
    "calculate",
    "evaluate",
]
