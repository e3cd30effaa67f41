"""Testing utilities – property-based strategies for Result and Option."""
from mp_monads.testing.strategies import option_strategy, present_values, result_strategy

__all__ = ["option_strategy", "present_values", "result_strategy"]
