"""bitwise evaluator — postfix evaluation and the query entry point."""

from bitwise.evaluator.evaluator import U64_MAX, WORD_BITS, evaluate, evaluate_postfix

__all__ = ["U64_MAX", "WORD_BITS", "evaluate", "evaluate_postfix"]
