"""Benchmark full tokenization throughput.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

import pytest

from teamlex import tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_mixed(benchmark, large_source):
    """Benchmark a ~100KB source with every token category."""
    tokens = benchmark(tokenize, large_source)
    assert tokens[-1].kind.name == "EOF"


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_comments(benchmark, comment_heavy_source):
    """Benchmark comment skipping (no tokens produced per comment)."""
    tokens = benchmark(tokenize, comment_heavy_source)
    assert len(tokens) == 2


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_errors(benchmark, error_heavy_source):
    """Benchmark error recovery paths."""
    tokens = benchmark(tokenize, error_heavy_source)
    assert tokens[-1].kind.name == "EOF"
