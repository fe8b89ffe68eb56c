from smartsort import tokenize

text = "Dan 100 A -1.5 items at .25 each, v2.10.3-rc1 " * 20


def test_tokenize_mixed_text(benchmark):
    tokens = benchmark(lambda: tokenize(text))
    assert "".join(token.value for token in tokens) == text
