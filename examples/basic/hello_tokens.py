"""Tokenize a line of source and print the token listing."""

from teamlex import format_tokens, tokenize

tokens = tokenize("func 134main = $hello$ // greet\n")
print(format_tokens(tokens))
