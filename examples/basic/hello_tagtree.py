"""Parse markup into a tree in 3 lines: zero config, zero deps."""

from tagtree import parse

tree = parse('<p class="greeting">Hello <em>World</em></p>')
print(tree)
