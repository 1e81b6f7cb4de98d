# marktree

`marktree` provides the building blocks for a CommonMark / GitHub Flavored
Markdown parser. It has no third-party dependencies. It contains:

- `marktree.nodes`: a mutable syntax tree. It defines node kinds, the data each
  kind carries, source positions, and the rules for which nodes may contain
  which.
- `marktree.autolink`: GFM extended autolinks. It finds bare `http://`,
  `https://` and `ftp://` URLs, `www.` domains and e-mail addresses inside
  text nodes.
- `marktree.linkscan`: scanners for inline link destinations.
- `marktree.references`: link reference definitions and how they are looked up.
- `marktree.flanking`: the flanking rules for emphasis delimiter runs, and smart
  dash rendering.

## Installation

```
pip install marktree
```

## The syntax tree

Each node is an `AstNode`. It holds a `NodeValue`, which is a `NodeKind` plus
the data for that kind, and a `Sourcepos`.

```python
from marktree.nodes import AstNode, NodeKind, NodeValue, Sourcepos, make_inline

para = AstNode(NodeValue(NodeKind.PARAGRAPH))
para.append(make_inline(NodeValue(NodeKind.TEXT, "hello"), Sourcepos.from_tuple((1, 1, 1, 5))))

for node in para.descendants():
    print(node.value.xml_node_name(), node.sourcepos)
```

You can change a tree with `append`, `prepend`, `insert_before`,
`insert_after` and `detach`. To walk it, use `children()`,
`following_siblings()`, `ancestors()` or `descendants()`.

`NodeValue` has these checks: `is_block()`, `contains_inlines()`,
`accepts_lines()` and `xml_node_name()`. For text nodes, `text()` reads the
text and `set_text()` replaces it.

The module-level helpers are `can_contain_type`, `containing_block`,
`ends_with_blank_line` and `last_child_is_open`.

## Autolinks

`process_autolinks(node, contents, relaxed_autolinks)` finds the first
autolink in `contents`, the text of `node`. It inserts a link node after
`node`, followed by a text node that holds what came after the link. It
returns the text that should stay in `node`:

```python
from marktree.autolink import process_autolinks

para = AstNode(NodeValue(NodeKind.PARAGRAPH))
text = make_inline(NodeValue(NodeKind.TEXT, "see www.example.com now"),
                   Sourcepos.from_tuple((1, 1, 1, 23)))
para.append(text)
text.value.set_text(process_autolinks(text, text.value.text(), False))
# para: "see ", link to http://www.example.com, " now"
```

To find further links, call it again on the trailing text node. E-mail
addresses such as `[email protected]` become `mailto:` links. With
`relaxed_autolinks` false, links inside square brackets are ignored.

`check_domain` and `autolink_delim` are also public. They measure a domain,
and trim trailing punctuation and unbalanced parentheses from a link.

## Link destinations and references

```python
from marktree.linkscan import manual_scan_link_url, count_newlines
from marktree.references import RefMap, Reference, normalize_label

manual_scan_link_url("/url (title))")   # ("/url", 4)
count_newlines("ab\ncd")                # (1, 2)

refs = RefMap()
refs.add("Legit", Reference(url="ok"))
refs.lookup("  LEGIT ")                 # Reference(url="ok", title="")
```

Labels are normalised with `normalize_label`: whitespace is collapsed and
case is folded. If a label is defined more than once, the first definition
wins. You can give `RefMap(max_ref_size=...)` a bound on the total size of
URLs and titles that lookups hand out.

## Delimiter runs

```python
from marktree.flanking import scan_delims, smart_dashes

scan_delims("**bold**", 0, "*", frozenset())   # (2, True, False)
smart_dashes(3)                                # "—"
```

## What this package does not do

`marktree` has no complete inline parser. Nothing in it turns a string of
Markdown into emphasis, code span, link or image nodes. It also has no block
parser, no HTML, XML or CommonMark renderer, and no command-line tool. It
supplies the tree and the scanning pieces that such a parser would build on.