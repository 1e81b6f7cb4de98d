"""Extended autolinks: bare URLs, ``www.`` domains and e-mail addresses in text."""

from __future__ import annotations

import unicodedata
from typing import Optional, Tuple

from marktree.nodes import AstNode, NodeKind, NodeLink, NodeValue, Sourcepos, make_inline

_SPACE = frozenset(" \t\n\x0b\x0c\r")
_WWW_DELIMS = frozenset("*_~([")
_LINK_END_ASSORTMENT = frozenset("?!.,:*_~'\"[]")
_EMAIL_OK = frozenset(".+-_")
_SCHEMES = ("http", "https", "ftp")

_Match = Tuple[AstNode, int, int]


def _isspace(c: str) -> bool:
    return c in _SPACE


def _isalpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _isalnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _is_valid_hostchar(c: str) -> bool:
    return not c.isspace() and not unicodedata.category(c).startswith("P")


def _placeholder_pos() -> Sourcepos:
    return Sourcepos.from_tuple((0, 1, 0, 1))


def _link_node(url: str, text: str) -> AstNode:
    link = make_inline(NodeValue(NodeKind.LINK, NodeLink(url=url, title="")), _placeholder_pos())
    link.append(make_inline(NodeValue(NodeKind.TEXT, text), _placeholder_pos()))
    return link


def process_autolinks(node: AstNode, contents: str, relaxed_autolinks: bool) -> str:
    """Find the first autolink in ``contents``, the text of ``node``.

    The link is inserted after ``node``, followed by a text node holding
    whatever came after the link.  Returns the text that stays in ``node``:
    everything before the link, or ``contents`` unchanged if there is none.
    Unless ``relaxed_autolinks`` is set, links inside brackets are ignored.
    """
    size = len(contents)
    bracket_opening = 0

    for i, c in enumerate(contents):
        if not relaxed_autolinks:
            if c == "[":
                bracket_opening += 1
            elif c == "]":
                bracket_opening -= 1
            if bracket_opening > 0:
                continue

        if c == ":":
            found = _url_match(contents, i)
        elif c == "w":
            found = _www_match(contents, i)
        elif c == "@":
            found = _email_match(contents, i)
        else:
            continue
        if found is None:
            continue

        link, reverse, skip = found
        start = i - reverse
        node.insert_after(link)
        if start + skip < size:
            remain = contents[start + skip:]
            link.insert_after(make_inline(NodeValue(NodeKind.TEXT, remain), _placeholder_pos()))
        return contents[:start]

    return contents


def _www_match(contents: str, i: int) -> Optional[_Match]:
    if i > 0 and not _isspace(contents[i - 1]) and contents[i - 1] not in _WWW_DELIMS:
        return None
    if not contents.startswith("www.", i):
        return None

    link_end = check_domain(contents[i:], False)
    if link_end is None:
        return None

    while i + link_end < len(contents) and not _isspace(contents[i + link_end]):
        link_end += 1

    link_end = autolink_delim(contents[i:], link_end)
    text = contents[i:i + link_end]
    return _link_node("http://" + text, text), 0, link_end


def check_domain(data: str, allow_short: bool) -> Optional[int]:
    """Length of the domain at the start of ``data``, or None if it is not one.

    Unless ``allow_short`` is set, the domain needs at least one period.
    Underscores are refused in the last two labels.
    """
    np = 0
    uscore1 = 0
    uscore2 = 0

    for i, c in enumerate(data):
        if c == "_":
            uscore2 += 1
        elif c == ".":
            uscore1 = uscore2
            uscore2 = 0
            np += 1
        elif not _is_valid_hostchar(c) and c != "-":
            if uscore1 == 0 and uscore2 == 0 and (allow_short or np > 0):
                return i
            return None

    if (uscore1 > 0 or uscore2 > 0) and np <= 10:
        return None
    if allow_short or np > 0:
        return len(data)
    return None


def autolink_delim(data: str, link_end: int) -> int:
    """Trim trailing punctuation, entities and unbalanced parentheses off a link."""
    lt = data.find("<", 0, link_end)
    if lt != -1:
        link_end = lt

    while link_end > 0:
        cclose = data[link_end - 1]

        if cclose in _LINK_END_ASSORTMENT:
            link_end -= 1
        elif cclose == ";":
            new_end = link_end - 2
            while new_end > 0 and _isalpha(data[new_end]):
                new_end -= 1
            if new_end < link_end - 2 and data[new_end] == "&":
                link_end = new_end
            else:
                link_end -= 1
        elif cclose == ")":
            opening = data.count("(", 0, link_end)
            closing = data.count(")", 0, link_end)
            if closing <= opening:
                break
            link_end -= 1
        else:
            break

    return link_end


def _url_match(contents: str, i: int) -> Optional[_Match]:
    size = len(contents)

    if size - i < 4 or contents[i + 1] != "/" or contents[i + 2] != "/":
        return None

    rewind = 0
    while rewind < i and _isalpha(contents[i - rewind - 1]):
        rewind += 1

    if contents[i - rewind:i] not in _SCHEMES:
        return None

    link_end = check_domain(contents[i + 3:], True)
    if link_end is None:
        return None

    while link_end < size - i and not _isspace(contents[i + link_end]):
        link_end += 1

    link_end = autolink_delim(contents[i:], link_end)

    url = contents[i - rewind:i + link_end]
    return _link_node(url, url), rewind, rewind + link_end


def _email_match(contents: str, i: int) -> Optional[_Match]:
    size = len(contents)

    auto_mailto = True
    is_xmpp = False
    rewind = 0

    while rewind < i:
        c = contents[i - rewind - 1]

        if _isalnum(c) or c in _EMAIL_OK:
            rewind += 1
            continue

        if c == ":":
            if _validate_protocol("mailto", contents, i - rewind - 1):
                auto_mailto = False
                rewind += 1
                continue
            if _validate_protocol("xmpp", contents, i - rewind - 1):
                is_xmpp = True
                auto_mailto = False
                rewind += 1
                continue

        break

    if rewind == 0:
        return None

    link_end = 1
    np = 0

    while link_end < size - i:
        c = contents[i + link_end]

        if _isalnum(c):
            pass
        elif c == "@":
            return None
        elif c == "." and link_end < size - i - 1 and _isalnum(contents[i + link_end + 1]):
            np += 1
        elif c == "/" and is_xmpp:
            pass
        elif c != "-" and c != "_":
            break

        link_end += 1

    last = contents[i + link_end - 1]
    if link_end < 2 or np == 0 or (not _isalpha(last) and last != "."):
        return None

    link_end = autolink_delim(contents[i:], link_end)
    if link_end == 0:
        return None

    text = contents[i - rewind:i + link_end]
    url = ("mailto:" + text) if auto_mailto else text
    return _link_node(url, text), rewind, rewind + link_end


def _validate_protocol(protocol: str, contents: str, cursor: int) -> bool:
    size = len(contents)
    rewind = 0
    while rewind < cursor and _isalpha(contents[cursor - rewind - 1]):
        rewind += 1
    return (
        size - cursor + rewind >= len(protocol)
        and contents[cursor - rewind:cursor] == protocol
    )