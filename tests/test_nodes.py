import pytest

from marktree.nodes import (
    AstNode,
    LineColumn,
    ListDelimType,
    NodeKind,
    NodeLink,
    NodeList,
    NodeValue,
    Sourcepos,
    TableAlignment,
    can_contain_type,
    containing_block,
    ends_with_blank_line,
    last_child_is_open,
    make_inline,
)


def _node(kind, data=None):
    return AstNode(NodeValue(kind, data))


def _text(s):
    return make_inline(NodeValue(NodeKind.TEXT, s), Sourcepos.from_tuple((1, 1, 1, 1)))


def test_table_alignment_xml_names():
    assert TableAlignment.NONE.xml_name() is None
    assert TableAlignment.LEFT.xml_name() == "left"
    assert TableAlignment.CENTER.xml_name() == "center"
    assert TableAlignment.RIGHT.xml_name() == "right"


def test_list_delim_xml_names():
    assert ListDelimType.PERIOD.xml_name() == "period"
    assert ListDelimType.PAREN.xml_name() == "paren"


def test_xml_node_names_from_source():
    assert NodeValue(NodeKind.BLOCK_QUOTE).xml_node_name() == "block_quote"
    assert NodeValue(NodeKind.SOFT_BREAK).xml_node_name() == "softbreak"
    assert NodeValue(NodeKind.FRONT_MATTER, "x").xml_node_name() == "frontmatter"
    assert NodeValue(NodeKind.TASK_ITEM).xml_node_name() == "taskitem"
    assert NodeValue(NodeKind.FOOTNOTE_REFERENCE).xml_node_name() == "footnote_reference"


def test_block_and_inline_classification():
    assert NodeValue(NodeKind.TASK_ITEM).is_block()
    assert NodeValue(NodeKind.TABLE_CELL).is_block()
    assert not NodeValue(NodeKind.TEXT, "a").is_block()
    assert not NodeValue(NodeKind.FRONT_MATTER, "a").is_block()
    assert NodeValue(NodeKind.HEADING).contains_inlines()
    assert not NodeValue(NodeKind.BLOCK_QUOTE).contains_inlines()
    assert NodeValue(NodeKind.CODE_BLOCK).accepts_lines()
    assert not NodeValue(NodeKind.TABLE_CELL).accepts_lines()


def test_text_and_set_text():
    value = NodeValue(NodeKind.TEXT, "abc")
    assert value.text() == "abc"
    value.set_text("xyz")
    assert value.text() == "xyz"
    assert NodeValue(NodeKind.EMPH).text() is None
    with pytest.raises(TypeError):
        NodeValue(NodeKind.EMPH).set_text("no")


def test_node_value_equality():
    a = NodeValue(NodeKind.LINK, NodeLink("/u", "t"))
    b = NodeValue(NodeKind.LINK, NodeLink("/u", "t"))
    assert a == b
    assert NodeValue(NodeKind.LIST, NodeList()) == NodeValue(NodeKind.LIST, NodeList())


def test_sourcepos_str_and_from_tuple():
    sp = Sourcepos.from_tuple((1, 5, 1, 9))
    assert str(sp) == "1:5-1:9"
    assert sp.start == LineColumn(1, 5)
    assert sp.end == LineColumn(1, 9)


def test_line_column_add_and_ordering():
    lc = LineColumn(3, 4)
    assert lc.column_add(2) == LineColumn(3, 6)
    assert lc.column_add(-4) == LineColumn(3, 0)
    assert LineColumn(1, 9) < LineColumn(2, 1)
    with pytest.raises(ValueError):
        lc.column_add(-5)


def test_default_sourcepos_and_open():
    node = _node(NodeKind.PARAGRAPH)
    assert node.open
    assert node.sourcepos.end.column == 0
    assert not _text("a").open


def test_append_prepend_order():
    parent = _node(NodeKind.PARAGRAPH)
    a, b, c = _text("a"), _text("b"), _text("c")
    parent.append(b)
    parent.append(c)
    parent.prepend(a)
    assert [n.value.text() for n in parent.children()] == ["a", "b", "c"]
    assert parent.first_child is a and parent.last_child is c
    assert all(n.parent is parent for n in parent.children())


def test_insert_after_and_before():
    parent = _node(NodeKind.PARAGRAPH)
    a, c = _text("a"), _text("c")
    parent.append(a)
    parent.append(c)
    a.insert_after(_text("b"))
    c.insert_after(_text("d"))
    a.insert_before(_text("z"))
    assert [n.value.text() for n in parent.children()] == ["z", "a", "b", "c", "d"]
    assert parent.last_child.value.text() == "d"
    assert parent.first_child.value.text() == "z"


def test_detach_and_moving_node():
    p1, p2 = _node(NodeKind.PARAGRAPH), _node(NodeKind.PARAGRAPH)
    a, b = _text("a"), _text("b")
    p1.append(a)
    p1.append(b)
    p2.append(a)
    assert list(p1.children()) == [b]
    assert list(p2.children()) == [a]
    b.detach()
    assert p1.first_child is None and p1.last_child is None
    assert b.parent is None


def test_following_siblings_includes_self():
    parent = _node(NodeKind.PARAGRAPH)
    nodes = [_text(s) for s in "abc"]
    for n in nodes:
        parent.append(n)
    assert list(nodes[1].following_siblings()) == nodes[1:]


def test_ancestors_and_descendants():
    doc = _node(NodeKind.DOCUMENT)
    para = _node(NodeKind.PARAGRAPH)
    emph = make_inline(NodeValue(NodeKind.EMPH), Sourcepos.from_tuple((1, 1, 1, 1)))
    t1, t2 = _text("x"), _text("y")
    doc.append(para)
    para.append(emph)
    emph.append(t1)
    para.append(t2)
    assert list(t1.ancestors()) == [t1, emph, para, doc]
    assert list(doc.descendants()) == [doc, para, emph, t1, t2]


def test_can_contain_type():
    doc = _node(NodeKind.DOCUMENT)
    lst = _node(NodeKind.LIST, NodeList())
    para = _node(NodeKind.PARAGRAPH)
    cell = _node(NodeKind.TABLE_CELL)
    assert not can_contain_type(doc, NodeValue(NodeKind.DOCUMENT))
    assert can_contain_type(doc, NodeValue(NodeKind.FRONT_MATTER, ""))
    assert not can_contain_type(para, NodeValue(NodeKind.FRONT_MATTER, ""))
    assert can_contain_type(doc, NodeValue(NodeKind.PARAGRAPH))
    assert not can_contain_type(doc, NodeValue(NodeKind.ITEM, NodeList()))
    assert can_contain_type(lst, NodeValue(NodeKind.TASK_ITEM))
    assert not can_contain_type(lst, NodeValue(NodeKind.PARAGRAPH))
    assert can_contain_type(para, NodeValue(NodeKind.TEXT, ""))
    assert not can_contain_type(para, NodeValue(NodeKind.PARAGRAPH))
    assert can_contain_type(cell, NodeValue(NodeKind.STRIKETHROUGH))
    assert not can_contain_type(cell, NodeValue(NodeKind.SOFT_BREAK))
    assert can_contain_type(_node(NodeKind.TABLE), NodeValue(NodeKind.TABLE_ROW, False))
    assert not can_contain_type(_node(NodeKind.THEMATIC_BREAK), NodeValue(NodeKind.TEXT, ""))


def test_last_child_is_open():
    parent = _node(NodeKind.DOCUMENT)
    assert not last_child_is_open(parent)
    parent.append(_node(NodeKind.PARAGRAPH))
    assert last_child_is_open(parent)
    parent.last_child.open = False
    assert not last_child_is_open(parent)


def test_ends_with_blank_line_follows_lists():
    lst = _node(NodeKind.LIST, NodeList())
    item = _node(NodeKind.ITEM, NodeList())
    para = _node(NodeKind.PARAGRAPH)
    lst.append(item)
    item.append(para)
    assert not ends_with_blank_line(lst)
    para.last_line_blank = True
    assert ends_with_blank_line(lst)
    quote = _node(NodeKind.BLOCK_QUOTE)
    inner = _node(NodeKind.PARAGRAPH)
    inner.last_line_blank = True
    quote.append(inner)
    assert not ends_with_blank_line(quote)


def test_containing_block():
    para = _node(NodeKind.PARAGRAPH)
    emph = make_inline(NodeValue(NodeKind.EMPH), Sourcepos.from_tuple((1, 1, 1, 1)))
    text = _text("a")
    para.append(emph)
    emph.append(text)
    assert containing_block(text) is para
    assert containing_block(para) is para
    assert containing_block(_text("lonely")) is None