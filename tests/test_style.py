from box_layout.css import Keyword, SimpleSelector, px
from box_layout.dom import elem, text
from box_layout.style import (
    Display, match_rule, matching_rules, specified_values, style_tree
)

from helpers import make_rule, make_sheet


def test_selector_matching():
    node = elem('div', {'id': 'main', 'class': 'a b c'})

    assert SimpleSelector('div').matches(node)
    assert SimpleSelector(None, 'main').matches(node)
    assert SimpleSelector(None, None, ['a', 'b']).matches(node)
    assert SimpleSelector().matches(node)
    assert not SimpleSelector('span').matches(node)
    assert not SimpleSelector(None, 'other').matches(node)
    assert not SimpleSelector(None, None, ['a', 'd']).matches(node)


def test_specificity():
    assert SimpleSelector('div', 'x', ['a', 'b']).specificity == (1, 2, 1)
    assert SimpleSelector().specificity == (0, 0, 0)


def test_id_beats_class_beats_tag_regardless_of_order():
    node = elem('div', {'id': 'x', 'class': 'y'})
    by_id = make_rule(SimpleSelector(None, 'x'), color='red')
    by_class = make_rule(SimpleSelector(None, None, ['y']), color='blue')
    by_tag = make_rule(SimpleSelector('div'), color='green')

    for sheet in (make_sheet(by_id, by_class, by_tag), make_sheet(by_tag, by_class, by_id)):
        assert specified_values(node, sheet)['color'] == Keyword('red')

    sheet = make_sheet(by_class, by_tag)
    assert specified_values(node, sheet)['color'] == Keyword('blue')


def test_equal_specificity_later_rule_wins():
    node = elem('p', {'class': 'a b'})
    sheet = make_sheet(
        make_rule(SimpleSelector(None, None, ['a']), color='red', width='10px'),
        make_rule(SimpleSelector(None, None, ['b']), color='blue'),
    )

    values = specified_values(node, sheet)

    assert values['color'] == Keyword('blue')
    assert values['width'] == px(10)


def test_rule_uses_best_matching_selector():
    node = elem('div', {'id': 'x', 'class': 'y'})
    grouped = make_rule([SimpleSelector('div'), SimpleSelector(None, 'x')], color='red')
    by_class = make_rule(SimpleSelector(None, None, ['y']), color='blue')

    assert match_rule(node, grouped)[0] == (1, 0, 0)
    assert specified_values(node, make_sheet(grouped, by_class))['color'] == Keyword('red')


def test_matching_rules_keeps_sheet_order_and_skips_misses():
    node = elem('span')
    first = make_rule(SimpleSelector('span'), color='red')
    miss = make_rule(SimpleSelector('div'), color='blue')
    last = make_rule(SimpleSelector(), color='green')

    matched = matching_rules(node, make_sheet(first, miss, last))

    assert [rule for _, rule in matched] == [first, last]


def test_inherited_properties_come_from_parent():
    tree = elem('div', {'class': 'outer'}, [elem('p')])
    sheet = make_sheet(make_rule(
        SimpleSelector(None, None, ['outer']),
        color='red', font_family='serif', width='100px', display='block',
    ))

    styled = style_tree(tree, sheet)
    child = styled.children[0]

    assert child.value('color') == Keyword('red')
    assert child.value('font-family') == Keyword('serif')
    assert child.value('width') is None
    assert child.value('display') is None


def test_own_value_beats_inherited_value():
    tree = elem('div', {}, [elem('p')])
    sheet = make_sheet(
        make_rule(SimpleSelector('div'), color='red'),
        make_rule(SimpleSelector('p'), color='blue'),
    )

    styled = style_tree(tree, sheet)

    assert styled.children[0].value('color') == Keyword('blue')


def test_missing_inherited_property_stays_missing():
    styled = style_tree(elem('div', {}, [elem('p')]), make_sheet())

    assert styled.specified_values == {}
    assert styled.children[0].specified_values == {}


def test_text_nodes_copy_parent_style():
    tree = elem('span', {}, [text('hello')])
    sheet = make_sheet(make_rule(SimpleSelector('span'), display='inline', width='5px'))

    styled = style_tree(tree, sheet)
    text_node = styled.children[0]

    assert text_node.node.data == 'hello'
    assert text_node.specified_values == styled.specified_values


def test_root_text_node_has_empty_style():
    assert style_tree(text('lonely'), make_sheet()).specified_values == {}


def test_styled_tree_mirrors_document():
    tree = elem('div', {}, [text('a'), elem('p', {}, [text('b')]), elem('span')])

    styled = style_tree(tree, make_sheet())

    assert styled.node is tree
    assert [child.node for child in styled.children] == tree.children
    assert styled.children[1].children[0].node.data == 'b'


def test_lookup_falls_back_to_shorthand_then_default():
    node = elem('div')
    sheet = make_sheet(make_rule(SimpleSelector('div'), margin='4px', margin_left='1px'))
    styled = style_tree(node, sheet)

    assert styled.lookup('margin-left', 'margin', px(0)) == px(1)
    assert styled.lookup('margin-top', 'margin', px(0)) == px(4)
    assert styled.lookup('padding-top', 'padding', px(0)) == px(0)


def test_display_defaults_to_inline():
    sheet = make_sheet(
        make_rule(SimpleSelector('div'), display='block'),
        make_rule(SimpleSelector('p'), display='none'),
        make_rule(SimpleSelector('em'), display='flex'),
    )

    assert style_tree(elem('div'), sheet).display() == Display.BLOCK
    assert style_tree(elem('p'), sheet).display() == Display.NONE
    assert style_tree(elem('em'), sheet).display() == Display.INLINE
    assert style_tree(elem('span'), sheet).display() == Display.INLINE
