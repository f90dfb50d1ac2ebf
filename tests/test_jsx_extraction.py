import pytest

from jsxtrans import JsxTrans, extract
from jsxtrans.core.error_handling import InvalidParameterError, InvalidTypeError, ParsingError
from jsxtrans.models import ElementNode, ExpressionNode, TextNode


@pytest.fixture
def lexer():
    return JsxTrans()


# --- <Interpolate> ---

def test_interpolate_key_from_i18nkey(lexer):
    assert lexer.extract_dicts('<Interpolate i18nKey="first" />') == [{'key': 'first'}]


# --- <Trans> ---

def test_key_attribute_on_closing_tags(lexer):
    content = '<Trans i18nKey="first" count={count}>Yo</Trans>'
    assert lexer.extract_dicts(content) == [{'key': 'first', 'defaultValue': 'Yo', 'count': '{count}'}]


def test_user_defined_key_attribute_on_closing_tags():
    content = '<Trans myIntlKey="first" count={count}>Yo</Trans>'
    assert JsxTrans(attr='myIntlKey').extract_dicts(content) == [
        {'key': 'first', 'defaultValue': 'Yo', 'count': '{count}'}
    ]


def test_key_attribute_on_self_closing_tags(lexer):
    assert lexer.extract_dicts('<Trans i18nKey="first" count={count} />') == [{'key': 'first', 'count': '{count}'}]


def test_user_defined_key_attribute_on_self_closing_tags():
    content = '<Trans myIntlKey="first" count={count} />'
    assert JsxTrans(attr='myIntlKey').extract_dicts(content) == [{'key': 'first', 'count': '{count}'}]


def test_custom_attributes(lexer):
    content = '<Trans customAttribute="Youpi">Yo</Trans>'
    assert lexer.extract_dicts(content) == [{'key': 'Yo', 'customAttribute': 'Youpi'}]


def test_content_as_key_without_i18nkey(lexer):
    assert lexer.extract_dicts('<Trans count={count}>Yo</Trans>') == [{'key': 'Yo', 'count': '{count}'}]


def test_single_key_object_becomes_placeholder(lexer):
    content = '<Trans count={count}>{{ key: property }}</Trans>'
    assert lexer.extract_dicts(content) == [{'key': '{{key}}', 'count': '{count}'}]


def test_invalid_interpolation_is_stripped(lexer):
    content = '<Trans count={count}>before{{ key1, key2 }}after</Trans>'
    assert lexer.extract_dicts(content) == [{'key': 'beforeafter', 'count': '{count}'}]


@pytest.mark.parametrize('content', [
    '<Trans>x{{ a: /,/ }}</Trans>',
    "<Trans>x{{ a: /'/ }}</Trans>",
    '<Trans>x{{ a: `y, ${z}` }}</Trans>',
])
def test_object_values_with_regex_or_template_literals(lexer, content):
    assert lexer.extract_dicts(content) == [{'key': 'x{{a}}'}]


def test_string_literal_next_to_comment(lexer):
    assert lexer.extract_dicts('<Trans>x{"a" /* c */}</Trans>') == [{'key': 'xa'}]


@pytest.mark.parametrize('content', ['<Trans count={count}></Trans>', '<Trans count={count}/>'])
def test_no_blank_key_for_empty_or_self_closing_tags(lexer, content):
    assert lexer.extract_dicts(content) == []


def test_tags_are_erased_from_content(lexer):
    content = '<Trans>a<b test={"</b>"}>c<c>z</c></b>{d}<br stuff={y}/></Trans>'
    assert lexer.extract(content)[0].key == 'a<1>c<1>z</1></1>{d}<3></3>'


def test_comment_expressions_are_erased(lexer):
    assert lexer.extract('<Trans>{/* some comment */}Some Content</Trans>')[0].key == 'Some Content'


def test_jsx_fragments(lexer):
    assert lexer.extract_dicts('<><Trans i18nKey="first" /></>') == [{'key': 'first'}]


def test_literal_string_values_are_interpolated(lexer):
    assert lexer.extract("<Trans>Some{' '}Interpolated {'Content'}</Trans>")[0].key == 'Some Interpolated Content'


def test_namespace_prop(lexer):
    assert lexer.extract_dicts('<Trans ns="foo">bar</Trans>') == [{'key': 'bar', 'namespace': 'foo'}]


# --- TypeScript ---

def test_basic_tsx_syntax(lexer):
    content = '<Interpolate i18nKey="first" someVar={foo() as bar} />'
    assert lexer.extract_dicts(content) == [{'key': 'first'}]


def test_type_assertion_in_children_is_kept_verbatim(lexer):
    assert lexer.extract('<Trans>{value as string}</Trans>')[0].key == '{value as string}'


def test_component_module():
    content = '''
import React from 'react';
import { Trans, Interpolate } from 'react-i18next';

export const Greeting: React.FC<{ name: string }> = ({ name }) => (
  <div className="greeting">
    <Trans i18nKey="greeting" ns="common">Hello <b>{{ name }}</b>!</Trans>
    <p>not translated</p>
    <Interpolate i18nKey="footer" />
  </div>
);
'''
    assert extract(content) == JsxTrans().extract(content)
    assert [entry.to_dict() for entry in extract(content)] == [
        {'key': 'greeting', 'defaultValue': 'Hello <1>{{name}}</1>!', 'namespace': 'common'},
        {'key': 'footer'},
    ]


# --- Traversal ---

def test_entries_follow_source_order(lexer):
    content = '<div><Trans>one</Trans><section><Trans>two</Trans></section><Trans>three</Trans></div>'
    assert [entry.key for entry in lexer.extract(content)] == ['one', 'two', 'three']


def test_nested_targets_are_not_extracted_separately(lexer):
    content = '<Trans>outer <Trans i18nKey="inner" /></Trans>'
    assert lexer.extract_dicts(content) == [{'key': 'outer <1></1>'}]


def test_target_inside_expression_container_is_child_content(lexer):
    content = '<Trans>a{ok && <Trans i18nKey="inner" />}</Trans>'
    entries = lexer.extract(content)
    assert len(entries) == 1
    assert entries[0].key == 'a{ok && <Trans i18nKey="inner" />}'


def test_other_components_are_ignored(lexer):
    assert lexer.extract('<div><span>Hello</span><trans>lower</trans></div>') == []


def test_custom_component_names():
    content = '<><T>first</T><I18n.Trans>second</I18n.Trans><Trans>third</Trans></>'
    extractor = JsxTrans(componentFunctions=['T', 'I18n.Trans'])
    assert [entry.key for entry in extractor.extract(content)] == ['first', 'second']


def test_multiline_content_keeps_whitespace(lexer):
    content = '<Trans>\n  Hello <strong>{{name}}</strong>\n</Trans>'
    assert lexer.extract(content)[0].key == '\n  Hello <1>{{name}}</1>\n'


def test_html_entities_are_kept_verbatim(lexer):
    assert lexer.extract('<Trans>Tom &amp; Jerry</Trans>')[0].key == 'Tom &amp; Jerry'


# --- Statelessness and errors ---

def test_repeated_calls_give_identical_results(lexer):
    content = '<Trans i18nKey="first" count={count}>Yo <b>there</b></Trans>'
    assert lexer.extract(content) == lexer.extract(content)


def test_no_components(lexer):
    assert lexer.extract('const answer = 42;') == []


def test_unparseable_source_raises(lexer):
    with pytest.raises(ParsingError):
        lexer.extract('<Trans>{</Trans>')


def test_non_string_input_is_rejected(lexer):
    with pytest.raises(InvalidTypeError):
        lexer.extract(b'<Trans>Yo</Trans>')


def test_config_and_options_are_exclusive():
    with pytest.raises(InvalidParameterError):
        JsxTrans(JsxTrans().config, attr='other')


# --- Hand-built trees ---

def test_extract_from_hand_built_elements(lexer):
    tree = ElementNode(tag_name='div', children=[
        ElementNode(tag_name='Trans', children=[
            TextNode(value='Hi '),
            ExpressionNode(source_text='{ name }'),
        ]),
        ElementNode(tag_name='Trans'),
    ])
    assert [entry.to_dict() for entry in lexer.extract_elements([tree])] == [{'key': 'Hi {{name}}'}]


def test_extract_file(lexer, tmp_path):
    source = tmp_path / 'Component.tsx'
    source.write_text('<Trans i18nKey="été">Bonjour</Trans>', encoding='utf-8')
    assert lexer.extract_file(str(source))[0].to_dict() == {'key': 'été', 'defaultValue': 'Bonjour'}
