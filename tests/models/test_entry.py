import pytest
from pydantic import ValidationError

from jsxtrans.models import ElementNode, TranslationEntry


def test_empty_key_is_rejected():
    with pytest.raises(ValidationError):
        TranslationEntry(key='')


def test_to_dict_omits_absent_fields():
    assert TranslationEntry(key='k').to_dict() == {'key': 'k'}


def test_to_dict_uses_i18next_field_names():
    entry = TranslationEntry(key='k', defaultValue='v', namespace='ns', count='{n}', attributes={'extra': 'x'})
    assert entry.to_dict() == {'key': 'k', 'defaultValue': 'v', 'namespace': 'ns', 'count': '{n}', 'extra': 'x'}


def test_reserved_fields_win_over_custom_attributes():
    entry = TranslationEntry(key='k', attributes={'key': 'other', 'title': 't'})
    assert entry.to_dict() == {'key': 'k', 'title': 't'}


def test_element_nodes_validate_from_plain_data():
    node = ElementNode.model_validate({
        'tag_name': 'Trans',
        'attributes': [{'name': 'count', 'value': {'kind': 'expression', 'source_text': 'n'}}],
        'children': [{'kind': 'text', 'value': 'a'}, {'kind': 'element', 'tag_name': 'b', 'children': []}],
    })
    assert node.attributes[0].value.source == '{n}'
    assert node.children[1].tag_name == 'b'
    assert node.children[1].children == []
