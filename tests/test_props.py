from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from htmlliteral.props import get_prop_name, get_props


def _tag(markup: str, **kwargs) -> Tag:
    return BeautifulSoup(markup, "html.parser", **kwargs).find(True)


def test_attribute_names_map_to_dom_properties() -> None:
    assert get_prop_name("class") == "className"
    assert get_prop_name("for") == "htmlFor"
    assert get_prop_name("tabindex") == "tabIndex"
    assert get_prop_name("href") is None


def test_input_props_are_typed() -> None:
    tag = _tag('<input readonly="" maxlength="10" data-id="7" type="text">')

    assert get_props(tag) == [
        "readOnly:true,",
        "maxLength:10,",
        '"data-id":"7",',
        'type:"text",',
    ]


def test_label_for() -> None:
    assert get_props(_tag('<label for="name">Name</label>')) == ['htmlFor:"name",']


def test_negative_tab_index() -> None:
    assert get_props(_tag('<div tabindex="-1"></div>')) == ["tabIndex:-1,"]


def test_unparseable_number_falls_back_to_string() -> None:
    assert get_props(_tag('<img width="100" height="auto">')) == ["width:100,", 'height:"auto",']


def test_width_is_a_string_outside_sized_elements() -> None:
    assert get_props(_tag('<td width="100"></td>')) == ['width:"100",']


def test_enumerated_booleans() -> None:
    tag = _tag('<div draggable="false" spellcheck="true" hidden></div>')

    assert get_props(tag) == ["draggable:false,", "spellcheck:true,", "hidden:true,"]


def test_hyphenated_names_are_quoted() -> None:
    assert get_props(_tag('<button aria-label="Close">x</button>')) == ['"aria-label":"Close",']


def test_split_class_list_is_joined() -> None:
    # the default html.parser builder splits class into a list
    assert get_props(_tag('<p class="a  b">x</p>')) == ['className:"a b",']


def test_size_is_numeric_only_on_form_controls() -> None:
    assert get_props(_tag('<font size="+1">x</font>')) == ['size:"+1",']
    assert get_props(_tag('<hr size="2">')) == ['size:"2",']
    assert get_props(_tag('<select size="4"></select>')) == ["size:4,"]


def test_list_item_value_is_numeric() -> None:
    assert get_props(_tag('<li value="3">c</li>')) == ["value:3,"]
    assert get_props(_tag('<input value="3">')) == ['value:"3",']


def test_start_and_rows_depend_on_the_element() -> None:
    assert get_props(_tag('<ol start="5"></ol>')) == ["start:5,"]
    assert get_props(_tag('<div start="5" rows="2"></div>')) == ['start:"5",', 'rows:"2",']
    assert get_props(_tag('<textarea rows="2" cols="40"></textarea>')) == ["rows:2,", "cols:40,"]


def test_translate_is_a_boolean() -> None:
    assert get_props(_tag('<p translate="no">x</p>')) == ["translate:false,"]
    assert get_props(_tag('<p translate="yes">x</p>')) == ["translate:true,"]


def test_nowrap_on_table_cells() -> None:
    assert get_props(_tag("<td nowrap>x</td>")) == ["noWrap:true,"]


def test_disabled_is_boolean_only_where_the_element_has_it() -> None:
    assert get_props(_tag("<button disabled>x</button>")) == ["disabled:true,"]
    assert get_props(_tag("<div disabled>x</div>")) == ['disabled:"",']
