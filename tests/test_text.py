import pytest

from dsalgo.text import Text


def test_empty_text():
    empty = Text()
    assert len(empty) == 0
    assert str(empty) == ""


def test_blank_text_is_spaces():
    sized = Text.blank(10)
    assert len(sized) == 10
    assert str(sized).strip() == ""


def test_blank_rejects_negative_size():
    with pytest.raises(ValueError):
        Text.blank(-1)


def test_construct_and_copy():
    s1 = Text("hello")
    s2 = Text(s1)
    assert len(s1) == len("hello")
    assert s2 == s1
    s2[0] = "j"
    assert str(s1) == "hello"


def test_concatenation_and_in_place_add():
    s1 = Text("hello")
    s3 = s1 + Text(s1)
    assert str(s3) == "hello" * 2
    assert len(s3) == 2 * len(s1)
    s4 = Text()
    s4 += s3
    assert s4 == s3
    assert str(s1) == "hello"


def test_add_with_plain_strings():
    assert str(Text("ab") + "cd") == "abcd"
    assert str("xy" + Text("z")) == "xyz"


def test_index_read_and_write():
    s4 = Text("hellohello")
    assert s4[0] + s4[1] == "he"
    s4[0] = "H"
    assert str(s4) == "H" + "hellohello"[1:]


def test_setitem_requires_single_character():
    text = Text("abc")
    with pytest.raises(ValueError):
        text[0] = "xy"
    assert str(text) == "abc"
    assert len(text) == 3


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Text("abc")[3]


def test_assign_shorter_and_longer():
    text = Text("hello world")
    text.assign("hi")
    assert str(text) == "hi"
    assert len(text) == len("hi")
    text.assign("a much longer value")
    assert str(text) == "a much longer value"


def test_append():
    text = Text("foo")
    text.append("bar")
    assert text == "foobar"


def test_equality_compares_content():
    assert Text("abc") == "abc"
    assert not (Text("abc") == "abd")
    assert not (Text("abc") == "ab")


def test_rejects_non_text_values():
    with pytest.raises(TypeError):
        Text(5)