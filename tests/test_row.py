from hacksaw.row import Row


def test_render_returns_requested_slice():
    assert Row("hello").render(1, 3) == "el"


def test_render_clamps_end_past_row():
    assert Row("hello").render(2, 100) == "llo"


def test_render_start_past_row_is_empty():
    row = Row("hello")
    assert row.render(5, 10) == ""
    assert row.render(50, 80) == ""
    assert row.render(3, 1) == ""


def test_render_empty_row():
    assert Row().render(0, 80) == ""


def test_insert_in_middle():
    row = Row("ac")
    row.insert(1, "b")
    assert row.text == "abc"
    assert len(row) == 3


def test_insert_past_end_appends():
    row = Row("ab")
    row.insert(2, "c")
    row.insert(40, "d")
    assert row.text == "abcd"


def test_delete_removes_character():
    row = Row("abc")
    row.delete(1)
    assert row.text == "ac"


def test_delete_out_of_range_is_noop():
    row = Row("abc")
    row.delete(3)
    row.delete(99)
    assert row.text == "abc"


def test_len_counts_characters_not_bytes():
    row = Row("héllo")
    assert len(row) == 5
    assert row.as_bytes() == "héllo".encode("utf-8")
    assert len(row.as_bytes()) == 6


def test_split_and_append():
    row = Row("hello world")
    rest = row.split(5)
    assert row.text == "hello"
    assert rest.text == " world"
    row.append(rest)
    assert row.text == "hello world"


def test_split_past_end_gives_empty_row():
    row = Row("abc")
    rest = row.split(10)
    assert row.text == "abc"
    assert rest.text == ""
