import pytest

from linepad.document import Document


def make(*lines):
    doc = Document()
    for number, text in enumerate(lines, start=1):
        doc.insert_line(text, number)
    return doc


def test_new_document_is_empty():
    doc = Document()
    assert len(doc) == 0
    assert list(doc) == []


def test_insert_appends_and_counts():
    doc = make("alpha", "beta", "gamma")
    assert len(doc) == 3
    assert list(doc) == ["alpha", "beta", "gamma"]


def test_insert_at_first_position_pushes_others_down():
    doc = make("alpha", "beta")
    doc.insert_line("zero", 1)
    assert list(doc) == ["zero", "alpha", "beta"]


def test_insert_in_middle_goes_before_chosen_line():
    doc = make("alpha", "gamma")
    doc.insert_line("beta", 2)
    assert list(doc) == ["alpha", "beta", "gamma"]


@pytest.mark.parametrize("position", [0, -1, 3])
def test_insert_out_of_range(position):
    doc = make("alpha")
    with pytest.raises(IndexError):
        doc.insert_line("x", position)
    assert list(doc) == ["alpha"]


def test_delete_first_middle_last():
    doc = make("a", "b", "c", "d")
    doc.delete_line(1)
    assert list(doc) == ["b", "c", "d"]
    doc.delete_line(2)
    assert list(doc) == ["b", "d"]
    doc.delete_line(2)
    assert list(doc) == ["b"]
    assert len(doc) == 1


@pytest.mark.parametrize("position", [0, 3])
def test_delete_out_of_range(position):
    doc = make("a", "b")
    with pytest.raises(IndexError):
        doc.delete_line(position)
    assert len(doc) == 2


def test_delete_from_empty_document():
    with pytest.raises(IndexError):
        Document().delete_line(1)


def test_edit_line_replaces_text():
    doc = make("a", "b", "c")
    doc.edit_line(1, "first")
    doc.edit_line(3, "third")
    assert list(doc) == ["first", "b", "third"]
    assert len(doc) == 3


def test_edit_out_of_range():
    doc = make("a")
    with pytest.raises(IndexError):
        doc.edit_line(2, "x")
    assert list(doc) == ["a"]


def test_numbered_lines_start_at_one():
    doc = make("a", "b")
    assert list(doc.numbered_lines()) == [(1, "a"), (2, "b")]


def test_search_finds_substrings():
    doc = make("the cat", "a dog", "concatenate")
    assert doc.search("cat") == [(1, "the cat"), (3, "concatenate")]


def test_search_no_match():
    doc = make("the cat", "a dog")
    assert doc.search("bird") == []


def test_search_empty_word_matches_every_line():
    doc = make("x", "y")
    assert doc.search("") == [(1, "x"), (2, "y")]


def test_save_writes_trailing_space(tmp_path):
    path = tmp_path / "out.txt"
    make("alpha", "beta").save(path)
    assert path.read_bytes() == b"alpha \nbeta \n"


def test_save_empty_document_creates_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    Document().save(path)
    assert path.read_bytes() == b""


def test_load_into_empty_document(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"one\ntwo\nthree")
    doc = Document()
    assert doc.load(path) == 3
    assert list(doc) == ["one", "two", "three"]


def test_load_places_file_lines_before_existing(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"one\ntwo\n")
    doc = make("existing")
    doc.load(path)
    assert list(doc) == ["one", "two", "existing"]


def test_load_keeps_empty_lines_and_carriage_returns(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\r\n\nb\n")
    doc = Document()
    doc.load(path)
    assert list(doc) == ["a\r", "", "b"]


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "doc.txt"
    original = make("alpha", "beta")
    original.save(path)
    restored = Document()
    restored.load(path)
    assert [text.rstrip(" ") for text in restored] == list(original)


def test_load_missing_file(tmp_path):
    doc = make("keep")
    with pytest.raises(FileNotFoundError):
        doc.load(tmp_path / "missing.txt")
    assert list(doc) == ["keep"]