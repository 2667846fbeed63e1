from models.results import ErrorKind


def test_write_read_and_overwrite(file_store, tmp_path):
    assert file_store.write("notes/todo.txt", "one").success
    result = file_store.write("notes/todo.txt", "two")
    assert result.success
    assert result.message == "Successfully wrote file: notes/todo.txt"
    assert file_store.read("notes/todo.txt").data == "two"


def test_read_missing_file(file_store):
    result = file_store.read("nope.txt")
    assert result.kind is ErrorKind.NOT_FOUND
    assert result.error == "File not found: nope.txt"
    assert result.message == "Failed to read file"


def test_create_does_not_overwrite(file_store, tmp_path):
    assert file_store.create("a.txt", "first").success
    result = file_store.create("a.txt", "second")
    assert result.kind is ErrorKind.ALREADY_EXISTS
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "first"


def test_plain_store_accepts_any_text(file_store):
    assert file_store.write("data.json", "{not json").success


def test_delete(file_store, tmp_path):
    (tmp_path / "gone.txt").write_text("bye", encoding="utf-8")
    result = file_store.delete("gone.txt")
    assert result.success
    assert result.data == ""
    assert not (tmp_path / "gone.txt").exists()
    assert file_store.delete("gone.txt").kind is ErrorKind.NOT_FOUND


def test_list_files_returns_names_only(file_store, tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "sub" / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "sub" / "nested").mkdir()
    result = file_store.list_files("sub")
    assert result.success
    assert result.data == ["a.txt", "b.txt"]


def test_list_missing_directory_is_empty_success(file_store):
    result = file_store.list_files("does/not/exist")
    assert result.success
    assert result.data == []
    assert result.message == "Directory not found: does/not/exist"


def test_edit_line_inserts_without_validation(file_store, tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("alpha\ngamma\n", encoding="utf-8")
    result = file_store.edit_line("plain.txt", 2, "beta")
    assert result.success
    assert result.data == "alpha\nbeta\ngamma"
    assert target.read_text(encoding="utf-8").splitlines() == ["alpha", "beta", "gamma"]
    assert "Successfully added line 2" in result.message

    appended = file_store.edit_line("plain.txt", 4, "delta")
    assert appended.success
    assert file_store.edit_line("plain.txt", 0, "x").kind is ErrorKind.INVALID_LINE_NUMBER
    assert file_store.edit_line("plain.txt", 99, "x").kind is ErrorKind.INVALID_LINE_NUMBER


def test_search(file_store, tmp_path):
    (tmp_path / "log.txt").write_text("Error here\nok\nanother ERROR\n", encoding="utf-8")
    result = file_store.search("log.txt", "error")
    assert result.data == [1, 3]
    assert result.message == "Found 2 matching lines in file: log.txt"


def test_escape_attempts_are_denied(file_store):
    assert file_store.delete("../x.txt").kind is ErrorKind.ACCESS_DENIED
    assert file_store.list_files("..").kind is ErrorKind.ACCESS_DENIED


def test_messages_name_the_operation_target(file_store, tmp_path):
    assert file_store.list_files("..").message == "Failed to list files"
    (tmp_path / "notes.txt").write_text("one\n", encoding="utf-8")
    added = file_store.edit_line("notes.txt", 2, "two")
    assert added.message == "Successfully added line 2 to file: notes.txt"
