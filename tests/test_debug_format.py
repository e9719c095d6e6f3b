from hydrazine.debug_format import strip_report_path, to_formatted_string, to_string


def test_to_string_joins_with_space():
    assert to_string([1, 2, 3]) == "1 2 3"


def test_to_string_custom_space():
    assert to_string(["a", "b"], ", ") == "a, b"


def test_to_string_empty():
    assert to_string([]) == ""


def test_to_string_single_item_has_no_space():
    assert to_string(["only"]) == "only"


def test_to_string_stops_after_limit():
    full = " ".join(str(n) for n in range(100))
    result = to_string(range(100), limit=10)
    assert full.startswith(result)
    assert len(result) > 10
    assert len(result) < len(full)
    assert len(result.rsplit(" ", 1)[0]) <= 10


def test_to_string_accepts_generators():
    assert to_string(str(n) for n in range(3)) == to_string([0, 1, 2])


def test_to_formatted_string_applies_format():
    assert to_formatted_string([10, 255], hex) == "0xa 0xff"


def test_to_formatted_string_limit():
    items = list(range(50))
    result = to_formatted_string(items, lambda n: n * 2, "-", 5)
    full = "-".join(str(n * 2) for n in items)
    assert full.startswith(result)
    assert len(result) > 5
    assert len(result) < len(full)


def test_strip_report_path():
    assert strip_report_path("hydrazine/implementation/json.cpp") == "json.cpp"


def test_strip_report_path_without_delimiter():
    assert strip_report_path("json.cpp") == "json.cpp"


def test_strip_report_path_other_delimiter():
    assert strip_report_path("c:\\src\\main.cpp", "\\") == "main.cpp"


def test_strip_report_path_trailing_delimiter():
    assert strip_report_path("dir/") == ""