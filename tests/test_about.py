from lenna.about import fetch_online_version, load_document, version_label


def test_missing_document_is_empty(tmp_path):
    assert load_document(tmp_path / "absent.html") == ""


def test_document_lines_end_with_newline(tmp_path):
    path = tmp_path / "about.html"
    path.write_bytes(b"first\r\nsecond")
    assert load_document(path) == "first\nsecond\n"


def test_document_round_trip(tmp_path):
    path = tmp_path / "license.txt"
    text = "line one\nline two\n"
    path.write_text(text, encoding="utf-8")
    assert load_document(path) == text


def test_version_label():
    assert version_label("1.0", "abc") == "1.0 - abc"


def test_fetch_online_version_reads_body(tmp_path):
    path = tmp_path / "VERSION"
    path.write_text("2.0.0\n", encoding="utf-8")
    assert fetch_online_version(path.as_uri()) == "2.0.0\n"


def test_fetch_online_version_failure_is_empty(tmp_path):
    assert fetch_online_version((tmp_path / "missing").as_uri(), timeout=1) == ""


def test_fetch_online_version_bad_url_is_empty():
    assert fetch_online_version("not a url") == ""