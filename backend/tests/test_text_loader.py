import pytest

from services.exceptions import InvalidInputError
from services.text_loader import decode_text_upload


def test_plain_text():
    assert decode_text_upload("resume.txt", b"Python developer\n") == "Python developer"


def test_strips_bom_and_normalizes_newlines():
    content = "\ufeffline one\r\nline two\rline three".encode("utf-8")
    assert decode_text_upload("resume.md", content) == "line one\nline two\nline three"


def test_no_extension_allowed():
    assert decode_text_upload("resume", b"text") == "text"
    assert decode_text_upload(None, b"text") == "text"


def test_utf8_content():
    assert decode_text_upload("cv.txt", "Résumé – 2015–2018".encode("utf-8")) == "Résumé – 2015–2018"


@pytest.mark.parametrize("name", ["resume.pdf", "resume.DOCX", "resume.doc", "cv.rtf"])
def test_rejects_binary_documents(name):
    with pytest.raises(InvalidInputError, match="plain-text"):
        decode_text_upload(name, b"whatever")


def test_rejects_unknown_extension():
    with pytest.raises(InvalidInputError, match="unsupported file type"):
        decode_text_upload("resume.png", b"\x89PNG")


def test_rejects_invalid_utf8():
    with pytest.raises(InvalidInputError, match="UTF-8"):
        decode_text_upload("resume.txt", b"\xff\xfe\x00bad")


def test_rejects_nul_bytes():
    with pytest.raises(InvalidInputError, match="binary"):
        decode_text_upload("resume.txt", b"abc\x00def")


def test_label_in_message():
    with pytest.raises(InvalidInputError, match="^Job description"):
        decode_text_upload("job.pdf", b"", label="Job description")
